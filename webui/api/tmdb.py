"""TMDB API endpoints"""

import logging

from fastapi import APIRouter, HTTPException, Query

from config import load_config
from tmdb import create_tmdb_client_from_config, TMDBClient
from webui.models.schemas import SearchResponse, SearchResultSchema, SeasonsResponse, SeasonSchema

router = APIRouter(prefix="/api/tmdb", tags=["tmdb"])
logger = logging.getLogger(__name__)


def get_tmdb_client() -> TMDBClient:
    """Build a TMDB client from the current config.yaml"""
    try:
        config = load_config()
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Cannot load configuration: {e}")
        raise HTTPException(status_code=500, detail=f"Configuration error: {e}")
    return create_tmdb_client_from_config(config, logger)


@router.get("/search", response_model=SearchResponse)
async def search_tmdb(query: str = Query(..., description="Search query")):
    """Search TMDB for movies and series"""
    if not query.strip():
        raise HTTPException(status_code=400, detail="Query must not be empty")

    results = get_tmdb_client().search(query)
    return SearchResponse(
        success=True,
        results=[
            SearchResultSchema(
                id=r.id,
                title=r.title,
                media_type=r.media_kind.value,
                poster_path=r.poster_path,
                release_date=r.release_date,
                overview=r.overview,
                vote_average=r.vote_average
            )
            for r in results
        ]
    )


@router.get("/seasons", response_model=SeasonsResponse)
async def list_seasons(tv_id: int = Query(..., alias="tvId", description="TMDB series ID")):
    """List the seasons of a series"""
    seasons = get_tmdb_client().get_seasons(tv_id)
    return SeasonsResponse(
        success=True,
        seasons=[SeasonSchema(**vars(s)) for s in seasons]
    )
