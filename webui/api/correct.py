"""Correction API endpoint"""

import logging

from fastapi import APIRouter, HTTPException

from config import load_config
from correction import create_correction_client_from_config, CorrectionClient
from model import Correction, MediaKind
from webui.models.schemas import CorrectRequest, CorrectResponse

router = APIRouter(prefix="/api", tags=["correct"])
logger = logging.getLogger(__name__)


def get_correction_client() -> CorrectionClient:
    """Build a correction client from the current config.yaml"""
    try:
        return create_correction_client_from_config(load_config(), logger)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Cannot load configuration: {e}")
        raise HTTPException(status_code=500, detail=f"Configuration error: {e}")


@router.post("/correct", response_model=CorrectResponse)
async def correct_folder(request: CorrectRequest):
    """Record the confirmed metadata for a folder"""
    correction = Correction(
        folder=request.folder,
        tmdb_id=request.tmdb_id,
        title=request.title,
        media_kind=MediaKind(request.media_type),
        poster_path=request.poster_path,
        release_date=request.release_date,
        overview=request.overview,
        vote_average=request.vote_average,
        season_number=request.season_number,
        season_name=request.season_name
    )

    if not get_correction_client().submit(correction):
        raise HTTPException(status_code=502, detail="Correction service rejected the request")

    return CorrectResponse(success=True, message=f"Corrected {request.folder}")
