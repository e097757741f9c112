"""Title parsing API endpoint"""

from fastapi import APIRouter

from pattern import parse_season_from_title
from webui.models.schemas import ParseRequest, ParseResponse

router = APIRouter(prefix="/api", tags=["parse"])


@router.post("/parse", response_model=ParseResponse)
async def parse_title(request: ParseRequest):
    """Extract clean title, season and year from a folder name"""
    return ParseResponse(**parse_season_from_title(request.title).to_dict())
