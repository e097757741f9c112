"""Pydantic schemas for API request/response models"""

from typing import Optional, List
from pydantic import BaseModel, Field


# Parse schemas
class ParseRequest(BaseModel):
    title: str = Field(..., description="Folder or file name")


class ParseResponse(BaseModel):
    clean_title: str
    season_number: Optional[int] = None
    year: Optional[int] = None
    original_title: str


# TMDB schemas
class SearchResultSchema(BaseModel):
    id: int
    title: str
    media_type: str  # movie or tv
    poster_path: Optional[str] = None
    release_date: Optional[str] = None
    overview: str = ""
    vote_average: float = 0.0


class SearchResponse(BaseModel):
    success: bool
    results: List[SearchResultSchema]


class SeasonSchema(BaseModel):
    season_number: int
    name: str
    episode_count: int = 0
    air_date: Optional[str] = None
    poster_path: Optional[str] = None
    overview: str = ""


class SeasonsResponse(BaseModel):
    success: bool
    seasons: List[SeasonSchema]


# Correction schemas
class CorrectRequest(BaseModel):
    folder: str = Field(..., description="Folder path being corrected")
    tmdb_id: int = Field(..., alias="tmdbId")
    title: str
    media_type: str = Field(..., alias="mediaType", pattern="^(movie|tv)$")
    poster_path: Optional[str] = Field(default=None, alias="posterPath")
    release_date: Optional[str] = Field(default=None, alias="releaseDate")
    overview: str = ""
    vote_average: float = Field(default=0.0, alias="voteAverage")
    season_number: Optional[int] = Field(default=None, alias="seasonNumber")
    season_name: Optional[str] = Field(default=None, alias="seasonName")


class CorrectResponse(BaseModel):
    success: bool
    message: str
