#!/usr/bin/env python3
"""
Data models for Media Title Corrector
Defines the parse result and the catalog records exchanged with the
metadata search, season listing and correction services.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ParsedTitle:
    """Result of parsing a folder or file name"""
    clean_title: str  # Title with season/year tokens and leftovers removed
    season_number: Optional[int]
    year: Optional[int]
    original_title: str  # Input exactly as given

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return asdict(self)


class MediaKind(Enum):
    MOVIE = "movie"
    TV = "tv"


@dataclass
class SearchResult:
    """A candidate work returned by the metadata search"""
    id: int
    title: str
    media_kind: MediaKind
    poster_path: Optional[str] = None
    release_date: Optional[str] = None  # Release date for movies, first air date for series
    overview: str = ""
    vote_average: float = 0.0


@dataclass
class SeasonEntry:
    """One season of a series"""
    season_number: int
    name: str
    episode_count: int = 0
    air_date: Optional[str] = None
    poster_path: Optional[str] = None
    overview: str = ""


@dataclass
class Correction:
    """User-confirmed metadata for a folder"""
    folder: str
    tmdb_id: int
    title: str
    media_kind: MediaKind
    poster_path: Optional[str] = None
    release_date: Optional[str] = None
    overview: str = ""
    vote_average: float = 0.0
    season_number: Optional[int] = None
    season_name: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """Build the JSON body sent to the correction service"""
        payload = {
            'folder': self.folder,
            'tmdbId': self.tmdb_id,
            'title': self.title,
            'posterPath': self.poster_path,
            'releaseDate': self.release_date,
            'overview': self.overview,
            'voteAverage': self.vote_average,
            'mediaType': self.media_kind.value,
        }
        if self.season_number is not None:
            payload['seasonNumber'] = self.season_number
            payload['seasonName'] = self.season_name
        return payload
