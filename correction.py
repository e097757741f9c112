#!/usr/bin/env python3
"""
Correction flow for Media Title Corrector
Turns a chosen search result (and season, for series) into a correction and
submits it to the correction service.
"""

import logging
from typing import Callable, List, Optional

import requests

from model import Correction, MediaKind, SearchResult, SeasonEntry

# Called with the season list when the choice is ambiguous; returns the
# chosen season or None to correct without one
SeasonPicker = Callable[[List[SeasonEntry]], Optional[SeasonEntry]]


def choose_season(seasons: List[SeasonEntry], hint: Optional[int] = None) -> Optional[SeasonEntry]:
    """
    Pick a season without asking the user when possible

    Args:
        seasons: Seasons of the series
        hint: Season number parsed from the folder name

    Returns:
        The only season, the season matching the hint, or None
    """
    if len(seasons) == 1:
        return seasons[0]
    if hint is None:
        return None
    for season in seasons:
        if season.season_number == hint:
            return season
    return None


def build_correction(folder: str, result: SearchResult, season: Optional[SeasonEntry] = None) -> Correction:
    """
    Build the correction for a folder

    Later seasons get the season name appended to the title
    ("绝命毒师 第 2 季"). Season artwork, air date and overview take
    precedence over the series' own values.
    """
    title = result.title
    if season and season.season_number > 1:
        title = f"{title} {season.name}"

    correction = Correction(
        folder=folder,
        tmdb_id=result.id,
        title=title,
        media_kind=result.media_kind,
        poster_path=(season and season.poster_path) or result.poster_path,
        release_date=(season and season.air_date) or result.release_date,
        overview=(season and season.overview) or result.overview,
        vote_average=result.vote_average
    )
    if season:
        correction.season_number = season.season_number
        correction.season_name = season.name
    return correction


def resolve_correction(
    folder: str,
    result: SearchResult,
    tmdb_client,
    season_hint: Optional[int] = None,
    pick: Optional[SeasonPicker] = None,
    logger: Optional[logging.Logger] = None
) -> Correction:
    """
    Resolve the season for a chosen result and build its correction

    Movies are corrected directly. For series the season list is fetched;
    a single season or a season matching ``season_hint`` is used as is,
    otherwise ``pick`` is asked to choose.

    Raises:
        ValueError: If the season is ambiguous and no picker was given
    """
    logger = logger or logging.getLogger(__name__)

    if result.media_kind != MediaKind.TV:
        return build_correction(folder, result)

    seasons = tmdb_client.get_seasons(result.id)
    if not seasons:
        logger.info(f"No season information for '{result.title}', correcting series as a whole")
        return build_correction(folder, result)

    season = choose_season(seasons, season_hint)
    if season is None:
        if pick is None:
            raise ValueError(
                f"'{result.title}' has {len(seasons)} seasons; "
                f"choose one with a season number"
            )
        season = pick(seasons)

    if season:
        logger.debug(f"Using season {season.season_number} ({season.name}) of '{result.title}'")
    return build_correction(folder, result, season)


class CorrectionClient:
    """Client for the service that records confirmed corrections"""

    def __init__(
        self,
        endpoint: str,
        token: Optional[str] = None,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)
        self.session = session or requests.Session()
        if token:
            self.session.headers.update({'Authorization': f"Bearer {token}"})

    def submit(self, correction: Correction) -> bool:
        """
        Record a correction

        Returns:
            True if the service accepted it, False otherwise
        """
        try:
            response = self.session.post(
                self.endpoint,
                json=correction.to_payload(),
                timeout=self.timeout
            )
            response.raise_for_status()
        except requests.RequestException as e:
            self.logger.error(f"Failed to submit correction for '{correction.folder}': {e}")
            return False

        self.logger.info(f"Corrected '{correction.folder}' -> {correction.title} (TMDB {correction.tmdb_id})")
        return True


def create_correction_client_from_config(config, logger: Optional[logging.Logger] = None) -> CorrectionClient:
    """
    Create CorrectionClient instance from Config

    Raises:
        ValueError: If no correction endpoint is configured
    """
    if not config.correction:
        raise ValueError(
            "Correction endpoint not configured.\n"
            "Please add a 'correction' section with an 'endpoint' to config.yaml."
        )
    return CorrectionClient(
        endpoint=config.correction.endpoint,
        token=config.correction.token,
        timeout=config.correction.timeout,
        logger=logger
    )
