#!/usr/bin/env python3
"""
TMDB API Client for metadata search and season listing
Provides access to The Movie Database API for finding candidate works for a
clean title and listing the seasons of a series.
"""

import logging
import time
from typing import Optional, List, Dict, Any

import requests
from tmdbv3api import TMDb, TV, Search

from model import MediaKind, SearchResult, SeasonEntry


class TMDBClient:
    """Client for interacting with TMDB API"""

    def __init__(
        self,
        api_key: str,
        languages: Optional[List[str]] = None,
        proxy_host: Optional[str] = None,
        proxy_port: Optional[int] = None,
        rate_limit: int = 40,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize TMDB client

        Args:
            api_key: TMDB API key
            languages: Preferred languages; the first one is used for requests
            proxy_host: Proxy host with protocol (e.g., "http://proxy.example.com")
            proxy_port: Proxy port
            rate_limit: Maximum number of requests allowed per second (default: 40)
            logger: Optional logger instance
        """
        self.api_key = api_key
        self.languages = languages or ["zh-CN", "zh-SG", "zh-TW", "zh-HK"]
        self.language = self.languages[0] if self.languages else "en-US"
        self.rate_limit = rate_limit
        self.min_request_interval = 1.0 / rate_limit
        self.last_request_time = 0.0
        self.logger = logger or logging.getLogger(__name__)

        self.session = requests.Session()
        if proxy_host and proxy_port:
            proxy_url = f"{proxy_host.rstrip('/')}:{proxy_port}"
            self.session.proxies.update({
                'http': proxy_url,
                'https': proxy_url,
            })
            # Set X-Forwarded-Host header to avoid 403 errors
            self.session.headers.update({'X-Forwarded-Host': 'api.themoviedb.org'})
            self.logger.debug(f"Proxy configured: {proxy_url}")

        self.tmdb = TMDb(session=self.session)
        self.tmdb.api_key = self.api_key
        self.tmdb.language = self.language

        self.search_api = Search()
        self.tv = TV()

    def _wait_for_rate_limit(self):
        """
        Enforce rate limiting by waiting if necessary before making a request.
        Ensures we don't exceed rate_limit requests per second.
        """
        current_time = time.time()
        time_since_last_request = current_time - self.last_request_time

        if time_since_last_request < self.min_request_interval:
            wait_time = self.min_request_interval - time_since_last_request
            self.logger.debug(f"Rate limiting: waiting {wait_time:.3f} seconds before next request")
            time.sleep(wait_time)

        self.last_request_time = time.time()

    def search(self, query: str) -> List[SearchResult]:
        """
        Search movies and series by free text

        Args:
            query: Search text, typically ParsedTitle.clean_title

        Returns:
            Ranked list of movie and series candidates; empty on failure
        """
        if not query or not query.strip():
            return []

        try:
            self.logger.debug(f"Searching TMDB for: {query}")
            self._wait_for_rate_limit()
            raw_results = self.search_api.multi(query)
        except Exception as e:
            self.logger.error(f"Error searching TMDB for '{query}': {e}")
            return []

        results = []
        for raw in raw_results or []:
            # An empty response iterates over its top-level keys instead of results
            if isinstance(raw, str) or raw.get('media_type') not in ('movie', 'tv'):
                continue
            try:
                results.append(self._parse_search_result(raw))
            except (KeyError, TypeError, ValueError) as e:
                self.logger.warning(f"Failed to parse search result: {e}")

        self.logger.debug(f"Found {len(results)} results for: {query}")
        return results

    def get_seasons(self, tv_id: int, include_specials: bool = False) -> List[SeasonEntry]:
        """
        List the seasons of a series

        Args:
            tv_id: TMDB series ID
            include_specials: Keep season 0 (specials) in the list

        Returns:
            Seasons ordered by season number; empty on failure
        """
        try:
            self.logger.debug(f"Fetching seasons for TV show ID: {tv_id}")
            self._wait_for_rate_limit()
            details = self.tv.details(tv_id)
        except Exception as e:
            self.logger.error(f"Error fetching seasons for TV show ID {tv_id}: {e}")
            return []

        if not details:
            self.logger.debug(f"No details found for TV show ID: {tv_id}")
            return []

        seasons = []
        for raw in details.get('seasons') or []:
            season = self._parse_season(raw)
            if season.season_number == 0 and not include_specials:
                continue
            seasons.append(season)

        seasons.sort(key=lambda s: s.season_number)
        self.logger.debug(f"TV show {tv_id} has {len(seasons)} seasons")
        return seasons

    def _parse_search_result(self, result: Dict[str, Any]) -> SearchResult:
        """
        Parse a multi-search entry into a SearchResult

        Movies carry title/release_date, series carry name/first_air_date.
        """
        media_kind = MediaKind(result['media_type'])
        if media_kind == MediaKind.MOVIE:
            title = result.get('title') or result.get('original_title') or ''
            release_date = result.get('release_date')
        else:
            title = result.get('name') or result.get('original_name') or ''
            release_date = result.get('first_air_date')

        return SearchResult(
            id=int(result['id']),
            title=title,
            media_kind=media_kind,
            poster_path=result.get('poster_path'),
            release_date=release_date or None,
            overview=result.get('overview') or '',
            vote_average=float(result.get('vote_average') or 0.0)
        )

    def _parse_season(self, season: Dict[str, Any]) -> SeasonEntry:
        season_number = season.get('season_number') or 0
        return SeasonEntry(
            season_number=season_number,
            name=season.get('name') or f"Season {season_number}",
            episode_count=season.get('episode_count') or 0,
            air_date=season.get('air_date'),
            poster_path=season.get('poster_path'),
            overview=season.get('overview') or ''
        )


def create_tmdb_client_from_config(config: Any, logger: Optional[logging.Logger] = None) -> TMDBClient:
    """
    Create TMDBClient instance from Config

    Args:
        config: Config instance (with tmdb and proxy at root level)
        logger: Optional logger instance

    Returns:
        TMDBClient instance configured with proxy if specified
    """
    tmdb_config = config.tmdb
    proxy_host = None
    proxy_port = None
    if config.proxy:
        proxy_host = config.proxy.host
        proxy_port = config.proxy.port

    return TMDBClient(
        api_key=tmdb_config.api_key,
        languages=tmdb_config.languages,
        proxy_host=proxy_host,
        proxy_port=proxy_port,
        rate_limit=tmdb_config.rate_limit,
        logger=logger
    )
