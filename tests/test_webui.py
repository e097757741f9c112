#!/usr/bin/env python3
"""
Tests for the FastAPI endpoints in webui/
TMDB and correction clients are replaced with mocks.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

# Add parent directory to path to import modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from model import MediaKind, SearchResult, SeasonEntry
from webui.main import app
from webui.api import tmdb as tmdb_api
from webui.api import correct as correct_api


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def tmdb_client(monkeypatch):
    mock = MagicMock()
    monkeypatch.setattr(tmdb_api, 'get_tmdb_client', lambda: mock)
    return mock


@pytest.fixture
def correction_client(monkeypatch):
    mock = MagicMock()
    monkeypatch.setattr(correct_api, 'get_correction_client', lambda: mock)
    return mock


class TestParseEndpoint:

    def test_parse(self, client):
        response = client.post('/api/parse', json={'title': '权力的游戏 第一季 (2011)'})
        assert response.status_code == 200
        assert response.json() == {
            'clean_title': '权力的游戏',
            'season_number': 1,
            'year': 2011,
            'original_title': '权力的游戏 第一季 (2011)',
        }

    def test_parse_requires_title(self, client):
        assert client.post('/api/parse', json={}).status_code == 422

    def test_health(self, client):
        assert client.get('/health').json() == {'status': 'healthy'}


class TestTMDBEndpoints:

    def test_search(self, client, tmdb_client):
        tmdb_client.search.return_value = [
            SearchResult(id=1396, title='绝命毒师', media_kind=MediaKind.TV,
                         release_date='2008-01-20', vote_average=8.9)
        ]

        response = client.get('/api/tmdb/search', params={'query': '绝命毒师'})

        assert response.status_code == 200
        data = response.json()
        assert data['success'] is True
        assert data['results'][0]['id'] == 1396
        assert data['results'][0]['media_type'] == 'tv'
        tmdb_client.search.assert_called_once_with('绝命毒师')

    def test_search_blank_query(self, client, tmdb_client):
        response = client.get('/api/tmdb/search', params={'query': '  '})
        assert response.status_code == 400
        tmdb_client.search.assert_not_called()

    def test_seasons(self, client, tmdb_client):
        tmdb_client.get_seasons.return_value = [
            SeasonEntry(season_number=1, name='第 1 季', episode_count=7),
            SeasonEntry(season_number=2, name='第 2 季', episode_count=13),
        ]

        response = client.get('/api/tmdb/seasons', params={'tvId': 1396})

        assert response.status_code == 200
        seasons = response.json()['seasons']
        assert [s['season_number'] for s in seasons] == [1, 2]
        tmdb_client.get_seasons.assert_called_once_with(1396)


class TestCorrectEndpoint:

    BODY = {
        'folder': '/tv/绝命毒师 第二部',
        'tmdbId': 1396,
        'title': '绝命毒师 第 2 季',
        'mediaType': 'tv',
        'posterPath': '/s2.jpg',
        'releaseDate': '2009-03-08',
        'overview': 'Season two',
        'voteAverage': 8.9,
        'seasonNumber': 2,
        'seasonName': '第 2 季',
    }

    def test_correct(self, client, correction_client):
        correction_client.submit.return_value = True

        response = client.post('/api/correct', json=self.BODY)

        assert response.status_code == 200
        assert response.json()['success'] is True
        correction = correction_client.submit.call_args[0][0]
        assert correction.to_payload() == self.BODY

    def test_correct_service_failure(self, client, correction_client):
        correction_client.submit.return_value = False
        response = client.post('/api/correct', json=self.BODY)
        assert response.status_code == 502

    def test_correct_rejects_unknown_media_type(self, client, correction_client):
        body = dict(self.BODY, mediaType='person')
        assert client.post('/api/correct', json=body).status_code == 422
        correction_client.submit.assert_not_called()
