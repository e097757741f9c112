#!/usr/bin/env python3
"""
Tests for config.py
"""

import sys
from pathlib import Path

import pytest
import yaml

# Add parent directory to path to import modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import load_config, Config, TMDBConfig, CorrectionConfig, ProxyConfig


def _write(tmp_path, data) -> Path:
    config_file = tmp_path / 'config.yaml'
    config_file.write_text(yaml.safe_dump(data, allow_unicode=True), encoding='utf-8')
    return config_file


class TestLoadConfig:
    """Tests for load_config"""

    def test_full_config(self, tmp_path):
        config_file = _write(tmp_path, {
            'tmdb': {'api_key': 'abc', 'languages': ['en-US'], 'rate_limit': 20.0},
            'proxy': {'host': 'http://127.0.0.1', 'port': 7890},
            'correction': {'endpoint': 'http://host/api/correct', 'token': 't', 'timeout': 3},
        })

        config = load_config(str(config_file))

        assert config.tmdb.api_key == 'abc'
        assert config.tmdb.languages == ['en-US']
        assert config.tmdb.rate_limit == 20
        assert config.proxy == ProxyConfig(host='http://127.0.0.1', port=7890)
        assert config.correction == CorrectionConfig(endpoint='http://host/api/correct', token='t', timeout=3.0)

    def test_defaults(self, tmp_path, monkeypatch):
        monkeypatch.delenv('CORRECTION_TOKEN', raising=False)
        config = load_config(str(_write(tmp_path, {'tmdb': {'api_key': 'abc'}})))
        assert config.tmdb.languages == ["zh-CN", "zh-SG", "zh-TW", "zh-HK"]
        assert config.tmdb.rate_limit == 40
        assert config.proxy is None
        assert config.correction is None

    def test_api_key_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv('TMDB_API_KEY', 'from-env')
        config = load_config(str(_write(tmp_path, {'tmdb': {'languages': ['zh-CN']}})))
        assert config.tmdb.api_key == 'from-env'

    def test_missing_api_key(self, tmp_path, monkeypatch):
        monkeypatch.delenv('TMDB_API_KEY', raising=False)
        with pytest.raises(ValueError):
            load_config(str(_write(tmp_path, {'tmdb': {'languages': ['zh-CN']}})))

    def test_missing_tmdb_section(self, tmp_path):
        with pytest.raises(ValueError):
            load_config(str(_write(tmp_path, {'proxy': {'host': 'h', 'port': 1}})))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / 'nope.yaml'))

    def test_empty_file(self, tmp_path):
        config_file = tmp_path / 'config.yaml'
        config_file.write_text('', encoding='utf-8')
        with pytest.raises(ValueError):
            load_config(str(config_file))

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / 'config.yaml'
        config_file.write_text('tmdb: [unclosed', encoding='utf-8')
        with pytest.raises(yaml.YAMLError):
            load_config(str(config_file))


class TestSections:
    """Tests for section parsing"""

    def test_incomplete_proxy_ignored(self):
        assert ProxyConfig.from_dict({'host': 'h'}) is None
        assert ProxyConfig.from_dict({}) is None

    def test_correction_token_from_environment(self, monkeypatch):
        monkeypatch.setenv('CORRECTION_TOKEN', 'env-token')
        correction = CorrectionConfig.from_dict({'endpoint': 'http://host'})
        assert correction.token == 'env-token'
        assert correction.timeout == 10.0

    def test_correction_requires_endpoint(self):
        assert CorrectionConfig.from_dict({'token': 't'}) is None

    def test_bad_types_fall_back(self):
        tmdb = TMDBConfig.from_dict({'api_key': 'k', 'languages': 'zh-CN', 'rate_limit': 'fast'})
        assert tmdb.languages == ["zh-CN", "zh-SG", "zh-TW", "zh-HK"]
        assert tmdb.rate_limit == 40

    def test_config_from_dict(self):
        config = Config.from_dict({'tmdb': {'api_key': 'k'}, 'correction': {'endpoint': 'http://x'}})
        assert config.correction.endpoint == 'http://x'
