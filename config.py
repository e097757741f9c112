#!/usr/bin/env python3
"""
Configuration loader for Media Title Corrector
Loads configuration from config.yaml file.
"""

import os
import yaml
from pathlib import Path
from typing import Optional, Dict, Any, List
from dataclasses import dataclass

DEFAULT_LANGUAGES = ["zh-CN", "zh-SG", "zh-TW", "zh-HK"]


@dataclass
class ProxyConfig:
    """Proxy configuration"""
    host: str
    port: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional['ProxyConfig']:
        """Create ProxyConfig from dictionary"""
        if not data:
            return None
        host = data.get('host')
        port = data.get('port')
        if not host or not port:
            return None
        return cls(host=host, port=port)


@dataclass
class TMDBConfig:
    """TMDB API configuration"""
    api_key: str
    languages: List[str] = None
    rate_limit: int = 40

    def __post_init__(self):
        """Set default languages if not provided"""
        if self.languages is None:
            self.languages = list(DEFAULT_LANGUAGES)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TMDBConfig':
        """Create TMDBConfig from dictionary"""
        # Get API key from config or environment
        api_key = data.get('api_key', '')
        if not api_key:
            api_key = os.getenv('TMDB_API_KEY', '')

        languages = data.get('languages', list(DEFAULT_LANGUAGES))
        if not isinstance(languages, list):
            languages = list(DEFAULT_LANGUAGES)

        rate_limit = data.get('rate_limit', 40)
        if isinstance(rate_limit, float):
            rate_limit = int(rate_limit)
        elif not isinstance(rate_limit, int):
            rate_limit = 40  # Default fallback

        return cls(
            api_key=api_key,
            languages=languages,
            rate_limit=rate_limit
        )


@dataclass
class CorrectionConfig:
    """Correction service configuration"""
    endpoint: str
    token: Optional[str] = None
    timeout: float = 10.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional['CorrectionConfig']:
        """Create CorrectionConfig from dictionary"""
        if not data or not data.get('endpoint'):
            return None

        token = data.get('token') or os.getenv('CORRECTION_TOKEN') or None

        timeout = data.get('timeout', 10.0)
        if not isinstance(timeout, (int, float)):
            timeout = 10.0

        return cls(
            endpoint=data['endpoint'],
            token=token,
            timeout=float(timeout)
        )


@dataclass
class Config:
    """Complete application configuration"""
    tmdb: TMDBConfig
    proxy: Optional[ProxyConfig] = None
    correction: Optional[CorrectionConfig] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create Config from dictionary"""
        tmdb_section = data.get('tmdb', {})
        if not tmdb_section:
            raise ValueError(
                "TMDB configuration section not found in config.yaml.\n"
                "Please add a 'tmdb' section with your API settings."
            )

        tmdb_config = TMDBConfig.from_dict(tmdb_section)

        if not tmdb_config.api_key:
            raise ValueError(
                "TMDB API key not found in config.yaml or TMDB_API_KEY environment variable.\n"
                "Please set tmdb.api_key in config.yaml or set TMDB_API_KEY environment variable."
            )

        # Proxy lives at root level
        proxy_data = data.get('proxy')
        proxy = ProxyConfig.from_dict(proxy_data) if proxy_data else None

        correction = CorrectionConfig.from_dict(data.get('correction') or {})

        return cls(
            tmdb=tmdb_config,
            proxy=proxy,
            correction=correction
        )


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load complete configuration from YAML file

    Args:
        config_path: Path to config.yaml file. If None, looks for config.yaml
                     in the current directory or script directory.

    Returns:
        Config object with all loaded configurations

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
        ValueError: If required configuration is missing
    """
    if config_path is None:
        # Try current directory first
        config_file = Path.cwd() / 'config.yaml'

        # If not found, try script directory
        if not config_file.exists():
            config_file = Path(__file__).parent / 'config.yaml'
    else:
        config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {config_file}\n"
            f"Please create config.yaml (see config.example.yaml)."
        )

    with open(config_file, 'r', encoding='utf-8') as f:
        config_data = yaml.safe_load(f)

    if not config_data:
        raise ValueError("Configuration file is empty")

    return Config.from_dict(config_data)
