#!/usr/bin/env python3
"""
Pattern matching and extraction for Media Title Corrector
Extracts season numbers and release years from folder names and produces a
clean title suitable as a metadata search query.

Supported season markers, in priority order:
- [S01], [S1], [s01], [s1]
- S01, S1, s01, s1
- [Season 1], [Season 01]
- Season 1, Season 01
- [第一季], [第1季], [第01季]
- 第一季, 第1季, 第01季
- [第一部], [第1部]
- 第一部, 第1部, 第01部

Years: [2023], (2023), 2023
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from model import ParsedTitle
from util import parse_chinese_number, is_valid_year


@dataclass(frozen=True)
class SeasonRule:
    """One entry of the ordered season table"""
    name: str
    regex: re.Pattern
    extract: Callable[[re.Match], int]


def _latin_number(match: re.Match) -> int:
    return int(match.group(1))


def _chinese_number(match: re.Match) -> int:
    return parse_chinese_number(match.group(1))


# Chinese numerals and ASCII digits allowed between 第 and 季/部
_CN_NUM = r'[一二三四五六七八九十0-9]{1,2}'

# ASCII word boundaries; \s stays Unicode so full-width spaces separate words
_WORD_START = r'(?<![A-Za-z0-9_])'
_WORD_END = r'(?![A-Za-z0-9_])'

# Ordered by priority; the first rule that matches wins.
# Bracketed forms come before their bare forms, Latin before Chinese.
SEASON_RULES: List[SeasonRule] = [
    SeasonRule('bracket_latin', re.compile(r'\[[Ss](\d{1,2})\]', re.ASCII), _latin_number),
    SeasonRule('latin', re.compile(r'\b[Ss](\d{1,2})\b', re.ASCII), _latin_number),
    SeasonRule('bracket_word', re.compile(r'\[Season\s+([0-9]{1,2})\]', re.IGNORECASE), _latin_number),
    SeasonRule('word', re.compile(_WORD_START + r'Season\s+([0-9]{1,2})' + _WORD_END, re.IGNORECASE),
               _latin_number),
    SeasonRule('bracket_cn_season', re.compile(r'\[第(' + _CN_NUM + r')季\]'), _chinese_number),
    SeasonRule('cn_season', re.compile(r'第(' + _CN_NUM + r')季'), _chinese_number),
    SeasonRule('bracket_cn_part', re.compile(r'\[第(' + _CN_NUM + r')部\]'), _chinese_number),
    SeasonRule('cn_part', re.compile(r'第(' + _CN_NUM + r')部'), _chinese_number),
]

# Tried in order against the current title; the captured group is the year
YEAR_PATTERNS: List[re.Pattern] = [
    re.compile(r'\[(\d{4})\]', re.ASCII),  # [2023]
    re.compile(r'\((\d{4})\)', re.ASCII),  # (2023)
    re.compile(r'\b(\d{4})\b', re.ASCII),  # 2023
]

# Decorative leftovers removed after extraction
CLEANUP_PATTERNS: List[Tuple[re.Pattern, str]] = [
    (re.compile(r'\[\s*\]'), ''),  # empty brackets
    (re.compile(r'\(\s*\)'), ''),  # empty parens
    (re.compile(r'\s+'), ' '),
    (re.compile(r'[·\-_\s]+$'), ''),  # trailing separators
]


def _remove_span(text: str, match: re.Match) -> str:
    return (text[:match.start()] + text[match.end():]).strip()


def normalize_title(title: str) -> str:
    """Replace underscores with spaces so tokenization and search behave"""
    return title.replace('_', ' ')


def extract_season(title: str) -> Tuple[Optional[int], str]:
    """Find the first season marker according to SEASON_RULES.

    Args:
        title: Normalized title

    Returns:
        (season_number, title with the season token removed). When no rule
        matches the season is None and the title is returned unchanged.
    """
    for rule in SEASON_RULES:
        match = rule.regex.search(title)
        if match:
            return rule.extract(match), _remove_span(title, match)
    return None, title


def extract_year(title: str) -> Tuple[Optional[int], str]:
    """Find a release year using YEAR_PATTERNS.

    Each pattern only looks at its first occurrence in the title. An
    out-of-range value is left in place and the next pattern is tried, so a
    valid year further along the title is not reached once an invalid
    four-digit run precedes it.

    Returns:
        (year, title with the year token removed)
    """
    for pattern in YEAR_PATTERNS:
        match = pattern.search(title)
        if match:
            year = int(match.group(1))
            if is_valid_year(year):
                return year, _remove_span(title, match)
    return None, title


def clean_title(title: str) -> str:
    """Remove empty brackets, extra whitespace and trailing separators"""
    for pattern, replacement in CLEANUP_PATTERNS:
        title = pattern.sub(replacement, title)
    return title.strip()


def parse_season_from_title(title: str) -> ParsedTitle:
    """Extract season and year from a folder or file name.

    Examples:
        "权力的游戏 第一季"  -> clean_title="权力的游戏", season_number=1
        "Movie_Title_2021" -> clean_title="Movie Title", year=2021
    """
    working = normalize_title(title)
    season_number, working = extract_season(working)
    year, working = extract_year(working)

    return ParsedTitle(
        clean_title=clean_title(working),
        season_number=season_number,
        year=year,
        original_title=title,
    )
