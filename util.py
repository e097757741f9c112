#!/usr/bin/env python3
"""
Utility functions for Media Title Corrector
Provides helper functions for parsing numerals and validating years.
"""

import re
from typing import Optional


# Chinese numeral mappings
CHINESE_NUMERALS = {
    '一': 1, '二': 2, '三': 3, '四': 4, '五': 5,
    '六': 6, '七': 7, '八': 8, '九': 9, '十': 10,
}

TEN = '十'

MIN_YEAR = 1900
MAX_YEAR = 2100


def _leading_int(text: str) -> Optional[int]:
    """Parse the leading run of ASCII digits, None if there is none"""
    match = re.match(r'[0-9]+', text)
    return int(match.group()) if match else None


def parse_chinese_number(chinese_text: str, default: Optional[int] = 1) -> Optional[int]:
    """Convert a short Chinese numeral (or ASCII digits) to an integer.

    Handles 一 through 十 and the compounds built from 十:
    十 = 10, 十二 = 12, 三十 = 30, 三十二 = 32. Unknown characters next to
    十 count as zero.

    Args:
        chinese_text: Numeral token, e.g. "二", "十一", "03"
        default: Value returned when the token is not recognized at all.
                 Pass None to tell an unrecognized token apart from 1.

    Returns:
        Integer value of the token, or ``default``
    """
    # Handle pure Arabic numbers
    if re.fullmatch(r'[0-9]+', chinese_text):
        return int(chinese_text)

    if chinese_text == TEN:
        return 10

    # 十X: 十一 .. 十九
    if chinese_text.startswith(TEN):
        return 10 + CHINESE_NUMERALS.get(chinese_text[1:], 0)

    # X十: 二十, 三十 ...
    if chinese_text.endswith(TEN):
        return CHINESE_NUMERALS.get(chinese_text[:-1], 0) * 10

    # X十Y: 二十一 ...
    if TEN in chinese_text:
        tens, units = chinese_text.split(TEN, 1)
        return CHINESE_NUMERALS.get(tens, 0) * 10 + CHINESE_NUMERALS.get(units, 0)

    # Single numeral, then leading digits; zero is not a usable value here
    value = CHINESE_NUMERALS.get(chinese_text) or _leading_int(chinese_text)
    return value or default


def is_valid_year(year: int) -> bool:
    """Check that a year lies in the accepted calendar range"""
    return MIN_YEAR <= year <= MAX_YEAR
