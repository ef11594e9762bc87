"""
Compound Option Parser

Reads sub-options out of a compound option string such as:

    --server:id=foo,portfile=/tmp/port,poolsize=4

Each sub-option is a key=value pair separated by commas. These are
substring scanners, not a grammar: the first occurrence of "key=" wins
and the value runs up to the next comma.

Usage:
    from sjbuild.options import extract_string_option, clean_sub_options

    portfile = extract_string_option("portfile", settings)
    settings = clean_sub_options({"portfile", "sjavac"}, settings)
"""

import logging
import re
from typing import AbstractSet, Optional, Tuple

logger = logging.getLogger(__name__)

SEPARATOR = ","
ASSIGN = "="

# Base-10 int with optional sign, any Unicode decimal digits
_INT_PATTERN = re.compile(r"[+-]?\d+")
_INT_MIN = -(2 ** 31)
_INT_MAX = 2 ** 31 - 1


def _find_value(key: str, source: str) -> Tuple[bool, str]:
    """Locate 'key=' in source and return (found, raw value)."""
    start = source.find(key + ASSIGN)
    if start == -1:
        return False, ""
    start += len(key) + 1
    end = source.find(SEPARATOR, start)
    if end == -1:
        end = len(source)
    return True, source[start:end]


def extract_string_option(key: str, source: Optional[str], default: Optional[str] = None) -> Optional[str]:
    """
    Extract the raw value of a sub-option.

    Args:
        key: Sub-option name, without the '='
        source: Compound option string (may be None)
        default: Returned when source is None or the key is absent

    Returns:
        Text between 'key=' and the next comma (or end of string)
    """
    if source is None:
        return default
    found, value = _find_value(key, source)
    if not found:
        return default
    return value


def _parse_int(text: str) -> Optional[int]:
    if not _INT_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if value < _INT_MIN or value > _INT_MAX:
        return None
    return value


def extract_int_option(key: str, source: Optional[str], default: int = 0) -> int:
    """
    Extract a sub-option as a 32-bit signed integer.

    A missing key (or None source) yields `default`. A value that is
    present but does not parse yields 0, not `default`. Callers rely on
    that distinction, so keep it.
    """
    if source is None:
        return default
    found, value = _find_value(key, source)
    if not found:
        return default
    parsed = _parse_int(value)
    if parsed is None:
        logger.debug(f"Sub-option {key}={value!r} is not an integer, using 0")
        return 0
    return parsed


def extract_boolean_option(key: str, source: Optional[str], default: bool) -> bool:
    """Extract a sub-option that must read exactly 'true' or 'false'."""
    value = extract_string_option(key, source)
    if value == "true":
        return True
    if value == "false":
        return False
    return default


def clean_sub_options(allowed_keys: AbstractSet[str], source: Optional[str]) -> str:
    """
    Drop every sub-option whose key is not in allowed_keys.

    For example, keeping only portfile from "id=foo,portfile=bar":
        clean_sub_options({"portfile"}, "id=foo,portfile=bar") == "portfile=bar"

    Tokens without '=' or with an empty key are dropped. Kept tokens
    stay in their original order, duplicates included.

    Args:
        allowed_keys: Sub-option names to keep (id, portfile etc.)
        source: The option settings string
    """
    if not source:
        return ""

    kept = []
    for token in source.split(SEPARATOR):
        pos = token.find(ASSIGN)
        if pos <= 0:
            continue
        key = token[:pos]
        value = token[pos + 1:]
        if key in allowed_keys:
            kept.append(f"{key}{ASSIGN}{value}")
        else:
            logger.debug(f"Dropping sub-option {key!r}")
    return SEPARATOR.join(kept)
