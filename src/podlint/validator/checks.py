#!/usr/bin/env python3
"""
PODLINT CHECKS - Format & Value Rules
-------------------------------------
Small pure predicates used by the level validators. None of them know
anything about the document tree; they only look at scalar text.

Author: PodLint Team
Date: 2026-10-17
"""

import re
from typing import Optional

# Fixed enumerations of the Pod schema
POD_OS_VALUES = frozenset({"linux", "windows"})
PROTOCOL_VALUES = frozenset({"TCP", "UDP"})

PORT_MIN = 0
PORT_MAX = 65535

IMAGE_PATTERN = re.compile(r"registry\.bigbrother\.io/(.+):(.+)")
MEMORY_PATTERN = re.compile(r"^(\d+)(Mi|Gi|Ki)$", re.ASCII)

# Snake-case normalisation: first split 'xFoo' words, then any 'aB' / '1B'
_FIRST_CAP = re.compile(r"(.)([A-Z][a-z]+)")
_ALL_CAP = re.compile(r"([a-z0-9])([A-Z])")


def is_one_of(value: str, allowed: frozenset) -> bool:
    return value in allowed


def parse_int(value: str) -> Optional[int]:
    """
    Integer value of an int-tagged scalar, or None when it cannot be read.
    Accepts the YAML 1.2 spellings (underscores, 0x/0o prefixes).
    """
    text = value.replace("_", "")
    try:
        return int(text, 10)
    except ValueError:
        pass
    try:
        return int(text, 0)
    except ValueError:
        return None


def in_range(number: int, minimum: Optional[int] = None, maximum: Optional[int] = None) -> bool:
    if minimum is not None and number < minimum:
        return False
    if maximum is not None and number > maximum:
        return False
    return True


def to_snake_case(value: str) -> str:
    snake = _FIRST_CAP.sub(r"\1_\2", value)
    snake = _ALL_CAP.sub(r"\1_\2", snake)
    return snake.lower()


def is_snake_case(value: str) -> bool:
    """True when the value is already in its normalised lower_snake form."""
    return value == to_snake_case(value)


def is_valid_image(value: str) -> bool:
    return IMAGE_PATTERN.fullmatch(value) is not None


def parse_memory(value: str) -> Optional[str]:
    """
    Numeric part of a quantity string such as '512Mi', or None when the
    whole value is not a quantity.
    """
    match = MEMORY_PATTERN.fullmatch(value)
    if match is None:
        return None
    return match.group(1)


def has_path_prefix(value: str) -> bool:
    return value.startswith("/")
