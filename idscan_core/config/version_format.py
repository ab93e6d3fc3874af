"""
Component Version Format.

Every component, and the core library itself, reports its version as::

    major.yyyymmdd.build

- major: increases after global changes.
- yyyymmdd: build date.
- build: increases with every build, independently from the other parts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from loguru import logger

DATE_SEGMENT_LENGTH = 8


@dataclass(frozen=True)
class ComponentVersion:
    """A version string split into its three segments."""

    major: str
    date: str
    build: str

    def __str__(self) -> str:
        return f"{self.major}.{self.date}.{self.build}"


def parse_version(version: str) -> Optional[ComponentVersion]:
    """
    Split a version string into its segments.

    Only the shape is checked: exactly three dot-separated segments with an
    8 character date segment. Segments are not required to be numeric.

    Returns:
        ComponentVersion, or None if the string does not have that shape.
    """
    # Empty segments count: "1..20210101.5" has four.
    segments = version.split(".")
    if len(segments) != 3 or len(segments[1]) != DATE_SEGMENT_LENGTH:
        logger.debug(f"Version '{version}' does not match major.yyyymmdd.build")
        return None
    return ComponentVersion(*segments)


def is_valid_version(version: str) -> bool:
    """Check whether ``version`` matches ``major.yyyymmdd.build``."""
    return parse_version(version) is not None
