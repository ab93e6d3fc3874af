"""
Required Config Declarations.

A component declares the config keys it needs as ``RequiredConfigEntry``
objects. Each entry names a ``ValueKind`` from a closed set; a persisted value
satisfies the declaration only if its kind is exactly the declared one.
"""

from __future__ import annotations

import datetime
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ValueKind(Enum):
    """Kinds of value a config entry can hold."""

    TEXT = "Text"
    INTEGER = "Integer"
    FLOATING_POINT = "FloatingPoint"
    TIMESTAMP = "Timestamp"
    LIST = "List"
    MAPPING = "Mapping"

    @classmethod
    def of(cls, value: Any) -> Optional["ValueKind"]:
        """
        Classify a runtime value.

        Booleans are not integers here, and there is no coercion between
        kinds: ``1`` is INTEGER, ``1.0`` is FLOATING_POINT.

        Returns:
            The value's kind, or None for values outside the supported set.
        """
        if isinstance(value, bool):
            return None
        if isinstance(value, str):
            return cls.TEXT
        if isinstance(value, int):
            return cls.INTEGER
        if isinstance(value, float):
            return cls.FLOATING_POINT
        # datetime is a subclass of date
        if isinstance(value, datetime.date):
            return cls.TIMESTAMP
        if isinstance(value, (list, tuple)):
            return cls.LIST
        if isinstance(value, Mapping):
            return cls.MAPPING
        return None

    def matches(self, value: Any) -> bool:
        """Check whether ``value`` is exactly of this kind."""
        return ValueKind.of(value) is self


def describe_kind(value: Any) -> str:
    """Human-readable kind of a value, used in failure messages."""
    kind = ValueKind.of(value)
    return kind.value if kind is not None else type(value).__name__


@dataclass(frozen=True)
class RequiredConfigEntry:
    """
    One config key a component requires.

    Attributes:
        key: Config key, unique within one component's declarations.
        value_kind: Kind the persisted value must have.
        modifiable: Whether the value may be edited after provisioning.
    """

    key: str
    value_kind: ValueKind
    modifiable: bool = False
