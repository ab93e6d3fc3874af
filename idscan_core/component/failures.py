"""
Validation Failures.

Recoverable problems (config mismatches, rejected edits, failed writes,
version format and self-test problems) are returned as lists of
``ConfigFailure`` objects rather than raised. An empty list means success.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


class FailureKind(Enum):
    """Category of a validation failure."""

    MISSING_KEY = "missing_key"
    WRONG_TYPE = "wrong_type"
    NOT_MODIFIABLE = "not_modifiable"
    NO_CONFIG = "no_config"
    UNKNOWN_KEY = "unknown_key"
    WRITE_FAILED = "write_failed"
    VERSION_FORMAT = "version_format"
    SELF_TEST = "self_test"


@dataclass(frozen=True)
class ConfigFailure:
    """
    A single failure description.

    Attributes:
        kind: Failure category.
        message: Human-readable description.
        key: Config key involved, if any.
    """

    kind: FailureKind
    message: str
    key: Optional[str] = None

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the failure to a dictionary for reporting."""
        return {"kind": self.kind.value, "message": self.message, "key": self.key}


ValidationReport = List[ConfigFailure]
