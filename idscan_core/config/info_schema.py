"""
ComponentInfo Schema.

Checks the static ``ComponentInfo`` document of a component against the
bundled ``component_info_schema.json`` using jsonschema. The schema only pins
down what the contract needs: a non-empty text ``version``. The version's
``major.yyyymmdd.build`` shape is left to the verification harness so that a
misformatted version is reported, not fatal.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Mapping, Optional

import jsonschema
from loguru import logger

from idscan_core.config.locator import CORE_RESOURCES_DIR

COMPONENT_INFO_SCHEMA_PATH = CORE_RESOURCES_DIR / "schemas" / "component_info_schema.json"


class SchemaValidationError(Exception):
    """Raised when a ComponentInfo document does not satisfy its schema."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class ComponentInfoSchema:
    """
    Validator for ComponentInfo documents.

    The schema file is read and the validator built on first use, then reused
    for every document.

    Usage::

        schema = ComponentInfoSchema()
        schema.validate_component_info({"version": "1.20210511.1"})
    """

    def __init__(self, schema_path: str | Path = COMPONENT_INFO_SCHEMA_PATH) -> None:
        self.schema_path = Path(schema_path)
        self._validator: Optional[jsonschema.Draft7Validator] = None

    @property
    def validator(self) -> jsonschema.Draft7Validator:
        """
        The compiled validator.

        Raises:
            SchemaValidationError: If the schema file is missing, unreadable
                                   or not a valid Draft 7 schema.
        """
        if self._validator is None:
            try:
                schema = json.loads(self.schema_path.read_text(encoding="utf-8"))
                jsonschema.Draft7Validator.check_schema(schema)
            except (OSError, json.JSONDecodeError, jsonschema.SchemaError) as e:
                raise SchemaValidationError(
                    f"Failed to load ComponentInfo schema {self.schema_path}: {e}"
                ) from e
            self._validator = jsonschema.Draft7Validator(schema)
            logger.debug(f"ComponentInfo schema loaded: {self.schema_path}")
        return self._validator

    def validate_component_info(self, info: Mapping[str, Any]) -> None:
        """
        Validate a ComponentInfo mapping.

        Raises:
            SchemaValidationError: Listing every violation, ordered by path.
        """
        violations = sorted(self.validator.iter_errors(info), key=lambda e: list(e.path))
        if not violations:
            return

        messages: List[str] = []
        for violation in violations:
            where = " -> ".join(str(p) for p in violation.absolute_path) or "(root)"
            messages.append(f"  [{where}] {violation.message}")

        raise SchemaValidationError(
            f"ComponentInfo does not match its schema ({len(messages)} error(s)):\n"
            + "\n".join(messages),
            errors=messages,
        )
