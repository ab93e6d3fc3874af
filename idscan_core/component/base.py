"""
Component Contract Module.

Every independently shipped component implements this contract. A component:
- Declares the config keys it requires, their value kinds and modifiability.
- Reports its name, its version and the core library version.
- Reads, validates and edits its section of the shared config document.

Config problems are returned as ``ConfigFailure`` lists (empty = success);
only packaging defects (no name, no version) raise.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cached_property
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from loguru import logger

from idscan_core.component.failures import ConfigFailure, FailureKind, ValidationReport
from idscan_core.component.kinds import RequiredConfigEntry, describe_kind
from idscan_core.component.metadata import (
    ComponentMetadata,
    ComponentPackagingError,
    load_info_document,
)
from idscan_core.config.loader import DocumentError, DocumentStore
from idscan_core.config.locator import CONFIG_DOCUMENT_NAME, ResourceLocator
from idscan_core.config.info_schema import ComponentInfoSchema


class Component:
    """
    Base class for all components.

    Subclasses override ``declare_required_configs`` to describe the config
    they need. The component name defaults to ``COMPONENT_NAME`` and then to
    the leading segment of the class's qualified name.

    Example usage::

        class Scanner(Component):
            def declare_required_configs(self):
                return [
                    RequiredConfigEntry("BaseURL", ValueKind.TEXT, modifiable=True),
                    RequiredConfigEntry("Valid Age", ValueKind.INTEGER, modifiable=True),
                    RequiredConfigEntry("USA States", ValueKind.LIST),
                ]

        scanner = Scanner(locator)
        errors = scanner.set_config_value("Valid Age", 21)
        assert not errors
    """

    COMPONENT_NAME: Optional[str] = None

    def __init__(
        self,
        locator: ResourceLocator,
        store: Optional[DocumentStore] = None,
        info_schema: Optional[ComponentInfoSchema] = None,
        component_name: Optional[str] = None,
    ) -> None:
        """
        Initialize the component.

        Args:
            locator: Resolves the config and metadata documents.
            store: Reads and writes documents (created if not provided).
            info_schema: Validates ComponentInfo documents (created if not provided).
            component_name: Explicit component identifier.

        Raises:
            ComponentPackagingError: If the resolved component name is empty.
        """
        if component_name is None:
            component_name = self.COMPONENT_NAME
        if component_name is None:
            component_name = type(self).__qualname__.split(".")[0]
        if not component_name or not component_name.strip():
            raise ComponentPackagingError("Failed to get component name")

        self._name = component_name
        self.locator = locator
        self.store = store or DocumentStore()
        self.info_schema = info_schema or ComponentInfoSchema()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(component_name={self._name!r})"

    # ------------------------------------------------------------------
    # Declarations and metadata
    # ------------------------------------------------------------------

    def declare_required_configs(self) -> List[RequiredConfigEntry]:
        """Config keys this component requires. None by default."""
        return []

    @property
    def component_name(self) -> str:
        return self._name

    @property
    def component_info(self) -> Dict[str, Any]:
        """ComponentInfo mapping of this component (version and other static values)."""
        path = self.locator.resolve_component_metadata_document(self._name)
        return load_info_document(path, self.store, self.info_schema, self._name)

    @property
    def core_info(self) -> Dict[str, Any]:
        """ComponentInfo mapping of the core library."""
        path = self.locator.resolve_core_metadata_document()
        return load_info_document(path, self.store, self.info_schema)

    @property
    def component_version(self) -> str:
        return self.component_info["version"]

    @property
    def core_version(self) -> str:
        return self.core_info["version"]

    @cached_property
    def metadata(self) -> ComponentMetadata:
        """
        All static facts, loaded on first access and kept for the instance.

        Raises:
            ComponentPackagingError: If either ComponentInfo document is
                                     missing or carries no version.
        """
        info = self.component_info
        return ComponentMetadata(
            component_name=self._name,
            component_version=info["version"],
            core_version=self.core_version,
            info=info,
        )

    # ------------------------------------------------------------------
    # Persisted config
    # ------------------------------------------------------------------

    def load_persisted_config(self) -> Optional[Dict[str, Any]]:
        """
        This component's section of the shared config document.

        Returns:
            The section, or None if the document or the section is absent.
        """
        loaded = self._load_config_document()
        if loaded is None:
            return None

        _, configs = loaded
        section = configs.get(self._name)
        if not isinstance(section, dict):
            logger.warning(f"{self._name}: no '{self._name}' section in {CONFIG_DOCUMENT_NAME}")
            return None
        return section

    def validate_config(self, candidate: Optional[Mapping[str, Any]]) -> ValidationReport:
        """
        Check a config mapping against the declared required configs.

        One failure per missing key and per kind mismatch, in declaration
        order. Has no side effects.

        Args:
            candidate: Config mapping to check; None is treated as empty.

        Returns:
            List of failures; empty if every declared key is present with
            exactly the declared kind.
        """
        errors: ValidationReport = []
        candidate = candidate or {}

        for entry in self.declare_required_configs():
            if entry.key not in candidate:
                errors.append(ConfigFailure(
                    kind=FailureKind.MISSING_KEY,
                    message=f"REQUIRED CONFIG: unable to load config value for key '{entry.key}'",
                    key=entry.key,
                ))
                continue

            value = candidate[entry.key]
            if not entry.value_kind.matches(value):
                errors.append(ConfigFailure(
                    kind=FailureKind.WRONG_TYPE,
                    message=(
                        f"REQUIRED CONFIG: wrong config value type for key '{entry.key}'. "
                        f"Required: '{entry.value_kind.value}'. "
                        f"But in config: '{describe_kind(value)}'"
                    ),
                    key=entry.key,
                ))

        return errors

    def set_config_value(self, key: str, value: Any) -> ValidationReport:
        """
        Edit the value of an existing, modifiable key and persist it.

        Only values of keys already present in this component's section can
        be changed; new keys are never introduced. The edited section must
        still pass ``validate_config`` before anything is written.

        Args:
            key: Config key to edit.
            value: New value.

        Returns:
            List of failures; empty if the new value was persisted.
        """
        prefix = f"{self._name}: unable to save component config value '{value}' for key '{key}'."

        if any(entry.key == key and not entry.modifiable for entry in self.declare_required_configs()):
            return self._reject(
                FailureKind.NOT_MODIFIABLE,
                f"{prefix} Required config key '{key}' is not modifiable",
                key,
            )

        current = self.load_persisted_config()
        if current is None:
            return self._reject(
                FailureKind.NO_CONFIG,
                f"{prefix} There is no {CONFIG_DOCUMENT_NAME} document "
                f"or component section '{self._name}' in it",
                key,
            )

        if key not in current:
            return self._reject(
                FailureKind.UNKNOWN_KEY,
                f"{prefix} The key does not exist. Only existing keys can be modified.",
                key,
            )

        edited = dict(current)
        edited[key] = value
        return self._write_config(edited)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _load_config_document(self) -> Optional[Tuple[Path, Dict[str, Any]]]:
        path = self.locator.resolve_component_config_document()
        if path is None:
            return None

        try:
            return path, self.store.load(path)
        except FileNotFoundError:
            logger.warning(f"{self._name}: config document {path} disappeared")
        except DocumentError as e:
            logger.warning(f"{self._name}: unreadable config document treated as absent: {e}")
        return None

    def _write_config(self, config: Dict[str, Any]) -> ValidationReport:
        """Validate ``config`` and store it as this component's section."""
        errors = self.validate_config(config)
        if errors:
            logger.warning(
                f"{self._name}: config edit rejected, {len(errors)} validation failure(s)"
            )
            return errors

        loaded = self._load_config_document()
        if loaded is None:
            return self._reject(
                FailureKind.NO_CONFIG,
                f"{self._name}: unable to save component config. There is no "
                f"{CONFIG_DOCUMENT_NAME} document or component section ({self._name}) in it"
                f"\n{config}",
            )

        path, configs = loaded
        configs[self._name] = config

        if not self.store.write(path, configs):
            failure = ConfigFailure(
                kind=FailureKind.WRITE_FAILED,
                message=(
                    f"{self._name}: unable to save component config. "
                    f"Can't save to file {path}\n{config}"
                ),
            )
            logger.error(failure.message)
            return [failure]

        logger.info(f"{self._name}: config saved to {path}")
        return []

    def _reject(
        self, kind: FailureKind, message: str, key: Optional[str] = None
    ) -> ValidationReport:
        logger.warning(message)
        return [ConfigFailure(kind=kind, message=message, key=key)]


SelfTestResult = Sequence[Union[ConfigFailure, str]]


class SelfTestingComponent(Component, ABC):
    """
    Component that plugs into the verification harness.

    Subclasses supply ``self_test`` for checks that cannot be expressed as
    declared config.
    """

    @abstractmethod
    def self_test(self) -> SelfTestResult:
        """
        Component-specific self test.

        Returns:
            Failures found; plain strings are accepted as failure messages.
        """
        ...
