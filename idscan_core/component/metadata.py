"""
Component Metadata Module.

Loads the static ``ComponentInfo`` documents that carry a component's version
(and the core library's version). A component that cannot report its name or
version is packaged incorrectly; that surfaces as ``ComponentPackagingError``
where the metadata is first loaded, so callers decide whether to abort.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

from idscan_core.config.loader import DocumentError, DocumentStore
from idscan_core.config.info_schema import ComponentInfoSchema, SchemaValidationError

PACKAGE_PREFIX = "IDScanComponents"


class ComponentPackagingError(Exception):
    """Raised when a component's name or metadata cannot be determined."""

    def __init__(self, message: str, component_name: Optional[str] = None) -> None:
        prefix = component_name or PACKAGE_PREFIX
        super().__init__(f"{prefix}: {message}")
        self.component_name = component_name


@dataclass(frozen=True)
class ComponentMetadata:
    """
    Static facts about a component.

    Attributes:
        component_name: Component identifier.
        component_version: Version from the component's ComponentInfo document.
        core_version: Version of the core library the component runs against.
        info: Full ComponentInfo mapping of the component.
    """

    component_name: str
    component_version: str
    core_version: str
    info: Dict[str, Any] = field(default_factory=dict, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a dictionary for report attachment."""
        return {
            "component_name": self.component_name,
            "component_version": self.component_version,
            "core_version": self.core_version,
        }


def load_info_document(
    path: Optional[Path],
    store: DocumentStore,
    info_schema: ComponentInfoSchema,
    component_name: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Load and schema-check a ComponentInfo document.

    Args:
        path: Resolved document path, or None if it could not be located.
        store: Document store used for reading.
        info_schema: Validator for the ComponentInfo schema.
        component_name: Owner of the document, used in error messages.
                        None for the core library's own document.

    Returns:
        The ComponentInfo mapping.

    Raises:
        ComponentPackagingError: If the document is missing, unreadable or
                                 does not carry a non-empty text version.
    """
    if path is None:
        raise ComponentPackagingError("Failed to load ComponentInfo document", component_name)

    try:
        info = store.load(path)
    except (FileNotFoundError, DocumentError) as e:
        raise ComponentPackagingError(
            f"Failed to load ComponentInfo document: {e}", component_name
        ) from e

    try:
        info_schema.validate_component_info(info)
    except SchemaValidationError as e:
        what = "component version" if component_name else "core component version"
        raise ComponentPackagingError(f"Failed to get {what}\n{e}", component_name) from e

    logger.debug(f"ComponentInfo loaded from {path}: version={info['version']}")
    return info
