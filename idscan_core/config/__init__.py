"""
Configuration Plumbing Module.

Handles the documents behind the component contract:
- Loading and atomically writing config and metadata documents (YAML/JSON/plist).
- Resolving document locations for components.
- JSON schema validation of static metadata documents.
- The ``major.yyyymmdd.build`` version format.
"""

from idscan_core.config.loader import DocumentError, DocumentStore
from idscan_core.config.locator import (
    CONFIG_DOCUMENT_NAME,
    METADATA_DOCUMENT_NAME,
    DirectoryResourceLocator,
    ResourceLocator,
)
from idscan_core.config.info_schema import ComponentInfoSchema, SchemaValidationError
from idscan_core.config.version_format import ComponentVersion, is_valid_version, parse_version

__all__ = [
    "CONFIG_DOCUMENT_NAME",
    "ComponentInfoSchema",
    "ComponentVersion",
    "DirectoryResourceLocator",
    "DocumentError",
    "DocumentStore",
    "METADATA_DOCUMENT_NAME",
    "ResourceLocator",
    "SchemaValidationError",
    "is_valid_version",
    "parse_version",
]
