"""
IDScan Core - Component Registry and Configuration Contract Package.

This package contains the shared logic for independently shipped components:
- Component Contract: required config declarations, validation and guarded edits.
- Configuration: config/metadata document storage and location.
- Registry: inventory of the components an application ships with.
- Verification: the shared self-test harness.
"""

from idscan_core.component import (
    Component,
    ComponentMetadata,
    ComponentPackagingError,
    ConfigFailure,
    FailureKind,
    RequiredConfigEntry,
    SelfTestingComponent,
    ValidationReport,
    ValueKind,
)
from idscan_core.config import DirectoryResourceLocator, DocumentStore, ResourceLocator
from idscan_core.registry import ComponentRegistry, RegistryError
from idscan_core.verification import ComponentVerifier, format_errors

__version__ = "1.0.0"

__all__ = [
    "Component",
    "ComponentMetadata",
    "ComponentPackagingError",
    "ComponentRegistry",
    "ComponentVerifier",
    "ConfigFailure",
    "DirectoryResourceLocator",
    "DocumentStore",
    "FailureKind",
    "RegistryError",
    "RequiredConfigEntry",
    "ResourceLocator",
    "SelfTestingComponent",
    "ValidationReport",
    "ValueKind",
    "format_errors",
]
