"""
Component Contract Package.

Declarations, metadata, failures and the ``Component`` base class that every
component implements.
"""

from idscan_core.component.base import Component, SelfTestingComponent
from idscan_core.component.failures import ConfigFailure, FailureKind, ValidationReport
from idscan_core.component.kinds import RequiredConfigEntry, ValueKind
from idscan_core.component.metadata import ComponentMetadata, ComponentPackagingError

__all__ = [
    "Component",
    "ComponentMetadata",
    "ComponentPackagingError",
    "ConfigFailure",
    "FailureKind",
    "RequiredConfigEntry",
    "SelfTestingComponent",
    "ValidationReport",
    "ValueKind",
]
