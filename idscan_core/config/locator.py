"""
Resource Locator Module.

Resolves where component documents live on disk:
- The shared ``IDScanComponents`` config document, searched first in
  application directories and then in test-fixture directories.
- Each component's ``ComponentInfo`` metadata document.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from loguru import logger

CONFIG_DOCUMENT_NAME = "IDScanComponents"
METADATA_DOCUMENT_NAME = "ComponentInfo"

# Lookup order when several formats of the same document exist
DOCUMENT_EXTENSIONS = (".yaml", ".yml", ".json", ".plist")

APP_RESOURCES_ENV = "IDSCAN_APP_RESOURCES_DIR"
FIXTURE_RESOURCES_ENV = "IDSCAN_FIXTURE_RESOURCES_DIR"

CORE_RESOURCES_DIR = Path(__file__).resolve().parent.parent / "resources"


def find_document(directory: str | Path, name: str) -> Optional[Path]:
    """Return the first ``<directory>/<name><ext>`` that exists, if any."""
    directory = Path(directory)
    for ext in DOCUMENT_EXTENSIONS:
        candidate = directory / f"{name}{ext}"
        if candidate.is_file():
            return candidate
    return None


class ResourceLocator(ABC):
    """Resolves document locations for components."""

    @abstractmethod
    def resolve_component_metadata_document(self, component_id: str) -> Optional[Path]:
        """Return the ``ComponentInfo`` document of a component, or None."""
        ...

    @abstractmethod
    def resolve_component_config_document(self) -> Optional[Path]:
        """Return the shared ``IDScanComponents`` document, or None."""
        ...

    def resolve_core_metadata_document(self) -> Optional[Path]:
        """Return the ``ComponentInfo`` document shipped with this library."""
        return find_document(CORE_RESOURCES_DIR, METADATA_DOCUMENT_NAME)


class DirectoryResourceLocator(ResourceLocator):
    """
    Locator backed by plain directories.

    The config document is looked up in ``app_dirs`` first and then in
    ``fixture_dirs``; both hold documents of the same shape. Metadata
    documents are looked up in a directory registered for the component, then
    in ``<base>/<component_id>/`` for every app and fixture directory.

    Usage::

        locator = DirectoryResourceLocator(app_dirs=["/opt/app/resources"])
        locator.add_component_dir("Scanner", "/opt/app/scanner")
        path = locator.resolve_component_config_document()
    """

    def __init__(
        self,
        app_dirs: Optional[Iterable[str | Path]] = None,
        fixture_dirs: Optional[Iterable[str | Path]] = None,
        component_dirs: Optional[Dict[str, str | Path]] = None,
    ) -> None:
        """
        Initialize the locator.

        Args:
            app_dirs: Application-level resource directories, searched first.
            fixture_dirs: Test-fixture resource directories, searched second.
            component_dirs: Mapping of component id to the directory holding
                            its ``ComponentInfo`` document.
        """
        self.app_dirs: List[Path] = [Path(d) for d in (app_dirs or [])]
        self.fixture_dirs: List[Path] = [Path(d) for d in (fixture_dirs or [])]
        self._component_dirs: Dict[str, Path] = {
            name: Path(d) for name, d in (component_dirs or {}).items()
        }

        logger.debug(
            f"DirectoryResourceLocator initialized — app_dirs={self.app_dirs}, "
            f"fixture_dirs={self.fixture_dirs}"
        )

    @classmethod
    def from_environment(cls) -> "DirectoryResourceLocator":
        """Build a locator from ``IDSCAN_APP_RESOURCES_DIR`` / ``IDSCAN_FIXTURE_RESOURCES_DIR``."""
        return cls(
            app_dirs=_split_env_paths(os.environ.get(APP_RESOURCES_ENV, "")),
            fixture_dirs=_split_env_paths(os.environ.get(FIXTURE_RESOURCES_ENV, "")),
        )

    def add_component_dir(self, component_id: str, directory: str | Path) -> None:
        """Register the directory holding a component's metadata document."""
        self._component_dirs[component_id] = Path(directory)

    def resolve_component_metadata_document(self, component_id: str) -> Optional[Path]:
        search_dirs: List[Path] = []
        if component_id in self._component_dirs:
            search_dirs.append(self._component_dirs[component_id])
        search_dirs.extend(d / component_id for d in self.app_dirs + self.fixture_dirs)

        for directory in search_dirs:
            path = find_document(directory, METADATA_DOCUMENT_NAME)
            if path is not None:
                logger.debug(f"Metadata document for {component_id}: {path}")
                return path

        logger.warning(f"No {METADATA_DOCUMENT_NAME} document found for {component_id}")
        return None

    def resolve_component_config_document(self) -> Optional[Path]:
        for directory in self.app_dirs + self.fixture_dirs:
            path = find_document(directory, CONFIG_DOCUMENT_NAME)
            if path is not None:
                logger.debug(f"Config document resolved: {path}")
                return path

        logger.warning(f"No {CONFIG_DOCUMENT_NAME} document found")
        return None


def _split_env_paths(value: str) -> List[Path]:
    return [Path(p) for p in value.split(os.pathsep) if p]
