"""
Root conftest.py — Shared Pytest fixtures and configuration.

Provides fixtures for:
- A scratch copy of the fixture resources (config and metadata documents),
  so tests that edit config never touch the checked-in fixtures.
- Resource locator and document store wired to that copy.
- The IDScanCoreTestModel component.
"""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from idscan_core.config.loader import DocumentStore
from idscan_core.config.locator import DirectoryResourceLocator
from tests.model import IDScanCoreTestModel

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Resource Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def resources_dir(tmp_path: Path) -> Path:
    """Copy the fixture resources into a temporary directory."""
    target = tmp_path / "resources"
    shutil.copytree(FIXTURES_DIR / "resources", target)
    return target


@pytest.fixture
def config_path(resources_dir: Path) -> Path:
    """Path of the scratch IDScanComponents document."""
    return resources_dir / "IDScanComponents.yaml"


@pytest.fixture
def locator(resources_dir: Path) -> DirectoryResourceLocator:
    """Locator that finds the scratch resources as test fixtures."""
    return DirectoryResourceLocator(fixture_dirs=[resources_dir])


@pytest.fixture
def store() -> DocumentStore:
    return DocumentStore()


# ---------------------------------------------------------------------------
# Component Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def model_component(locator: DirectoryResourceLocator) -> IDScanCoreTestModel:
    """The test model component bound to the scratch resources."""
    return IDScanCoreTestModel(locator)
