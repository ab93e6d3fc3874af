"""
Pytest integration for component verification.

A component's test suite enables it from its ``conftest.py`` and verifies
itself with::

    pytest_plugins = ["idscan_core.verification.pytest_plugin"]

    def test_component(scanner, assert_component_passes):
        assert_component_passes(scanner)
"""

from __future__ import annotations

from typing import Callable

import pytest

from idscan_core.component.base import SelfTestingComponent
from idscan_core.verification.harness import ComponentVerifier, format_errors


@pytest.fixture
def component_verifier() -> ComponentVerifier:
    """Provide a ComponentVerifier instance."""
    return ComponentVerifier()


@pytest.fixture
def assert_component_passes(
    component_verifier: ComponentVerifier,
) -> Callable[[SelfTestingComponent], None]:
    """Run the full verification pass and fail the test with the formatted report."""

    def _assert(component: SelfTestingComponent) -> None:
        errors = component_verifier.run_checks(component)
        formatted = format_errors(errors, component.component_name)
        if formatted is not None:
            pytest.fail(formatted, pytrace=False)

    return _assert


def pytest_configure(config: pytest.Config) -> None:
    """Register the marker used by component verification suites."""
    config.addinivalue_line(
        "markers",
        "component(name): Verification test for the named component",
    )
