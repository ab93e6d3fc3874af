"""
Component Verification Harness.

Runs the shared verification pass every component must survive:
1. Version format of the component version and of the core version.
2. Required config presence and value kinds in the persisted config.
3. The component's own self test.

All failures are collected into one report instead of stopping at the first.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from loguru import logger

from idscan_core.component.base import Component, SelfTestingComponent
from idscan_core.component.failures import ConfigFailure, FailureKind, ValidationReport
from idscan_core.config.version_format import is_valid_version

BANNER_WIDTH = 100


def format_errors(errors: Sequence[ConfigFailure], component_name: str) -> Optional[str]:
    """
    Render failures as one readable block.

    Args:
        errors: Failures to render.
        component_name: Component the failures belong to.

    Returns:
        The block, or None when there is nothing to report.
    """
    if not errors:
        return None

    lines = [str(error).replace("\n", "\n    ") for error in errors]

    bottom_separator = "#" * BANNER_WIDTH
    top_separator = f"## {component_name} Errors: " + bottom_separator[: -(len(component_name) + 12)]

    return (
        f"\n\n\n{top_separator}\n\n"
        + " -> "
        + "\n\n -> ".join(lines)
        + f"\n\n{bottom_separator}\n\n\n"
    )


class ComponentVerifier:
    """
    Verifies components against the shared component contract.

    Usage::

        verifier = ComponentVerifier()
        errors = verifier.run_checks(scanner)
        verifier.assert_errors(errors, scanner.component_name)
    """

    def run_checks(self, component: SelfTestingComponent) -> ValidationReport:
        """
        Run every check on a component.

        Args:
            component: Component to verify.

        Returns:
            All failures in check order; empty if the component passed.

        Raises:
            ComponentPackagingError: If the component's metadata cannot be loaded.
        """
        name = component.component_name
        logger.info(f"Verifying component: {name}")

        errors: ValidationReport = []
        errors.extend(self.check_versions(component))
        errors.extend(self.check_required_configs(component))
        errors.extend(self.run_self_test(component))

        if errors:
            logger.warning(f"Component {name}: {len(errors)} check failure(s)")
        else:
            logger.info(f"Component {name}: all checks passed")
        return errors

    def check_versions(self, component: Component) -> ValidationReport:
        errors: ValidationReport = []

        component_version = component.component_version
        if not self.validate_version(component_version):
            errors.append(ConfigFailure(
                kind=FailureKind.VERSION_FORMAT,
                message=f"VERSION: wrong version format '{component_version}'",
            ))

        core_version = component.core_version
        if not self.validate_version(core_version):
            errors.append(ConfigFailure(
                kind=FailureKind.VERSION_FORMAT,
                message=f"VERSION: wrong core version format '{core_version}'",
            ))

        return errors

    def check_required_configs(self, component: Component) -> ValidationReport:
        return component.validate_config(component.load_persisted_config())

    def run_self_test(self, component: SelfTestingComponent) -> ValidationReport:
        """
        Run the component's self test hook.

        A hook that raises is reported as a single failure so the rest of the
        pass is still reported.
        """
        try:
            results = component.self_test()
        except Exception as e:
            logger.error(f"Self test of {component.component_name} raised: {e}")
            return [ConfigFailure(
                kind=FailureKind.SELF_TEST,
                message=f"SELF TEST: raised {type(e).__name__}: {e}",
            )]

        errors: List[ConfigFailure] = []
        for result in results or []:
            if isinstance(result, ConfigFailure):
                errors.append(result)
            else:
                errors.append(ConfigFailure(kind=FailureKind.SELF_TEST, message=str(result)))
        return errors

    @staticmethod
    def validate_version(version: str) -> bool:
        return is_valid_version(version)

    @staticmethod
    def format_errors(errors: Sequence[ConfigFailure], component_name: str) -> Optional[str]:
        return format_errors(errors, component_name)

    def assert_errors(self, errors: Sequence[ConfigFailure], component_name: str) -> None:
        """
        Fail with the formatted report if there are any failures.

        Raises:
            AssertionError: With the formatted block as its message.
        """
        formatted = format_errors(errors, component_name)
        if formatted is not None:
            raise AssertionError(formatted)
