"""
Component Registry Module.

Keeps the inventory of components an application ships with:
- Registration loads and checks each component's metadata up front, so
  packaging defects surface once, at startup.
- Lookup by component name.
- A verification pass over every registered component.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger

from idscan_core.component.base import Component, SelfTestingComponent
from idscan_core.component.failures import ValidationReport
from idscan_core.component.metadata import ComponentMetadata
from idscan_core.verification.harness import ComponentVerifier


class RegistryError(Exception):
    """Raised when a component cannot be registered or looked up."""

    pass


class ComponentRegistry:
    """
    Inventory of registered components.

    Usage::

        registry = ComponentRegistry()
        registry.register(Scanner(locator))   # raises ComponentPackagingError if misbuilt

        reports = registry.verify_all()
        failed = {name: errors for name, errors in reports.items() if errors}
    """

    def __init__(self) -> None:
        self._components: Dict[str, Component] = {}
        self._metadata: Dict[str, ComponentMetadata] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._components

    def __len__(self) -> int:
        return len(self._components)

    def register(self, component: Component) -> ComponentMetadata:
        """
        Register a component and load its metadata.

        Args:
            component: Component to register.

        Returns:
            The component's metadata.

        Raises:
            RegistryError: If a component with the same name is registered.
            ComponentPackagingError: If the component's metadata cannot be loaded.
        """
        name = component.component_name
        if name in self._components:
            raise RegistryError(f"Component '{name}' is already registered")

        metadata = component.metadata
        self._components[name] = component
        self._metadata[name] = metadata

        logger.info(
            f"Component registered: {name} v{metadata.component_version} "
            f"(core v{metadata.core_version})"
        )
        return metadata

    def unregister(self, name: str) -> bool:
        """
        Remove a component from the registry.

        Returns:
            True if the component was removed, False if it wasn't registered.
        """
        if name not in self._components:
            logger.warning(f"Component {name} is not registered")
            return False

        del self._components[name]
        del self._metadata[name]
        logger.info(f"Component unregistered: {name}")
        return True

    def get(self, name: str) -> Component:
        """
        Look up a registered component.

        Raises:
            RegistryError: If no component with that name is registered.
        """
        try:
            return self._components[name]
        except KeyError:
            raise RegistryError(
                f"Unknown component '{name}'. Registered: {self.names()}"
            ) from None

    def get_metadata(self, name: str) -> Optional[ComponentMetadata]:
        return self._metadata.get(name)

    def names(self) -> List[str]:
        return list(self._components)

    def verify_all(
        self, verifier: Optional[ComponentVerifier] = None
    ) -> Dict[str, ValidationReport]:
        """
        Run the verification harness over every self-testing component.

        Components without a self test hook are skipped.

        Args:
            verifier: Harness to use (created if not provided).

        Returns:
            Mapping of component name to its report.
        """
        verifier = verifier or ComponentVerifier()
        reports: Dict[str, ValidationReport] = {}

        for name, component in self._components.items():
            if not isinstance(component, SelfTestingComponent):
                logger.debug(f"Skipping verification of {name}: no self test")
                continue
            reports[name] = verifier.run_checks(component)

        failed = [name for name, errors in reports.items() if errors]
        logger.info(
            f"Verified {len(reports)} component(s), {len(failed)} with failures"
            + (f": {', '.join(failed)}" if failed else "")
        )
        return reports

    def summary(self) -> List[Dict[str, Any]]:
        """Metadata of all registered components, for reports."""
        return [self._metadata[name].to_dict() for name in self._components]
