"""Project-level pytest configuration: enables the component verification plugin."""

pytest_plugins = ["idscan_core.verification.pytest_plugin"]
