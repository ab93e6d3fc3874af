"""
Verification Harness Package.

Composes version, required config and self-test checks into one report,
and formats reports for test runners.
"""

from idscan_core.verification.harness import ComponentVerifier, format_errors

__all__ = ["ComponentVerifier", "format_errors"]
