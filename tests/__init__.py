"""
IDScan Core - Test Suite Package.

Pytest-based unit tests for the component contract, the document plumbing,
the component registry and the verification harness.
"""
