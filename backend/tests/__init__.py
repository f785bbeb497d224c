"""
Tests package for the ShortDrop backend.

This package contains test suites organized by type:
- unit/: Fast tests against the in-memory object store
- integration/: Tests with a real temporary directory and the full app
- contracts/: Contract tests for the object storage interface
- property/: Property-based tests using Hypothesis
"""
