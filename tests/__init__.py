"""Test suite for easekit.

Test Structure:
- unit/: Unit tests for individual components
  - curves/: Curve abstraction, variants, sampling, registry and library
  - config/: Config models and loaders
  - utils/: Logging and shared random source
- cross_verify/: Parity checks against the easing-functions package
- fixtures/: Shared curve cases
- conftest.py: Shared fixtures and test configuration
"""
