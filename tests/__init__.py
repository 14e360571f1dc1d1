"""
Test Suite for mysql-userstat.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Collect-then-render tests against the mock database

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest -m integration                   # Integration tests only
"""
