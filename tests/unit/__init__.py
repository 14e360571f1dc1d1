"""
Unit Tests - Testing Individual Components in Isolation.

The MySQL driver is replaced with fakes; no server is needed.

Test Files:
    - test_userstat_collector.py: Query result to gauge mapping
    - test_metric_store.py: ensure/get/snapshot and thread safety
    - test_graphite.py: Text rendering and write failures
    - test_config_loader.py: Configuration loading/validation
"""
