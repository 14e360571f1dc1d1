"""
Integration Tests - Collect and Render.

These tests run whole collection cycles through MockUserStatDatabase
and check the rendered Graphite output.
"""
