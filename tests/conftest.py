"""Pytest configuration and fixtures."""

pytest_plugins = ["pytester", "tdd_assert.pytest_plugin"]
