"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import os
import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Keep env overrides from the developer's shell out of config tests."""
    for name in ("DATABASE_URL", "REDIS_URL", "ADMIN_TOKEN"):
        if name in os.environ:
            monkeypatch.delenv(name)
