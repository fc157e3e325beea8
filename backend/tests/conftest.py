"""Pytest Configuration and Shared Fixtures

This file is automatically loaded by pytest and makes all fixtures available to all tests.
"""
import os
import sys
import tempfile
from pathlib import Path

import pytest

# Add backend to path for imports
backend_path = Path(__file__).parent.parent
sys.path.insert(0, str(backend_path))

# Keep test runs from writing into the working directory's log folder
os.environ.setdefault(
    "LOGGER__FILE_PATH",
    str(Path(tempfile.gettempdir()) / "stockchart-tests" / "app.log"),
)

# Import all fixture modules to register them
pytest_plugins = [
    "tests.fixtures.synthetic_data",
    "tests.fixtures.upstream",
]


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: HTTP-level tests through the FastAPI app"
    )
    config.addinivalue_line(
        "markers",
        "unit: Unit tests with mocks only (fast)"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
