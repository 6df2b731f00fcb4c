"""
Global pytest configuration and fixtures for the vendor client tests.

This file contains shared fixtures and configurations that are available
to all test modules without explicit import.
"""

import os
import sys
from pathlib import Path
from typing import Dict, Generator

import pytest  # type: ignore
from faker import Faker  # type: ignore

# Add the project root to Python path
project_root: Path = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from vendor_clients.config.settings import reset_settings  # noqa: E402

pytest_plugins = ["tests.fixtures.http_fixtures"]

# Initialize Faker for generating test data
fake: Faker = Faker()


# ============================================================================
# Session-level fixtures
# ============================================================================


@pytest.fixture(scope="session")
def faker_instance() -> Faker:
    """
    Provide a Faker instance for generating test data.

    Returns:
        Configured Faker instance
    """
    return fake


# ============================================================================
# Function-level fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """
    Reset environment and the settings singleton around each test.
    This ensures tests don't interfere with each other.
    """
    original_env: Dict[str, str] = os.environ.copy()
    reset_settings()

    yield

    os.environ.clear()
    os.environ.update(original_env)
    reset_settings()


# ============================================================================
# Test lifecycle hooks
# ============================================================================


def pytest_collection_modifyitems(config, items):
    """
    Auto-mark tests based on their module names.
    """
    for item in items:
        if "pagination" in item.nodeid.lower():
            item.add_marker(pytest.mark.pagination)
        if "test_vendor_" in str(item.fspath):
            item.add_marker(pytest.mark.vendor)
