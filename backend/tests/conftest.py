"""Shared test configuration and fixtures."""

import pytest

from config import DEFAULT_DATA_FILE
from services.matching import directory as directory_module
from services.matching.directory import SnapshotDirectory, load_directory


@pytest.fixture(autouse=True)
def _reset_directory():
    """Clear the directory singleton before and after each test."""
    directory_module.clear()
    yield
    directory_module.clear()


@pytest.fixture
def seed_directory() -> SnapshotDirectory:
    """The sample directory shipped in data/directory.json."""
    return load_directory(DEFAULT_DATA_FILE)
