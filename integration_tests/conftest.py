"""Pytest configuration for end-to-end tests."""

import pytest


def pytest_collection_modifyitems(items):
    """Tag everything collected here so it can be skipped with -m 'not integration'."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def data_dir(tmp_path):
    """Data directory shared by the CLI and the API in one test."""
    return tmp_path / "fit-avatar"
