"""Shared pytest fixtures and configuration."""

import pytest

from followup.config import Configuration


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


@pytest.fixture
def configuration() -> Configuration:
    """Configuration matching the documented end-to-end scenario."""
    return Configuration(
        repository_owner="owner",
        repository_name="repo",
        github_token="test-token",
        target_board=9,
        validation_board=3,
        title_suffix="(validated)",
        assignee_names=("alice",),
        label_names=("qa-verified",),
    )
