"""Shared pytest fixtures and configuration."""

import pytest

from trellolink.config import ActionConfig, CardAction


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def action_config() -> ActionConfig:
    """Configuration with the comment action and the default '#' prefix."""
    return ActionConfig(
        api_key="test-key",
        auth_token="test-token",
        board_id="board-1",
        card_action=CardAction.COMMENT,
        card_action_raw="comment",
    )
