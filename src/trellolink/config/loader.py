"""Load action configuration from GitHub Actions inputs."""

from __future__ import annotations

import os
from collections.abc import Mapping

from trellolink.config.exceptions import ConfigError
from trellolink.config.models import ActionConfig, CardAction

REQUIRED_INPUTS = (
    "trello-api-key",
    "trello-auth-token",
    "trello-board-id",
    "trello-card-action",
)


def input_env_name(name: str) -> str:
    """Environment variable the Actions runner uses for an input."""
    return "INPUT_" + name.replace(" ", "_").upper()


def get_input(env: Mapping[str, str], name: str, default: str = "") -> str:
    """Read an action input, stripped; default when unset or blank."""
    value = env.get(input_env_name(name), "").strip()
    return value or default


def _float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e


def _int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e
    if value < 1:
        raise ConfigError(f"{name} must be at least 1, got {value}")
    return value


def load_config(env: Mapping[str, str] | None = None) -> ActionConfig:
    """Load the action configuration.

    Args:
        env: Environment mapping. Defaults to os.environ.

    Returns:
        Immutable configuration for the run.

    Raises:
        ConfigError: If a required input is missing or a setting is malformed.
    """
    if env is None:
        env = os.environ

    missing = [name for name in REQUIRED_INPUTS if not get_input(env, name)]
    if missing:
        raise ConfigError(f"Input required and not supplied: {', '.join(missing)}")

    action_raw = get_input(env, "trello-card-action")
    return ActionConfig(
        api_key=get_input(env, "trello-api-key"),
        auth_token=get_input(env, "trello-auth-token"),
        board_id=get_input(env, "trello-board-id"),
        card_action=CardAction.parse(action_raw),
        card_action_raw=action_raw,
        card_id_pattern=get_input(env, "trello-card-id-pattern", "#"),
        api_base_url=env.get("TRELLOLINK_API_BASE_URL") or "https://api.trello.com",
        web_base_url=env.get("TRELLOLINK_WEB_BASE_URL") or "https://trello.com",
        timeout_seconds=_float(env, "TRELLOLINK_TIMEOUT_SECONDS", 30.0),
        max_concurrency=_int(env, "TRELLOLINK_MAX_CONCURRENCY", 5),
    )
