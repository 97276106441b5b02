"""CLI entry point for trellolink.

Runs once per GitHub Actions event: reads the action inputs and the event
payload, updates the referenced Trello cards, and exits.
"""

from __future__ import annotations

import asyncio
import os
from typing import TYPE_CHECKING, Any

import click

from trellolink.board import BoardClient
from trellolink.config import ConfigError, load_config
from trellolink.dispatcher import EventDispatcher
from trellolink.events import EventPayloadError, load_event_payload
from trellolink.logging import get_logger, setup_logging

if TYPE_CHECKING:
    from trellolink.config import ActionConfig
    from trellolink.dispatcher import DispatchReport

logger = get_logger("cli")


async def run(config: ActionConfig, payload: dict[str, Any]) -> DispatchReport:
    """Dispatch one event and close the Board Client afterwards."""
    async with BoardClient(config) as board:
        dispatcher = EventDispatcher(config, board)
        return await dispatcher.run(payload)


@click.command()
@click.option(
    "--event-path",
    type=click.Path(dir_okay=False),
    envvar="GITHUB_EVENT_PATH",
    default=None,
    help="Path to the event payload JSON (defaults to $GITHUB_EVENT_PATH). "
    "Without one there is no event to handle.",
)
@click.option(
    "--log-level",
    default=None,
    help="Log level (DEBUG, INFO, WARNING, ERROR). Defaults to $TRELLOLINK_LOG_LEVEL or INFO.",
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Also write a rotating log file to this directory.",
)
@click.version_option(package_name="trellolink")
def main(event_path: str | None, log_level: str | None, log_dir: str | None) -> None:
    """Link the pushed commit or pull request to its Trello cards."""
    setup_logging(level=log_level, log_dir=log_dir)

    try:
        config = load_config(os.environ)
        if event_path:
            payload = load_event_payload(event_path)
        else:
            logger.warning("No event payload path given; nothing to handle")
            payload = {}
    except (ConfigError, EventPayloadError) as e:
        raise click.ClickException(str(e)) from e

    report = asyncio.run(run(config, payload))

    updated = sum(1 for outcome in report.outcomes if outcome.success)
    logger.info(
        "Done (%s path): %d card(s) referenced, %d updated",
        report.path,
        len(report.identifiers),
        updated,
    )


if __name__ == "__main__":
    main()
