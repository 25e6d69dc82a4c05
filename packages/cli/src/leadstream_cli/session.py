"""Glue between the CLI and the triage core.

Loads a batch into the session's ReviewStore and turns core failures into
console output, so every command reports configuration problems the same way.
"""

from __future__ import annotations

import asyncio

import click
from rich.console import Console

from leadstream_core.errors import ConfigurationError
from leadstream_core.models import SourceMode
from leadstream_core.triage import TriageSummary, resolve_mode, run_triage, summarize

console = Console()

_CONFIG_HINT = (
    "Remote mode needs YOUTUBE_API_KEY, YOUTUBE_CHANNEL_ID (or channel_id in .leadstream.yml) "
    "and a valid classifier setting. Showing demo data instead."
)


def pick_mode(config: dict, mode: str | None) -> SourceMode:
    if mode:
        return SourceMode(mode)
    try:
        return resolve_mode(config)
    except ValueError as e:
        raise click.UsageError(str(e))


def load_into_store(store, config: dict, mode: SourceMode) -> TriageSummary:
    """Run one triage and install the batch in store.

    A ConfigurationError falls back to fixture data after warning the user.
    SourceFetchError propagates with the store left as it was.
    """
    try:
        batch = asyncio.run(run_triage(mode, config))
    except ConfigurationError as e:
        console.print(f"[yellow]Configuration error: {e}[/yellow]")
        console.print(f"[yellow]{_CONFIG_HINT}[/yellow]")
        mode = SourceMode.FIXTURE
        batch = asyncio.run(run_triage(mode, config))
    store.replace_all(batch)
    return summarize(mode, batch)
