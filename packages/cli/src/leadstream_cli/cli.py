"""CLI entry point for leadstream.

Commands:
  inbox   — triage the latest comments and list them by tab
  show    — triage the latest comments and print one in full
  review  — interactive session: toggle replied, refresh, filter
"""

from __future__ import annotations

import importlib.metadata
import logging

import click

from leadstream_cli.commands.inbox import inbox_cmd, show_cmd
from leadstream_cli.commands.review import review_cmd


@click.group()
@click.version_option(
    version=importlib.metadata.version("leadstream"),
    prog_name="leadstream",
)
@click.option(
    "--config",
    "config_path",
    default=".leadstream.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="LEADSTREAM_CONFIG",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool):
    """Triage YouTube comments into leads and draft replies."""
    from leadstream_core.config import load_config
    from leadstream_store.memory import ReviewStore

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    ctx.ensure_object(dict)
    ctx.obj["config"] = load_config(config_path)
    # One store per process: review state lives only for this session.
    ctx.obj["store"] = ReviewStore()


main.add_command(inbox_cmd)
main.add_command(show_cmd)
main.add_command(review_cmd)
