"""inbox and show commands — one-shot triage views."""

from __future__ import annotations

import click

from leadstream_cli.render import print_comments, print_detail
from leadstream_cli.session import load_into_store, pick_mode
from leadstream_core.errors import SourceFetchError
from leadstream_store.filters import LeadFilter, StatusFilter

TABS = {
    "inbox": StatusFilter.UNREAD,
    "replied": StatusFilter.REPLIED,
    "all": StatusFilter.ANY,
}

mode_option = click.option(
    "--mode",
    type=click.Choice(["fixture", "remote"]),
    default=None,
    help="Comment source. Overrides config file.",
)


def _load(ctx: click.Context, mode: str | None):
    config = ctx.obj["config"]
    store = ctx.obj["store"]
    try:
        return load_into_store(store, config, pick_mode(config, mode))
    except SourceFetchError as e:
        raise click.ClickException(f"Error loading comments: {e}")


@click.command("inbox")
@mode_option
@click.option(
    "--tab",
    type=click.Choice(list(TABS)),
    default="inbox",
    show_default=True,
    help="Which review status to list.",
)
@click.option("--leads", "leads_only", is_flag=True, help="Only show potential leads.")
@click.pass_context
def inbox_cmd(ctx, mode: str | None, tab: str, leads_only: bool):
    """Triage the latest comments and list them.

    \b
    Environment variables for remote mode:
      YOUTUBE_API_KEY              YouTube Data API key
      YOUTUBE_CHANNEL_ID           Channel to read (or channel_id in config)
      LEADSTREAM_CLASSIFIER_KEY    Enables the keyword classifier
      ANTHROPIC_API_KEY            Required with classifier: anthropic
      OPENAI_API_KEY               Required with classifier: openai
    """
    summary = _load(ctx, mode)
    store = ctx.obj["store"]
    lead = LeadFilter.LEADS if leads_only else LeadFilter.ANY
    title = f"{tab.capitalize()} — {summary.total} comments, {summary.leads} leads ({summary.mode})"
    print_comments(store.view(TABS[tab], lead), title, store.unread_leads())


@click.command("show")
@click.argument("comment_id")
@mode_option
@click.pass_context
def show_cmd(ctx, comment_id: str, mode: str | None):
    """Print one triaged comment with its analysis and draft reply."""
    _load(ctx, mode)
    comment = ctx.obj["store"].get(comment_id)
    if comment is None:
        raise click.ClickException(f"No comment with id {comment_id!r} in this batch.")
    print_detail(comment)
