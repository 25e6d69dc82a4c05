"""review command — interactive triage session."""

from __future__ import annotations

import click
from rich.console import Console

from leadstream_cli.commands.inbox import TABS, mode_option
from leadstream_cli.render import print_comments, print_detail
from leadstream_cli.session import load_into_store, pick_mode
from leadstream_core.errors import SourceFetchError
from leadstream_store.filters import LeadFilter

console = Console()

_PROMPT = "\nComment id to toggle replied, [r]efresh, [l]eads only, [t]ab, [q]uit"


@click.command("review")
@mode_option
@click.pass_context
def review_cmd(ctx, mode: str | None):
    """Work through the inbox interactively.

    Entering a comment id prints it with its draft reply and toggles it
    between unread and replied. Review state lasts for this session only.
    """
    config = ctx.obj["config"]
    store = ctx.obj["store"]
    source_mode = pick_mode(config, mode)

    try:
        load_into_store(store, config, source_mode)
    except SourceFetchError as e:
        raise click.ClickException(f"Error loading comments: {e}")

    tabs = list(TABS)
    tab = "inbox"
    leads_only = False

    while True:
        lead = LeadFilter.LEADS if leads_only else LeadFilter.ANY
        title = f"{tab.capitalize()}{' — leads only' if leads_only else ''}"
        print_comments(store.view(TABS[tab], lead), title, store.unread_leads())

        choice = click.prompt(_PROMPT, prompt_suffix=": ").strip()
        if choice == "q":
            return
        if choice == "r":
            try:
                load_into_store(store, config, source_mode)
            except SourceFetchError as e:
                # The previous batch stays in place.
                console.print(f"[red]Error loading comments: {e}[/red]")
        elif choice == "l":
            leads_only = not leads_only
        elif choice == "t":
            tab = tabs[(tabs.index(tab) + 1) % len(tabs)]
        else:
            updated = store.toggle_replied(choice)
            if updated is None:
                console.print(f"[yellow]No comment with id {choice!r}.[/yellow]")
            else:
                print_detail(updated)
                console.print(f"[green]Marked {updated.external_id} as {updated.review_status.value}.[/green]")
