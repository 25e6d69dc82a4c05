"""Rich rendering for triage results."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.table import Table

from leadstream_core.models import TriagedComment

console = Console()

_TEXT_WIDTH = 60


def badge(comment: TriagedComment) -> str:
    if comment.is_lead:
        return "[bold orange1]Potential Lead[/bold orange1]"
    return "[dim]General[/dim]"


def status_label(comment: TriagedComment) -> str:
    return "[green]replied[/green]" if comment.replied else "[yellow]unread[/yellow]"


def print_comments(comments: Sequence[TriagedComment], title: str, unread_leads: int) -> None:
    console.print(f"\n[bold]Unread leads:[/bold] [orange1]{unread_leads}[/orange1]")
    if not comments:
        console.print("[yellow]No comments in this view.[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("ID", style="bold")
    table.add_column("Author", max_width=20)
    table.add_column("Type", width=16)
    table.add_column("Status", width=8)
    table.add_column("Video", max_width=30)
    table.add_column("Comment", max_width=_TEXT_WIDTH)
    table.add_column("Published", width=10)

    for c in comments:
        text = c.text if len(c.text) <= _TEXT_WIDTH else c.text[: _TEXT_WIDTH - 1] + "…"
        table.add_row(
            c.external_id,
            c.author_name,
            badge(c),
            status_label(c),
            c.item_label,
            text,
            c.published_at.date().isoformat(),
        )
    console.print(table)


def print_detail(comment: TriagedComment) -> None:
    console.print(f"\n[bold red]YOUTUBE[/bold red]  {comment.item_label}")
    console.print(f"[bold]{comment.author_name}[/bold]  [dim]{comment.published_at.date().isoformat()}[/dim]")
    console.print(comment.text, markup=False)
    console.print(f"\n[bold]AI insight[/bold]  {badge(comment)}  {status_label(comment)}")
    console.print(comment.rationale, markup=False)
    console.print("\n[bold]Draft reply[/bold]")
    console.print(comment.suggested_reply, markup=False)
