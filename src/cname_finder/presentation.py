"""Console rendering of banner and status events."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from .models import OutcomeKind, StatusEvent

BANNER = r"""
  ____       _____ _           _
 / ___|_ __ |  ___(_)_ __   __| | ___ _ __
| |   | '_ \| |_  | | '_ \ / _' |/ _ \ '__|
| |___| | | |  _| | | | | | (_| |  __/ |
 \____|_| |_|_|   |_|_| |_|\__,_|\___|_|
"""

STATUS_STYLES = {
    OutcomeKind.SUCCESS: "green",
    OutcomeKind.NO_RECORD: "red",
    OutcomeKind.NOT_FOUND: "cyan",
    OutcomeKind.TIMEOUT: "red",
    OutcomeKind.ERROR: "red",
}
WRITE_FAILED_STYLE = "red"


def format_event(event: StatusEvent) -> str:
    """Return the plain status line for an event."""
    source = event.source
    outcome = event.record.outcome
    if event.write_error is not None:
        return f"[-] Failed writing result for {source}: {event.write_error}"
    if outcome.kind is OutcomeKind.SUCCESS:
        return f"[+] {source} > {outcome.target}"
    if outcome.kind is OutcomeKind.NOT_FOUND:
        return f"[-] {source} does not exist"
    if outcome.kind is OutcomeKind.TIMEOUT:
        return f"[-] Timeout resolving {source}"
    if outcome.kind is OutcomeKind.NO_RECORD:
        return f"[-] No CNAME record found for {source}"
    return f"[-] Error checking CNAME for {source}: {outcome.detail}"


def event_style(event: StatusEvent) -> str:
    if event.write_error is not None:
        return WRITE_FAILED_STYLE
    return STATUS_STYLES[event.record.outcome.kind]


def render_event(event: StatusEvent) -> Text:
    """Styled status line for a rich console."""
    return Text(format_event(event), style=event_style(event))


def print_banner(console: Console) -> None:
    console.print(Text(BANNER, style="cyan"))
