"""Rich formatting for confirmations, listings and diagnostics."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from workdir.utils.errors import WorkdirError
from workdir.utils.jumplist import Entry, Listing, Moved, SaveEffect


def make_console(color: str = "always", *, stderr: bool = False) -> Console:
    """Build a console for the given color mode (always/auto/never)."""
    if color == "never":
        return Console(stderr=stderr, force_terminal=False, no_color=True, highlight=False)
    force = True if color == "always" else None
    return Console(stderr=stderr, force_terminal=force, highlight=False)


def fmt_id(index: int) -> str:
    return f"[{index + 1}]"


def path_label(index: int, path: str) -> Text:
    """``[N] path`` with the position emphasized."""
    label = Text()
    label.append(fmt_id(index), style="bold")
    label.append(" ")
    label.append(path)
    return label


def entry_label(entry: Entry) -> Text:
    label = path_label(entry.index, entry.path)
    if entry.stale:
        label.append(" [*]")
        label.stylize("strike dim")
    return label


def print_listing(console: Console, listing: Listing) -> None:
    for entry in listing.entries:
        console.print(entry_label(entry), soft_wrap=True)


def print_ok(console: Console, header: str, style: str, body: Text) -> None:
    line = Text()
    line.append(header, style=f"bold {style}")
    line.append(" ")
    line.append_text(body)
    console.print(line, soft_wrap=True)


def print_save_effect(console: Console, effect: SaveEffect) -> None:
    if isinstance(effect, Moved):
        body = Text(fmt_id(effect.from_index), style="bold")
        body.append(" -> ")
        body.append_text(path_label(effect.to_index, effect.path))
        print_ok(console, "moved", "cyan", body)
    else:
        print_ok(console, "saved", "green", path_label(effect.at, effect.path))


def print_deleted(console: Console, index: int, path: str) -> None:
    print_ok(console, "deleted", "magenta", path_label(index, path))


def print_error(console: Console, err: WorkdirError) -> None:
    line = Text("error:", style="bold red")
    line.append(" ")
    line.append_text(err.render())
    console.print(line, soft_wrap=True)


def print_warning(console: Console, message: Text) -> None:
    line = Text("warning:", style="bold yellow")
    line.append(" ")
    line.append_text(message)
    console.print(line, soft_wrap=True)
    console.print()


def length_warning(listing: Listing) -> Text:
    text = Text("invalid value '")
    text.append(str(listing.requested), style="yellow")
    text.append("' for '")
    text.append("[length]", style="bold")
    text.append(f"': only {listing.available} paths are saved")
    return text
