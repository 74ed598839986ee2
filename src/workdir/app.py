"""Command runners for workdir.

Each command loads the path list, runs one engine operation, persists the
result if it changed, and renders the outcome. Errors are reported once
here and turned into a non-zero exit code.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from rich.console import Console
from rich.text import Text

from workdir.ui.render import (
    length_warning,
    print_deleted,
    print_error,
    print_listing,
    print_save_effect,
    print_warning,
)
from workdir.utils.config import Settings
from workdir.utils.errors import StaleEntryError, WorkdirError
from workdir.utils.jumplist import (
    DEFAULT,
    Position,
    delete_path,
    list_entries,
    resolve_position,
    restore_path,
    save_path,
    short_list,
)
from workdir.utils.store import PathStore

log = logging.getLogger(__name__)

WRAPPER_PATH = Path(__file__).with_name("wrapper.sh")
SHELLS = ("sh", "bash", "zsh")

Prompt = Callable[[str], bool]


class Workdir:
    """The working directory switcher."""

    def __init__(
        self,
        settings: Settings,
        *,
        out: Console,
        err: Console,
        prompt: Prompt | None = None,
        store: PathStore | None = None,
    ) -> None:
        self.settings = settings
        self.store = store if store is not None else PathStore(settings.path_file)
        self.out = out
        self.err = err
        # None means stdin is not interactive: stale entries are only reported.
        self.prompt = prompt

    def run(self, command: Callable[..., int | None], *args, **kwargs) -> int:
        """Run a command, reporting any WorkdirError. Returns the exit code."""
        try:
            return command(*args, **kwargs) or 0
        except WorkdirError as e:
            log.debug("%s failed: %r", command.__name__, e)
            print_error(self.err, e)
            return 1

    def list_paths(self, length: int | None = None) -> None:
        listing = list_entries(self.store.load(), length)
        if listing.clamped:
            print_warning(self.err, length_warning(listing))
        print_listing(self.out, listing)

    def short_list(self) -> None:
        print_listing(self.out, short_list(self.store.load()))

    def save(self, path: str, position: Position = DEFAULT) -> None:
        paths, effect = save_path(
            self.store.load(), path, position, limit=self.settings.limit
        )
        self.store.save(paths)
        print_save_effect(self.out, effect)

    def restore(self, position: Position = DEFAULT, verbose: bool = False) -> int:
        paths = self.store.load()
        try:
            path = restore_path(paths, position)
        except StaleEntryError as e:
            print_error(self.err, e)
            self._offer_removal(paths, e)
            return 1
        flag = "CHDIRV" if verbose else "CHDIR"
        # Written raw: the wrapper needs the path byte for byte.
        self.out.file.write(f"{flag} {path}\n")
        self.out.file.flush()
        return 0

    def _offer_removal(self, paths: list[str], stale: StaleEntryError) -> None:
        if self.prompt is None:
            return
        self.err.print()
        if not self.prompt("Remove from list?"):
            return
        remaining, removed = delete_path(paths, Position(stale.index))
        self.store.save(remaining)
        self.out.print()
        print_deleted(self.out, stale.index, removed)

    def delete(self, position: Position) -> None:
        paths, removed = delete_path(self.store.load(), position)
        self.store.save(paths)
        print_deleted(self.out, resolve_position(position), removed)

    def wrapper(self, shell: str | None = None) -> None:
        log.debug("dumping wrapper for %s", shell or "default shell")
        # One POSIX function serves every supported shell.
        self.out.out(WRAPPER_PATH.read_text(encoding="utf-8").rstrip("\n"), highlight=False)

    def info(self) -> None:
        try:
            installed = version("workdir")
        except PackageNotFoundError:
            installed = "unknown"
        self.out.print(Text(f"workdir {installed}"))
        self.out.print(Text(f"path file: {self.store.path}"), soft_wrap=True)
        self.out.print(Text(f"limit: {self.settings.limit}"))
