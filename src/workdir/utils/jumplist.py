"""Position-aware operations over the saved path list.

Every function here is pure: it takes the current list, validates the
request and returns a new list (or a selection) without touching the
input. Persisting the result is up to the caller.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from workdir.utils.config import DEFAULT_LIMIT, SHORT_LIST_LENGTH
from workdir.utils.errors import (
    IdenticalPositionError,
    InvalidPositionError,
    LimitReachedError,
    MissingArgumentError,
    PathEncodingError,
    PathIsNotDirError,
    StaleEntryError,
)

IsDir = Callable[[str], bool]


@dataclass(frozen=True)
class Position:
    """A list position: either the default (most recent) or an explicit index."""

    index: int | None = None

    @classmethod
    def from_user(cls, pos: int | None) -> Position:
        """Build from a 1-based position as typed on the command line."""
        if pos is None:
            return DEFAULT
        if pos < 1:
            raise InvalidPositionError(pos - 1, None)
        return cls(pos - 1)

    @property
    def is_default(self) -> bool:
        return self.index is None


DEFAULT = Position()


def resolve_position(position: Position) -> int:
    """Map a position to a 0-based index. Not bounds-checked."""
    return 0 if position.index is None else position.index


def _check_index(index: int, length: int) -> None:
    if not 0 <= index < length:
        raise InvalidPositionError(index, length)


@dataclass(frozen=True)
class Entry:
    index: int
    path: str
    stale: bool = False

    @property
    def position(self) -> int:
        return self.index + 1


@dataclass(frozen=True)
class Listing:
    entries: list[Entry] = field(default_factory=list)
    # Set when a longer listing was asked for than there are saved paths.
    requested: int | None = None
    available: int = 0

    @property
    def clamped(self) -> bool:
        return self.requested is not None


def _entries(paths: Sequence[str], n: int, is_dir: IsDir) -> list[Entry]:
    return [Entry(i, p, stale=not is_dir(p)) for i, p in enumerate(paths[:n])]


def list_entries(
    paths: Sequence[str],
    length: int | None = None,
    *,
    is_dir: IsDir = os.path.isdir,
) -> Listing:
    """Return the first ``length`` entries (all by default), tagging stale ones.

    Asking for more entries than exist is not an error: the listing is
    clamped and flagged so the caller can warn.
    """
    available = len(paths)
    if length is None or length <= available:
        n = available if length is None else length
        return Listing(_entries(paths, n, is_dir), available=available)
    return Listing(_entries(paths, available, is_dir), requested=length, available=available)


def short_list(
    paths: Sequence[str],
    *,
    rows: int = SHORT_LIST_LENGTH,
    is_dir: IsDir = os.path.isdir,
) -> Listing:
    """Return at most ``rows`` entries, silently clamped."""
    return Listing(_entries(paths, min(len(paths), rows), is_dir), available=len(paths))


@dataclass(frozen=True)
class Saved:
    path: str
    at: int


@dataclass(frozen=True)
class Moved:
    path: str
    from_index: int
    to_index: int


SaveEffect = Saved | Moved


def save_path(
    paths: Sequence[str],
    path: str,
    position: Position = DEFAULT,
    *,
    limit: int = DEFAULT_LIMIT,
    is_dir: IsDir = os.path.isdir,
) -> tuple[list[str], SaveEffect]:
    """Insert ``path`` at ``position``, or move it there if already saved."""
    if not path:
        raise MissingArgumentError("<path>", "Please use the included wrapper")
    try:
        path.encode("utf-8")
    except UnicodeEncodeError:
        raise PathEncodingError(path) from None
    if not is_dir(path):
        raise PathIsNotDirError(path)

    index = resolve_position(position)
    length = len(paths)
    result = list(paths)

    try:
        existing = result.index(path)
    except ValueError:
        existing = None

    if existing is not None:
        if existing == index:
            raise IdenticalPositionError(path)
        # The moved entry still occupies a slot, so the end is not a target.
        _check_index(index, length)
        del result[existing]
        result.insert(index, path)
        return result, Moved(path, existing, index)

    if index > length:
        raise InvalidPositionError(index, length)
    if length >= limit:
        raise LimitReachedError(limit)
    result.insert(index, path)
    return result, Saved(path, index)


def restore_path(
    paths: Sequence[str],
    position: Position = DEFAULT,
    *,
    is_dir: IsDir = os.path.isdir,
) -> str:
    """Select the path to switch to. Raises StaleEntryError for missing directories."""
    index = resolve_position(position)
    _check_index(index, len(paths))
    path = paths[index]
    if not is_dir(path):
        raise StaleEntryError(index, path)
    return path


def delete_path(paths: Sequence[str], position: Position) -> tuple[list[str], str]:
    """Remove the entry at an explicit position. Returns the new list and the removed path."""
    if position.is_default:
        raise MissingArgumentError("[pos]")
    index = resolve_position(position)
    _check_index(index, len(paths))
    result = list(paths)
    removed = result.pop(index)
    return result, removed
