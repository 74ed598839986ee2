"""Load and save the saved-paths file.

The file is a plain list of paths, one per line. It is read fresh and
rewritten in full on every invocation with no locking: two shells saving
at the same time race and the last writer wins.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from workdir.utils.errors import NoPathFileError, PathFileReadError, PathFileWriteError

log = logging.getLogger(__name__)


class PathStore:
    """Flat-file persistence for the path list."""

    def __init__(self, path_file: str | os.PathLike[str]) -> None:
        self._path_file = os.fspath(path_file)

    @property
    def path_file(self) -> str:
        """The configured location, as given (may start with ``~``)."""
        return self._path_file

    @property
    def path(self) -> Path:
        """The configured location with ``~`` expanded."""
        return Path(os.path.expanduser(self._path_file))

    def load(self) -> list[str]:
        """Read saved paths in order, dropping blank lines."""
        path = self.path
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise NoPathFileError(self._path_file) from None
        except (OSError, UnicodeDecodeError) as e:
            raise PathFileReadError(e) from e
        paths = [line.rstrip("\r") for line in text.split("\n")]
        paths = [p for p in paths if p]
        log.debug("loaded %d paths from %s", len(paths), path)
        return paths

    def save(self, paths: Sequence[str]) -> None:
        """Overwrite the file with one path per line."""
        path = self.path
        if not path.exists():
            raise NoPathFileError(self._path_file)
        # Encode before opening, so a bad path never truncates the file.
        try:
            data = "".join(f"{p}\n" for p in paths).encode("utf-8")
        except UnicodeEncodeError as e:
            raise PathFileWriteError(e) from e
        try:
            path.write_bytes(data)
        except OSError as e:
            raise PathFileWriteError(e) from e
        log.debug("saved %d paths to %s", len(paths), path)
