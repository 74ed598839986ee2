"""Yes/No confirmation prompt on the terminal."""

from __future__ import annotations

import sys
from typing import TextIO

from rich.console import Console
from rich.text import Text

from workdir.utils.errors import InputReadError


def ask_yes_no(question: str, *, console: Console, stream: TextIO | None = None) -> bool:
    """Ask until the first character of an answer is y/Y or n/N.

    The question is written to ``console`` (stderr in practice, since stdout
    is captured by the shell wrapper).
    """
    source = sys.stdin if stream is None else stream
    hint = Text(question)
    hint.append(" [")
    hint.append("y", style="bold cyan")
    hint.append("/")
    hint.append("n", style="bold cyan")
    hint.append("]: ")
    while True:
        console.print(hint, end="")
        console.file.flush()
        try:
            answer = source.readline()
        except OSError as e:
            raise InputReadError(err=e) from e
        if not answer:
            raise InputReadError()
        first = answer.strip()[:1].lower()
        if first == "y":
            return True
        if first == "n":
            return False
