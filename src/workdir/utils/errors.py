"""Exception types raised by the store and the list engine."""

from __future__ import annotations

from rich.text import Text


class WorkdirError(Exception):
    """Base class for every failure reported to the user."""

    def render(self) -> Text:
        """Return the message as Rich text, offending values highlighted."""
        return Text(str(self))


def _quoted(value: object, style: str = "yellow") -> Text:
    text = Text("'")
    text.append(str(value), style=style)
    text.append("'")
    return text


def _nested(err: Exception) -> Text:
    text = Text("\n\n")
    text.append(str(err), style="red")
    return text


class InvalidPositionError(WorkdirError):
    def __init__(self, index: int, length: int | None, argument: str = "[pos]") -> None:
        self.index = index
        self.length = length
        self.argument = argument
        message = f"invalid value '{index + 1}' for '{argument}'"
        if length is not None:
            message = f"{message}: only {length} paths are saved"
        super().__init__(message)

    def render(self) -> Text:
        text = Text("invalid value ")
        text.append_text(_quoted(self.index + 1))
        text.append(" for '")
        text.append(self.argument, style="bold")
        text.append("'")
        if self.length is not None:
            text.append(f": only {self.length} paths are saved")
        return text


class IdenticalPositionError(WorkdirError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"path '{path}' already exists on that position")

    def render(self) -> Text:
        text = Text("path ")
        text.append_text(_quoted(self.path))
        text.append(" already exists on that position")
        return text


class LimitReachedError(WorkdirError):
    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"limit of {limit} saved paths reached")

    def render(self) -> Text:
        text = Text("limit of ")
        text.append(str(self.limit), style="red")
        text.append(" saved paths reached")
        return text


class PathIsNotDirError(WorkdirError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"'{path}' is not a directory")

    def render(self) -> Text:
        text = _quoted(self.path)
        text.append(" is not a directory")
        return text


class StaleEntryError(PathIsNotDirError):
    """A saved path no longer resolves to a directory."""

    def __init__(self, index: int, path: str) -> None:
        self.index = index
        super().__init__(path)


class MissingArgumentError(WorkdirError):
    def __init__(self, argument: str, hint: str = "") -> None:
        self.argument = argument
        self.hint = hint
        message = f"'{argument}' was not provided"
        if hint:
            message = f"{message}. {hint}"
        super().__init__(message)

    def render(self) -> Text:
        text = Text("'")
        text.append(self.argument, style="bold")
        text.append("' was not provided")
        if self.hint:
            text.append(f". {self.hint}")
        return text


class NoPathFileError(WorkdirError):
    def __init__(self, path_file: str) -> None:
        self.path_file = path_file
        super().__init__(f"path file doesn't exist: '{path_file}'")

    def render(self) -> Text:
        text = Text("path file doesn't exist: ")
        text.append_text(_quoted(self.path_file))
        return text


class _PathFileIOError(WorkdirError):
    action = ""

    def __init__(self, err: OSError | UnicodeError) -> None:
        self.err = err
        super().__init__(f"cannot {self.action} path file: {err}")

    def render(self) -> Text:
        text = Text(f"cannot {self.action} path file")
        text.append_text(_nested(self.err))
        return text


class PathFileReadError(_PathFileIOError):
    action = "read"


class PathFileWriteError(_PathFileIOError):
    action = "write"


class InputReadError(WorkdirError):
    def __init__(self, received: str = "", err: OSError | None = None) -> None:
        self.received = received
        self.err = err
        message = "cannot read line from stdin stream"
        if received:
            message = f"{message}, failed at: '{received}'"
        reason = str(err) if err else "end of input"
        super().__init__(f"{message} ({reason})")

    def render(self) -> Text:
        text = Text("cannot read line from stdin stream")
        if self.received:
            text.append(", failed at: ")
            text.append_text(_quoted(self.received))
        if self.err is not None:
            text.append_text(_nested(self.err))
        else:
            text.append(" (end of input)")
        return text


class PathEncodingError(WorkdirError):
    """A path that cannot be stored as UTF-8 text."""

    def __init__(self, path: str) -> None:
        self.path = path
        self.shown = path.encode("utf-8", "backslashreplace").decode("utf-8")
        super().__init__(f"'{self.shown}' is not valid UTF-8")

    def render(self) -> Text:
        text = _quoted(self.shown)
        text.append(" is not valid UTF-8")
        return text


class ConfigError(WorkdirError):
    def __init__(self, variable: str, value: str) -> None:
        self.variable = variable
        self.value = value
        super().__init__(f"invalid value '{value}' for '{variable}'")

    def render(self) -> Text:
        text = Text("invalid value ")
        text.append_text(_quoted(self.value))
        text.append(" for '")
        text.append(self.variable, style="bold")
        text.append("'")
        return text
