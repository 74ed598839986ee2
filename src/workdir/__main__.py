"""Entry point for `python -m workdir` and the `workdir` script."""

from __future__ import annotations

import argparse
import functools
import logging
import os
import sys

from rich.logging import RichHandler

from workdir.app import SHELLS, Workdir
from workdir.ui.confirm_prompt import ask_yes_no
from workdir.ui.render import make_console, print_error
from workdir.utils.config import SHORT_LIST_LENGTH, Settings, load_settings
from workdir.utils.errors import ConfigError
from workdir.utils.jumplist import Position

SUBCOMMANDS = {
    "list", "ls", "l",
    "restore", "r", "res",
    "save", "s",
    "delete", "d", "del",
    "wrapper", "info",
}


def _bounded_int(limit: int, metavar: str):
    """argparse type for integers in ``1..limit``."""
    def parse(value: str) -> int:
        try:
            parsed = int(value)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
        if not 1 <= parsed <= limit:
            raise argparse.ArgumentTypeError(f"{metavar} must be in 1..{limit}")
        return parsed
    parse.__name__ = metavar
    return parse


def _subcommand_parser(settings: Settings) -> argparse.ArgumentParser:
    pos = _bounded_int(settings.limit, "[pos]")
    parser = argparse.ArgumentParser(
        prog="workdir",
        description="workdir - fast 'working directory' switcher",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    list_p = sub.add_parser("list", aliases=["ls"], help="List recent paths")
    list_p.add_argument(
        "length", nargs="?", type=_bounded_int(settings.limit, "[length]"),
        help="Optional max list length",
    )
    list_p.set_defaults(handler="list")

    l_p = sub.add_parser("l", help=f"List {SHORT_LIST_LENGTH} recent paths")
    l_p.set_defaults(handler="l")

    restore_p = sub.add_parser("restore", aliases=["r", "res"], help="Switch to selected path")
    restore_p.add_argument("pos", nargs="?", type=pos, help="Optional path position")
    restore_p.add_argument("-v", "--verbose", action="store_true", help="Show verbose info")
    restore_p.set_defaults(handler="restore")

    save_p = sub.add_parser("save", aliases=["s"], help="Save path")
    save_p.add_argument(
        "path",
        help="Current directory path (provided by wrapper function - do not enter)",
    )
    save_p.add_argument("pos", nargs="?", type=pos, help="Optional path position")
    save_p.set_defaults(handler="save")

    delete_p = sub.add_parser("delete", aliases=["d", "del"], help="Delete selected path")
    delete_p.add_argument("pos", type=pos, help="Path position")
    delete_p.set_defaults(handler="delete")

    wrapper_p = sub.add_parser("wrapper", help="Dump wrapper function")
    wrapper_p.add_argument("shell", nargs="?", choices=SHELLS, help="Shell type")
    wrapper_p.set_defaults(handler="wrapper")

    info_p = sub.add_parser("info", help="Show version and path file location")
    info_p.set_defaults(handler="info")

    return parser


def _restore_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="workdir",
        description="workdir - fast 'working directory' switcher",
        epilog=(
            "commands: list (ls) [length], l, restore (r, res) [pos], "
            "save (s) <path> [pos], delete (d, del) <pos>, wrapper [shell], info"
        ),
    )
    parser.add_argument(
        "pos", nargs="?", type=_bounded_int(settings.limit, "[pos]"),
        help="Optional path position to restore",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose info")
    return parser


def _configure_logging(debug: bool) -> None:
    # stdout belongs to the wrapper protocol; logs go to stderr only.
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=make_console("auto", stderr=True), show_path=False)],
    )


def _dispatch(app: Workdir, args: argparse.Namespace) -> int:
    handler = getattr(args, "handler", "restore")
    if handler == "list":
        return app.run(app.list_paths, args.length)
    if handler == "l":
        return app.run(app.short_list)
    if handler == "save":
        return app.run(app.save, args.path, Position.from_user(args.pos))
    if handler == "delete":
        return app.run(app.delete, Position.from_user(args.pos))
    if handler == "wrapper":
        return app.run(app.wrapper, args.shell)
    if handler == "info":
        return app.run(app.info)
    return app.run(app.restore, Position.from_user(args.pos), args.verbose)


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    try:
        settings = load_settings(os.environ)
    except ConfigError as e:
        print_error(make_console("auto", stderr=True), e)
        return 1

    _configure_logging(settings.debug)

    # Route subcommands to a separate parser to avoid the argparse
    # conflict between subparsers and the bare restore position.
    if argv and argv[0] in SUBCOMMANDS:
        args = _subcommand_parser(settings).parse_args(argv)
    else:
        args = _restore_parser(settings).parse_args(argv)

    err = make_console(settings.color, stderr=True)
    interactive = sys.stdin is not None and sys.stdin.isatty()
    prompt = functools.partial(ask_yes_no, console=err) if interactive else None
    app = Workdir(settings, out=make_console(settings.color), err=err, prompt=prompt)
    return _dispatch(app, args)


if __name__ == "__main__":
    sys.exit(main())
