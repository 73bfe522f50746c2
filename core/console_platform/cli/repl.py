"""
    Interactive console on a terminal.

    Every transcript line is printed as it is logged, through the
    ``console_logmessage`` hook, so the terminal shows exactly what a
    UI listening to the console would show.
"""
import argparse
import logging
import sys
from typing import List, Optional

try:
    import readline  # noqa: F401  (line editing for input())
except ImportError:  # pragma: no cover - platform dependent
    readline = None

from ..config import ConsoleConfig
from ..core import create_platform
from .console import EVENT_LOG_MESSAGE

EXIT_WORDS = ("quit", "exit")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="command-console",
        description="Interactive command console.",
    )
    parser.add_argument("--no-plugins", action="store_true",
                        help="do not register installed command packs")
    parser.add_argument("--verbose", action="store_true",
                        help="show the console's log records on stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    platform = create_platform(ConsoleConfig(load_plugins=not args.no_plugins))
    platform.console.subscribe(
        EVENT_LOG_MESSAGE,
        lambda message: sys.stdout.write(message),
    )

    print("Command console. Type 'cmdlist' for commands, 'quit' to leave.")
    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if line.strip() in EXIT_WORDS:
            break
        platform.execute(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
