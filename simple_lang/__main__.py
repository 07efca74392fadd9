"""Command line entry point for the simple_lang interpreter.

Usage:
    python -m simple_lang                      interactive mode
    python -m simple_lang <file>               evaluate a file line by line
    python -m simple_lang -i [<file>]          evaluate the file, then enter interactive mode
    python -m simple_lang [-v|-vv] ...         log to stderr (INFO / DEBUG)
"""

import argparse
import logging

from simple_lang.interpreter import Session

LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simple_lang",
        description="Simple arithmetic language interpreter",
        epilog="If no file is specified, the interpreter runs in interactive mode.",
    )
    parser.add_argument(
        "-i", "--interactive", action="store_true", help="run in interactive mode after executing file"
    )
    parser.add_argument("-v", action="count", default=0, help="increase log verbosity (can be repeated)")
    parser.add_argument("file", nargs="?", help="file to evaluate line by line")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_arg_parser()
    args, unknown = parser.parse_known_args(argv)
    # a single unrecognised argument such as "-x" is still a file name
    if len(unknown) == 1 and args.file is None:
        args.file = unknown[0]
    elif unknown:
        parser.error(f"unrecognized arguments: {' '.join(unknown)}")
    logging.basicConfig(
        level=LOG_LEVELS[min(args.v, len(LOG_LEVELS) - 1)],
        format="%(levelname)s %(name)s: %(message)s",
    )

    session = Session()
    if args.file is not None:
        session.run_file(args.file)
    if args.file is None or args.interactive:
        session.run_interactive()


if __name__ == "__main__":
    main()
