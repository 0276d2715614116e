"""Command line entry point for stackscript.

Usage:
    stackscript script.ss
    stackscript -c '"hello" print'
    stackscript --root ./sandbox script.ss
    stackscript --tokens script.ss
"""

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from .errors import LexerError
from .fs import ReadWriteFs
from .parser import tokenize
from .stack_script import StackScript

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stackscript",
        description="Run a stackscript program against the files under a root directory.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("file", nargs="?", help="Path to the script to run, or '-' for stdin.")
    source.add_argument("-c", dest="command", metavar="SOURCE", help="Run SOURCE instead of a file.")
    parser.add_argument(
        "--root",
        default=os.getcwd(),
        help="Directory the script's filesystem is rooted at (default: current directory).",
    )
    parser.add_argument("--tokens", action="store_true", help="Print the token stream and exit.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each step to stderr.")
    return parser


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )

    if args.command is not None:
        source = args.command
    else:
        try:
            source = _read_source(args.file)
        except OSError as e:
            print(f"stackscript: cannot read '{args.file}': {e.strerror or e}", file=sys.stderr)
            return 1
        except UnicodeDecodeError:
            print(f"stackscript: cannot read '{args.file}': not valid UTF-8 text", file=sys.stderr)
            return 1

    if args.tokens:
        try:
            for token in tokenize(source):
                print(token)
        except LexerError as e:
            print(f"stackscript: {e}", file=sys.stderr)
            return e.exit_code
        return 0

    try:
        fs = ReadWriteFs(args.root)
    except OSError as e:
        print(f"stackscript: {e}", file=sys.stderr)
        return 1
    logger.debug("running with root %s", fs.root)

    result = StackScript(fs=fs).run(source)
    sys.stdout.write(result.stdout)
    sys.stderr.write(result.stderr)
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
