from __future__ import annotations

import argparse
import contextlib
import io
import json
import logging
import sys
from collections.abc import Iterator

from .api import iter_chars
from .position import Position
from .tagged import Tagged


logger = logging.getLogger("charsloc")


@contextlib.contextmanager
def _open_input(path: str) -> Iterator[io.TextIOBase]:
    if path == "-":
        # read stdin the same way as files
        sys.stdin.reconfigure(encoding="utf-8", newline="")
        yield sys.stdin
        return
    with open(path, encoding="utf-8", newline="") as fh:
        yield fh


def _scan(path: str) -> tuple[list[tuple[str, Position]], Position]:
    with _open_input(path) as fh:
        tagged = Tagged(iter_chars(fh))
        pairs = list(tagged)
        return pairs, tagged.located.position()


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="charsloc", description="Print the line:column of every character")
    ap.add_argument("inputs", nargs="+", help="Text files to annotate ('-' reads stdin)")
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("--json", action="store_true", help="Print positions as JSON")
    mode.add_argument("--end", action="store_true", help="Print only the end position of each input")
    ap.add_argument("--stdin-name", default="<stdin>", help="Name reported for stdin input")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    status = 0
    payload: dict[str, list[dict[str, object]]] = {}
    for path in args.inputs:
        name = args.stdin_name if path == "-" else path
        logger.debug("reading %s", name)
        try:
            pairs, end = _scan(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("%s: %s", name, e)
            status = 1
            continue

        if args.json:
            payload[name] = [{"char": ch, "line": pos.line, "column": pos.column} for ch, pos in pairs]
        elif args.end:
            print(end.format(name))
        else:
            for ch, pos in pairs:
                print(f"{pos.format(name)}\t{ch!r}")

    if args.json:
        print(json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False))
    return status
