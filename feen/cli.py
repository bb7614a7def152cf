from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .api import ascii_board
from .core import NotationError
from .notation import STARTPOS_FEEN, dump_position, parse

LOGGER = logging.getLogger("feen.cli")


def cmd_show(args: argparse.Namespace) -> int:
    pos = parse(args.feen or STARTPOS_FEEN)
    print(ascii_board(pos.placement))
    print()
    if not pos.hands.is_empty():
        print("Hands:", pos.hands)
    print("Turn:", pos.turn.name.lower(), f"({pos.style_turn.active})")
    print(dump_position(pos))
    return 0


def cmd_normalize(args: argparse.Namespace) -> int:
    print(dump_position(parse(args.feen)))
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    parse(args.feen)
    if not args.quiet:
        print("valid")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="feen")
    ap.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    sub = ap.add_subparsers(dest="cmd", required=True)

    ss = sub.add_parser("show", help="Show the board as text and the canonical FEEN")
    ss.add_argument("feen", nargs="?", default=None)
    ss.set_defaults(fn=cmd_show)

    sn = sub.add_parser("normalize", help="Print the canonical form of a FEEN string")
    sn.add_argument("feen")
    sn.set_defaults(fn=cmd_normalize)

    sv = sub.add_parser("validate", help="Exit 0 if the FEEN string is valid, 1 otherwise")
    sv.add_argument("feen")
    sv.add_argument("--quiet", "-q", action="store_true")
    sv.set_defaults(fn=cmd_validate)

    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        return int(args.fn(args))
    except NotationError as exc:
        LOGGER.warning("feen_rejected", extra={"error": str(exc)})
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
