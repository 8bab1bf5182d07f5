"""Token dump command line for scriptlex.

Prints the reference token stream for a script, one token per line:

    Line    3: INDENT '\\n' @ 12..13

Usage:
    python -m scriptlex main.agent
    python -m scriptlex main.agent --line 40
    python -m scriptlex prompt.txt --instructions --state
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from scriptlex.errors import ScriptLexError
from scriptlex.tokenizer import INSTRUCTION_KINDS, LAYOUT_KINDS, Tokenizer
from scriptlex.tokens import Token
from scriptlex.utils.logger import get_logger

logger = get_logger(__name__)

# Lines shown on each side of --line
CONTEXT_LINES = 5


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scriptlex",
        description="Dump the layout and instruction-text tokens of a script.",
    )
    parser.add_argument("path", help="Path to the script file")
    parser.add_argument(
        "--line",
        type=int,
        default=0,
        help=f"Only show tokens within {CONTEXT_LINES} lines of this line (default: all)",
    )
    parser.add_argument(
        "--instructions",
        action="store_true",
        help="Offer instruction-text kinds ({! and text segments) instead of layout kinds",
    )
    parser.add_argument(
        "--state",
        action="store_true",
        help="Print the serialized scanner state after the last token",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log every scanner decision to stderr",
    )
    return parser


def format_token(token: Token) -> str:
    start, end = token.span
    return f"Line {token.lineno:4}: {token.type.name} {token.value!r} @ {start}..{end}"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the token dump; returns the process exit code."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    path = Path(args.path)
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"scriptlex: cannot read {path}: {e}", file=sys.stderr)
        return 1

    valid = INSTRUCTION_KINDS if args.instructions else LAYOUT_KINDS
    tokenizer = Tokenizer(source, valid, source_file=str(path))
    target = args.line

    try:
        for token in tokenizer.tokenize():
            if target == 0 or target - CONTEXT_LINES <= token.lineno <= target + CONTEXT_LINES:
                print(format_token(token))
    except ScriptLexError as e:
        logger.error("Tokenizing %s failed: %s", path, e)
        print(f"scriptlex: {e}", file=sys.stderr)
        return 1

    if args.state:
        print(f"State: {tokenizer.scanner.serialize().hex()}")
    return 0
