"""
Command-line interface and high-level generator function.
"""
from __future__ import annotations

import logging
import math
import sys
from dataclasses import dataclass
from typing import Sequence

from .args import parse_args
from .config import Options, DEFAULT_OPTIONS
from .entropy import RandomSource, SystemRandomSource
from .errors import PassForgeError
from .mapping import build_alphabet, draw_password

logger = logging.getLogger(__name__)

PROG = "passforge"

HELP_TEXT = f"""
Usage: {PROG} [options]

Options:
  --help            Show help message
  --length <num>    Specify the length of the password (default is 8)
  --uppercase       Include uppercase letters
  --numbers         Include digits
  --symbols         Include special characters

Examples:
  {PROG} --length 12
  {PROG} --length 10 --uppercase
  {PROG} --numbers --symbols
"""


@dataclass
class GenerationMeta:
    """
    Full result of one password generation.
    """
    password: str
    alphabet: str

    # Theoretical strength: length * log2(alphabet size)
    entropy_bits: float
    options: Options


def generate_password_with_meta(
    options: Options | None = None,
    source: RandomSource | None = None,
) -> GenerationMeta:
    """
    Build the alphabet for `options`, draw the password from `source` and
    report the theoretical entropy alongside it.
    """
    opts = options or DEFAULT_OPTIONS
    if opts.length < 1:
        raise ValueError(f"Password length must be a positive integer, got {opts.length}")

    alphabet = build_alphabet(
        opts.include_uppercase,
        opts.include_digits,
        opts.include_symbols,
    )
    password = draw_password(opts.length, alphabet, source or SystemRandomSource())

    return GenerationMeta(
        password=password,
        alphabet=alphabet,
        entropy_bits=len(password) * math.log2(len(alphabet)),
        options=opts,
    )


def generate_password(
    options: Options | None = None,
    source: RandomSource | None = None,
) -> str:
    meta = generate_password_with_meta(options, source)
    return meta.password


def _report(error: PassForgeError) -> int:
    for line in error.diagnostics():
        print(line, file=sys.stderr)
    return error.exit_status


def main(
    argv: Sequence[str] | None = None,
    source: RandomSource | None = None,
) -> int:
    """
    Entry point for `python -m passforge` or `run_passforge.py`.

    Returns the process exit status; callers pass it to sys.exit.
    """
    if argv is None:
        argv = sys.argv[1:]

    try:
        options = parse_args(argv)
    except PassForgeError as exc:
        return _report(exc)

    if options.show_help:
        print(HELP_TEXT)
        return 0

    try:
        password = generate_password(options, source)
    except PassForgeError as exc:
        logger.debug("Generation failed for %s", options)
        return _report(exc)

    print(f"Your generated password is: {password}")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
