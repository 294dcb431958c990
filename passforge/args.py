"""
Argument parser: turn raw command-line tokens into validated Options.
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import Sequence

from .config import Options, DEFAULT_OPTIONS
from .errors import InvalidLengthError, UnrecognizedArgumentError

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Boolean flags and the Options field each one switches on.
BOOLEAN_FLAGS = {
    "--help": "show_help",
    "--uppercase": "include_uppercase",
    "--numbers": "include_digits",
    "--symbols": "include_symbols",
}

LENGTH_FLAG = "--length"


def parse_length(value: str | None) -> int:
    """
    Validate the token following `--length`.

    It must exist, be a base-10 integer and be at least 1.
    """
    if value is None or not _INTEGER_RE.fullmatch(value):
        raise InvalidLengthError(value)

    length = int(value, 10)
    if length < 1:
        raise InvalidLengthError(value)
    return length


def parse_args(tokens: Sequence[str]) -> Options:
    """
    Parse tokens strictly left to right.

    - Boolean flags may repeat; repeating them changes nothing.
    - `--length` consumes the next token; the last occurrence wins.
    - Anything else raises UnrecognizedArgumentError.
    """
    options = DEFAULT_OPTIONS
    i = 0

    while i < len(tokens):
        token = tokens[i]

        if token == LENGTH_FLAG:
            value = tokens[i + 1] if i + 1 < len(tokens) else None
            options = replace(options, length=parse_length(value))
            # Skip the value we just consumed.
            i += 2
            continue

        field_name = BOOLEAN_FLAGS.get(token)
        if field_name is None:
            raise UnrecognizedArgumentError(token)

        options = replace(options, **{field_name: True})
        i += 1

    logger.debug("Parsed options: %s", options)
    return options
