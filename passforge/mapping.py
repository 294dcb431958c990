"""
Mapping logic: build the alphabet from the selected character classes and
map random indices into password characters.
"""

from __future__ import annotations

import logging

from .config import LOWERCASE, UPPERCASE, DIGITS, SYMBOLS
from .entropy import RandomSource, SystemRandomSource
from .errors import EmptyAlphabetError

logger = logging.getLogger(__name__)


def build_alphabet(
    include_uppercase: bool = False,
    include_digits: bool = False,
    include_symbols: bool = False,
) -> str:
    """
    Concatenate the character classes in fixed order: lowercase, then
    uppercase, digits and symbols when requested.
    """
    alphabet = LOWERCASE
    if include_uppercase:
        alphabet += UPPERCASE
    if include_digits:
        alphabet += DIGITS
    if include_symbols:
        alphabet += SYMBOLS
    return alphabet


def draw_password(
    length: int,
    alphabet: str,
    source: RandomSource,
) -> str:
    """
    Draw `length` characters from `alphabet`, one independent index per
    position.
    """
    if not alphabet:
        raise EmptyAlphabetError()

    alphabet_size = len(alphabet)
    return "".join(alphabet[source.randbelow(alphabet_size)] for _ in range(length))


def generate(
    length: int,
    include_uppercase: bool = False,
    include_digits: bool = False,
    include_symbols: bool = False,
    source: RandomSource | None = None,
) -> str:
    """
    Generate a password of exactly `length` characters.

    `source` defaults to a fresh SystemRandomSource; pass your own for
    reproducible output.
    """
    if length < 1:
        raise ValueError(f"Password length must be a positive integer, got {length}")

    alphabet = build_alphabet(include_uppercase, include_digits, include_symbols)
    logger.debug("Generating %s characters from a %s-character alphabet", length, len(alphabet))

    return draw_password(length, alphabet, source or SystemRandomSource())
