"""
Flag-driven random password generator package.
"""

from .config import (
    Options,
    DEFAULT_OPTIONS,
    LOWERCASE,
    UPPERCASE,
    DIGITS,
    SYMBOLS,
)
from .args import parse_args
from .entropy import SystemRandomSource
from .errors import (
    PassForgeError,
    ArgumentError,
    InvalidLengthError,
    UnrecognizedArgumentError,
    EmptyAlphabetError,
)
from .mapping import build_alphabet, generate
from .cli import generate_password, generate_password_with_meta, main

__all__ = [
    "Options",
    "DEFAULT_OPTIONS",
    "LOWERCASE",
    "UPPERCASE",
    "DIGITS",
    "SYMBOLS",
    "parse_args",
    "SystemRandomSource",
    "PassForgeError",
    "ArgumentError",
    "InvalidLengthError",
    "UnrecognizedArgumentError",
    "EmptyAlphabetError",
    "build_alphabet",
    "generate",
    "generate_password",
    "generate_password_with_meta",
    "main",
]
