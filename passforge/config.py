"""
Configuration for the flag-driven password generator.
"""

from dataclasses import dataclass
from typing import Optional


# Fixed character classes, concatenated in this order to form the alphabet.
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
SYMBOLS = "!@#$%^&*()-_=+[]{};:,.<>?"

DEFAULT_LENGTH = 8


@dataclass(frozen=True)
class Options:
    # Desired password length in characters. Always >= 1 once parsed.
    length: int = DEFAULT_LENGTH

    # Optional character classes. Lowercase is always included.
    include_uppercase: bool = False
    include_digits: bool = False
    include_symbols: bool = False

    # Print usage instead of generating a password.
    show_help: bool = False


@dataclass
class QuantumSourceConfig:
    # Number of qubits to prepare in superposition.
    # Each qubit gives one raw bit per engine run.
    # NOTE: Keep this <= backend limit (often 20-29 for local simulators).
    num_qubits: int = 20

    # How many rounds of entropy amplification (hash mixing) to apply.
    entropy_rounds: int = 2

    # Independent engine runs XOR-combined into one refill.
    quantum_streams: int = 2

    # Seed for the simulator; None means fresh randomness on every run.
    seed: Optional[int] = None


# Default instances you can import elsewhere
DEFAULT_OPTIONS = Options()
DEFAULT_QUANTUM_CONFIG = QuantumSourceConfig()
