"""
Errors raised by the parser and the generator.

Each error knows the diagnostic lines to show the user and the exit status
the command-line boundary should return. Nothing in the package calls
sys.exit itself.
"""

from __future__ import annotations


class PassForgeError(Exception):
    """Base class for every fatal passforge condition."""

    exit_status = 1

    def diagnostics(self) -> list[str]:
        """Lines written to stderr when this error reaches the CLI."""
        return [str(self)]


class ArgumentError(PassForgeError):
    """The command line could not be turned into valid options."""


class InvalidLengthError(ArgumentError):
    """`--length` is missing its value, not an integer, or below 1."""

    def __init__(self, value: str | None) -> None:
        self.value = value
        super().__init__(
            "Error: Invalid value for --length. It must be a positive integer."
        )


class UnrecognizedArgumentError(ArgumentError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unrecognized argument: {token}")

    def diagnostics(self) -> list[str]:
        return [str(self), "Use --help for usage information."]


class EmptyAlphabetError(PassForgeError):
    """
    Internal invariant violation: no character class was selected.

    Lowercase letters are always part of the alphabet, so this should be
    unreachable from the command line.
    """

    def __init__(self) -> None:
        super().__init__("No valid characters specified for password generation.")

    def diagnostics(self) -> list[str]:
        return [f"An error occurred while generating the password: {self}"]
