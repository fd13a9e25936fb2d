"""Exceptions raised while splitting a string into arguments."""

from __future__ import annotations


class ParseError(Exception):
    """Base class for tokenizer failures.

    Attributes:
        position: Index in the input where the problem was detected, if known
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class MalformedInputError(ParseError, ValueError):
    """Unterminated quote or an escape that ends with the input."""


class AllocationFailureError(ParseError):
    """Memory for the working buffer or token list could not be obtained."""
