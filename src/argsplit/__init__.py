"""Split strings into argument vectors with quoting and C escapes."""

from argsplit.core import (
    DEFAULT_SEPARATORS,
    AllocationFailureError,
    ArgVector,
    MalformedInputError,
    ParseError,
    Token,
    join,
    parse_to_tokens,
    quote,
    release_tokens,
    split,
    tokenize,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_SEPARATORS",
    "AllocationFailureError",
    "ArgVector",
    "MalformedInputError",
    "ParseError",
    "Token",
    "join",
    "parse_to_tokens",
    "quote",
    "release_tokens",
    "split",
    "tokenize",
]
