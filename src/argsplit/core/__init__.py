"""Core functionality: tokenizer, argument vectors, and quoting."""

from argsplit.core.argv import ArgVector, parse_to_tokens, release_tokens, split
from argsplit.core.errors import AllocationFailureError, MalformedInputError, ParseError
from argsplit.core.quoting import join, needs_quoting, quote
from argsplit.core.tokenizer import DEFAULT_SEPARATORS, Token, Tokenizer, tokenize

__all__ = [
    "ArgVector",
    "parse_to_tokens",
    "release_tokens",
    "split",
    "ParseError",
    "MalformedInputError",
    "AllocationFailureError",
    "join",
    "needs_quoting",
    "quote",
    "DEFAULT_SEPARATORS",
    "Token",
    "Tokenizer",
    "tokenize",
]
