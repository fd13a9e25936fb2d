"""Argument vector builder and release."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import overload

from argsplit.core.errors import AllocationFailureError, MalformedInputError
from argsplit.core.tokenizer import Token, Tokenizer, normalize_separators

logger = logging.getLogger(__name__)


class ArgVector(Sequence[str]):
    """Tokens split from one input, together with the buffer they came from.

    Behaves as a read-only sequence of token values. The vector owns its
    working buffer and token list; ``release()`` drops both at once and
    leaves an empty vector behind.
    """

    def __init__(self, tokens: list[Token], buffer: list[str]) -> None:
        self._tokens = tokens
        self._buffer: list[str] | None = buffer

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> list[str]: ...

    def __getitem__(self, index: int | slice) -> str | list[str]:
        if isinstance(index, slice):
            return [token.value for token in self._tokens[index]]
        return self._tokens[index].value

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return (token.value for token in self._tokens)

    def __repr__(self) -> str:
        return f"ArgVector({self.argv!r})"

    def __enter__(self) -> ArgVector:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    @property
    def count(self) -> int:
        """Number of tokens."""
        return len(self._tokens)

    @property
    def tokens(self) -> list[Token]:
        """Token objects with positions in the original input."""
        return list(self._tokens)

    @property
    def argv(self) -> list[str]:
        """Token values as a plain list."""
        return [token.value for token in self._tokens]

    @property
    def released(self) -> bool:
        """Whether the vector has been released."""
        return self._buffer is None

    def terminated(self) -> list[str | None]:
        """Token values followed by a single ``None`` end marker."""
        return [*self.argv, None]

    def release(self) -> None:
        """Drop the token list and working buffer together.

        Releasing an already released vector does nothing.
        """
        if self._buffer is None:
            return
        self._buffer.clear()
        self._buffer = None
        self._tokens = []


def parse_to_tokens(
    text: str,
    separators: str | Iterable[str] | None = None,
) -> ArgVector:
    """Split a string into an argument vector.

    Quotes group characters, separators between them are kept, and
    backslash escapes are decoded. Either every token is returned or the
    call fails; no partial result is ever produced.

    Args:
        text: The string to split
        separators: Separator characters (default: space, tab, newline,
            carriage return, form feed and vertical tab)

    Returns:
        ArgVector owning the tokens

    Raises:
        MalformedInputError: On an unterminated quote or escape
        AllocationFailureError: If memory runs out while splitting
    """
    seps = normalize_separators(separators)

    try:
        buffer = list(text)
    except MemoryError as e:
        raise AllocationFailureError("Cannot allocate working buffer") from e

    tokens: list[Token] = []
    tokenizer = Tokenizer(text, seps, buffer=buffer)

    try:
        token = tokenizer.next_token()
        while token is not None:
            tokens.append(token)
            token = tokenizer.next_token()
    except MalformedInputError as e:
        logger.debug("Split failed after %d tokens: %s", len(tokens), e)
        buffer.clear()
        tokens.clear()
        raise
    except MemoryError as e:
        buffer.clear()
        tokens.clear()
        raise AllocationFailureError("Cannot allocate token list") from e

    logger.debug("Split %d characters into %d tokens", len(text), len(tokens))
    return ArgVector(tokens, buffer)


def release_tokens(result: ArgVector | None) -> None:
    """Release a result of parse_to_tokens; None is ignored."""
    if result is None:
        return
    result.release()


def split(text: str, separators: str | Iterable[str] | None = None) -> list[str]:
    """Split a string and return the token values as a list.

    Examples:
        >>> split('a "b c" d')
        ['a', 'b c', 'd']

        >>> split("a,b,c", ",")
        ['a', 'b', 'c']
    """
    with parse_to_tokens(text, separators) as argv:
        return argv.argv
