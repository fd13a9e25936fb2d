"""Argument tokenizer with quote and C escape handling.

The tokenizer works on a mutable copy of the input, the working buffer.
Resolved characters are written back into the same buffer behind the read
cursor, so a token never needs more room than the text it came from.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import Enum, auto

from argsplit.core.errors import MalformedInputError

DEFAULT_SEPARATORS = " \t\n\r\f\v"

NAMED_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
}

OCTAL_DIGITS = "01234567"
HEX_DIGITS = "0123456789abcdefABCDEF"
QUOTE_CHARS = "'\""


class QuoteType(Enum):
    """Kind of quote region."""

    SINGLE = "'"
    DOUBLE = '"'

    @property
    def char(self) -> str:
        return self.value


class EscapeForm(Enum):
    """Stage of an escape sequence being collected."""

    INTRODUCED = auto()  # backslash seen, form not known yet
    OCTAL = auto()
    HEX = auto()

    @property
    def base(self) -> int:
        return 8 if self is EscapeForm.OCTAL else 16

    @property
    def max_digits(self) -> int:
        return 3 if self is EscapeForm.OCTAL else 2

    def accepts(self, char: str) -> bool:
        """Check if char is a digit of this escape form."""
        if self is EscapeForm.OCTAL:
            return char in OCTAL_DIGITS
        if self is EscapeForm.HEX:
            return char in HEX_DIGITS
        return False


class MarkKind(Enum):
    """Kind of markup found inside a token."""

    QUOTE = auto()
    ESCAPE = auto()


@dataclass(frozen=True)
class Mark:
    """Location of a quote delimiter or escape sequence in the input."""

    kind: MarkKind
    start: int
    end: int


@dataclass(frozen=True)
class Normal:
    """Outside of any quote or escape."""


NORMAL = Normal()


@dataclass(frozen=True)
class InQuote:
    """Inside a quote region opened at ``start``."""

    quote: QuoteType
    start: int


@dataclass(frozen=True)
class Escaping:
    """Collecting an escape sequence whose backslash is at ``start``.

    ``enclosing`` is the state that resumes once the escape has produced
    its character.
    """

    form: EscapeForm
    start: int
    enclosing: Normal | InQuote
    digits_seen: int = 0
    value: int = 0


ParseState = Normal | InQuote | Escaping


@dataclass
class Token:
    """A token from the input.

    Attributes:
        value: The resolved value, with quotes removed and escapes decoded
        start: Start position in the original string
        end: End position in the original string (exclusive, before the separator)
        raw: The raw token text including quotes and escapes
        marks: Quote delimiters and escape sequences found in the token
    """

    value: str
    start: int
    end: int
    raw: str = ""
    marks: list[Mark] = field(default_factory=list)

    @property
    def is_quoted(self) -> bool:
        """Check if the token contains a quote region."""
        return any(mark.kind is MarkKind.QUOTE for mark in self.marks)

    @property
    def length(self) -> int:
        """Length of the token in the original string."""
        return self.end - self.start


def normalize_separators(separators: str | Iterable[str] | None) -> frozenset[str]:
    """Build a separator set.

    Args:
        separators: A string of separator characters, an iterable of
            single characters, or None for the default whitespace set

    Returns:
        Frozen set of separator characters

    Raises:
        ValueError: If an element is not a single character
    """
    if separators is None:
        return frozenset(DEFAULT_SEPARATORS)
    if isinstance(separators, str):
        return frozenset(separators)

    result: set[str] = set()
    for sep in separators:
        if not isinstance(sep, str) or len(sep) != 1:
            raise ValueError(f"Separator must be a single character: {sep!r}")
        result.add(sep)
    return frozenset(result)


class Tokenizer:
    """Splits a working buffer into tokens, one call at a time.

    Two cursors walk the buffer: ``pos`` reads ahead and the output cursor
    writes resolved characters behind it. The output cursor never passes
    ``pos``.
    """

    def __init__(
        self,
        text: str,
        separators: str | Iterable[str] | None = None,
        buffer: list[str] | None = None,
    ) -> None:
        self.text = text
        self.buffer = buffer if buffer is not None else list(text)
        self.separators = normalize_separators(separators)
        self.pos = 0
        self.length = len(self.buffer)
        self._out = 0
        self._marks: list[Mark] = []

    def tokenize(self) -> list[Token]:
        """Tokenize the remaining buffer."""
        tokens: list[Token] = []

        token = self.next_token()
        while token is not None:
            tokens.append(token)
            token = self.next_token()

        return tokens

    def next_token(self) -> Token | None:
        """Extract the next token and move past it.

        At most one trailing separator is consumed.

        Returns:
            The next token, or None when only separators remain

        Raises:
            MalformedInputError: If the input ends inside a quote or an escape
        """
        self._skip_separators()
        if self.pos >= self.length:
            return None

        start = self.pos
        end = self.length
        self._out = start
        self._marks = []
        state: ParseState = NORMAL

        while self.pos < self.length:
            char = self.buffer[self.pos]

            if isinstance(state, Escaping):
                state, consumed = self._step_escape(state, char)
                if consumed:
                    self.pos += 1
                    continue
                # Interrupted digit run: char is handled below

            if isinstance(state, InQuote) and char == state.quote.char:
                self._mark(MarkKind.QUOTE, self.pos, self.pos + 1)
                state = NORMAL
            elif isinstance(state, Normal) and char in QUOTE_CHARS:
                self._mark(MarkKind.QUOTE, self.pos, self.pos + 1)
                state = InQuote(QuoteType(char), self.pos)
            elif char == "\\":
                state = Escaping(EscapeForm.INTRODUCED, self.pos, state)
            elif isinstance(state, Normal) and char in self.separators:
                end = self.pos
                self.pos += 1
                break
            else:
                self._emit(char)

            self.pos += 1

        # A short octal or hex run at the end of input still yields its byte
        if isinstance(state, Escaping) and state.digits_seen:
            state = self._finish_escape(state, self.pos)

        if isinstance(state, Escaping):
            raise MalformedInputError(
                f"Unfinished escape sequence at position {state.start}",
                position=state.start,
            )
        if isinstance(state, InQuote):
            kind = "double" if state.quote is QuoteType.DOUBLE else "single"
            raise MalformedInputError(
                f"Unterminated {kind} quote at position {state.start}",
                position=state.start,
            )

        return Token(
            value="".join(self.buffer[start : self._out]),
            start=start,
            end=end,
            raw=self.text[start:end],
            marks=self._marks,
        )

    def _skip_separators(self) -> None:
        """Skip separator characters."""
        while self.pos < self.length and self.buffer[self.pos] in self.separators:
            self.pos += 1

    def _emit(self, char: str) -> None:
        self.buffer[self._out] = char
        self._out += 1

    def _mark(self, kind: MarkKind, start: int, end: int) -> None:
        self._marks.append(Mark(kind, start, end))

    def _step_escape(self, state: Escaping, char: str) -> tuple[ParseState, bool]:
        """Feed one character to an escape sequence.

        Returns:
            The new state and whether char was consumed by the escape
        """
        if state.form is EscapeForm.INTRODUCED:
            if char in OCTAL_DIGITS:
                return replace(state, form=EscapeForm.OCTAL, digits_seen=1, value=int(char, 8)), True
            if char == "x":
                return replace(state, form=EscapeForm.HEX), True

            self._emit(NAMED_ESCAPES.get(char, char))
            self._mark(MarkKind.ESCAPE, state.start, self.pos + 1)
            return state.enclosing, True

        if state.form.accepts(char):
            base = state.form.base
            state = replace(
                state,
                digits_seen=state.digits_seen + 1,
                value=state.value * base + int(char, base),
            )
            if state.digits_seen == state.form.max_digits:
                return self._finish_escape(state, self.pos + 1), True
            return state, True

        return self._finish_escape(state, self.pos), False

    def _finish_escape(self, state: Escaping, end: int) -> Normal | InQuote:
        """Write the collected value as one character and leave the escape."""
        # Values wrap to a byte, so \777 is 0xff
        self._emit(chr(state.value & 0xFF))
        self._mark(MarkKind.ESCAPE, state.start, end)
        return state.enclosing


def tokenize(text: str, separators: str | Iterable[str] | None = None) -> list[Token]:
    """Tokenize a string.

    Args:
        text: The string to tokenize
        separators: Separator characters (default: whitespace)

    Returns:
        List of Token objects

    Raises:
        MalformedInputError: On an unterminated quote or escape

    Examples:
        >>> [t.value for t in tokenize('gcc -DNAME="hello world" main.c')]
        ['gcc', '-DNAME=hello world', 'main.c']

        >>> [t.value for t in tokenize(r"a\\ b")]
        ['a b']
    """
    return Tokenizer(text, separators).tokenize()
