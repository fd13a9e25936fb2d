"""Lexer highlighting how a line splits into arguments."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.formatted_text.utils import split_lines
from prompt_toolkit.lexers import Lexer

from argsplit.core.errors import MalformedInputError
from argsplit.core.tokenizer import MarkKind, Token, Tokenizer

TOKEN_CLASS = "class:argv.token"
ODD_TOKEN_CLASS = "class:argv.token.odd"
QUOTE_CLASS = "class:argv.quote"
ESCAPE_CLASS = "class:argv.escape"
ERROR_CLASS = "class:argv.error"


class ArgvLexer(Lexer):
    """Lexer that colors each argument of the line.

    Consecutive tokens alternate between two classes so that token
    boundaries stay visible even when a quoted separator joins words.
    Quote delimiters and escape sequences get their own classes. When the
    line cannot be split, everything from the offending quote or
    backslash on is shown with the error class.
    """

    def __init__(self, separators: str | Iterable[str] | None = None) -> None:
        self.separators = separators
        self.error: MalformedInputError | None = None

    def lex_document(self, document: Document) -> Callable[[int], StyleAndTextTuples]:
        """Lex a document and return a function that returns styled text for each line.

        Args:
            document: The document to lex

        Returns:
            Function that takes a line number and returns styled text tuples
        """
        lines = list(split_lines(self.style_text(document.text)))

        def get_line(line_number: int) -> StyleAndTextTuples:
            if 0 <= line_number < len(lines):
                return lines[line_number]
            return []

        return get_line

    def split_with_error(self, text: str) -> tuple[list[Token], MalformedInputError | None]:
        """Split text, keeping the tokens found before any error."""
        tokenizer = Tokenizer(text, self.separators)
        tokens: list[Token] = []
        try:
            token = tokenizer.next_token()
            while token is not None:
                tokens.append(token)
                token = tokenizer.next_token()
        except MalformedInputError as e:
            return tokens, e
        return tokens, None

    def style_text(self, text: str) -> StyleAndTextTuples:
        """Convert text to styled fragments."""
        tokens, self.error = self.split_with_error(text)

        styled: StyleAndTextTuples = []
        last_end = 0

        for index, token in enumerate(tokens):
            if token.start > last_end:
                styled.append(("", text[last_end : token.start]))

            token_class = ODD_TOKEN_CLASS if index % 2 else TOKEN_CLASS
            styled.extend(self._style_token(text, token, token_class))
            last_end = token.end

        if self.error is not None and self.error.position is not None:
            error_start = max(self.error.position, last_end)
            if error_start > last_end:
                styled.append(("", text[last_end:error_start]))
            styled.append((ERROR_CLASS, text[error_start:]))
        elif last_end < len(text):
            styled.append(("", text[last_end:]))

        return styled

    def _style_token(self, text: str, token: Token, token_class: str) -> StyleAndTextTuples:
        """Style one token, highlighting its quotes and escapes."""
        styled: StyleAndTextTuples = []
        pos = token.start

        for mark in sorted(token.marks, key=lambda m: m.start):
            if mark.start > pos:
                styled.append((token_class, text[pos : mark.start]))
            mark_class = QUOTE_CLASS if mark.kind is MarkKind.QUOTE else ESCAPE_CLASS
            styled.append((mark_class, text[mark.start : mark.end]))
            pos = mark.end

        if pos < token.end:
            styled.append((token_class, text[pos : token.end]))

        return styled
