"""Interactive prompt that shows how lines split."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory, History, InMemoryHistory
from prompt_toolkit.styles import Style

from argsplit.config.loader import load_config
from argsplit.config.schema import Config
from argsplit.core.argv import parse_to_tokens
from argsplit.core.errors import MalformedInputError
from argsplit.editor.lexer import ArgvLexer

logger = logging.getLogger(__name__)


def describe_tokens(values: list[str]) -> str:
    """Format token values for display, one per line with its index."""
    if not values:
        return "(no tokens)"
    return "\n".join(f"[{i}] {value!r}" for i, value in enumerate(values))


class ArgvPrompt:
    """Read lines interactively and print the arguments they split into."""

    def __init__(
        self,
        config: Config | None = None,
        separators: str | Iterable[str] | None = None,
        theme: str | None = None,
        output: Callable[[str], None] = print,
    ) -> None:
        """Initialize the prompt.

        Args:
            config: Configuration object (loads default if None)
            separators: Separator characters (default: whitespace)
            theme: Theme name to use
            output: Function receiving the text to display
        """
        self.config = config or load_config()
        self.separators = separators
        self.theme = self.config.get_theme(theme)
        self.lexer = ArgvLexer(separators)
        self.output = output

    def _create_history(self) -> History:
        """Create persistent history if configured."""
        history_file = self.config.config.history_file
        if history_file:
            path = Path(history_file).expanduser()
            path.parent.mkdir(parents=True, exist_ok=True)
            return FileHistory(str(path))
        return InMemoryHistory()

    def _create_style(self) -> Style:
        """Create prompt_toolkit style from theme."""
        return Style.from_dict(self.theme.styles)

    def handle_line(self, line: str) -> list[str] | None:
        """Split one line and display the result.

        Returns:
            The token values, or None if the line is malformed
        """
        try:
            with parse_to_tokens(line, self.separators) as argv:
                values = argv.argv
        except MalformedInputError as e:
            logger.debug("Rejected line %r", line)
            self.output(f"error: {e}")
            return None

        self.output(describe_tokens(values))
        return values

    def run(self) -> int:
        """Run the prompt until end of input.

        Returns:
            Exit code
        """
        session: PromptSession[str] = PromptSession(
            history=self._create_history(),
            lexer=self.lexer,
            style=self._create_style(),
        )

        while True:
            try:
                line = session.prompt("argv> ")
            except KeyboardInterrupt:
                continue
            except EOFError:
                return 0
            self.handle_line(line)
