"""Interactive highlighting using prompt_toolkit."""

from argsplit.editor.lexer import ArgvLexer
from argsplit.editor.prompt import ArgvPrompt

__all__ = ["ArgvLexer", "ArgvPrompt"]
