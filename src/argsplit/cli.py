"""Command-line interface for argsplit."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from argsplit import __version__
from argsplit.config.loader import load_config
from argsplit.config.schema import Config
from argsplit.core.argv import parse_to_tokens, split
from argsplit.core.errors import MalformedInputError, ParseError
from argsplit.core.quoting import join

logger = logging.getLogger(__name__)

EXIT_CONFIG_ERROR = 1
EXIT_PARSE_ERROR = 2


def configure_logging(level: str) -> None:
    """Configure the root logger for command-line use."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def decode_separators(value: str) -> str:
    """Decode separators given on the command line.

    Backslash escapes are resolved, so ``'\\t'`` selects a tab. An empty
    value selects no separators at all.

    Raises:
        argparse.ArgumentTypeError: If the escapes are malformed
    """
    if not value:
        return ""
    try:
        return "".join(split(value, separators=""))
    except MalformedInputError as e:
        raise argparse.ArgumentTypeError(f"invalid separators: {e}") from e


def format_tokens(values: list[str], fmt: str) -> str:
    """Render token values in an output format.

    Args:
        values: Token values
        fmt: One of 'lines', 'json' or 'null'

    Returns:
        Text to write to stdout
    """
    if fmt == "json":
        return json.dumps(values, ensure_ascii=False) + "\n"
    if fmt == "null":
        return "".join(value + "\0" for value in values)
    return "".join(value + "\n" for value in values)


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        args: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="argsplit",
        description="Split text into arguments honoring quotes and C escapes",
        epilog="Example: argsplit -- 'cc -DNAME=\"hello world\" main.c'",
    )

    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        metavar="FILE",
        help="Configuration file path (default: ~/.config/argsplit/config.yaml)",
    )

    parser.add_argument(
        "--config-dir",
        type=Path,
        metavar="DIR",
        help="Drop-in configuration directory (default: ~/.config/argsplit/conf.d/)",
    )

    seps = parser.add_mutually_exclusive_group()
    seps.add_argument(
        "--separators",
        "-s",
        type=decode_separators,
        metavar="CHARS",
        help="Separator characters, escapes allowed (default: whitespace)",
    )
    seps.add_argument(
        "--profile",
        "-P",
        metavar="NAME",
        help="Use the separators of a configured profile",
    )

    parser.add_argument(
        "--format",
        "-f",
        choices=["lines", "json", "null"],
        help="Output format (default from configuration)",
    )

    parser.add_argument(
        "--join",
        "-j",
        action="store_true",
        help="Print the tokens re-quoted on one line",
    )

    parser.add_argument(
        "--interactive",
        "-i",
        action="store_true",
        help="Read lines interactively and show how they split",
    )

    parser.add_argument(
        "--theme",
        "-t",
        metavar="NAME",
        help="Theme to use in interactive mode",
    )

    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        default=os.environ.get("ARGSPLIT_LOG"),
        help="Logging level (default from configuration)",
    )

    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "text",
        nargs="*",
        help="Text to split (read from stdin when omitted)",
    )

    return parser.parse_args(args)


def run_interactive(config: Config, separators: str | None, theme: str | None) -> int:
    """Start the interactive prompt."""
    from argsplit.editor.prompt import ArgvPrompt

    return ArgvPrompt(config, separators=separators, theme=theme).run()


def main(args: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        args: Command-line arguments

    Returns:
        Exit code
    """
    parsed = parse_args(args)

    try:
        config = load_config(
            config_path=parsed.config,
            dropin_dir=parsed.config_dir,
        )
        separators = config.resolve_separators(parsed.profile, parsed.separators)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    configure_logging(parsed.log_level or config.config.log_level)

    if parsed.interactive:
        try:
            return run_interactive(config, separators, parsed.theme)
        except KeyboardInterrupt:
            return 130

    if parsed.text:
        text = " ".join(parsed.text)
    else:
        text = sys.stdin.read()

    try:
        with parse_to_tokens(text, separators) as argv:
            values = argv.argv
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    logger.info("Split input into %d tokens", len(values))

    if parsed.join:
        line_separator = separators[0] if separators else " "
        print(join(values, separator=line_separator, separators=separators))
    else:
        sys.stdout.write(format_tokens(values, parsed.format or config.config.format))

    return 0


if __name__ == "__main__":
    sys.exit(main())
