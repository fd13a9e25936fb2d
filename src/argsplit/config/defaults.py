"""Default configuration values."""

DEFAULT_CONFIG_YAML = """
config:
  format: lines
  log_level: WARNING

profiles:
  whitespace:
    description: "Space, tab, newline, carriage return, form feed, vertical tab"
  csv:
    separators: ","
    description: "Comma separated values"
  colon:
    separators: ":"
    description: "Colon separated lists such as PATH"
  tab:
    separators: "\\t"
    description: "Tab separated values"

themes:
  default:
    "argv.token": "#e0e0e0"
    "argv.token.odd": "#87afd7"
    "argv.quote": "#d7af5f bold"
    "argv.escape": "#d787d7"
    "argv.error": "#ffffff bg:#af0000"
  mono:
    "argv.token": ""
    "argv.token.odd": "underline"
    "argv.quote": "bold"
    "argv.escape": "italic"
    "argv.error": "reverse"
"""
