"""
Main Entry Point for the tagc CLI.

Parses arguments and dispatches to the handlers in `tagc.cli.commands`.
"""

import argparse
import logging
from typing import List, Optional

from tagc import __version__
from tagc.cli import commands
from tagc.config import parse_cli_key_values
from tagc.utils.console import log_error


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="tagc: template tag compiler")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("--verbose", "-v", action="store_true", help="Log registrations and tokens")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: EMIT ---
  cmd_emit = subparsers.add_parser("emit", help="Compile tag contents and print the generated code")
  cmd_emit.add_argument("tags", nargs="+", help='Tag contents without delimiters, e.g. \'trans "Hello"\'')
  cmd_emit.add_argument("--file-name", default="<cli>", help="File name reported in diagnostics")
  cmd_emit.add_argument(
    "--config",
    nargs="*",
    help="Compiler settings in key=value format (e.g. locale_key=LOCALE indent='    ')",
  )

  # --- Command: TAGS ---
  cmd_tags = subparsers.add_parser("tags", help="List registered tags")
  cmd_tags.add_argument("--config", nargs="*", help="Compiler settings in key=value format")

  args = parser.parse_args(argv)

  if args.verbose:
    logging.getLogger().setLevel(logging.DEBUG)

  try:
    settings = parse_cli_key_values(args.config)
  except ValueError as e:
    log_error(str(e))
    return 1

  if args.command == "emit":
    return commands.handle_emit(args.tags, args.file_name, settings)
  if args.command == "tags":
    return commands.handle_tags(settings)

  return 1
