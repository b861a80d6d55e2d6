"""
Enumerations for tagc.

Token categories produced by the tag lexer and the lexer's scanning modes.
"""

from enum import Enum


class TokenKind(str, Enum):
  """
  Lexical category of a tag token.
  """

  BARE = "bare"  # unquoted word, e.g. a dictionary key
  QUOTED = "quoted"  # double-quoted literal, escapes already resolved


class LexMode(Enum):
  """
  States of the tag lexer.
  """

  SKIP = 0  # between tokens
  BARE = 1  # inside an unquoted word
  QUOTED = 2  # inside a double-quoted literal
