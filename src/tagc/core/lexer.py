"""
Tag Lexer.

Splits the inner text of one template tag into BARE and QUOTED tokens with a
three-mode scanner:

- ``SKIP``: between tokens, whitespace is consumed.
- ``BARE``: an unquoted word, terminated by whitespace or end of input.
- ``QUOTED``: a double-quoted literal. A backslash toggles a one-character
  escape flag; an escaped ``"`` stays inside the token and is unescaped when
  the token is emitted.
"""

import logging
from typing import List, Union

from tagc.core.context import ParserContext
from tagc.core.tokens import Token
from tagc.enums import LexMode, TokenKind
from tagc.utils.codecs import unescape_quotes

logger = logging.getLogger(__name__)

# C-locale isspace set; Unicode spaces such as U+00A0 belong to the word.
_WHITESPACE = frozenset(" \t\n\r\x0b\x0c")


class TagLexer:
  """
  Mode-based scanner turning raw tag text into tokens.
  """

  def tokenize(self, raw: Union[str, bytes], context: ParserContext) -> List[Token]:
    """
    Tokenizes the text of a single tag.

    Whitespace-only input yields an empty list; reporting that as an
    incomplete command is the caller's job. An unterminated quoted literal
    produces no token and is reported through `context.fail`. Bytes that are
    not valid UTF-8 are reported the same way and yield no tokens.

    Args:
        raw (Union[str, bytes]): Tag contents without delimiters. Bytes are decoded as UTF-8.
        context (ParserContext): Receives diagnostics.

    Returns:
        List[Token]: Tokens in source order.
    """
    if isinstance(raw, bytes):
      try:
        text = raw.decode("utf-8")
      except UnicodeDecodeError as e:
        context.fail(f"Invalid UTF-8 in tag at byte {e.start}")
        return []
    else:
      text = raw
    strict = context.config.strict_unescape

    tokens: List[Token] = []
    mode = LexMode.SKIP
    escaped = False
    start = 0

    for pos, ch in enumerate(text):
      if mode is LexMode.SKIP:
        if ch in _WHITESPACE:
          continue
        if ch == '"':
          mode = LexMode.QUOTED
          escaped = False
          start = pos + 1
        else:
          mode = LexMode.BARE
          start = pos

      elif mode is LexMode.BARE:
        if ch in _WHITESPACE:
          tokens.append(Token(text[start:pos], TokenKind.BARE, start))
          mode = LexMode.SKIP

      else:
        if ch == '"':
          if escaped:
            escaped = False
          else:
            body = unescape_quotes(text[start:pos], strict=strict)
            tokens.append(Token(body, TokenKind.QUOTED, start - 1))
            mode = LexMode.SKIP
        elif ch == "\\":
          escaped = not escaped
        else:
          escaped = False

    if mode is LexMode.BARE:
      tokens.append(Token(text[start:], TokenKind.BARE, start))
    elif mode is LexMode.QUOTED:
      context.fail(f"Unterminated quoted string starting at column {start - 1}")

    for token in tokens:
      logger.debug("token %s %r", token.kind.value, token.text)

    return tokens


_default_lexer = TagLexer()


def tokenize(raw: Union[str, bytes], context: ParserContext) -> List[Token]:
  """Tokenizes `raw` with a shared `TagLexer`."""
  return _default_lexer.tokenize(raw, context)
