"""
String codecs for tag text and generated code.

Two directions:

1.  **Unescaping** (`unescape_quotes`): resolves the ``\\"`` escape markers the
    tokenizer leaves inside quoted tag arguments.
2.  **Quoting** (`quote_literal`): renders arbitrary text as a double-quoted
    Python string literal so handlers can embed template text in generated code.
"""

from typing import Dict

_LITERAL_ESCAPES: Dict[str, str] = {
  "\\": "\\\\",
  '"': '\\"',
  "\n": "\\n",
  "\r": "\\r",
  "\t": "\\t",
}


def unescape_quotes(text: str, strict: bool = True) -> str:
  """
  Drops each backslash that immediately precedes a double quote.

  Only ``\\"`` is rewritten; every other backslash sequence (``\\\\``, ``\\n``)
  is kept verbatim. Text without any quote is returned unchanged (same object).

  Args:
      text (str): Quoted-token contents, without the surrounding quotes.
      strict (bool): If True, every ``"`` must be preceded by a backslash.
          If False, bare quotes are left as they are, so unescaping an
          already-unescaped string is a no-op.

  Returns:
      str: The unescaped text.

  Raises:
      ValueError: If `strict` and the text contains an unescaped quote.
  """
  if '"' not in text:
    return text

  if strict:
    pos = text.find('"')
    while pos != -1:
      if pos == 0 or text[pos - 1] != "\\":
        raise ValueError(f"Unescaped quote at offset {pos} in {text!r}")
      pos = text.find('"', pos + 1)

  return text.replace('\\"', '"')


def quote_literal(text: str) -> str:
  """
  Quotes text as a double-quoted Python string literal.

  Args:
      text (str): Raw text (e.g. a translatable message).

  Returns:
      str: Source code for a literal evaluating to `text`.
  """
  out = ['"']
  for ch in text:
    escaped = _LITERAL_ESCAPES.get(ch)
    if escaped is not None:
      out.append(escaped)
    elif ch.isprintable():
      out.append(ch)
    else:
      code = ord(ch)
      if code < 0x100:
        out.append(f"\\x{code:02x}")
      elif code < 0x10000:
        out.append(f"\\u{code:04x}")
      else:
        out.append(f"\\U{code:08x}")
  out.append('"')
  return "".join(out)
