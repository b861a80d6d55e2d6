"""
Token and Command model.

A `Command` is the ordered token sequence of one tag occurrence. Token 0 is the
tag name; the remaining tokens are the handler's arguments.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple, overload

from tagc.enums import TokenKind


@dataclass(frozen=True)
class Token:
  """
  Represents a lexical unit of tag text.

  Attributes:
      text (str): Token contents. For QUOTED tokens the surrounding quotes are
          stripped and escape markers are already resolved.
      kind (TokenKind): BARE or QUOTED.
      column (int): 0-based offset of the token start in the tag text.
  """

  text: str
  kind: TokenKind = TokenKind.BARE
  column: int = 0

  @property
  def is_quoted(self) -> bool:
    return self.kind is TokenKind.QUOTED


class Command:
  """
  Immutable, non-empty sequence of tokens for one tag.
  """

  __slots__ = ("_tokens",)

  def __init__(self, tokens: Iterable[Token]):
    """
    Args:
        tokens: Tokens in source order. The first one names the tag.

    Raises:
        ValueError: If no tokens are given.
    """
    self._tokens: Tuple[Token, ...] = tuple(tokens)
    if not self._tokens:
      raise ValueError("A Command requires at least one token (the tag name).")

  @property
  def name(self) -> str:
    """The tag name (text of token 0)."""
    return self._tokens[0].text

  @property
  def args(self) -> Tuple[Token, ...]:
    """Tokens following the tag name."""
    return self._tokens[1:]

  @property
  def tokens(self) -> Tuple[Token, ...]:
    return self._tokens

  def value(self, n: int) -> Optional[str]:
    """
    Returns the text of the n-th token, or None past the end.

    Args:
        n (int): Token index; 0 is the tag name.
    """
    if 0 <= n < len(self._tokens):
      return self._tokens[n].text
    return None

  def kind(self, n: int) -> TokenKind:
    """
    Returns the kind of the n-th token. Missing tokens report QUOTED.

    Args:
        n (int): Token index; 0 is the tag name.
    """
    if 0 <= n < len(self._tokens):
      return self._tokens[n].kind
    return TokenKind.QUOTED

  def __len__(self) -> int:
    return len(self._tokens)

  def __iter__(self) -> Iterator[Token]:
    return iter(self._tokens)

  @overload
  def __getitem__(self, index: int) -> Token: ...

  @overload
  def __getitem__(self, index: slice) -> Tuple[Token, ...]: ...

  def __getitem__(self, index):
    return self._tokens[index]

  def __eq__(self, other: object) -> bool:
    if not isinstance(other, Command):
      return NotImplemented
    return self._tokens == other._tokens

  def __hash__(self) -> int:
    return hash(self._tokens)

  def __repr__(self) -> str:
    parts = ", ".join(repr(t.text) for t in self._tokens)
    return f"Command([{parts}])"
