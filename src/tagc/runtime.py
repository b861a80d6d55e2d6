"""
Render-time Runtime Surface.

Helpers that generated tag code calls while a page is being rendered. The
assembled render function is expected to run with::

    from tagc.runtime import dict_get, translate, translate_format

and the names ``res`` (response writer), ``req`` (request) and ``context``
(render-time dictionary) in scope.

Translations come from a gettext catalog selected with `set_catalog`; without
one, messages are returned untranslated.
"""

import gettext
import io
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple, Union

_catalog: Tuple[Optional[str], Optional[str]] = (None, None)


def set_catalog(domain: Optional[str], localedir: Optional[Union[str, Path]] = None) -> None:
  """
  Selects the gettext domain used by `translate`.

  Args:
      domain: Catalog domain (``<localedir>/<lang>/LC_MESSAGES/<domain>.mo``). None disables translation.
      localedir: Directory holding the compiled catalogs.
  """
  global _catalog
  _catalog = (domain, str(localedir) if localedir is not None else None)
  _translations.cache_clear()


@lru_cache(maxsize=None)
def _translations(domain: str, localedir: Optional[str], locale: str) -> gettext.NullTranslations:
  return gettext.translation(domain, localedir=localedir, languages=[locale], fallback=True)


def dict_get(context: Mapping[str, Any], key: str) -> str:
  """Returns ``context[key]`` as text; missing keys and None yield ``""``."""
  value = context.get(key)
  if value is None:
    return ""
  return value if isinstance(value, str) else str(value)


def translate(locale: str, text: str) -> str:
  """
  Translates `text` into `locale` using the active catalog.

  Args:
      locale (str): Language code, e.g. ``"es"``. Empty means untranslated.
      text (str): Source message.

  Returns:
      str: The translated message, or `text` if no translation exists.
  """
  domain, localedir = _catalog
  if not domain or not locale:
    return text
  return _translations(domain, localedir, locale).gettext(text)


def translate_format(size: int, locale: str, text: str, *args: Any) -> str:
  """
  Translates `text` and ``%``-formats it with `args` into a bounded buffer.

  Args:
      size (int): Buffer size; output is truncated to ``size - 1`` characters.
      locale (str): Language code.
      text (str): Source message containing ``%s`` placeholders.
      *args: Format arguments in placeholder order.

  If the translation does not accept `args`, the source message is formatted
  instead. If neither accepts them, the translation is returned unformatted.

  Returns:
      str: The formatted, possibly truncated, translated message.
  """
  translated = translate(locale, text)
  try:
    formatted = translated % args
  except (TypeError, ValueError):
    try:
      formatted = text % args
    except (TypeError, ValueError):
      formatted = translated
  return formatted[: max(size - 1, 0)]


class Response:
  """
  In-memory response writer.
  """

  def __init__(self) -> None:
    self._buffer = io.StringIO()

  def write(self, text: str) -> int:
    return self._buffer.write(text)

  def getvalue(self) -> str:
    return self._buffer.getvalue()
