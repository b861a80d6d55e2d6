"""
Tests for the render-time runtime surface used by generated code.
"""

import struct
from array import array

import pytest

from tagc import runtime


def _write_mo(path, messages):
  """Writes a minimal GNU gettext catalog (same layout as msgfmt.py)."""
  keys = sorted(messages)
  ids = strs = b""
  offsets = []
  for key in keys:
    kb, vb = key.encode("utf-8"), messages[key].encode("utf-8")
    offsets.append((len(ids), len(kb), len(strs), len(vb)))
    ids += kb + b"\0"
    strs += vb + b"\0"

  n = len(keys)
  keystart = 7 * 4 + 16 * n
  valuestart = keystart + len(ids)
  koffsets, voffsets = [], []
  for o1, l1, o2, l2 in offsets:
    koffsets += [l1, o1 + keystart]
    voffsets += [l2, o2 + valuestart]

  header = struct.pack("Iiiiiii", 0x950412DE, 0, n, 7 * 4, 7 * 4 + n * 8, 0, 0)
  path.parent.mkdir(parents=True, exist_ok=True)
  path.write_bytes(header + array("i", koffsets).tobytes() + array("i", voffsets).tobytes() + ids + strs)


@pytest.fixture
def spanish_catalog(tmp_path):
  _write_mo(
    tmp_path / "es" / "LC_MESSAGES" / "site.mo",
    {
      "": "Content-Type: text/plain; charset=UTF-8\n",
      "Hello": "Hola",
      "Hello %s": "Hola %s",
      "Bye %s": "Adios %s %s",
    },
  )
  runtime.set_catalog("site", tmp_path)
  yield tmp_path
  runtime.set_catalog(None)


def test_dict_get_stringifies():
  ctx = {"a": "x", "n": 3, "none": None}
  assert runtime.dict_get(ctx, "a") == "x"
  assert runtime.dict_get(ctx, "n") == "3"
  assert runtime.dict_get(ctx, "none") == ""
  assert runtime.dict_get(ctx, "missing") == ""


def test_translate_without_catalog_returns_text():
  assert runtime.translate("es", "Hello") == "Hello"


def test_translate_with_catalog(spanish_catalog):
  assert runtime.translate("es", "Hello") == "Hola"
  assert runtime.translate("es", "Unknown") == "Unknown"
  assert runtime.translate("fr", "Hello") == "Hello"
  assert runtime.translate("", "Hello") == "Hello"


def test_translate_format_with_catalog(spanish_catalog):
  assert runtime.translate_format(4096, "es", "Hello %s", "Ana") == "Hola Ana"


def test_translate_format_truncates_to_buffer():
  assert runtime.translate_format(5, "", "%s-%s", "abc", "def") == "abc-"
  assert runtime.translate_format(1, "", "anything") == ""


def test_response_collects_writes():
  res = runtime.Response()
  res.write("a")
  res.write("b")
  assert res.getvalue() == "ab"


def test_translate_format_placeholder_mismatch_keeps_text():
  assert runtime.translate_format(4096, "", "Hi %s %s", "a") == "Hi %s %s"
  assert runtime.translate_format(4096, "", "Hi", "a") == "Hi"


def test_translate_format_bad_translation_uses_source(spanish_catalog):
  assert runtime.translate_format(4096, "es", "Bye %s", "Ana") == "Bye Ana"
