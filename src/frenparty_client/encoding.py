"""Byte-level helpers shared by the composers.

`to_json_bytes` produces exactly what `toUtf8(JSON.stringify(obj))` produces in
cosmjs: compact separators, insertion key order, non-ASCII kept as UTF-8, lone
surrogates written as `\\uXXXX` escapes.
"""

from __future__ import annotations

import base64
import binascii
import json
import re
from typing import Any

from frenparty_client.errors import MessageDecodeError

# A high+low surrogate pair, or any unpaired surrogate code point
_SURROGATE_RE = re.compile("([\ud800-\udbff][\udc00-\udfff])|[\ud800-\udfff]")


def _join_pair(pair: str) -> str:
    return pair.encode("utf-16-le", "surrogatepass").decode("utf-16-le")


def _escape_surrogate(m: re.Match[str]) -> str:
    if m.group(1):
        return _join_pair(m.group(1))
    return "\\u%04x" % ord(m.group(0))


def _replace_surrogate(m: re.Match[str]) -> str:
    if m.group(1):
        return _join_pair(m.group(1))
    return "\ufffd"


def to_utf8(s: str) -> bytes:
    """UTF-8 encode; unpaired surrogates become U+FFFD like TextEncoder."""
    return _SURROGATE_RE.sub(_replace_surrogate, s).encode("utf-8")


def from_utf8(data: bytes) -> str:
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        raise MessageDecodeError(f"invalid utf-8 at byte {e.start}") from e


def to_json_bytes(obj: Any) -> bytes:
    text = json.dumps(obj, separators=(",", ":"), ensure_ascii=False)
    return to_utf8(_SURROGATE_RE.sub(_escape_surrogate, text))


def from_json_bytes(data: bytes) -> Any:
    text = from_utf8(data)
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MessageDecodeError(f"invalid json: {e.msg} (pos {e.pos})") from e


def to_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def from_base64(s: str) -> bytes:
    try:
        return base64.b64decode(s, validate=True)
    except (binascii.Error, ValueError) as e:
        raise MessageDecodeError(f"invalid base64: {e}") from e
