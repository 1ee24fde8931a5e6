"""Percent-encoding of URL parameter values.

Flexivis reads its parameters from the URL fragment, so values are
escaped with a policy of our own rather than ``urllib.parse.quote``:

- unreserved characters (RFC 3986 section 2.3) are never escaped;
- reserved characters (RFC 3986 section 2.2) are left alone, except
  ``&`` (parameter separator), ``+`` (Flexivis reads it as a space) and
  ``#`` (terminal URL recognition stops at it);
- a space becomes ``+``;
- everything else, ``%`` included, becomes ``%XX`` with uppercase hex.

Values are escaped byte by byte over their UTF-8 encoding. Lone surrogates
are encoded as their three-byte UTF-8 form, so every ``str`` can be escaped.
"""

from __future__ import annotations

_HEX = b"0123456789ABCDEF"
_UNRESERVED = frozenset(
    b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_.~"
)
_RESERVED = frozenset(b":/?#[]@!$&'()*+,;=")
_ALWAYS_ESCAPED = frozenset(b"&+#")
_SPACE = ord(" ")
_PLUS = ord("+")
_PERCENT = ord("%")


def should_escape(c: int) -> bool:
    """Whether byte *c* must be transformed inside a parameter value."""
    if c in _UNRESERVED:
        return False
    if c in _RESERVED:
        return c in _ALWAYS_ESCAPED
    return True


def escape_parameter_value(value: str) -> str:
    """Escape *value* for use as one ``&``-separated fragment parameter.

    Returns *value* itself when nothing needs escaping. Total over all
    strings.
    """
    raw = value.encode("utf-8", "surrogatepass")
    has_space = False
    to_percent_encode = 0
    for c in raw:
        if should_escape(c):
            if c == _SPACE:
                has_space = True
            else:
                to_percent_encode += 1
    if to_percent_encode == 0 and not has_space:
        return value

    encoded = bytearray(len(raw) + 2 * to_percent_encode)
    i = 0
    for c in raw:
        if not should_escape(c):
            encoded[i] = c
            i += 1
        elif c == _SPACE:
            encoded[i] = _PLUS
            i += 1
        else:
            encoded[i] = _PERCENT
            encoded[i + 1] = _HEX[c >> 4]
            encoded[i + 2] = _HEX[c & 0xF]
            i += 3
    return encoded.decode("ascii")
