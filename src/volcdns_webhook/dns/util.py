"""TXT value helpers for Volcengine Public DNS."""

from __future__ import annotations

_HERITAGE_PREFIX = '"heritage='


def escape_txt_value(value: str) -> str:
    """Prepare a TXT value for writing.

    Volcengine TXT records reject double-quote characters, so every quote is
    removed. ACME challenge tokens are base64url and pass through unchanged.
    """
    v = value.strip()
    if v.startswith(_HERITAGE_PREFIX):
        v = v.strip('"')
    return v.replace('"', "")


def unescape_txt_value(value: str) -> str:
    """Strip whitespace and one surrounding pair of quotes from a stored TXT value.

    Only used to compare a stored value against the challenge key. This is not
    the inverse of :func:`escape_txt_value`, which drops every quote.
    """
    v = value.strip()
    if len(v) >= 2 and v.startswith('"') and v.endswith('"'):
        v = v[1:-1]
    return v
