"""Canonicalisation of attachment payload text and MIME labels.

Clients send base64 in several dialects: bare, wrapped in a
``data:<mime>;base64,`` URL, URL-safe (``-``/``_``) and with or without
padding.  Everything downstream works on one canonical form -- the
standard alphabet, padded to a multiple of four.  Nothing in this module
raises; illegal content is caught by :mod:`chatgate.media.validate`.
"""

from __future__ import annotations

import re

_DATA_URL_RE = re.compile(r"^data:[^;]+;base64,(.*)$")
_NON_BASE64_RE = re.compile(r"[^A-Za-z0-9+/=]")
_URLSAFE_TO_STANDARD = str.maketrans("-_", "+/")


def normalize_mime(mime: str | None) -> str | None:
    """Lowercase *mime* and drop any ``;param=...`` suffix.

    >>> normalize_mime("Image/PNG; charset=binary")
    'image/png'
    """
    if not mime:
        return None
    cleaned = mime.split(";", 1)[0].strip().lower()
    return cleaned or None


def strip_data_url_prefix(content: str) -> str:
    trimmed = content.strip()
    match = _DATA_URL_RE.match(trimmed)
    return match.group(1) if match else trimmed


def normalize_base64(content: str) -> str:
    """Return *content* as standard-alphabet, padded base64 text.

    >>> normalize_base64("data:image/png;base64,iVBORw0KGgo")
    'iVBORw0KGgo='
    >>> normalize_base64("-_8")
    '+/8='
    """
    text = strip_data_url_prefix(content).strip()
    text = text.translate(_URLSAFE_TO_STANDARD)
    remainder = len(text) % 4
    if remainder:
        text += "=" * (4 - remainder)
    return text


def is_base64_text(text: str) -> bool:
    return _NON_BASE64_RE.search(text) is None
