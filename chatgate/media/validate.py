"""Decode and bound-check attachment content."""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any

from .encoding import is_base64_text, normalize_base64
from .errors import InvalidEncodingError, SizeExceededError, UnsupportedContentShapeError
from .models import DecodedAttachment

logger = logging.getLogger(__name__)

DEFAULT_MAX_BYTES = 5_000_000


def decode_attachment_content(
    content: Any,
    label: str,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> DecodedAttachment:
    """Decode base64 *content* into bytes, enforcing charset and size rules.

    Raises :class:`UnsupportedContentShapeError` for non-string content,
    :class:`InvalidEncodingError` for text that is not base64 and
    :class:`SizeExceededError` when the decoded payload is empty or larger
    than *max_bytes*.
    """
    if not isinstance(content, str):
        raise UnsupportedContentShapeError(label)

    b64 = normalize_base64(content)
    if not is_base64_text(b64):
        raise InvalidEncodingError(label)
    try:
        buffer = base64.b64decode(b64, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidEncodingError(label) from exc

    size = len(buffer)
    if size <= 0 or size > max_bytes:
        raise SizeExceededError(label, size, max_bytes)

    logger.debug("Decoded attachment %s (%d bytes)", label, size)
    return DecodedAttachment(label=label, data=b64, buffer=buffer)
