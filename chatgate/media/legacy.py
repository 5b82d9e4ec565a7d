"""Inline markdown image encoding for chat messages.

Deprecated: models cannot read images embedded as markdown data URLs.
Use :func:`chatgate.media.parse.parse_message_with_attachments` and send
the images as content blocks instead.  Kept until the remaining callers
have moved over.
"""

from __future__ import annotations

import re
import warnings
from collections.abc import Sequence

from .classify import is_image_mime
from .encoding import normalize_mime
from .errors import UnsupportedContentShapeError, UnsupportedMediaTypeError
from .models import AttachmentInput, as_attachment
from .validate import decode_attachment_content

LEGACY_MAX_BYTES = 2_000_000

_WHITESPACE_RE = re.compile(r"\s+")


def build_message_with_attachments(
    message: str,
    attachments: Sequence[AttachmentInput] | None,
    *,
    max_bytes: int = LEGACY_MAX_BYTES,
) -> str:
    """Append every attachment to *message* as a markdown data-URL image.

    Strict: any attachment without an ``image/*`` declared type fails
    the call.  There is no sniffing and no audio tolerance.
    """
    warnings.warn(
        "build_message_with_attachments is deprecated; use parse_message_with_attachments",
        DeprecationWarning,
        stacklevel=2,
    )
    if not attachments:
        return message

    blocks: list[str] = []

    for idx, raw in enumerate(attachments):
        if raw is None:
            continue
        att = as_attachment(raw, idx)
        label = att.label(idx)

        if not isinstance(att.content, str):
            raise UnsupportedContentShapeError(label)
        mime = normalize_mime(att.mime_type)
        if not is_image_mime(mime):
            raise UnsupportedMediaTypeError(label)

        decoded = decode_attachment_content(att.content, label, max_bytes)
        safe_label = _WHITESPACE_RE.sub("_", label)
        blocks.append(f"![{safe_label}](data:{mime};base64,{decoded.data})")

    if not blocks:
        return message
    separator = "\n\n" if message.strip() else ""
    return message + separator + "\n\n".join(blocks)
