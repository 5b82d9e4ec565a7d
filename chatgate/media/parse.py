"""Collect the image attachments of a chat message for a multimodal model."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from .classify import classify_attachment, is_audio_mime, is_image_mime
from .models import AttachmentInput, ChatImageContent, ParsedMessageWithImages, as_attachment
from .validate import DEFAULT_MAX_BYTES, decode_attachment_content

logger = logging.getLogger(__name__)


class AttachmentLog(Protocol):
    """Anything that accepts warnings -- a :class:`logging.Logger` will do."""

    def warning(self, msg: str) -> None: ...


def parse_message_with_attachments(
    message: str,
    attachments: Sequence[AttachmentInput] | None,
    *,
    max_bytes: int = DEFAULT_MAX_BYTES,
    log: AttachmentLog | None = None,
) -> ParsedMessageWithImages:
    """Validate every attachment and keep the images, in input order.

    Invalid content (wrong shape, bad base64, empty or over *max_bytes*)
    fails the whole call.  Audio is dropped silently since it is handled
    by the transcription path; anything else that is not an image is
    dropped with a warning on *log*.
    """
    sink: AttachmentLog = log if log is not None else logger
    if not attachments:
        return ParsedMessageWithImages(message=message)

    images: list[ChatImageContent] = []

    for idx, raw in enumerate(attachments):
        if raw is None:
            continue
        att = as_attachment(raw, idx)
        label = att.label(idx)

        decoded = decode_attachment_content(att.content, label, max_bytes)
        result = classify_attachment(decoded.buffer, att.mime_type)
        declared, sniffed = result.declared_mime, result.sniffed_mime

        if sniffed and not is_image_mime(sniffed):
            if not is_audio_mime(sniffed) and not result.container_override:
                sink.warning(f"attachment {label}: detected non-image ({sniffed}), dropping")
            continue
        if not sniffed and not is_image_mime(declared):
            if not is_audio_mime(declared):
                sink.warning(f"attachment {label}: unable to detect image mime type, dropping")
            continue
        if result.mismatch:
            sink.warning(
                f"attachment {label}: mime mismatch ({declared} -> {sniffed}), using sniffed"
            )

        images.append(ChatImageContent(data=decoded.data, mime_type=result.mime_type))

    logger.debug("Kept %d of %d attachments as images", len(images), len(attachments))
    return ParsedMessageWithImages(message=message, images=images)
