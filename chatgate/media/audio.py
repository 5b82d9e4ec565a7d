"""Pick the audio attachment of a chat message for transcription."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .classify import classify_attachment, is_audio_mime
from .encoding import normalize_mime
from .models import AttachmentInput, ChatAttachment, FirstAudioResult, as_attachment
from .sniff import sniff_mime_from_base64
from .validate import DEFAULT_MAX_BYTES, decode_attachment_content

logger = logging.getLogger(__name__)


def _decode_audio(att: ChatAttachment, label: str, max_bytes: int) -> FirstAudioResult | None:
    decoded = decode_attachment_content(att.content, label, max_bytes)
    result = classify_attachment(decoded.buffer, att.mime_type)
    if result.category != "audio":
        logger.debug(
            "attachment %s: resolved to %s after decode, not audio", label, result.mime_type,
        )
        return None
    return FirstAudioResult(buffer=decoded.buffer, mime_type=result.mime_type)


def get_first_audio_attachment(
    attachments: Sequence[AttachmentInput] | None,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> FirstAudioResult | None:
    """Return the first attachment, by index, that decodes as audio.

    An attachment is a candidate when its declared type is audio or,
    failing that, when its base64 prefix sniffs as audio.  Candidates are
    fully validated and errors propagate, non-string content included:
    once picked as audio an attachment must be well formed.  A candidate
    that classifies as something else after decoding is skipped and the
    scan continues.
    """
    if not attachments:
        return None

    for idx, raw in enumerate(attachments):
        if raw is None:
            continue
        att = as_attachment(raw, idx)
        label = att.label(idx)

        if is_audio_mime(normalize_mime(att.mime_type)):
            found = _decode_audio(att, label, max_bytes)
            if found:
                return found

        if not isinstance(att.content, str):
            continue  # nothing to sniff
        if is_audio_mime(normalize_mime(sniff_mime_from_base64(att.content))):
            found = _decode_audio(att, label, max_bytes)
            if found:
                return found

    return None
