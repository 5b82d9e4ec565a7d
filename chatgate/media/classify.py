"""Reconcile the declared MIME type of an attachment with its actual bytes."""

from __future__ import annotations

from .encoding import normalize_mime
from .models import Category, ClassifiedAttachment
from .sniff import SNIFF_BYTES, detect_mime

UNKNOWN_MIME = "application/octet-stream"

# Generic ISO-BMFF type; M4A and friends share it with video.
MPEG4_CONTAINER_MIME = "video/mp4"


def is_image_mime(mime: str | None) -> bool:
    return isinstance(mime, str) and mime.startswith("image/")


def is_audio_mime(mime: str | None) -> bool:
    return isinstance(mime, str) and mime.startswith("audio/")


def category_for(mime: str | None) -> Category:
    if is_image_mime(mime):
        return "image"
    if is_audio_mime(mime):
        return "audio"
    return "other"


def classify_attachment(buffer: bytes, declared_mime: str | None = None) -> ClassifiedAttachment:
    """Resolve the MIME type and category of a decoded attachment.

    The sniffed type is authoritative.  The one exception is an attachment
    declared as audio whose bytes sniff as the generic MPEG-4 container:
    M4A audio is indistinguishable from MP4 video by signature alone, so
    the declared audio type is kept.  Without a usable sniff the declared
    type is trusted, and with neither the attachment is ``other``.
    """
    declared = normalize_mime(declared_mime)
    sniffed = normalize_mime(detect_mime(buffer[:SNIFF_BYTES]))

    if sniffed:
        if is_audio_mime(declared) and sniffed == MPEG4_CONTAINER_MIME:
            return ClassifiedAttachment(
                mime_type=declared,
                category="audio",
                declared_mime=declared,
                sniffed_mime=sniffed,
                container_override=True,
            )
        return ClassifiedAttachment(
            mime_type=sniffed,
            category=category_for(sniffed),
            declared_mime=declared,
            sniffed_mime=sniffed,
        )

    if declared:
        return ClassifiedAttachment(
            mime_type=declared,
            category=category_for(declared),
            declared_mime=declared,
        )

    return ClassifiedAttachment(mime_type=UNKNOWN_MIME, category="other")
