"""Attachment ingestion -- normalize, sniff, validate and classify."""

from .audio import get_first_audio_attachment
from .classify import classify_attachment, is_audio_mime, is_image_mime
from .encoding import normalize_base64, normalize_mime, strip_data_url_prefix
from .errors import (
    AttachmentError,
    InvalidEncodingError,
    MalformedAttachmentError,
    SizeExceededError,
    UnsupportedContentShapeError,
    UnsupportedMediaTypeError,
)
from .legacy import LEGACY_MAX_BYTES, build_message_with_attachments
from .models import (
    ChatAttachment,
    ChatImageContent,
    ClassifiedAttachment,
    DecodedAttachment,
    FirstAudioResult,
    ParsedMessageWithImages,
)
from .parse import AttachmentLog, parse_message_with_attachments
from .sniff import detect_mime, sniff_mime_from_base64
from .validate import DEFAULT_MAX_BYTES, decode_attachment_content

__all__ = [
    "DEFAULT_MAX_BYTES",
    "LEGACY_MAX_BYTES",
    "AttachmentError",
    "AttachmentLog",
    "ChatAttachment",
    "ChatImageContent",
    "ClassifiedAttachment",
    "DecodedAttachment",
    "FirstAudioResult",
    "InvalidEncodingError",
    "MalformedAttachmentError",
    "ParsedMessageWithImages",
    "SizeExceededError",
    "UnsupportedContentShapeError",
    "UnsupportedMediaTypeError",
    "build_message_with_attachments",
    "classify_attachment",
    "decode_attachment_content",
    "detect_mime",
    "get_first_audio_attachment",
    "is_audio_mime",
    "is_image_mime",
    "normalize_base64",
    "normalize_mime",
    "parse_message_with_attachments",
    "sniff_mime_from_base64",
    "strip_data_url_prefix",
]
