"""Attachment ingestion errors.

All of these are fatal to the call that raised them.  Classification
problems that only drop an attachment are reported to the warning sink
instead and never show up here.
"""

from __future__ import annotations


class AttachmentError(Exception):
    """Base class for rejected attachment content."""

    def __init__(self, label: str, reason: str) -> None:
        super().__init__(f"attachment {label}: {reason}")
        self.label = label
        self.reason = reason


class UnsupportedContentShapeError(AttachmentError):
    """``content`` was not base64 text."""

    def __init__(self, label: str) -> None:
        super().__init__(label, "content must be base64 string")


class InvalidEncodingError(AttachmentError):
    def __init__(self, label: str) -> None:
        super().__init__(label, "invalid base64 content")


class SizeExceededError(AttachmentError):
    """Decoded payload is empty or larger than the byte ceiling."""

    def __init__(self, label: str, size: int, limit: int) -> None:
        if size <= 0:
            reason = f"empty content ({size} bytes, limit {limit} bytes)"
        else:
            reason = f"exceeds size limit ({size} > {limit} bytes)"
        super().__init__(label, reason)
        self.size = size
        self.limit = limit


class UnsupportedMediaTypeError(AttachmentError):
    def __init__(self, label: str, expected: str = "image/*") -> None:
        super().__init__(label, f"only {expected} supported")
        self.expected = expected


class MalformedAttachmentError(AttachmentError):
    """The attachment entry itself does not have the expected shape."""

    def __init__(self, label: str, detail: str) -> None:
        super().__init__(label, f"malformed attachment ({detail})")
        self.detail = detail
