"""Attachment data models -- inbound payload shape and classified results."""

from __future__ import annotations

import base64
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import MalformedAttachmentError

Category = Literal["image", "audio", "other"]


# -- inbound ---------------------------------------------------------------


class ChatAttachment(BaseModel):
    """An attachment exactly as a client sent it.  Nothing here is trusted."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    type: str | None = Field(default=None, description="Free-form kind label")
    mime_type: str | None = Field(default=None, alias="mimeType")
    file_name: str | None = Field(default=None, alias="fileName")
    content: Any = None

    def label(self, index: int) -> str:
        """Name used in errors and warnings for the attachment at *index*."""
        return self.file_name or self.type or f"attachment-{index + 1}"

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        *,
        mime_type: str | None = None,
        file_name: str | None = None,
        type: str | None = None,
    ) -> ChatAttachment:
        """Build an attachment from raw bytes by encoding them as base64 text.

        Channel handlers that receive binary buffers convert them here,
        before anything in :mod:`chatgate.media` sees the attachment.
        """
        return cls(
            type=type,
            mime_type=mime_type,
            file_name=file_name,
            content=base64.b64encode(data).decode("ascii"),
        )


def as_attachment(obj: ChatAttachment | Mapping[str, Any], index: int = 0) -> ChatAttachment:
    """Coerce a wire entry into a :class:`ChatAttachment`.

    Raises :class:`MalformedAttachmentError` when *obj* is not a mapping or
    carries non-string labels.
    """
    if isinstance(obj, ChatAttachment):
        return obj
    try:
        return ChatAttachment.model_validate(obj)
    except ValidationError as exc:
        label = _wire_label(obj, index)
        detail = "; ".join(_describe(err) for err in exc.errors())
        raise MalformedAttachmentError(label, detail) from exc


def _describe(err: Mapping[str, Any]) -> str:
    where = ".".join(str(part) for part in err["loc"]) or "entry"
    return f"{where}: {err['msg']}"


def _wire_label(obj: object, index: int) -> str:
    if isinstance(obj, Mapping):
        for key in ("fileName", "file_name", "type"):
            value = obj.get(key)
            if isinstance(value, str) and value:
                return value
    return f"attachment-{index + 1}"


AttachmentInput = ChatAttachment | Mapping[str, Any] | None


# -- decoded / classified --------------------------------------------------


@dataclass(frozen=True)
class DecodedAttachment:
    """Attachment content that passed charset and size validation."""

    label: str
    data: str  # canonical base64
    buffer: bytes = field(repr=False)

    @property
    def size(self) -> int:
        return len(self.buffer)


@dataclass(frozen=True)
class ClassifiedAttachment:
    mime_type: str
    category: Category
    declared_mime: str | None = None
    sniffed_mime: str | None = None
    container_override: bool = False  # audio declared, MPEG-4 sniffed

    @property
    def mismatch(self) -> bool:
        return bool(
            self.sniffed_mime
            and self.declared_mime
            and self.sniffed_mime != self.declared_mime
            and not self.container_override
        )


# -- results ---------------------------------------------------------------


@dataclass(frozen=True)
class ChatImageContent:
    """An image content block ready for a multimodal chat model."""

    data: str
    mime_type: str
    kind: Literal["image"] = "image"

    def to_dict(self) -> dict[str, str]:
        return {"type": self.kind, "data": self.data, "mimeType": self.mime_type}


@dataclass
class ParsedMessageWithImages:
    message: str
    images: list[ChatImageContent] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "images": [img.to_dict() for img in self.images],
        }


@dataclass(frozen=True)
class FirstAudioResult:
    buffer: bytes = field(repr=False)
    mime_type: str

    @property
    def size(self) -> int:
        return len(self.buffer)
