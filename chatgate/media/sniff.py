"""Magic-byte content type detection.

Only the leading bytes of a payload are inspected.  Detection is best
effort: a ``None`` result means "unknown", never "invalid", and the
functions here do not raise on garbage input.
"""

from __future__ import annotations

import base64
import binascii
import logging

from .encoding import normalize_base64

logger = logging.getLogger(__name__)

# Characters of base64 text decoded for sniffing (3 bytes per 4 chars).
SNIFF_CHARS = 256
SNIFF_BYTES = SNIFF_CHARS // 4 * 3
_MIN_SNIFF_CHARS = 8

# (offset, signature, mime) -- checked in order, first hit wins.
_PREFIX_SIGNATURES: list[tuple[int, bytes, str]] = [
    (0, b"\x89PNG\r\n\x1a\n", "image/png"),
    (0, b"\xff\xd8\xff", "image/jpeg"),
    (0, b"GIF87a", "image/gif"),
    (0, b"GIF89a", "image/gif"),
    (0, b"II*\x00", "image/tiff"),
    (0, b"MM\x00*", "image/tiff"),
    (0, b"\x00\x00\x01\x00", "image/x-icon"),
    (0, b"BM", "image/bmp"),
    (0, b"ID3", "audio/mpeg"),
    (0, b"fLaC", "audio/flac"),
    (0, b"#!AMR", "audio/amr"),
    (0, b"MThd", "audio/midi"),
    (0, b"%PDF-", "application/pdf"),
    (0, b"PK\x03\x04", "application/zip"),
    (0, b"PK\x05\x06", "application/zip"),
    (0, b"PK\x07\x08", "application/zip"),
    (0, b"\x1f\x8b\x08", "application/gzip"),
]

# RIFF / FORM containers: the form type lives at offset 8.
_RIFF_FORMS: dict[bytes, str] = {
    b"WEBP": "image/webp",
    b"WAVE": "audio/wav",
    b"AVI ": "video/vnd.avi",
}
_IFF_FORMS: dict[bytes, str] = {
    b"AIFF": "audio/aiff",
    b"AIFC": "audio/aiff",
}

# ISO base media ``ftyp`` major brands that are not generic MPEG-4 video.
_FTYP_BRANDS: dict[str, str] = {
    "M4A": "audio/mp4",
    "M4B": "audio/mp4",
    "M4P": "audio/mp4",
    "M4V": "video/x-m4v",
    "qt": "video/quicktime",
    "3g2": "video/3gpp2",
    "heic": "image/heic",
    "heix": "image/heic",
    "mif1": "image/heif",
    "msf1": "image/heif-sequence",
    "avif": "image/avif",
    "avis": "image/avif",
}

_EBML_MAGIC = b"\x1a\x45\xdf\xa3"


def _detect_ftyp(data: bytes) -> str:
    brand = data[8:12].replace(b"\x00", b" ").decode("latin-1").strip()
    if brand in _FTYP_BRANDS:
        return _FTYP_BRANDS[brand]
    if brand.startswith("3g"):
        return "video/3gpp"
    return "video/mp4"


def _detect_ogg(data: bytes) -> str:
    # The first page's packet starts at offset 28.
    packet = data[28:36]
    if packet.startswith(b"OpusHead"):
        return "audio/opus"
    if packet.startswith(b"\x80theora"):
        return "video/ogg"
    return "audio/ogg"


def _detect_mpeg_frame(data: bytes) -> str | None:
    if len(data) < 2 or data[0] != 0xFF or (data[1] & 0xE0) != 0xE0:
        return None
    if (data[1] & 0xF6) == 0xF0:
        return "audio/aac"  # ADTS header, layer bits zero
    if data[1] & 0x06:
        return "audio/mpeg"
    return None


def detect_mime(data: bytes) -> str | None:
    """Return the MIME type signalled by the leading bytes of *data*.

    >>> detect_mime(b"\\x89PNG\\r\\n\\x1a\\n" + bytes(8))
    'image/png'
    >>> detect_mime(b"plain text") is None
    True
    """
    if len(data) < 2:
        return None

    if data[4:8] == b"ftyp":
        return _detect_ftyp(data)
    if data.startswith(b"RIFF"):
        return _RIFF_FORMS.get(data[8:12])
    if data.startswith(b"FORM"):
        return _IFF_FORMS.get(data[8:12])
    if data.startswith(b"OggS"):
        return _detect_ogg(data)
    if data.startswith(_EBML_MAGIC):
        return "video/webm" if b"webm" in data[:64] else "video/x-matroska"

    for offset, signature, mime in _PREFIX_SIGNATURES:
        if data.startswith(signature, offset):
            return mime

    return _detect_mpeg_frame(data)


def sniff_mime_from_base64(content: str) -> str | None:
    """Detect the content type of base64 *content* from a bounded prefix.

    Only the first :data:`SNIFF_CHARS` characters are decoded, so a large
    payload is never fully materialised just to look at its header.
    """
    normalized = normalize_base64(content)
    take = min(SNIFF_CHARS, len(normalized))
    slice_len = take - take % 4
    if slice_len < _MIN_SNIFF_CHARS:
        return None
    try:
        head = base64.b64decode(normalized[:slice_len])
    except (binascii.Error, ValueError) as exc:
        logger.debug("Could not decode sniff prefix: %s", exc)
        return None
    try:
        return detect_mime(head)
    except Exception:
        logger.debug("Signature detection failed", exc_info=True)
        return None
