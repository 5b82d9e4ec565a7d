"""Tests for the first-audio selector."""

from __future__ import annotations

import pytest

from chatgate.media.audio import get_first_audio_attachment
from chatgate.media.errors import (
    InvalidEncodingError,
    SizeExceededError,
    UnsupportedContentShapeError,
)
from chatgate.media.models import ChatAttachment


def _att(data: str, mime: str | None = None, name: str | None = None) -> ChatAttachment:
    return ChatAttachment(mime_type=mime, file_name=name, content=data)


class TestNoAudio:
    @pytest.mark.parametrize("attachments", [None, []])
    def test_empty(self, attachments) -> None:
        assert get_first_audio_attachment(attachments) is None

    def test_only_images(self, samples, encode) -> None:
        assert get_first_audio_attachment([_att(encode(samples.png), "image/png")]) is None


class TestSelection:
    def test_first_by_index(self, samples, encode) -> None:
        attachments = [
            _att(encode(samples.png), "image/png"),
            _att(encode(samples.mp3), "audio/mpeg", "x.mp3"),
            _att(encode(samples.ogg), "audio/ogg", "y.ogg"),
        ]
        found = get_first_audio_attachment(attachments)
        assert found is not None
        assert found.buffer == samples.mp3
        assert found.mime_type == "audio/mpeg"

    def test_sniffed_audio_without_declared_type(self, samples, encode) -> None:
        found = get_first_audio_attachment([_att(encode(samples.flac))])
        assert found is not None
        assert found.mime_type == "audio/flac"
        assert found.size == len(samples.flac)

    def test_sniffed_audio_with_generic_label(self, samples, encode) -> None:
        found = get_first_audio_attachment([_att(encode(samples.wav), "application/octet-stream")])
        assert found is not None
        assert found.mime_type == "audio/wav"

    def test_m4a_container_override(self, samples, encode) -> None:
        found = get_first_audio_attachment([_att(encode(samples.mp4), "audio/m4a")])
        assert found is not None
        assert found.mime_type == "audio/m4a"
        assert found.buffer == samples.mp4

    def test_declared_audio_trusted_when_unsniffable(self, samples, encode) -> None:
        found = get_first_audio_attachment([_att(encode(samples.text), "audio/webm; codecs=opus")])
        assert found is not None
        assert found.mime_type == "audio/webm"

    def test_spoofed_label_skipped_for_later_audio(self, samples, encode) -> None:
        attachments = [
            _att(encode(samples.png), "audio/ogg", "fake.ogg"),
            _att(encode(samples.ogg), "audio/ogg", "real.ogg"),
        ]
        found = get_first_audio_attachment(attachments)
        assert found is not None
        assert found.buffer == samples.ogg

    def test_video_mp4_not_selected(self, samples, encode) -> None:
        assert get_first_audio_attachment([_att(encode(samples.mp4), "video/mp4")]) is None

    def test_wire_dicts(self, samples, encode) -> None:
        found = get_first_audio_attachment(
            [None, {"mimeType": "audio/mpeg", "content": encode(samples.mp3_frame)}],
        )
        assert found is not None
        assert found.buffer == samples.mp3_frame


class TestCandidateValidation:
    def test_invalid_declared_audio_raises(self, samples, encode) -> None:
        attachments = [
            _att("!!!!", "audio/ogg", "broken.ogg"),
            _att(encode(samples.ogg), "audio/ogg"),
        ]
        with pytest.raises(InvalidEncodingError, match="broken.ogg"):
            get_first_audio_attachment(attachments)

    def test_oversized_audio_raises(self, samples, encode) -> None:
        with pytest.raises(SizeExceededError):
            get_first_audio_attachment([_att(encode(samples.mp3), "audio/mpeg")], max_bytes=4)

    def test_malformed_non_candidate_ignored(self, samples, encode) -> None:
        attachments = [
            _att("!!!!", "image/png", "broken.png"),
            ChatAttachment(mime_type="image/png", content=b"raw bytes"),
            _att(encode(samples.ogg), "audio/ogg"),
        ]
        found = get_first_audio_attachment(attachments)
        assert found is not None
        assert found.buffer == samples.ogg

    def test_declared_audio_with_binary_content_raises(self, samples, encode) -> None:
        attachments = [
            ChatAttachment(mime_type="audio/ogg", file_name="voice.ogg", content=samples.ogg),
            _att(encode(samples.mp3), "audio/mpeg"),
        ]
        with pytest.raises(UnsupportedContentShapeError, match="voice.ogg"):
            get_first_audio_attachment(attachments)
