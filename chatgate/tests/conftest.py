"""Shared pytest fixtures for chatgate tests."""

from __future__ import annotations

import base64
from pathlib import Path
from types import SimpleNamespace

import pytest


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    dotenv = tmp_path / ".env"
    monkeypatch.setenv("DOTENV_PATH", str(dotenv))
    for key in (
        "CHATGATE_MAX_ATTACHMENT_BYTES",
        "CHATGATE_PORT",
        "CHATGATE_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    return dotenv


@pytest.fixture()
def dotenv_path(_isolate_env: Path) -> Path:
    return _isolate_env


@pytest.fixture()
def samples() -> SimpleNamespace:
    """Minimal payloads carrying real format signatures."""
    return SimpleNamespace(
        png=b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR" + bytes(16),
        jpeg=b"\xff\xd8\xff\xe0\x00\x10JFIF\x00" + bytes(16),
        gif=b"GIF89a" + bytes(20),
        webp=b"RIFF\x24\x00\x00\x00WEBPVP8 " + bytes(16),
        mp4=b"\x00\x00\x00\x18ftypisom\x00\x00\x02\x00isomiso2" + bytes(16),
        m4a=b"\x00\x00\x00\x20ftypM4A \x00\x00\x00\x00M4A mp42isom" + bytes(8),
        ogg=b"OggS\x00\x02" + bytes(22) + b"\x01vorbis" + bytes(16),
        opus=b"OggS\x00\x02" + bytes(22) + b"OpusHead" + bytes(16),
        mp3=b"ID3\x04\x00\x00\x00\x00\x00\x00" + bytes(16),
        mp3_frame=b"\xff\xfb\x90\x64" + bytes(28),
        wav=b"RIFF\x24\x00\x00\x00WAVEfmt " + bytes(16),
        flac=b"fLaC\x00\x00\x00\x22" + bytes(16),
        pdf=b"%PDF-1.7\n%\xe2\xe3\xcf\xd3\n" + bytes(16),
        text=b"just some plain text, nothing binary",
    )


def b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


@pytest.fixture()
def encode():
    return b64


class WarnSink:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def warning(self, msg: str) -> None:
        self.messages.append(msg)


@pytest.fixture()
def warn_sink() -> WarnSink:
    return WarnSink()
