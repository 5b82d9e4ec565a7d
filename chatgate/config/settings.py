"""Application settings -- reads from ``.env`` file and environment."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from ..media.validate import DEFAULT_MAX_BYTES

logger = logging.getLogger(__name__)

# KEY=VALUE with an optional leading ``export``; quotes around VALUE are dropped.
_DOTENV_LINE = re.compile(
    r"""^\s*(?:export\s+)?([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(['"]?)(.*?)\2\s*$"""
)


def _load_dotenv(path: Path) -> dict[str, str]:
    if not path.is_file():
        return {}
    values: dict[str, str] = {}
    for line in path.read_text().splitlines():
        match = _DOTENV_LINE.match(line)
        if match:
            values[match.group(1)] = match.group(3)
    return values


class Settings:
    """Process-wide configuration for the gateway surface.

    The media functions never read this; callers pass the values in.
    """

    def __init__(self) -> None:
        self.dotenv_path = Path(os.getenv("DOTENV_PATH") or ".env")
        self.reload()

    def reload(self) -> None:
        self._dotenv = _load_dotenv(self.dotenv_path)
        self.max_attachment_bytes: int = self._read_int(
            "CHATGATE_MAX_ATTACHMENT_BYTES", DEFAULT_MAX_BYTES,
        )
        self.port: int = self._read_int("CHATGATE_PORT", 8787)
        self.log_level: str = (self._read("CHATGATE_LOG_LEVEL") or "INFO").upper()

    def _read(self, key: str) -> str:
        return self._dotenv.get(key) or os.getenv(key, "")

    def _read_int(self, key: str, default: int) -> int:
        raw = self._read(key)
        if not raw:
            return default
        try:
            value = int(raw)
        except ValueError:
            logger.warning("Ignoring non-integer %s=%r, using %d", key, raw, default)
            return default
        if value <= 0:
            logger.warning("Ignoring non-positive %s=%r, using %d", key, raw, default)
            return default
        return value


cfg = Settings()
