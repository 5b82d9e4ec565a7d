"""Attachment ingestion API routes -- /api/attachments/*."""

from __future__ import annotations

import asyncio
import base64
import logging
from typing import Any

from aiohttp import web

from ...config.settings import Settings
from ...media import (
    AttachmentError,
    get_first_audio_attachment,
    parse_message_with_attachments,
)

logger = logging.getLogger(__name__)


class _CollectingLog:
    """Warning sink that keeps messages for the response and logs them."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def warning(self, msg: str) -> None:
        self.messages.append(msg)
        logger.warning(msg)


def _error(message: str, status: int = 400) -> web.Response:
    return web.json_response({"status": "error", "message": message}, status=status)


class AttachmentRoutes:
    """REST handler that runs client attachments through the ingestion core."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def register(self, router: web.UrlDispatcher) -> None:
        router.add_post("/api/attachments/parse", self._parse)
        router.add_post("/api/attachments/audio", self._audio)

    async def _parse(self, req: web.Request) -> web.Response:
        body = await _read_body(req)
        if isinstance(body, web.Response):
            return body
        message = body.get("message", "")
        if not isinstance(message, str):
            return _error("message must be a string")

        sink = _CollectingLog()
        try:
            parsed = await asyncio.to_thread(
                parse_message_with_attachments,
                message,
                body.get("attachments"),
                max_bytes=self._settings.max_attachment_bytes,
                log=sink,
            )
        except AttachmentError as exc:
            logger.info("Rejected attachments: %s", exc)
            return _error(str(exc))
        return web.json_response({"status": "ok", **parsed.to_dict(), "warnings": sink.messages})

    async def _audio(self, req: web.Request) -> web.Response:
        body = await _read_body(req)
        if isinstance(body, web.Response):
            return body
        try:
            found = await asyncio.to_thread(
                get_first_audio_attachment,
                body.get("attachments"),
                self._settings.max_attachment_bytes,
            )
        except AttachmentError as exc:
            logger.info("Rejected audio attachment: %s", exc)
            return _error(str(exc))
        if found is None:
            return web.json_response({"status": "ok", "found": False})
        return web.json_response({
            "status": "ok",
            "found": True,
            "mimeType": found.mime_type,
            "size": found.size,
            "data": base64.b64encode(found.buffer).decode("ascii"),
        })


async def _read_body(req: web.Request) -> dict[str, Any] | web.Response:
    try:
        body = await req.json()
    except ValueError:
        return _error("Request body must be JSON")
    if not isinstance(body, dict):
        return _error("Request body must be a JSON object")
    attachments = body.get("attachments")
    if attachments is not None and not isinstance(attachments, list):
        return _error("attachments must be a list")
    return body
