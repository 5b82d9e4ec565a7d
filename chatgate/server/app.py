"""Gateway server -- app factory and entry point."""

from __future__ import annotations

import logging

from aiohttp import web
from aiohttp.abc import AbstractAccessLogger

from .. import __version__
from ..config.settings import Settings, cfg
from .routes import AttachmentRoutes

logger = logging.getLogger(__name__)

_QUIET_PATHS = frozenset({"/health"})


class QuietAccessLogger(AbstractAccessLogger):
    """Demotes health-check entries to DEBUG."""

    def log(self, request: web.BaseRequest, response: web.StreamResponse, time: float) -> None:
        level = logging.DEBUG if request.path in _QUIET_PATHS else logging.INFO
        self.logger.log(
            level,
            "%s %s %s %s %.3fs",
            request.remote,
            request.method,
            request.path,
            response.status,
            time,
        )


async def _health(_req: web.Request) -> web.Response:
    return web.json_response({"status": "ok", "version": __version__})


def create_app(settings: Settings | None = None) -> web.Application:
    settings = settings or cfg
    app = web.Application(client_max_size=_request_limit(settings))
    app.router.add_get("/health", _health)
    AttachmentRoutes(settings).register(app.router)
    return app


def _request_limit(settings: Settings) -> int:
    # Eight max-size attachments per request, base64 inflated, plus framing.
    return settings.max_attachment_bytes * 4 // 3 * 8 + 1024 * 1024


def main() -> None:
    cfg.reload()
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s  %(name)s  %(levelname)s  %(message)s",
    )
    logger.info("Starting chatgate %s on port %d ...", __version__, cfg.port)
    web.run_app(create_app(cfg), host="0.0.0.0", port=cfg.port, access_log_class=QuietAccessLogger)


if __name__ == "__main__":
    main()
