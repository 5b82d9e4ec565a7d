"""HTTP route handlers."""

from .attachment_routes import AttachmentRoutes

__all__ = ["AttachmentRoutes"]
