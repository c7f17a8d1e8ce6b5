"""Middleware that resolves the client address once per request."""
from __future__ import annotations

import logging
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .config import get_settings
from .utils.network import get_forwarded

logger = logging.getLogger(__name__)


class ForwardedMiddleware(BaseHTTPMiddleware):
    """
    Stores the resolved address on ``request.state`` for handlers and
    dependencies. The response is passed through untouched.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        settings = get_settings()
        if settings.FORWARDED_ENABLED:
            address = get_forwarded(request)
            setattr(request.state, settings.FORWARDED_STATE_ATTR, address)
            if settings.FORWARDED_LOG_RESOLUTION:
                logger.debug(
                    "Resolved client %s:%s secure=%s for %s %s",
                    address.ip, address.port, address.secure, request.method, request.url.path,
                )
        return await call_next(request)
