"""FastAPI dependencies exposing the resolved client address."""
from __future__ import annotations

from fastapi import Depends, HTTPException
from fastapi.requests import HTTPConnection

from .config import get_settings
from .exceptions import ClientAddressUnavailableError
from .models import ResolvedAddress
from .utils.network import get_client_ip, get_forwarded


def get_forwarded_address(connection: HTTPConnection) -> ResolvedAddress:
    """Resolved address for the current request or WebSocket.

    Reuses the value stored by ``ForwardedMiddleware`` when it ran; WebSocket
    routes (which the middleware does not see) are resolved here.
    """
    cached = getattr(connection.state, get_settings().FORWARDED_STATE_ATTR, None)
    if isinstance(cached, ResolvedAddress):
        return cached
    return get_forwarded(connection)


def require_client_ip(address: ResolvedAddress = Depends(get_forwarded_address)) -> str:
    """Return the client IP or fail the request with 400."""
    if address.ip is None:
        raise HTTPException(status_code=400, detail="Unable to determine client address")
    return address.ip


def get_strict_client_ip(connection: HTTPConnection) -> str:
    """Like ``require_client_ip`` but resolves directly, bypassing any cache."""
    try:
        return get_client_ip(connection, strict=True)
    except ClientAddressUnavailableError as exc:
        raise HTTPException(status_code=400, detail="Unable to determine client address") from exc
