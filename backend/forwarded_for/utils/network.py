from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from fastapi.requests import HTTPConnection

from ..config import get_settings
from ..exceptions import ClientAddressUnavailableError
from ..models import ResolvedAddress
from ..resolver import forwarded

_SECURE_SCHEMES = ("https", "wss")

Descriptor = Tuple[Dict[str, Any], Dict[str, str]]


def _join_headers(pairs: Iterable[Tuple[str, str]]) -> Dict[str, str]:
    # Repeated headers fold into one comma list, in arrival order
    merged: Dict[str, str] = {}
    for key, value in pairs:
        key = key.lower()
        merged[key] = f"{merged[key]}, {value}" if key in merged else value
    return merged


def describe_connection(connection: HTTPConnection) -> Descriptor:
    """Split a Starlette ``Request``/``WebSocket`` into (descriptor, headers)."""
    client = connection.client
    descriptor: Dict[str, Any] = {
        "remoteAddress": client.host if client else None,
        "remotePort": client.port if client else None,
        "encrypted": connection.url.scheme in _SECURE_SCHEMES,
    }
    return descriptor, _join_headers(connection.headers.items())


def describe_scope(scope: Mapping[str, Any]) -> Descriptor:
    """Same as :func:`describe_connection` for a raw ASGI scope."""
    client = scope.get("client") or (None, None)
    descriptor: Dict[str, Any] = {
        "remoteAddress": client[0],
        "remotePort": client[1],
        "encrypted": scope.get("scheme", "http") in _SECURE_SCHEMES,
    }
    raw = scope.get("headers") or []
    pairs = ((k.decode("latin-1"), v.decode("latin-1")) for k, v in raw)
    return descriptor, _join_headers(pairs)


def get_forwarded(connection: HTTPConnection) -> ResolvedAddress:
    """Resolve the client address of an HTTP request or WebSocket."""
    descriptor, headers = describe_connection(connection)
    return forwarded(descriptor, headers)


def get_client_ip(connection: Optional[HTTPConnection], strict: bool = False) -> str:
    """Best-effort client IP for logging, quotas and audit trails.

    Returns ``FORWARDED_UNKNOWN_IP`` when nothing identifies the client, or
    raises ``ClientAddressUnavailableError`` when ``strict`` is set.
    """
    ip = get_forwarded(connection).ip if connection is not None else None
    if ip is None:
        if strict:
            raise ClientAddressUnavailableError("No client address in connection or headers")
        return get_settings().FORWARDED_UNKNOWN_IP
    return ip
