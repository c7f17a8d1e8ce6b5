"""Extractors: one per header family or connection shape.

Each extractor is a pure function ``(connection, headers) -> Partial``.
``EXTRACTORS`` holds them in priority order, highest first. Headers are
always looked up by name; the header mapping is never iterated to decide
which source wins.
"""
from __future__ import annotations

from typing import Any, Callable, Tuple

from .models import EMPTY, Partial
from .utils.fields import first_item, first_pair, forwarded_for, header, probe, to_flag, to_ip, to_port

Extractor = Callable[[Any, Any], Partial]

REMOTE_ADDRESS = ("remoteAddress", "remote_address")
REMOTE_PORT = ("remotePort", "remote_port")
ADDRESS = ("address",)
PORT = ("port",)


def _secure(value: Any) -> bool | None:
    # Only a positive signal counts; false leaves room for lower sources
    return True if to_flag(value) else None


def fastly(connection: Any, headers: Any) -> Partial:
    """Fastly edge: ``fastly-client-ip`` and ``fastly-ssl: 1``."""
    ip = to_ip(header(headers, "fastly-client-ip"))
    ssl = header(headers, "fastly-ssl")
    secure = True if ssl is not None and ssl.strip() == "1" else None
    if ip is None and secure is None:
        return EMPTY
    return Partial(ip=ip, secure=secure)


def zscaler(connection: Any, headers: Any) -> Partial:
    """Zscaler/Zeus proxies: ``z-forwarded-for``."""
    ip = first_item(header(headers, "z-forwarded-for"))
    return Partial(ip=ip) if ip else EMPTY


def forwarded_headers(connection: Any, headers: Any) -> Partial:
    """De facto ``X-Forwarded-*`` headers, RFC 7239 ``Forwarded`` and ``X-Real-IP``."""
    ip = first_item(header(headers, "x-forwarded-for"))
    port = to_port(header(headers, "x-forwarded-port"))

    proto = first_item(header(headers, "x-forwarded-proto"))
    secure = True if proto is not None and proto.lower() == "https" else None

    if ip is None:
        ip = forwarded_for(header(headers, "forwarded"))
    if ip is None:
        ip = to_ip(header(headers, "x-real-ip"))

    if ip is None and port is None and secure is None:
        return EMPTY
    return Partial(ip=ip, port=port, secure=secure)


_SOCKET_LOCATIONS = (
    (("_session", "recv", "connection"), REMOTE_ADDRESS, REMOTE_PORT),
    ((), REMOTE_ADDRESS, REMOTE_PORT),
    (("address",), ADDRESS, PORT),
)


def socket_abstraction(connection: Any, headers: Any) -> Partial:
    """SockJS-style wrapped sockets.

    The real peer may sit on the session's receiving connection, on the
    wrapper itself, or under ``address``. ``address`` on these wrappers often
    describes the local end, so it is consulted last.
    """
    ip, port = first_pair(connection, _SOCKET_LOCATIONS)
    return Partial(ip=ip, port=port, secure=_secure(probe(connection, "secure")))


def handshake(connection: Any, headers: Any) -> Partial:
    """Socket.IO handshake data: ``address: {address, port}`` and ``secure``."""
    address = probe(connection, "address")
    if isinstance(address, (str, bytes)):
        ip, port = to_ip(address), to_port(probe(connection, "port"))
    elif isinstance(address, tuple) and len(address) >= 2:
        # socket.getpeername() style (host, port[, flowinfo, scope_id])
        ip, port = to_ip(address[0]), to_port(address[1])
    else:
        ip, port = first_pair(address, (((), ADDRESS, PORT),))
    return Partial(ip=ip, port=port, secure=_secure(probe(connection, "secure")))


def raw_connection(connection: Any, headers: Any) -> Partial:
    """Plain ``net.Socket``-like connection: ``remoteAddress``/``remotePort``/``encrypted``."""
    ip, port = first_pair(connection, (((), REMOTE_ADDRESS, REMOTE_PORT),))
    return Partial(ip=ip, port=port, secure=_secure(probe(connection, "encrypted")))


EXTRACTORS: Tuple[Extractor, ...] = (
    fastly,
    zscaler,
    forwarded_headers,
    socket_abstraction,
    handshake,
    raw_connection,
)
