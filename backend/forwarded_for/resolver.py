"""Resolve the real client address behind proxies, CDNs and socket wrappers."""
from __future__ import annotations

from typing import Any, Iterable, Optional

from .extractors import EXTRACTORS, Extractor
from .models import ResolvedAddress


def forwarded(
    connection: Any = None,
    headers: Any = None,
    extractors: Optional[Iterable[Extractor]] = None,
) -> ResolvedAddress:
    """Return the client ``ip``, ``port`` and ``secure`` flag for a connection.

    Extractors run in priority order and each field is taken from the first
    extractor that supplies it; a field is never overwritten once set.
    ``secure`` can only be raised to ``True`` and otherwise stays ``False``.
    Missing or malformed inputs yield ``None`` fields rather than errors.
    """
    connection = {} if connection is None else connection
    headers = {} if headers is None else headers

    ip: Optional[str] = None
    port: Optional[int] = None
    secure = False

    for extract in EXTRACTORS if extractors is None else extractors:
        found = extract(connection, headers)
        if ip is None and found.ip is not None:
            ip = found.ip
        if port is None and found.port is not None:
            port = found.port
        if not secure and found.secure:
            secure = True
        if ip is not None and port is not None and secure:
            break

    return ResolvedAddress(ip=ip, port=port, secure=secure)


resolve = forwarded
