"""Safe field probing and value coercion for loosely shaped inputs.

Connection descriptors come from many producers (raw sockets, handshake
wrappers, socket-abstraction libraries) and header mappings from many
frameworks. Nothing here raises for a missing or wrong-typed value; the
helpers return ``None`` and let the caller move on to the next source.
"""
from __future__ import annotations

import re
from typing import Any, Iterable, Mapping, Optional, Sequence

_PORT_RE = re.compile(r"^\s*(\d+)\s*$")
_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})


def probe(obj: Any, *path: str) -> Any:
    """Walk ``path`` through nested mappings/objects; ``None`` when absent."""
    current = obj
    for name in path:
        if current is None:
            return None
        if isinstance(current, Mapping):
            current = current.get(name)
        elif isinstance(current, (str, bytes, list, tuple, set)):
            return None
        else:
            try:
                current = getattr(current, name, None)
            except Exception:  # noqa: BLE001 - properties on foreign objects may raise
                return None
    return current


def probe_any(obj: Any, names: Iterable[str], *prefix: str) -> Any:
    """Return the first non-None value among alternative field names."""
    base = probe(obj, *prefix) if prefix else obj
    for name in names:
        value = probe(base, name)
        if value is not None:
            return value
    return None


def header(headers: Any, name: str) -> Optional[str]:
    """Case-insensitive header lookup by name.

    The exact lower-case key wins; other spellings are consulted in sorted
    key order so the result never depends on how the mapping iterates.
    """
    if not isinstance(headers, Mapping) or not headers:
        return None
    name = name.lower()
    value = headers.get(name)
    if value is None:
        candidates = sorted(k for k in headers.keys() if isinstance(k, str) and k.lower() == name)
        for key in candidates:
            value = headers.get(key)
            if value is not None:
                break
    return as_text(value)


def as_text(value: Any) -> Optional[str]:
    """Normalize a header value to ``str``; lists are joined with commas."""
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode("latin-1")
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        parts = [as_text(v) for v in value]
        return ", ".join(p for p in parts if p is not None)
    return None


def first_item(value: Optional[str]) -> Optional[str]:
    """First entry of a comma-separated list, stripped; ``None`` if empty."""
    if not value:
        return None
    item = value.split(",", 1)[0].strip()
    return item or None


def forwarded_for(value: Optional[str]) -> Optional[str]:
    """Extract the first ``for=`` token from a ``Forwarded`` header.

    Only the first element of the list is examined, and only its ``for``
    parameter; quotes around the token are removed. Other parameters
    (``proto``, ``by``, ``host``) are ignored.
    """
    element = first_item(value)
    if not element:
        return None
    for pair in element.split(";"):
        key, sep, token = pair.partition("=")
        if sep and key.strip().lower() == "for":
            token = token.strip().strip('"').strip()
            return token or None
    return None


def to_ip(value: Any) -> Optional[str]:
    """Accept non-empty strings only; the address itself is not validated."""
    if isinstance(value, bytes):
        value = value.decode("latin-1")
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def to_port(value: Any) -> Optional[int]:
    """Coerce a port to ``int``; base-10 digit strings are parsed."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, bytes):
        value = value.decode("latin-1")
    if isinstance(value, str):
        match = _PORT_RE.match(value)
        if match:
            return int(match.group(1), 10)
    return None


def to_flag(value: Any) -> Optional[bool]:
    """Coerce a boolean-ish flag; ``None`` when the value is not recognized."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value == 1 if value in (0, 1) else None
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return None


def first_pair(obj: Any, locations: Sequence[tuple]) -> tuple[Optional[str], Optional[int]]:
    """Return the (ip, port) pair from the first location that has an ip.

    Each location is ``(prefix_path, ip_names, port_names)``. The port is
    always read from the same location as the ip.
    """
    for prefix, ip_names, port_names in locations:
        base = probe(obj, *prefix) if prefix else obj
        ip = to_ip(probe_any(base, ip_names))
        if ip is not None:
            return ip, to_port(probe_any(base, port_names))
    return None, None
