"""Exceptions raised by the integration helpers.

``forwarded()`` never raises; callers that insist on an address opt in to
these and translate them to HTTP responses.
"""
from __future__ import annotations


class ClientAddressUnavailableError(Exception):
    """No source supplied a client IP (maps to HTTP 400)."""
