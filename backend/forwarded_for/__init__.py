"""Find the real client address behind proxies, CDNs and socket wrappers.

Modules:
- resolver: forwarded()/resolve(), the priority fold over extractors.
- extractors: one function per header family or connection shape.
- models: ResolvedAddress (result) and Partial (per-extractor finding).
- deps, middleware: FastAPI/Starlette integration.
"""
from __future__ import annotations

from .models import ResolvedAddress
from .resolver import forwarded, resolve

__all__ = ["ResolvedAddress", "forwarded", "resolve"]
