"""Result models for client address resolution."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ResolvedAddress(BaseModel):
    """Canonical client address reported to the host server."""

    model_config = ConfigDict(frozen=True)

    ip: Optional[str] = Field(default=None, description="Client IP as reported; not validated")
    port: Optional[int] = Field(default=None, description="Client source port")
    secure: bool = Field(default=False, description="Transport was encrypted end to end")


@dataclass(frozen=True)
class Partial:
    """What a single extractor found. ``None`` means no signal."""

    ip: Optional[str] = None
    port: Optional[int] = None
    secure: Optional[bool] = None


EMPTY = Partial()
