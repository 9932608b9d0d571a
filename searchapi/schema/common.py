from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None


class HealthStatus(BaseModel):
    status: Literal["ok", "degraded", "down"] = "ok"
    version: Optional[str] = None
    elasticsearch: Optional[Literal["ok", "down"]] = None
