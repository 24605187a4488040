"""Return contract for CalendarService.

Every service method returns a ServiceResult. Bad input lands in ``error``
with code ``INVALID_ARGUMENT``; nothing is raised to the caller.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one calendar operation, named by ``op``."""

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)  # e.g. day outside its month
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None  # span tree under "telemetry" when verbose
