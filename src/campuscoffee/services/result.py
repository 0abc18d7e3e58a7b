"""ServiceResult and ServiceError — the presentation contract.

Services raise typed :class:`CampusCoffeeError` subclasses; the CLI
converts outcomes into a ServiceResult so every output mode (human,
quiet, JSON) renders from one shape.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from campuscoffee.domain.errors import CampusCoffeeError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: CampusCoffeeError) -> ServiceError:
        return cls(code=exc.code, message=exc.message, detail=exc.detail)


class ServiceResult(BaseModel):
    """Universal return shape for CLI operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"import_pos"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
