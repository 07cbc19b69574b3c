"""Result envelope returned by LayoutService to the CLI.

LayoutService (services/layout.py) catches resolver exceptions and turns
them into a failed ServiceResult with a ServiceError code. Commands only
render results and never see the exceptions.

Error codes:
    INVALID_ARGUMENT: malformed input such as bad artifact coordinates.
    NO_LAYOUT: no candidate factory produced a layout.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

INVALID_ARGUMENT = "INVALID_ARGUMENT"
NO_LAYOUT = "NO_LAYOUT"


class ServiceError(BaseModel):
    """Error code, message and machine-readable detail for a failed call."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one LayoutService call.

    Attributes:
        ok: False when ``error`` is set.
        op: ``"resolve"`` or ``"list_factories"``; selects the renderer.
        data: Payload of a successful call.
        warnings: Shown on stderr in human mode, included as-is in JSON.
        error: Set on failure only.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(
        cls,
        op: str,
        data: dict[str, Any],
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [])

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )

    @property
    def exit_code(self) -> int:
        """Process exit status for this result: 0 on success, else 1."""
        return 0 if self.ok else 1
