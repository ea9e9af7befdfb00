# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

from allocation_ledger.errors import AllocationLedgerError

# ─── Keys ─────────────────────────────────────────────────────────────────────


class QuotaKey(BaseModel, frozen=True):
    """Composite lookup key: a period (e.g. a year) and a region identifier."""

    period: int = Field(..., strict=True)
    region: str = Field(..., min_length=1, strict=True)


# ─── Records ──────────────────────────────────────────────────────────────────


class QuotaRecord(BaseModel):
    """
    Live state of one quota.

    ``committed_amount`` stays within ``[0, total_capacity]`` after every
    successful ledger operation.
    """

    total_capacity: int | float = Field(..., strict=True)
    committed_amount: int | float = Field(default=0, strict=True)


# ─── Results ──────────────────────────────────────────────────────────────────

ErrorCode = Literal[
    "not_authorized",
    "quota_not_found",
    "insufficient_capacity",
    "excessive_release",
    "invalid_amount",
]


class LedgerResult(BaseModel):
    """
    Outcome of a ledger operation.

    Domain failures are reported here rather than raised. ``value`` carries the
    boolean answer of an availability check and is None for mutators.
    """

    success: bool
    value: Optional[bool] = None
    error: Optional[ErrorCode] = None
    message: Optional[str] = None
    exception: Optional[AllocationLedgerError] = Field(
        default=None, exclude=True, repr=False
    )

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    @classmethod
    def ok(cls, value: bool | None = None) -> LedgerResult:
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, exc: AllocationLedgerError) -> LedgerResult:
        return cls(success=False, error=exc.code, message=exc.message, exception=exc)

    def unwrap(self) -> bool | None:
        """
        Return ``value`` on success, or raise the error that caused the failure.

        Use this where an exception is more convenient than branching on
        ``success``.
        """
        if self.success:
            return self.value
        if self.exception is not None:
            raise self.exception
        raise AllocationLedgerError(
            self.message or "ledger operation failed",
            code=self.error or "ledger_error",
        )


# ─── Utilization ──────────────────────────────────────────────────────────────


class QuotaUtilization(BaseModel):
    """Point-in-time utilization snapshot for one quota."""

    period: int
    region: str
    total_capacity: int | float
    committed_amount: int | float
    available: int | float
    utilization_percent: float
