# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations


class AllocationLedgerError(Exception):
    """Base class for all allocation-ledger errors."""

    def __init__(self, message: str, code: str = "ledger_error") -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class NotAuthorizedError(AllocationLedgerError):
    """
    Raised when a caller other than the ledger owner tries to define a quota.

    Attributes:
        caller: The identity token that attempted the call.
    """

    def __init__(self, caller: str) -> None:
        super().__init__(
            f"Not authorized: caller '{caller}' is not the ledger owner.",
            code="not_authorized",
        )
        self.caller = caller


class QuotaNotFoundError(AllocationLedgerError):
    """Raised when an operation references a (period, region) with no quota."""

    def __init__(self, period: int, region: str) -> None:
        super().__init__(
            f"No allocation found for region and year: '{region}' in {period}. "
            "Define it first with QuotaLedger.define_quota().",
            code="quota_not_found",
        )
        self.period = period
        self.region = region


class InsufficientCapacityError(AllocationLedgerError):
    """
    Raised when a commit would push the committed amount above capacity.

    Attributes:
        requested: The amount the caller tried to commit.
        available: Capacity remaining at the time of the attempt.
    """

    def __init__(
        self,
        period: int,
        region: str,
        requested: float,
        available: float,
    ) -> None:
        super().__init__(
            f"Not enough capacity available for '{region}' in {period}: "
            f"requested {requested:g} but only {available:g} remains.",
            code="insufficient_capacity",
        )
        self.period = period
        self.region = region
        self.requested = requested
        self.available = available


class ExcessiveReleaseError(AllocationLedgerError):
    """
    Raised when a release exceeds the amount currently committed.

    Attributes:
        requested: The amount the caller tried to release.
        committed: The amount committed at the time of the attempt.
    """

    def __init__(
        self,
        period: int,
        region: str,
        requested: float,
        committed: float,
    ) -> None:
        super().__init__(
            f"Cannot release more than allocated for '{region}' in {period}: "
            f"requested {requested:g} but only {committed:g} is committed.",
            code="excessive_release",
        )
        self.period = period
        self.region = region
        self.requested = requested
        self.committed = committed


class InvalidAmountError(AllocationLedgerError):
    """Raised in strict mode when a capacity or amount is negative or non-finite."""

    def __init__(self, field: str, value: float) -> None:
        super().__init__(
            f"{field} must be a finite, non-negative number; got {value!r}.",
            code="invalid_amount",
        )
        self.field = field
        self.value = value


class ConfigurationError(AllocationLedgerError):
    """Raised when the ledger is misconfigured."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="configuration_error")
