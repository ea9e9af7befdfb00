# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

import math

from allocation_ledger.errors import InvalidAmountError
from allocation_ledger.types import QuotaRecord


def create_record(total_capacity: float) -> QuotaRecord:
    """Build a fresh record with nothing committed."""
    return QuotaRecord(total_capacity=total_capacity, committed_amount=0)


def available_capacity(record: QuotaRecord) -> float:
    """
    Capacity not yet committed.

    Not clamped at zero: availability checks compare against the raw
    difference.
    """
    return record.total_capacity - record.committed_amount


def utilization_percent(record: QuotaRecord) -> float:
    """Compute utilization as a percentage (0–100)."""
    if record.total_capacity == 0:
        return 100.0
    return (record.committed_amount / record.total_capacity) * 100.0


def validate_amount(field: str, value: float) -> None:
    """Raise InvalidAmountError unless ``value`` is finite and non-negative."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidAmountError(field, value)
    if not math.isfinite(value) or value < 0:
        raise InvalidAmountError(field, value)
