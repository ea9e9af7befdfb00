# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from allocation_ledger.quota import available_capacity, utilization_percent
from allocation_ledger.types import QuotaKey, QuotaRecord, QuotaUtilization


def build_utilization(key: QuotaKey, record: QuotaRecord) -> QuotaUtilization:
    """Derive a point-in-time utilization snapshot from a quota record."""
    return QuotaUtilization(
        period=key.period,
        region=key.region,
        total_capacity=record.total_capacity,
        committed_amount=record.committed_amount,
        available=available_capacity(record),
        utilization_percent=utilization_percent(record),
    )


def build_all_utilizations(
    items: list[tuple[QuotaKey, QuotaRecord]],
) -> list[QuotaUtilization]:
    """
    Summarize all quotas into utilization snapshots, sorted by
    utilization_percent descending (most constrained first).
    """
    return sorted(
        (build_utilization(key, record) for key, record in items),
        key=lambda utilization: utilization.utilization_percent,
        reverse=True,
    )
