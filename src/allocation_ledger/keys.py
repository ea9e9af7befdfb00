# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from allocation_ledger.types import QuotaKey


def quota_key(period: int, region: str) -> QuotaKey:
    """
    Compose the lookup key for a (period, region) pair.

    Raises pydantic.ValidationError (a ValueError) if ``period`` is not an int
    or ``region`` is not a non-empty string.
    """
    return QuotaKey(period=period, region=region)


def format_key(key: QuotaKey) -> str:
    """Render a key as ``"{period}-{region}"`` for logs and messages."""
    return f"{key.period}-{key.region}"
