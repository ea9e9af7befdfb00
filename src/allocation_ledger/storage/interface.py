# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from abc import ABC, abstractmethod

from allocation_ledger.types import QuotaKey, QuotaRecord


class QuotaStorage(ABC):
    """
    Minimal persistence contract for the quota ledger.

    The ledger serializes writes per key, so implementations only need each
    individual call to be atomic. Records handed out must be copies: the
    ledger mutates what it reads before saving it back.
    """

    @abstractmethod
    def get_record(self, key: QuotaKey) -> QuotaRecord | None:
        ...

    @abstractmethod
    def save_record(self, key: QuotaKey, record: QuotaRecord) -> None:
        ...

    @abstractmethod
    def list_records(self) -> list[tuple[QuotaKey, QuotaRecord]]:
        ...
