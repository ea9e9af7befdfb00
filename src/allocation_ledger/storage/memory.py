# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from allocation_ledger.storage.interface import QuotaStorage
from allocation_ledger.types import QuotaKey, QuotaRecord


class MemoryStorage(QuotaStorage):
    """
    In-process memory store — suitable for single-process use and testing.

    All state is lost when the process exits.
    """

    def __init__(self) -> None:
        self._records: dict[QuotaKey, QuotaRecord] = {}

    def get_record(self, key: QuotaKey) -> QuotaRecord | None:
        record = self._records.get(key)
        if record is None:
            return None
        return record.model_copy(deep=True)

    def save_record(self, key: QuotaKey, record: QuotaRecord) -> None:
        self._records[key] = record.model_copy(deep=True)

    def list_records(self) -> list[tuple[QuotaKey, QuotaRecord]]:
        return [
            (key, record.model_copy(deep=True))
            for key, record in list(self._records.items())
        ]
