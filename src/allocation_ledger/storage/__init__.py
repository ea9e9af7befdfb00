# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from allocation_ledger.storage.interface import QuotaStorage
from allocation_ledger.storage.memory import MemoryStorage

__all__ = ["QuotaStorage", "MemoryStorage"]
