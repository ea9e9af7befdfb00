# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
allocation-ledger — capacity quotas keyed by period and region.

Quick start::

    from allocation_ledger import LedgerConfig, QuotaLedger

    ledger = QuotaLedger(LedgerConfig(owner="ops-admin"))
    ledger.define_quota(2023, "Colorado River Basin", 10_000, caller="ops-admin")

    result = ledger.commit(2023, "Colorado River Basin", 2_500, caller="district-7")
    if not result.success:
        print(result.error, result.message)
"""

from allocation_ledger.config import LedgerConfig, load_config
from allocation_ledger.errors import (
    AllocationLedgerError,
    ConfigurationError,
    ExcessiveReleaseError,
    InsufficientCapacityError,
    InvalidAmountError,
    NotAuthorizedError,
    QuotaNotFoundError,
)
from allocation_ledger.keys import format_key, quota_key
from allocation_ledger.ledger import QuotaLedger
from allocation_ledger.query import build_all_utilizations, build_utilization
from allocation_ledger.quota import (
    available_capacity,
    create_record,
    utilization_percent,
    validate_amount,
)
from allocation_ledger.storage import MemoryStorage, QuotaStorage
from allocation_ledger.types import (
    ErrorCode,
    LedgerResult,
    QuotaKey,
    QuotaRecord,
    QuotaUtilization,
)

__all__ = [
    # Core class
    "QuotaLedger",
    "LedgerConfig",
    "load_config",
    # Types
    "QuotaKey",
    "QuotaRecord",
    "QuotaUtilization",
    "LedgerResult",
    "ErrorCode",
    # Errors
    "AllocationLedgerError",
    "NotAuthorizedError",
    "QuotaNotFoundError",
    "InsufficientCapacityError",
    "ExcessiveReleaseError",
    "InvalidAmountError",
    "ConfigurationError",
    # Storage
    "QuotaStorage",
    "MemoryStorage",
    # Utilities
    "quota_key",
    "format_key",
    "create_record",
    "available_capacity",
    "utilization_percent",
    "validate_amount",
    "build_utilization",
    "build_all_utilizations",
]
