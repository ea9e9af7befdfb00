# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Shared fixtures for allocation-ledger tests."""

from __future__ import annotations

import pytest

from allocation_ledger.config import LedgerConfig
from allocation_ledger.ledger import QuotaLedger

from tests._constants import COLORADO, OWNER


@pytest.fixture
def ledger() -> QuotaLedger:
    """A freshly initialised ledger owned by OWNER."""
    return QuotaLedger(LedgerConfig(owner=OWNER))


@pytest.fixture
def colorado_ledger(ledger: QuotaLedger) -> QuotaLedger:
    """A ledger with a 10 000 unit Colorado River Basin quota for 2023."""
    ledger.define_quota(2023, COLORADO, 10_000, caller=OWNER)
    return ledger


@pytest.fixture
def strict_ledger() -> QuotaLedger:
    """A ledger that rejects negative and non-finite amounts."""
    return QuotaLedger(LedgerConfig(owner=OWNER, validate_amounts=True))
