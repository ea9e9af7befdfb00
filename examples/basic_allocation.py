# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
basic_allocation.py

Demonstrates the allocation loop for a seasonal water quota:
  1. Create a ledger and define a quota as the owner.
  2. Check availability before committing.
  3. Release capacity when a commitment is cancelled.
  4. Inspect utilization at the end.

Run with:  python examples/basic_allocation.py
(with allocation-ledger installed)
"""

import logging

from allocation_ledger import LedgerConfig, QuotaLedger

logging.basicConfig(level=logging.INFO, format="%(levelname)-7s %(message)s")

OWNER = "water-board"
YEAR = 2023
BASIN = "Colorado River Basin"

# ─── Setup ────────────────────────────────────────────────────────────────────

ledger = QuotaLedger(LedgerConfig(owner=OWNER, namespace="water"))
ledger.define_quota(YEAR, BASIN, 10_000, caller=OWNER)

denied = ledger.define_quota(YEAR, BASIN, 50_000, caller="district-3")
print(f"Redefine by non-owner: {denied.error}")

# ─── Simulate district requests ───────────────────────────────────────────────

requests = [("district-1", 3_000), ("district-2", 4_000), ("district-3", 4_500)]

for district, volume in requests:
    if not ledger.check_availability(YEAR, BASIN, volume).value:
        print(f"{district}: DENIED  {volume}")
        continue
    ledger.commit(YEAR, BASIN, volume, caller=district)
    print(f"{district}: COMMITTED {volume}")

# district-2 cancels half of its request.
ledger.release(YEAR, BASIN, 2_000, caller="district-2")

# ─── Final utilization snapshot ───────────────────────────────────────────────

utilization = ledger.utilization(YEAR, BASIN)
assert utilization is not None

print("\n── Quota summary ─────────────────────────────────────")
print(f"  Period      : {utilization.period}")
print(f"  Region      : {utilization.region}")
print(f"  Capacity    : {utilization.total_capacity:,.0f}")
print(f"  Committed   : {utilization.committed_amount:,.0f}")
print(f"  Available   : {utilization.available:,.0f}")
print(f"  Utilization : {utilization.utilization_percent:.1f}%")
print("──────────────────────────────────────────────────────")
