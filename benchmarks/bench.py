# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Micro-benchmark for the quota ledger hot paths.

Each scenario drives one ledger call in a loop, times it, and tallies the
outcome codes the ledger returned. Results go to stdout as JSON.

Usage::

    python benchmarks/bench.py > results/ledger.json
"""

from __future__ import annotations

import json
import platform
import sys
import time
from collections import Counter
from typing import Callable

from allocation_ledger import LedgerConfig, LedgerResult, QuotaLedger

ITERATIONS = 50_000
OWNER = "bench-owner"
USER = "bench-user"
REGION = "Colorado River Basin"
CAPACITY = ITERATIONS * 10


def run_scenario(
    name: str,
    call: Callable[[], LedgerResult],
    iterations: int = ITERATIONS,
) -> dict[str, object]:
    """Time ``call`` over ``iterations`` and count successes and error codes."""
    outcomes: Counter[str] = Counter()
    started = time.perf_counter_ns()
    for _ in range(iterations):
        result = call()
        outcomes["ok" if result.success else str(result.error)] += 1
    elapsed_ns = time.perf_counter_ns() - started

    mean_ns = elapsed_ns // iterations
    return {
        "name": name,
        "iterations": iterations,
        "mean_ns": mean_ns,
        "ops_per_sec": round(1_000_000_000 / mean_ns) if mean_ns else 0,
        "outcomes": dict(outcomes),
    }


def fresh_ledger(capacity: int = CAPACITY) -> QuotaLedger:
    ledger = QuotaLedger(LedgerConfig(owner=OWNER))
    ledger.define_quota(2023, REGION, capacity, caller=OWNER)
    return ledger


# ─── Scenarios ────────────────────────────────────────────────────────────────


def bench_check_availability() -> dict[str, object]:
    ledger = fresh_ledger()
    return run_scenario(
        "check_availability",
        lambda: ledger.check_availability(2023, REGION, 10),
    )


def bench_fill_to_capacity() -> dict[str, object]:
    # Half the commits fit, the rest come back insufficient_capacity.
    ledger = fresh_ledger(capacity=ITERATIONS // 2 * 10)
    return run_scenario(
        "fill_to_capacity",
        lambda: ledger.commit(2023, REGION, 10, caller=USER),
    )


def bench_drain_commitments() -> dict[str, object]:
    # Half the releases succeed, the rest come back excessive_release.
    ledger = fresh_ledger()
    ledger.commit(2023, REGION, ITERATIONS // 2 * 10, caller=USER)
    return run_scenario(
        "drain_commitments",
        lambda: ledger.release(2023, REGION, 10, caller=USER),
    )


def bench_unknown_region() -> dict[str, object]:
    ledger = fresh_ledger()
    return run_scenario(
        "unknown_region",
        lambda: ledger.commit(2025, "Unknown Basin", 1, caller=USER),
    )


# ─── Entry point ─────────────────────────────────────────────────────────────


def main() -> None:
    python_version = platform.python_version()
    report = {
        "language": "python",
        "version": python_version,
        "runtime": f"cpython-{python_version}-{platform.machine()}",
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "scenarios": [
            bench_check_availability(),
            bench_fill_to_capacity(),
            bench_drain_commitments(),
            bench_unknown_region(),
        ],
    }

    json.dump(report, sys.stdout, indent=2)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
