# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

import logging
import threading
from typing import Any

from allocation_ledger.config import LedgerConfig, load_config
from allocation_ledger.errors import (
    AllocationLedgerError,
    ExcessiveReleaseError,
    InsufficientCapacityError,
    NotAuthorizedError,
    QuotaNotFoundError,
)
from allocation_ledger.keys import format_key, quota_key
from allocation_ledger.query import build_all_utilizations, build_utilization
from allocation_ledger.quota import available_capacity, create_record, validate_amount
from allocation_ledger.storage.interface import QuotaStorage
from allocation_ledger.storage.memory import MemoryStorage
from allocation_ledger.types import LedgerResult, QuotaKey, QuotaRecord, QuotaUtilization

logger = logging.getLogger("allocation_ledger")


class QuotaLedger:
    """
    Capacity ledger for quotas keyed by (period, region).

    Design contract
    ---------------
    - Only the configured owner may define a quota. Redefining a key replaces
      the record and resets its committed amount to zero.
    - ``check_availability()`` and ``get_quota()`` are read-only.
    - ``commit()`` and ``release()`` are all-or-nothing: a rejected call leaves
      the record untouched. Any caller may commit or release.
    - Domain failures come back as a failed ``LedgerResult``; they are never
      raised. Call ``LedgerResult.unwrap()`` to get an exception instead.
    - Each key serializes its own read-modify-write, so concurrent commits on
      one key cannot both pass the capacity check.

    Usage
    -----
    ::

        ledger = QuotaLedger(LedgerConfig(owner="ops-admin"))
        ledger.define_quota(2023, "Colorado River Basin", 10_000, caller="ops-admin")

        if ledger.check_availability(2023, "Colorado River Basin", 2_500).value:
            ledger.commit(2023, "Colorado River Basin", 2_500, caller="district-7")
    """

    def __init__(
        self,
        config: LedgerConfig | dict[str, Any],
        storage: QuotaStorage | None = None,
    ) -> None:
        self._config = load_config(config)
        self._storage: QuotaStorage = storage if storage is not None else MemoryStorage()

        self._locks: dict[QuotaKey, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    @property
    def config(self) -> LedgerConfig:
        return self._config

    # ─── Define ───────────────────────────────────────────────────────────────

    def define_quota(
        self,
        period: int,
        region: str,
        total_capacity: float,
        caller: str,
    ) -> LedgerResult:
        """
        Create or replace the quota for (period, region).

        Fails with ``not_authorized`` unless ``caller`` is the configured
        owner. On success the record holds ``total_capacity`` with nothing
        committed, discarding any earlier commitments on the same key.
        A capacity that is not an int or float raises pydantic.ValidationError.
        """
        key = quota_key(period, region)

        if caller != self._config.owner:
            return self._reject(NotAuthorizedError(caller), key, caller, total_capacity)

        if self._config.validate_amounts:
            try:
                validate_amount("total_capacity", total_capacity)
            except AllocationLedgerError as exc:
                return self._reject(exc, key, caller, total_capacity)

        record = create_record(total_capacity)
        with self._lock_for(key):
            self._storage.save_record(key, record)

        self._log(logging.INFO, "quota defined", key, caller, total_capacity)
        return LedgerResult.ok()

    # ─── Reads ────────────────────────────────────────────────────────────────

    def get_quota(self, period: int, region: str) -> QuotaRecord | None:
        """Return a copy of the record for (period, region), or None if undefined."""
        return self._storage.get_record(quota_key(period, region))

    def check_availability(
        self,
        period: int,
        region: str,
        requested_amount: float,
    ) -> LedgerResult:
        """
        Check whether ``requested_amount`` fits in the remaining capacity.

        Read-only. Succeeds with ``value=True`` when the amount is at most
        ``total_capacity - committed_amount`` (boundary-inclusive) and
        ``value=False`` otherwise. Fails with ``quota_not_found`` if the key
        was never defined.
        """
        key = quota_key(period, region)

        if self._config.validate_amounts:
            try:
                validate_amount("requested_amount", requested_amount)
            except AllocationLedgerError as exc:
                return self._reject(exc, key, None, requested_amount)

        record = self._storage.get_record(key)
        if record is None:
            return self._not_found(key, None, requested_amount)

        available = available_capacity(record)
        permitted = requested_amount <= available
        self._log(
            logging.DEBUG,
            "availability checked",
            key,
            None,
            requested_amount,
            available=available,
            permitted=permitted,
        )
        return LedgerResult.ok(permitted)

    # ─── Commit / Release ─────────────────────────────────────────────────────

    def commit(
        self,
        period: int,
        region: str,
        amount: float,
        caller: str,
    ) -> LedgerResult:
        """
        Commit ``amount`` against the quota for (period, region).

        Fails with ``quota_not_found`` for an undefined key and with
        ``insufficient_capacity`` if the new committed total would exceed the
        capacity. ``caller`` is recorded in the log but not checked.
        """
        key = quota_key(period, region)

        if self._config.validate_amounts:
            try:
                validate_amount("amount", amount)
            except AllocationLedgerError as exc:
                return self._reject(exc, key, caller, amount)

        # Undefined keys never get a lock entry.
        if self._storage.get_record(key) is None:
            return self._not_found(key, caller, amount)

        with self._lock_for(key):
            record = self._storage.get_record(key)
            if record is None:
                return self._not_found(key, caller, amount)

            new_committed = record.committed_amount + amount
            if new_committed > record.total_capacity:
                exc = InsufficientCapacityError(
                    period=key.period,
                    region=key.region,
                    requested=amount,
                    available=available_capacity(record),
                )
                return self._reject(exc, key, caller, amount)

            record.committed_amount = new_committed
            self._storage.save_record(key, record)

        self._log(logging.INFO, "amount committed", key, caller, amount)
        return LedgerResult.ok()

    def release(
        self,
        period: int,
        region: str,
        amount: float,
        caller: str,
    ) -> LedgerResult:
        """
        Return ``amount`` of committed capacity to the quota.

        Fails with ``quota_not_found`` for an undefined key and with
        ``excessive_release`` if ``amount`` exceeds the committed amount.
        Releasing exactly the committed amount brings it back to zero.
        """
        key = quota_key(period, region)

        if self._config.validate_amounts:
            try:
                validate_amount("amount", amount)
            except AllocationLedgerError as exc:
                return self._reject(exc, key, caller, amount)

        # Undefined keys never get a lock entry.
        if self._storage.get_record(key) is None:
            return self._not_found(key, caller, amount)

        with self._lock_for(key):
            record = self._storage.get_record(key)
            if record is None:
                return self._not_found(key, caller, amount)

            if amount > record.committed_amount:
                exc = ExcessiveReleaseError(
                    period=key.period,
                    region=key.region,
                    requested=amount,
                    committed=record.committed_amount,
                )
                return self._reject(exc, key, caller, amount)

            record.committed_amount -= amount
            self._storage.save_record(key, record)

        self._log(logging.INFO, "amount released", key, caller, amount)
        return LedgerResult.ok()

    # ─── Queries ──────────────────────────────────────────────────────────────

    def utilization(self, period: int, region: str) -> QuotaUtilization | None:
        """Return a utilization snapshot for one quota, or None if undefined."""
        key = quota_key(period, region)
        record = self._storage.get_record(key)
        if record is None:
            return None
        return build_utilization(key, record)

    def list_quotas(self) -> list[QuotaUtilization]:
        """Snapshot every defined quota, most constrained first."""
        return build_all_utilizations(self._storage.list_records())

    # ─── Private helpers ──────────────────────────────────────────────────────

    def _lock_for(self, key: QuotaKey) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock

    def _not_found(
        self,
        key: QuotaKey,
        caller: str | None,
        amount: float,
    ) -> LedgerResult:
        exc = QuotaNotFoundError(key.period, key.region)
        self._log(logging.DEBUG, exc.message, key, caller, amount, error=exc.code)
        return LedgerResult.fail(exc)

    def _reject(
        self,
        exc: AllocationLedgerError,
        key: QuotaKey,
        caller: str | None,
        amount: float,
    ) -> LedgerResult:
        self._log(logging.WARNING, exc.message, key, caller, amount, error=exc.code)
        return LedgerResult.fail(exc)

    def _log(
        self,
        level: int,
        message: str,
        key: QuotaKey,
        caller: str | None,
        amount: float,
        **fields: Any,
    ) -> None:
        if not logger.isEnabledFor(level):
            return
        logger.log(
            level,
            "%s [%s]",
            message,
            format_key(key),
            extra={
                "quota_key": format_key(key),
                "caller": caller,
                "amount": amount,
                "namespace": self._config.namespace,
                **fields,
            },
        )
