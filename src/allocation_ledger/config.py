# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, Field, ValidationError

from allocation_ledger.errors import ConfigurationError


class LedgerConfig(BaseModel, frozen=True):
    """
    Configuration for a QuotaLedger.

    Attributes:
        owner: The single identity token allowed to define or redefine quotas.
            Compared by equality only; its authenticity is the hosting
            layer's concern.
        validate_amounts: When True, negative or non-finite capacities and
            amounts are rejected with an ``invalid_amount`` result. When False
            (the default) they are accepted as given.
        namespace: Optional label attached to every log record emitted by the
            ledger, useful when several ledgers share a process.
    """

    owner: Annotated[str, Field(min_length=1)]
    validate_amounts: bool = False
    namespace: str | None = None


def load_config(config: LedgerConfig | dict[str, Any]) -> LedgerConfig:
    """
    Validate a LedgerConfig or a plain mapping of its fields.

    Raises:
        ConfigurationError: If the mapping is missing ``owner`` or carries
            values of the wrong type.
    """
    if isinstance(config, LedgerConfig):
        return config
    try:
        return LedgerConfig.model_validate(config)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid ledger configuration: {exc}") from exc
