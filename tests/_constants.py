# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Identity tokens and region names shared across the test modules."""

OWNER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
NON_OWNER = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"
USER_1 = "ST3NBRSFKX28FQ2ZJ1MAKX58HKHSDGNV5N7R21XCP"

COLORADO = "Colorado River Basin"
MISSISSIPPI = "Mississippi River Basin"
UNKNOWN = "Unknown Basin"
