"""Environment-driven settings.

Values are read from the process environment, with a local ``.env`` file loaded
on import when present.
"""
from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

try:
    load_dotenv()
except Exception as e:  # pragma: no cover
    logger.warning(f"Failed to load .env file: {e}")


CYCLE_POLICY_ENV = "ROLEGATE_CYCLE_POLICY"
DEFAULT_CYCLE_POLICY = "warn"

# warn: truncate and log, raise: fail construction, ignore: truncate quietly
CYCLE_POLICIES = ("warn", "raise", "ignore")


def resolve_cycle_policy(policy: Optional[str] = None) -> str:
    """Return a validated cycle policy.

    An explicit ``policy`` wins over ``ROLEGATE_CYCLE_POLICY``.

    Raises:
        ValueError: If the policy is not one of ``CYCLE_POLICIES``
    """
    if policy is None:
        policy = os.getenv(CYCLE_POLICY_ENV) or DEFAULT_CYCLE_POLICY
    policy = policy.lower().strip()
    if policy not in CYCLE_POLICIES:
        raise ValueError(f"Unknown cycle policy: {policy}")
    return policy
