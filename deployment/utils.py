import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Optional

logger = logging.getLogger(__name__)


def next_timestamp_divisible_by(period: int, now: Optional[float] = None) -> int:
    """
    Returns the first timestamp strictly after `now` that is a multiple of `period`.
    A `now` already on a boundary yields the following boundary.
    """
    if isinstance(period, bool) or not isinstance(period, int) or period <= 0:
        raise ValueError(f"Period must be a positive integer, got {period!r}")
    if now is None:
        now = time.time()
    return (int(now) // period + 1) * period


class VerificationStatus(Enum):
    VERIFIED = "verified"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class VerificationOutcome:
    resource: Any
    status: VerificationStatus
    reason: Optional[str] = None

    @property
    def verified(self) -> bool:
        return self.status is VerificationStatus.VERIFIED


class ConstantBackoff:
    """Fixed pause between explorer requests."""

    def __init__(self, seconds: float, sleep=time.sleep):
        self.seconds = seconds
        self._sleep = sleep

    def __call__(self) -> None:
        if self.seconds > 0:
            self._sleep(self.seconds)


def verify_contracts(resources: Iterable, provider, cooldown) -> List[VerificationOutcome]:
    """
    Publishes the source of each resource with the explorer, one at a time.

    A failing resource is logged and reported as FAILED; the remaining resources
    are still attempted. The cooldown runs after every attempt.
    """
    outcomes = []
    for resource in resources:
        logger.info("(i) Verifying %s at %s...", resource.name, resource.address)
        try:
            provider.publish(resource.address, resource.constructor_args)
        except Exception as error:
            logger.error("Cannot verify contract %s: %r", resource.address, error)
            outcome = VerificationOutcome(resource, VerificationStatus.FAILED, str(error))
        else:
            logger.info("Contract %s verified successfully", resource.address)
            outcome = VerificationOutcome(resource, VerificationStatus.VERIFIED)
        outcomes.append(outcome)
        cooldown()
    return outcomes


def skip_verification(resources: Iterable) -> List[VerificationOutcome]:
    outcomes = []
    for resource in resources:
        logger.info("Skipping verification of %s at %s", resource.name, resource.address)
        outcomes.append(VerificationOutcome(resource, VerificationStatus.SKIPPED))
    return outcomes
