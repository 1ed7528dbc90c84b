"""Simulated latency and random failures for demo deployments.

Disabled by default. Enabled through ``SIMULATED_LATENCY_MS`` and
``SIMULATED_ERROR_RATE`` so the UI's error and retry paths can be exercised.
"""

import asyncio
import logging
import random

from app.domain.exceptions import TransientServiceError

logger = logging.getLogger(__name__)


class FaultInjector:
    """Delays each call and fails a configurable fraction of them."""

    def __init__(
        self,
        error_rate: float = 0.0,
        latency_seconds: float = 0.0,
        rng: random.Random | None = None,
    ) -> None:
        if not 0.0 <= error_rate <= 1.0:
            raise ValueError(f"error_rate must be within [0, 1], got {error_rate}")
        if latency_seconds < 0:
            raise ValueError(f"latency_seconds must be >= 0, got {latency_seconds}")
        self._error_rate = error_rate
        self._latency_seconds = latency_seconds
        self._rng = rng or random.Random()

    @property
    def enabled(self) -> bool:
        return self._error_rate > 0 or self._latency_seconds > 0

    async def maybe_fail(self, failure_message: str) -> None:
        """Suspend for the configured latency, then possibly raise.

        Raises:
            TransientServiceError: With ``failure_message``, at ``error_rate`` probability.
        """
        if self._latency_seconds:
            await asyncio.sleep(self._latency_seconds)
        if self._error_rate and self._rng.random() < self._error_rate:
            logger.info("Injected failure: %s", failure_message)
            raise TransientServiceError(failure_message)


NO_FAULTS = FaultInjector()
