"""Application service exposing the explanation engine to the UI layer."""

import asyncio
import logging
from random import Random
from typing import Dict, Optional

from .dispatch import DEFAULT_MIN_CONTENT_LENGTH, Dispatcher
from .errors import ExplanationError, SessionBusyError
from .models import ExplanationArtifact, RawInput
from .ports import RandomSource, Sleeper

logger = logging.getLogger(__name__)

DEFAULT_LATENCY_SECONDS = (1.0, 3.5)


class ExplanationService:
    """Facade that turns raw documentation input into an explanation artifact.

    Each call waits a bounded random delay before producing a result so the
    UI loading state stays observable.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        sleep: Sleeper = asyncio.sleep,
        latency_seconds: tuple[float, float] = DEFAULT_LATENCY_SECONDS,
        min_content_length: int = DEFAULT_MIN_CONTENT_LENGTH,
        dispatcher: Optional[Dispatcher] = None,
    ):
        lower, upper = latency_seconds
        if lower < 0 or upper < lower:
            raise ValueError("latency_seconds must be a non-negative (lower, upper) pair")
        self.rng = rng or Random()
        self.sleep = sleep
        self.latency_seconds = (lower, upper)
        self.dispatcher = dispatcher or Dispatcher(min_length=min_content_length, rng=self.rng)

    def next_delay(self) -> float:
        """Draw the simulated latency, in [lower, upper) seconds."""
        lower, upper = self.latency_seconds
        if upper == lower:
            return lower
        delay = self.rng.uniform(lower, upper)
        # random.uniform may return the upper bound through float rounding.
        return delay if delay < upper else lower

    async def explain(self, raw_input: str, channel: str = "paste") -> ExplanationArtifact:
        """Explain documentation text received on a channel.

        Raises:
            ExplanationError: If anything unexpected fails; short or unusual
                input is handled by the fallback routes instead.
        """
        try:
            raw = RawInput(text=raw_input, channel=channel)
            await self.sleep(self.next_delay())
            result = self.dispatcher.run(raw)
        except Exception as exc:
            logger.exception("Explanation failed for %s input", channel)
            raise ExplanationError() from exc

        logger.info(
            "Explained %s input (%d chars) via %s",
            channel,
            len(raw_input),
            result.history[-1].value,
        )
        return result.artifact


class ExplanationSession:
    """Holds the single current explanation for one UI session.

    At most one request runs at a time. A request superseded by ``clear``
    still runs to completion but its result is discarded.
    """

    def __init__(self, service: ExplanationService):
        self.service = service
        self.current: Optional[ExplanationArtifact] = None
        self.last_error: Optional[str] = None
        self._busy = False
        self._latest_request = 0

    @property
    def busy(self) -> bool:
        return self._busy

    async def submit(self, raw_input: str, channel: str = "paste") -> ExplanationArtifact:
        if self._busy:
            raise SessionBusyError("an explanation is already in progress")

        self._latest_request += 1
        request_id = self._latest_request
        self._busy = True
        self.current = None
        self.last_error = None
        try:
            artifact = await self.service.explain(raw_input, channel)
        except ExplanationError as exc:
            if request_id == self._latest_request:
                self.last_error = str(exc)
            raise
        finally:
            self._busy = False

        if request_id == self._latest_request:
            self.current = artifact
        else:
            logger.info("Discarding superseded explanation request %d", request_id)
        return artifact

    def clear(self) -> None:
        """Empty the slot and supersede any in-flight request."""
        self._latest_request += 1
        self.current = None
        self.last_error = None

    def snapshot(self) -> Dict:
        return {
            "busy": self._busy,
            "explanation": self.current.to_dict() if self.current else None,
            "error": self.last_error,
        }
