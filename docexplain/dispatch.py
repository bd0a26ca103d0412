"""Request routing between the fallback artifacts and the analysis pipeline."""

import enum
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from . import classifier, synthesizer
from .fallbacks import SHORT_CONTENT_FALLBACK, URL_CONTENT_FALLBACK
from .models import AnalysisRecord, ExplanationArtifact, RawInput
from .ports import RandomSource

logger = logging.getLogger(__name__)

DEFAULT_MIN_CONTENT_LENGTH = 50
URL_CONTENT_PREFIX = "Documentation from URL: "

Analyzer = Callable[[str], AnalysisRecord]
Generator = Callable[[str, AnalysisRecord, Optional[RandomSource]], ExplanationArtifact]


class DispatchState(str, enum.Enum):
    IDLE = "idle"
    DISPATCHING = "dispatching"
    SHORT_CIRCUIT = "short_circuit"
    ANALYZING = "analyzing"
    DONE = "done"


@dataclass(frozen=True)
class Route:
    """Routing decision for one raw input.

    Short-circuit routes carry the fallback artifact; analyzing routes carry
    the text to classify.
    """

    state: DispatchState
    artifact: Optional[ExplanationArtifact] = None
    content: Optional[str] = None


@dataclass(frozen=True)
class DispatchResult:
    artifact: ExplanationArtifact
    history: tuple[DispatchState, ...]
    record: Optional[AnalysisRecord] = None

    @property
    def short_circuited(self) -> bool:
        return DispatchState.SHORT_CIRCUIT in self.history


def route(raw: RawInput, min_length: int = DEFAULT_MIN_CONTENT_LENGTH) -> Route:
    """Decide whether raw input bypasses analysis.

    URL input mentioning ``http`` always gets the URL fallback since no
    fetch happens; anything shorter than ``min_length`` once trimmed gets the
    short-content fallback.
    """
    if raw.channel == "url":
        if "http" in raw.text:
            return Route(DispatchState.SHORT_CIRCUIT, artifact=URL_CONTENT_FALLBACK)
        content = f"{URL_CONTENT_PREFIX}{raw.text}".strip()
    else:
        content = raw.text.strip()

    if len(content) < min_length:
        return Route(DispatchState.SHORT_CIRCUIT, artifact=SHORT_CONTENT_FALLBACK)
    return Route(DispatchState.ANALYZING, content=content)


@dataclass
class Dispatcher:
    """Walks one request through Idle -> Dispatching -> ShortCircuit|Analyzing -> Done."""

    min_length: int = DEFAULT_MIN_CONTENT_LENGTH
    analyze: Analyzer = classifier.analyze
    generate: Generator = synthesizer.generate
    rng: Optional[RandomSource] = field(default=None, repr=False)

    def run(self, raw: RawInput) -> DispatchResult:
        history = [DispatchState.IDLE, DispatchState.DISPATCHING]
        decision = route(raw, self.min_length)
        history.append(decision.state)

        if decision.state is DispatchState.SHORT_CIRCUIT:
            logger.info("Short-circuiting %s input (%d chars)", raw.channel, len(raw.text))
            return DispatchResult(artifact=decision.artifact, history=tuple(history))

        record = self.analyze(decision.content)
        artifact = self.generate(decision.content, record, self.rng)
        history.append(DispatchState.DONE)
        return DispatchResult(artifact=artifact, history=tuple(history), record=record)
