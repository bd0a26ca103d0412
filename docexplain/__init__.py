"""DocExplain - rule-based explanations for technical documentation."""

from .classifier import analyze
from .dispatch import Dispatcher, DispatchState, route
from .errors import ExplanationError, SessionBusyError
from .fallbacks import SHORT_CONTENT_FALLBACK, URL_CONTENT_FALLBACK
from .models import AnalysisRecord, ExplanationArtifact, RawInput
from .service import ExplanationService, ExplanationSession
from .synthesizer import generate

__all__ = [
    "AnalysisRecord",
    "DispatchState",
    "Dispatcher",
    "ExplanationArtifact",
    "ExplanationError",
    "ExplanationService",
    "ExplanationSession",
    "RawInput",
    "SHORT_CONTENT_FALLBACK",
    "SessionBusyError",
    "URL_CONTENT_FALLBACK",
    "analyze",
    "generate",
    "route",
]

__version__ = "0.1.0"
