"""Core domain models shared by the classifier, synthesizer and session."""

from dataclasses import dataclass
from typing import Dict, Literal, Sequence, get_args

Channel = Literal["paste", "url", "file"]
Domain = Literal["generic", "ui-framework", "scripting", "network-api", "styling"]
Complexity = Literal["beginner", "intermediate", "advanced"]

CHANNELS: tuple[str, ...] = get_args(Channel)
DOMAINS: tuple[str, ...] = get_args(Domain)
COMPLEXITY_ORDER: tuple[str, ...] = get_args(Complexity)

MIN_LIST_ITEMS = 3
MAX_LIST_ITEMS = 6


@dataclass(frozen=True)
class RawInput:
    """Text submitted for one explanation request."""

    text: str
    channel: Channel = "paste"

    def __post_init__(self) -> None:
        if self.channel not in CHANNELS:
            raise ValueError(f"unknown input channel: {self.channel!r}")


@dataclass(frozen=True)
class AnalysisRecord:
    """Classifier output for a block of documentation text.

    ``topics`` and ``key_terms`` follow vocabulary order and never repeat.
    ``complexity_score`` is the number of distinct advanced-usage signal
    categories that matched.
    """

    domain: Domain
    complexity: Complexity
    topics: Sequence[str]
    key_terms: Sequence[str]
    code_fragments: Sequence[str]
    complexity_score: int = 0


@dataclass(frozen=True)
class ExplanationArtifact:
    """The five-section explanation handed to the UI and exporters."""

    summary: str
    analogy: str
    code_example: str
    use_cases: Sequence[str]
    key_points: Sequence[str]

    def validate(self) -> "ExplanationArtifact":
        """Check structural invariants, returning self so calls can chain."""
        for name in ("summary", "analogy", "code_example"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{name} must be a non-empty string")
        for name in ("use_cases", "key_points"):
            items = getattr(self, name)
            if not MIN_LIST_ITEMS <= len(items) <= MAX_LIST_ITEMS:
                raise ValueError(
                    f"{name} must hold {MIN_LIST_ITEMS}-{MAX_LIST_ITEMS} entries, got {len(items)}"
                )
            if any(not item.strip() for item in items):
                raise ValueError(f"{name} entries must be non-empty")
        return self

    def to_dict(self) -> Dict:
        """Return the wire shape consumed by the browser UI."""
        return {
            "summary": self.summary,
            "analogy": self.analogy,
            "codeExample": self.code_example,
            "useCases": list(self.use_cases),
            "keyPoints": list(self.key_points),
        }
