"""Rule-based content classification for documentation text."""

import logging

from .models import AnalysisRecord, Complexity, Domain
from .patterns import (
    ADVANCED_THRESHOLD,
    CODE_FRAGMENT_PATTERN,
    COMPLEXITY_SIGNALS,
    DOMAIN_SIGNALS,
    INTERMEDIATE_THRESHOLD,
    KEY_TERMS,
    TOPIC_KEYWORDS,
)

logger = logging.getLogger(__name__)


def analyze(text: str) -> AnalysisRecord:
    """Classify text into an analysis record.

    Never raises for string input; empty text yields a generic, beginner
    record with empty collections.
    """
    score = count_complexity_signals(text)
    record = AnalysisRecord(
        domain=detect_domain(text),
        complexity=complexity_for_score(score),
        topics=identify_topics(text),
        key_terms=extract_key_terms(text),
        code_fragments=extract_code_fragments(text),
        complexity_score=score,
    )
    logger.debug(
        "Classified %d chars as domain=%s complexity=%s (score=%d, %d topics, %d fragments)",
        len(text),
        record.domain,
        record.complexity,
        score,
        len(record.topics),
        len(record.code_fragments),
    )
    return record


def detect_domain(text: str) -> Domain:
    for domain, patterns in DOMAIN_SIGNALS:
        if any(pattern.search(text) for pattern in patterns):
            return domain
    return "generic"


def extract_code_fragments(text: str) -> tuple[str, ...]:
    """Return fenced blocks and inline backtick spans in order of appearance."""
    return tuple(match.group(0) for match in CODE_FRAGMENT_PATTERN.finditer(text))


def matched_complexity_signals(text: str) -> tuple[str, ...]:
    return tuple(name for name, pattern in COMPLEXITY_SIGNALS if pattern.search(text))


def count_complexity_signals(text: str) -> int:
    return len(matched_complexity_signals(text))


def complexity_for_score(score: int) -> Complexity:
    if score >= ADVANCED_THRESHOLD:
        return "advanced"
    if score >= INTERMEDIATE_THRESHOLD:
        return "intermediate"
    return "beginner"


def extract_key_terms(text: str) -> tuple[str, ...]:
    lowered = text.lower()
    return tuple(term for term in KEY_TERMS if term in lowered)


def identify_topics(text: str) -> tuple[str, ...]:
    lowered = text.lower()
    return tuple(
        topic
        for topic, keywords in TOPIC_KEYWORDS.items()
        if any(keyword in lowered for keyword in keywords)
    )
