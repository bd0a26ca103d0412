"""Template-driven synthesis of explanation artifacts."""

import re
from random import Random
from typing import Optional

from .models import MAX_LIST_ITEMS, AnalysisRecord, ExplanationArtifact
from .ports import RandomSource
from .templates import (
    ADVANCED_ADVISORY,
    KEY_TERMS_POINT,
    TOPIC_USE_CASE,
    TemplateBank,
    bank_for,
)

TARGET_KEY_POINTS = 4
TARGET_PLAIN_USE_CASES = 4
DOMAIN_USE_CASES_AFTER_TOPICS = 3
MAX_TOPIC_USE_CASES = MAX_LIST_ITEMS - DOMAIN_USE_CASES_AFTER_TOPICS

_FENCE_OPEN = re.compile(r"^```(?:[\w+-]*\n)?")
_FENCE_CLOSE = re.compile(r"\n?```$")

_default_rng = Random()


def generate(
    text: str,
    record: AnalysisRecord,
    rng: Optional[RandomSource] = None,
) -> ExplanationArtifact:
    """Assemble the five-section explanation for an analysed text.

    Everything except the analogy is a pure function of ``record``; the
    analogy is drawn from ``rng`` so tests can pin it with a seeded source.
    """
    bank = bank_for(record.domain)
    artifact = ExplanationArtifact(
        summary=build_summary(record, bank),
        analogy=choose_analogy(bank, rng or _default_rng),
        code_example=build_code_example(record, bank),
        use_cases=build_use_cases(record, bank),
        key_points=build_key_points(record, bank),
    )
    return artifact.validate()


def build_summary(record: AnalysisRecord, bank: TemplateBank) -> str:
    terms = ", ".join(record.key_terms[:3]) or bank.default_terms
    topics = ", ".join(record.topics) or bank.default_topics
    return " ".join(
        sentence.format(complexity=record.complexity, terms=terms, topics=topics)
        for sentence in bank.summary
    )


def choose_analogy(bank: TemplateBank, rng: RandomSource) -> str:
    return rng.choice(bank.analogies)


def build_code_example(record: AnalysisRecord, bank: TemplateBank) -> str:
    if record.code_fragments:
        example = strip_code_delimiters(record.code_fragments[0])
        if example:
            return example
    return bank.code_example


def strip_code_delimiters(fragment: str) -> str:
    """Remove fence or inline backtick delimiters and surrounding whitespace."""
    fragment = fragment.strip()
    if fragment.startswith("```"):
        fragment = _FENCE_CLOSE.sub("", _FENCE_OPEN.sub("", fragment, count=1), count=1)
    else:
        fragment = fragment.strip("`")
    return fragment.strip()


def build_use_cases(record: AnalysisRecord, bank: TemplateBank) -> tuple[str, ...]:
    if record.topics:
        # Topic entries are capped so the list never exceeds MAX_LIST_ITEMS.
        topical = tuple(
            TOPIC_USE_CASE.format(topic=topic.lower())
            for topic in record.topics[:MAX_TOPIC_USE_CASES]
        )
        return topical + tuple(bank.use_cases[:DOMAIN_USE_CASES_AFTER_TOPICS])
    return tuple(bank.use_cases[:TARGET_PLAIN_USE_CASES])


def build_key_points(record: AnalysisRecord, bank: TemplateBank) -> tuple[str, ...]:
    points = []
    if record.complexity == "advanced":
        points.append(ADVANCED_ADVISORY)
    if record.key_terms:
        points.append(KEY_TERMS_POINT.format(terms=", ".join(record.key_terms[:3])))
    remaining = max(TARGET_KEY_POINTS - len(points), 0)
    return tuple(points) + tuple(bank.key_points[:remaining])
