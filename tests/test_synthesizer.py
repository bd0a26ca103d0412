from random import Random

import pytest

from docexplain.classifier import analyze
from docexplain.models import AnalysisRecord, DOMAINS
from docexplain.synthesizer import (
    build_code_example,
    build_key_points,
    build_summary,
    build_use_cases,
    generate,
    strip_code_delimiters,
)
from docexplain.templates import (
    ADVANCED_ADVISORY,
    GENERIC,
    NETWORK_API,
    STYLING,
    TEMPLATE_BANKS,
    UI_FRAMEWORK,
    bank_for,
)

COUNTER_SNIPPET = (
    "function useCounter() { const [c, setC] = useState(0); return <Counter value={c} /> }"
)


def _record(**overrides):
    values = {
        "domain": "generic",
        "complexity": "beginner",
        "topics": (),
        "key_terms": (),
        "code_fragments": (),
    }
    values.update(overrides)
    return AnalysisRecord(**values)


def test_bank_for_unknown_domain_falls_back_to_generic():
    assert bank_for("cobol") is GENERIC
    assert set(TEMPLATE_BANKS) == set(DOMAINS)


def test_every_bank_has_three_analogies_and_enough_entries():
    for bank in TEMPLATE_BANKS.values():
        assert len(bank.summary) == 4
        assert len(bank.analogies) == 3
        assert len(bank.use_cases) >= 4
        assert len(bank.key_points) >= 4
        assert bank.code_example.strip()


def test_summary_interpolates_complexity_terms_and_topics():
    record = _record(
        domain="network-api",
        complexity="intermediate",
        key_terms=("api", "endpoint", "request", "response"),
        topics=("Data Fetching",),
    )

    summary = build_summary(record, NETWORK_API)

    assert "intermediate-level" in summary
    assert "api, endpoint, request" in summary
    assert "response" not in summary.split("including")[1].split(".")[0]
    assert summary.endswith("Key areas covered: Data Fetching.")


def test_summary_uses_domain_defaults_when_nothing_was_found():
    summary = build_summary(_record(domain="styling"), STYLING)

    assert STYLING.default_terms in summary
    assert STYLING.default_topics in summary
    assert "{" not in summary


def test_code_example_uses_first_fragment_without_fences():
    record = _record(code_fragments=("```js\nconst x = 1;\n```", "`second`"))

    assert build_code_example(record, GENERIC) == "const x = 1;"


def test_code_example_falls_back_to_canonical_listing():
    assert build_code_example(_record(domain="ui-framework"), UI_FRAMEWORK) == UI_FRAMEWORK.code_example
    assert build_code_example(_record(code_fragments=("```\n```",)), GENERIC) == GENERIC.code_example


@pytest.mark.parametrize(
    "fragment, expected",
    [
        ("`npm install`", "npm install"),
        ("```python\nprint('hi')\n```", "print('hi')"),
        ("```\n  indented()\n```", "indented()"),
        ("```c++\nint x;\n```", "int x;"),
        ("```npm install react```", "npm install react"),
    ],
)
def test_strip_code_delimiters(fragment, expected):
    assert strip_code_delimiters(fragment) == expected


def test_use_cases_without_topics_are_first_four_templates():
    assert build_use_cases(_record(), GENERIC) == tuple(GENERIC.use_cases[:4])


def test_use_cases_prepend_topic_entries():
    record = _record(topics=("State Management", "Forms"))

    assert build_use_cases(record, UI_FRAMEWORK) == (
        "When working with state management in your applications",
        "When working with forms in your applications",
        *UI_FRAMEWORK.use_cases[:3],
    )


def test_use_cases_stay_within_six_entries_for_many_topics():
    record = analyze("state effect event fetch css memo form route")

    assert len(record.topics) == 8
    assert len(build_use_cases(record, bank_for(record.domain))) == 6


def test_key_points_for_advanced_content_with_terms():
    record = _record(complexity="advanced", key_terms=("async", "await", "promise", "callback"))

    points = build_key_points(record, GENERIC)

    assert points == (
        ADVANCED_ADVISORY,
        "Key terminology to remember: async, await, promise",
        *GENERIC.key_points[:2],
    )


def test_key_points_without_prefix_use_four_templates():
    assert build_key_points(_record(), GENERIC) == tuple(GENERIC.key_points[:4])


def test_generate_counter_snippet():
    record = analyze(COUNTER_SNIPPET)

    artifact = generate(COUNTER_SNIPPET, record, Random(0))

    assert artifact.code_example == UI_FRAMEWORK.code_example
    assert artifact.analogy in UI_FRAMEWORK.analogies
    assert "beginner-level" in artifact.summary
    assert artifact.use_cases[0] == "When working with state management in your applications"
    assert artifact.key_points[0] == "Key terminology to remember: state"
    assert len(artifact.use_cases) == 4
    assert len(artifact.key_points) == 4


@pytest.mark.parametrize(
    "text",
    [
        "",
        COUNTER_SNIPPET,
        "GET /api/users returns JSON. Use `curl` to test the endpoint with a callback.",
        ".grid { display: grid; } @media (max-width: 600px) { .grid { display: block; } }",
        "class Store extends Base {}\ninterface Props { id: number }\nasync function run() {}",
        "state effect event fetch css memo form route",
    ],
)
def test_generate_is_structurally_valid_and_stable(text):
    record = analyze(text)

    first = generate(text, record, Random(1))
    second = generate(text, record, Random(2))

    for artifact in (first, second):
        assert all(
            [artifact.summary, artifact.analogy, artifact.code_example, artifact.use_cases, artifact.key_points]
        )
        assert 3 <= len(artifact.use_cases) <= 6
        assert 3 <= len(artifact.key_points) <= 6
        assert artifact.analogy in bank_for(record.domain).analogies

    assert first.summary == second.summary
    assert first.code_example == second.code_example
    assert first.use_cases == second.use_cases
    assert first.key_points == second.key_points


def test_seeded_random_source_pins_the_analogy():
    record = analyze(COUNTER_SNIPPET)

    first = generate(COUNTER_SNIPPET, record, Random(42))
    second = generate(COUNTER_SNIPPET, record, Random(42))

    assert first == second


def test_single_line_fence_keeps_every_word_of_the_code():
    text = "Install it with ```npm install react``` before rendering the app component."

    artifact = generate(text, analyze(text), Random(0))

    assert artifact.code_example == "npm install react"
