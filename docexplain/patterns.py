"""Pattern and vocabulary tables driving content classification."""

import re
from typing import Dict, Pattern, Sequence

# Evaluated in order; the first family with any matching pattern sets the domain.
DOMAIN_SIGNALS: Sequence[tuple[str, Sequence[Pattern[str]]]] = (
    (
        "ui-framework",
        (
            re.compile(r"\buse[A-Z]\w*"),
            re.compile(r"</?[A-Z][A-Za-z]*"),
        ),
    ),
    (
        "scripting",
        (
            re.compile(r"\bfunction\s+\w+"),
            re.compile(r"\bclass\s+(?:[A-Z]\w*|\w+\s*(?:\(|:|\{|extends\b))"),
            re.compile(r"\b(?:const|let|var)\s+\w+\s*=\s*(?:async\s*)?\("),
            re.compile(r"=>\s*\{"),
            re.compile(r"\bdef\s+\w+\s*\("),
        ),
    ),
    (
        "network-api",
        (
            re.compile(r"/api/"),
            re.compile(r"\b(?:GET|POST|PUT|DELETE|PATCH)\b"),
            re.compile(r"\bfetch\("),
            re.compile(r"\baxios\."),
            re.compile(r"XMLHttpRequest"),
            re.compile(r"\brequests\.(?:get|post|put|delete|patch)\("),
        ),
    ),
    (
        "styling",
        (
            re.compile(r"(?:^|\s)[.#][A-Za-z][\w-]*\s*\{"),
            re.compile(r"\b[a-z][a-z-]*\s*:\s*[^;{}\n]+;"),
            re.compile(r"@media|@keyframes"),
        ),
    ),
)

# One entry per advanced-usage category; each contributes at most 1 to the score.
COMPLEXITY_SIGNALS: Sequence[tuple[str, Pattern[str]]] = (
    ("asynchronous", re.compile(r"\b(?:async|await|Promise)\b")),
    ("inheritance", re.compile(r"\bclass\s+\w+[^\n]*\bextends\b")),
    ("type-declaration", re.compile(r"\binterface\s+\w+|\btype\s+\w+\s*=")),
    ("generic-type", re.compile(r"[Gg]eneric|<T>|<[A-Z]\w*>")),
    ("higher-order", re.compile(r"callback|closure|higher-order", re.IGNORECASE)),
)

ADVANCED_THRESHOLD = 3
INTERMEDIATE_THRESHOLD = 1

CODE_FRAGMENT_PATTERN = re.compile(r"```[\s\S]*?```|`[^`\n]+`")

KEY_TERMS: Sequence[str] = (
    "component",
    "hook",
    "state",
    "props",
    "render",
    "effect",
    "async",
    "await",
    "promise",
    "callback",
    "closure",
    "scope",
    "api",
    "endpoint",
    "request",
    "response",
    "http",
    "json",
    "css",
    "selector",
    "property",
    "responsive",
    "flexbox",
    "grid",
)

TOPIC_KEYWORDS: Dict[str, Sequence[str]] = {
    "State Management": ("state", "usestate", "reducer", "context"),
    "Side Effects": ("useeffect", "effect", "lifecycle", "cleanup"),
    "Event Handling": ("onclick", "onchange", "event", "handler"),
    "Data Fetching": ("fetch", "api", "axios", "request", "response"),
    "Styling": ("css", "style", "class", "selector", "responsive"),
    "Performance": ("memo", "callback", "usememo", "optimization"),
    "Forms": ("form", "input", "validation", "submit"),
    "Routing": ("route", "navigate", "link", "router"),
}
