"""Serialization of explanation artifacts for export and sharing."""

from dataclasses import dataclass
from html import escape
from typing import Callable, Dict

from .models import ExplanationArtifact

EXPORT_FORMATS = ("markdown", "html", "share", "download")
DOWNLOAD_FILENAME = "documentation-explanation.md"


@dataclass(frozen=True)
class ExportResult:
    content: str
    filename: str
    media_type: str


def to_markdown(artifact: ExplanationArtifact) -> str:
    sections = [
        "# Documentation Explanation",
        "## Summary",
        artifact.summary,
        "## Analogy",
        f"> {artifact.analogy}",
        "## Code Example",
        f"```\n{artifact.code_example}\n```",
        "## Use Cases",
        "\n".join(f"- {item}" for item in artifact.use_cases),
        "## Key Points",
        "\n".join(f"{index}. {item}" for index, item in enumerate(artifact.key_points, start=1)),
    ]
    return "\n\n".join(sections) + "\n"


def to_html(artifact: ExplanationArtifact) -> str:
    paragraphs = "".join(f"<p>{escape(line)}</p>" for line in artifact.summary.split("\n") if line)
    use_cases = "".join(f"<li>{escape(item)}</li>" for item in artifact.use_cases)
    key_points = "".join(f"<li>{escape(item)}</li>" for item in artifact.key_points)
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        "<title>Documentation Explanation</title>\n"
        "<style>body{font-family:system-ui,sans-serif;max-width:760px;margin:2rem auto;"
        "line-height:1.6}pre{background:#f4f4f5;padding:1rem;overflow-x:auto}"
        "blockquote{border-left:4px solid #6366f1;margin:0;padding-left:1rem}</style>\n"
        "</head>\n"
        "<body>\n"
        "<h1>Documentation Explanation</h1>\n"
        f"<h2>Summary</h2>\n{paragraphs}\n"
        f"<h2>Analogy</h2>\n<blockquote>{escape(artifact.analogy)}</blockquote>\n"
        f"<h2>Code Example</h2>\n<pre><code>{escape(artifact.code_example)}</code></pre>\n"
        f"<h2>Use Cases</h2>\n<ul>{use_cases}</ul>\n"
        f"<h2>Key Points</h2>\n<ol>{key_points}</ol>\n"
        "</body>\n"
        "</html>\n"
    )


def to_share_text(artifact: ExplanationArtifact) -> str:
    """Short plain-text digest suitable for the clipboard."""
    points = "\n".join(f"- {item}" for item in artifact.key_points)
    return f"{artifact.summary}\n\nKey points:\n{points}\n"


_EXPORTERS: Dict[str, Callable[[ExplanationArtifact], ExportResult]] = {
    "markdown": lambda artifact: ExportResult(to_markdown(artifact), DOWNLOAD_FILENAME, "text/markdown"),
    "html": lambda artifact: ExportResult(
        to_html(artifact), "documentation-explanation.html", "text/html"
    ),
    "share": lambda artifact: ExportResult(
        to_share_text(artifact), "documentation-explanation.txt", "text/plain"
    ),
    "download": lambda artifact: ExportResult(
        to_markdown(artifact), DOWNLOAD_FILENAME, "application/octet-stream"
    ),
}


def export(artifact: ExplanationArtifact, fmt: str) -> ExportResult:
    """Serialize an artifact into one of ``EXPORT_FORMATS``."""
    try:
        exporter = _EXPORTERS[fmt]
    except KeyError:
        raise ValueError(f"unknown export format: {fmt!r}") from None
    return exporter(artifact)
