import pytest

from docexplain.export import DOWNLOAD_FILENAME, export, to_html, to_markdown
from docexplain.fallbacks import SHORT_CONTENT_FALLBACK, URL_CONTENT_FALLBACK
from docexplain.models import ExplanationArtifact

ARTIFACT = ExplanationArtifact(
    summary="First paragraph.\nSecond paragraph.",
    analogy="Like a map.",
    code_example="return <div>Hello & welcome</div>;",
    use_cases=("One", "Two", "Three"),
    key_points=("Alpha", "Beta", "Gamma"),
)


def test_markdown_contains_every_section():
    markdown = to_markdown(ARTIFACT)

    assert markdown.startswith("# Documentation Explanation")
    assert "## Summary\n\nFirst paragraph.\nSecond paragraph." in markdown
    assert "> Like a map." in markdown
    assert "```\nreturn <div>Hello & welcome</div>;\n```" in markdown
    assert "- One\n- Two\n- Three" in markdown
    assert "1. Alpha\n2. Beta\n3. Gamma" in markdown


def test_html_escapes_content():
    html = to_html(ARTIFACT)

    assert html.startswith("<!DOCTYPE html>")
    assert "&lt;div&gt;Hello &amp; welcome&lt;/div&gt;" in html
    assert "<p>First paragraph.</p><p>Second paragraph.</p>" in html
    assert "<li>Gamma</li>" in html


@pytest.mark.parametrize(
    "fmt, filename, media_type",
    [
        ("markdown", DOWNLOAD_FILENAME, "text/markdown"),
        ("html", "documentation-explanation.html", "text/html"),
        ("share", "documentation-explanation.txt", "text/plain"),
        ("download", DOWNLOAD_FILENAME, "application/octet-stream"),
    ],
)
def test_export_formats(fmt, filename, media_type):
    result = export(URL_CONTENT_FALLBACK, fmt)

    assert result.filename == filename
    assert result.media_type == media_type
    assert URL_CONTENT_FALLBACK.summary.split(".")[0] in result.content


def test_share_text_lists_key_points():
    result = export(SHORT_CONTENT_FALLBACK, "share")

    assert "Key points:" in result.content
    assert f"- {SHORT_CONTENT_FALLBACK.key_points[0]}" in result.content


def test_unknown_export_format_is_rejected():
    with pytest.raises(ValueError):
        export(ARTIFACT, "pdf")
