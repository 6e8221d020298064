"""
Unit tests for format processors.

Tests the text -> value converters in folio.contexts.ingest.format_processors.
"""

import json

import pytest
import yaml

from folio.contexts.ingest.format_processors import (
    FormatTag,
    canonical_format,
    get_processor,
    process_content,
    process_json,
    process_markdown,
    process_text,
    process_yaml,
)


@pytest.mark.unit
class TestProcessJson:
    """Tests for process_json function."""

    def test_matches_reference_parse(self):
        text = '{"name": "Ada", "skills": ["python", "sql"], "years": 7, "active": true}'
        assert process_json(text) == json.loads(text)

    def test_array_document(self):
        assert process_json('[{"name": "P1"}, {"name": "P2"}]') == [{"name": "P1"}, {"name": "P2"}]

    def test_invalid_json_returns_original_text(self):
        assert process_json("{bad json") == "{bad json"

    def test_non_string_passes_through(self):
        payload = {"already": "parsed"}
        assert process_json(payload) is payload


@pytest.mark.unit
class TestProcessYaml:
    """Tests for process_yaml function."""

    def test_matches_reference_parse(self):
        text = "name: Ada\nskills:\n  - python\n  - sql\ncontact:\n  email: ada@example.com\n"
        assert process_yaml(text) == yaml.safe_load(text)

    def test_scalar_document(self):
        assert process_yaml("just words") == "just words"

    def test_invalid_yaml_returns_original_text(self):
        text = "key: [unclosed"
        assert process_yaml(text) == text


@pytest.mark.unit
class TestProcessMarkdown:
    """Tests for process_markdown function."""

    def test_frontmatter_extraction(self):
        doc = process_markdown("---\ntitle: X\n---\nBody")

        assert doc["frontmatter"] == {"title": "X"}
        assert doc["body"] == "Body"
        assert "Body" in doc["html"]
        assert "<p>" in doc["html"]
        assert doc["raw"] == "---\ntitle: X\n---\nBody"

    def test_without_frontmatter(self):
        doc = process_markdown("# Hi\nHello")

        assert doc["frontmatter"] == {}
        assert doc["body"] == "# Hi\nHello"
        assert "<h1>Hi</h1>" in doc["html"]
        assert "Hello" in doc["html"]

    def test_dashes_later_in_document_are_not_frontmatter(self):
        text = "Intro\n---\ntitle: X\n---\nMore"
        doc = process_markdown(text)

        assert doc["frontmatter"] == {}
        assert doc["body"] == text

    def test_rendering_is_deterministic(self):
        text = "## Projects\n\n- one\n- two\n"
        assert process_markdown(text)["html"] == process_markdown(text)["html"]

    def test_non_mapping_frontmatter_is_ignored(self):
        doc = process_markdown("---\n- a\n- b\n---\nBody")

        assert doc["frontmatter"] == {}
        assert doc["body"] == "Body"

    def test_invalid_frontmatter_degrades_to_text(self):
        text = "---\nkey: [unclosed\n---\nBody"
        doc = process_markdown(text)

        assert doc == {"frontmatter": {}, "body": text, "html": text, "raw": text}


@pytest.mark.unit
class TestFormatDispatch:
    """Tests for format tag resolution and processor dispatch."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("json", FormatTag.JSON),
            ("yml", FormatTag.YAML),
            ("YAML", FormatTag.YAML),
            ("md", FormatTag.MARKDOWN),
            ("Markdown", FormatTag.MARKDOWN),
            ("text", FormatTag.TEXT),
            ("toml", FormatTag.TEXT),
            (None, FormatTag.TEXT),
        ],
    )
    def test_canonical_format(self, raw, expected):
        assert canonical_format(raw) == expected

    def test_unknown_format_uses_text_processor(self):
        assert get_processor("rst") is process_text
        assert process_content("rst", "*emphasis*") == "*emphasis*"

    def test_dispatch_by_alias(self):
        assert process_content("yml", "a: 1") == {"a": 1}
