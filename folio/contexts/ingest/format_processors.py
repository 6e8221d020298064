"""
Format Processors

Pure text -> value converters for the content formats found in portfolio
repositories. Every processor is total: a parse failure never raises, it logs a
warning and degrades to the original text (or, for Markdown, to a document
whose body and html are the original text).

Degraded values are returned unsanitized. Consumers that insert them into an
HTML sink must sanitize them first.
"""

import json
import re
from enum import Enum
from typing import Any, Callable, Dict, Optional

import yaml
from markdown_it import MarkdownIt

from folio.contexts.ingest.logger import _log_debug, log_parse_degradation


class FormatTag(str, Enum):
    """Canonical content format of a tagged node."""

    JSON = "json"
    YAML = "yaml"
    MARKDOWN = "markdown"
    TEXT = "text"


# Aliases accepted in the "format" field of a tagged node
FORMAT_ALIASES = {
    "json": FormatTag.JSON,
    "yaml": FormatTag.YAML,
    "yml": FormatTag.YAML,
    "markdown": FormatTag.MARKDOWN,
    "md": FormatTag.MARKDOWN,
    "text": FormatTag.TEXT,
    "txt": FormatTag.TEXT,
}

# Leading "---" block, then the rest of the document
FRONTMATTER_PATTERN = re.compile(r"^---[ \t]*\r?\n(.*?)\r?\n---[ \t]*\r?\n(.*)$", re.DOTALL)

_markdown_renderer = MarkdownIt("commonmark")


def canonical_format(format_tag: Any) -> FormatTag:
    """
    Resolve a raw format string to its canonical FormatTag.

    Matching is case-insensitive and accepts the yml/md/txt aliases.
    Anything unrecognized (including non-strings) is treated as text.
    """
    if isinstance(format_tag, FormatTag):
        return format_tag
    if isinstance(format_tag, str):
        resolved = FORMAT_ALIASES.get(format_tag.strip().lower())
        if resolved is not None:
            return resolved
    _log_debug(f"Unrecognized format '{format_tag}', treating as text")
    return FormatTag.TEXT


def process_json(text: Any) -> Any:
    """Parse JSON text. Invalid JSON is returned unchanged."""
    if not isinstance(text, str):
        return text
    try:
        return json.loads(text)
    except ValueError as e:
        log_parse_degradation("JSON", e, text)
        return text


def process_yaml(text: Any) -> Any:
    """Parse YAML text with the safe loader. Invalid YAML is returned unchanged."""
    if not isinstance(text, str):
        return text
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        log_parse_degradation("YAML", e, text)
        return text


def render_markdown(body: str) -> str:
    """Render Markdown to HTML with a CommonMark renderer."""
    return _markdown_renderer.render(body)


def process_markdown(text: Any) -> Any:
    """
    Parse a Markdown document with optional YAML frontmatter.

    A document starting with a "---" delimited block has that block parsed as
    YAML frontmatter; the remainder is the body. Without such a block the whole
    text is the body and frontmatter is empty.

    Args:
        text: Markdown source

    Returns:
        Dict with keys:
        - frontmatter: Mapping parsed from the leading block ({} if absent)
        - body: Markdown source after the frontmatter block
        - html: Rendered body
        - raw: The original text

    Examples:
        >>> doc = process_markdown("---\\ntitle: X\\n---\\nBody")
        >>> doc["frontmatter"], doc["body"]
        ({'title': 'X'}, 'Body')
    """
    if not isinstance(text, str):
        return text

    try:
        match = FRONTMATTER_PATTERN.match(text)
        if match:
            frontmatter = yaml.safe_load(match.group(1)) or {}
            if not isinstance(frontmatter, dict):
                _log_debug(
                    f"Frontmatter is a {type(frontmatter).__name__}, not a mapping; ignoring it"
                )
                frontmatter = {}
            body = match.group(2)
        else:
            frontmatter = {}
            body = text

        return {
            "frontmatter": frontmatter,
            "body": body,
            "html": render_markdown(body),
            "raw": text,
        }
    except Exception as e:
        log_parse_degradation("Markdown", e, text)
        return {"frontmatter": {}, "body": text, "html": text, "raw": text}


def process_text(text: Any) -> Any:
    """Plain text passes through unchanged."""
    return text


PROCESSORS: Dict[FormatTag, Callable[[Any], Any]] = {
    FormatTag.JSON: process_json,
    FormatTag.YAML: process_yaml,
    FormatTag.MARKDOWN: process_markdown,
    FormatTag.TEXT: process_text,
}


def get_processor(format_tag: Optional[str]) -> Callable[[Any], Any]:
    """Return the processor for a format tag; unknown tags get the text processor."""
    return PROCESSORS[canonical_format(format_tag)]


def process_content(format_tag: Optional[str], content: Any) -> Any:
    """Dispatch content to the processor matching its format tag."""
    return get_processor(format_tag)(content)
