"""
Section Normalization

Resolves every format-tagged node in a raw content tree, producing a tree of the
same shape with plain values in place of the wrappers:

- Scalars pass through unchanged
- Sequences are normalized element-wise at the same depth
- Tagged nodes are parsed by their format processor; a parsed mapping or
  sequence is walked one level deeper so tagged sub-documents resolve too
- Plain mappings are normalized value-wise one level deeper

A depth guard (default 10) bounds the walk. Sequences do not count towards it,
so a second bound (MAX_NESTING) caps total nesting of any kind. A node beyond
either limit is returned as-is and its dotted path is reported in
NormalizationResult.truncated_paths.

normalize_map() treats its argument as a content map: the root itself is never
read as a format wrapper, even if its keys happen to be "format" and "content".
"""

import os
from dataclasses import dataclass, field
from typing import Any, List, Mapping

from dotenv import load_dotenv

from folio.contexts.ingest.content_nodes import (
    MappingNode,
    ScalarNode,
    SequenceNode,
    TaggedNode,
    child_path,
    classify,
)
from folio.contexts.ingest.format_processors import canonical_format, process_content
from folio.contexts.ingest.logger import log_depth_truncation

load_dotenv()
DEFAULT_MAX_DEPTH = int(os.getenv("FOLIO_MAX_DEPTH", "10"))

# Total nesting (sequences included) after which a node is left unprocessed
MAX_NESTING = 100

# Content areas a portfolio is expected to carry
RECOGNIZED_SECTIONS = ("about", "projects", "skills", "contact", "experience", "education")


@dataclass
class NormalizationResult:
    """Result from SectionNormalizer.normalize()."""

    data: Any
    truncated_paths: List[str] = field(default_factory=list)

    @property
    def truncated(self) -> bool:
        return bool(self.truncated_paths)


class SectionNormalizer:
    """
    Depth-bounded recursive normalizer for raw content trees.

    Instances hold configuration only; every normalize() call keeps its own
    truncation record, so one instance can serve concurrent callers.
    """

    def __init__(self, max_depth: int = None):
        """
        Args:
            max_depth: Deepest level still processed. Defaults to FOLIO_MAX_DEPTH
                       from environment, or 10.
        """
        self.max_depth = DEFAULT_MAX_DEPTH if max_depth is None else max_depth

    def normalize(self, raw: Any) -> NormalizationResult:
        """
        Normalize a raw content tree.

        Args:
            raw: RawContentMap (or any node of one)

        Returns:
            NormalizationResult with the normalized tree and truncated node paths
        """
        truncated: List[str] = []
        data = self._visit(raw, 0, "", truncated, 0)
        return NormalizationResult(data=data, truncated_paths=truncated)

    def normalize_map(self, raw: Mapping[str, Any]) -> NormalizationResult:
        """
        Normalize a RawContentMap value by value.

        Top-level values start at depth 1 under their own key, exactly as in
        normalize(), but the map itself is never classified.
        """
        truncated: List[str] = []
        data = {
            key: self._visit(value, 1, child_path("", key), truncated, 1)
            for key, value in raw.items()
        }
        return NormalizationResult(data=data, truncated_paths=truncated)

    def _visit(self, value: Any, depth: int, path: str, truncated: List[str], nesting: int) -> Any:
        if depth > self.max_depth or nesting > MAX_NESTING:
            log_depth_truncation(path, self.max_depth)
            truncated.append(path or "<root>")
            return value

        node = classify(value)

        if isinstance(node, ScalarNode):
            return node.value

        if isinstance(node, SequenceNode):
            return [
                self._visit(item, depth, child_path(path, index), truncated, nesting + 1)
                for index, item in enumerate(node.items)
            ]

        if isinstance(node, TaggedNode):
            parsed = process_content(node.format, node.content)
            if isinstance(parsed, (dict, list)):
                return self._visit(parsed, depth + 1, path, truncated, nesting + 1)
            return parsed

        if isinstance(node, MappingNode):
            return {
                key: self._visit(item, depth + 1, child_path(path, key), truncated, nesting + 1)
                for key, item in node.entries.items()
            }

        raise TypeError(f"Unhandled content node: {type(node).__name__}")

    def detect_data_formats(self, raw: Any) -> List[str]:
        """
        Collect the canonical formats of all tagged nodes in a raw tree.

        Walks the unparsed tree under the same depth guard as normalize().

        Returns:
            Deduplicated format names in first-seen order
        """
        formats: List[str] = []
        self._collect_formats(raw, 0, formats, 0)
        return formats

    def detect_map_formats(self, raw: Mapping[str, Any]) -> List[str]:
        """Like detect_data_formats(), without reading the map itself as a wrapper."""
        formats: List[str] = []
        for value in raw.values():
            self._collect_formats(value, 1, formats, 1)
        return formats

    def _collect_formats(self, value: Any, depth: int, formats: List[str], nesting: int) -> None:
        if depth > self.max_depth or nesting > MAX_NESTING:
            return

        node = classify(value)

        if isinstance(node, TaggedNode):
            tag = canonical_format(node.format).value
            if tag not in formats:
                formats.append(tag)
            self._collect_formats(node.content, depth + 1, formats, nesting + 1)
        elif isinstance(node, SequenceNode):
            for item in node.items:
                self._collect_formats(item, depth, formats, nesting + 1)
        elif isinstance(node, MappingNode):
            for item in node.entries.values():
                self._collect_formats(item, depth + 1, formats, nesting + 1)


def normalize(raw: Any, max_depth: int = None) -> Any:
    """Normalize a raw content tree and return only the normalized data."""
    return SectionNormalizer(max_depth).normalize(raw).data


def detect_data_formats(raw: Any, max_depth: int = None) -> List[str]:
    """Deduplicated canonical formats of every tagged node in a raw tree."""
    return SectionNormalizer(max_depth).detect_data_formats(raw)


def missing_sections(data: Any) -> List[str]:
    """Recognized content sections absent (or empty) in a portfolio mapping."""
    if not isinstance(data, dict):
        return list(RECOGNIZED_SECTIONS)
    return [section for section in RECOGNIZED_SECTIONS if not data.get(section)]
