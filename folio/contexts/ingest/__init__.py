"""
Ingest Context

Responsibilities:
- Parses JSON, YAML, Markdown-with-frontmatter and plain text content
- Normalizes raw content trees, resolving format-tagged nodes under a depth guard
- Maps repository files onto portfolio content sections

Owns: Format detection and parsing, canonical section values
Never: Chooses templates or styling
"""

from folio.contexts.ingest.file_mapper import (
    RepositoryFile,
    categorize_files,
    file_format,
    map_files_to_content,
)
from folio.contexts.ingest.format_processors import (
    FormatTag,
    canonical_format,
    process_json,
    process_markdown,
    process_text,
    process_yaml,
)
from folio.contexts.ingest.section_normalizer import (
    NormalizationResult,
    SectionNormalizer,
    detect_data_formats,
    normalize,
)

__all__ = [
    # Format processors
    "FormatTag",
    "canonical_format",
    "process_json",
    "process_yaml",
    "process_markdown",
    "process_text",
    # Normalization
    "SectionNormalizer",
    "NormalizationResult",
    "normalize",
    "detect_data_formats",
    # Repository files
    "RepositoryFile",
    "categorize_files",
    "file_format",
    "map_files_to_content",
]
