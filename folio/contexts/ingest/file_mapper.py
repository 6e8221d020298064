"""
Repository File Mapping

Maps the files of a portfolio repository onto content sections and builds the
RawContentMap the engine consumes. Operates on already-read, in-memory files;
fetching them is the caller's job.

Each section has prioritized filename patterns (lower number wins):

    about:    about.md (1), bio.md (2), profile.md (2), readme.md (3)
    projects: projects.json|yaml (1), work.json|yaml (2), projects.md (4)
    ...

A primary data file (data.json, portfolio.yaml, profile.json) seeds the map
with its top-level keys; dedicated section files override those keys.
"""

import re
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Pattern, Tuple

from folio.contexts.ingest.format_processors import FormatTag, process_content
from folio.contexts.ingest.logger import _log_debug, _log_info, _log_warning

MAX_FILE_SIZE = 1024 * 1024  # 1 MiB

_DATA = r"(json|ya?ml)"
_DOC = r"(md|markdown)"

# section -> [(filename pattern, priority)], checked in declaration order
FILE_PATTERNS: "OrderedDict[str, List[Tuple[Pattern, int]]]" = OrderedDict(
    [
        (
            "data",
            [
                (re.compile(rf"^data\.{_DATA}$", re.I), 1),
                (re.compile(rf"^portfolio\.{_DATA}$", re.I), 1),
                (re.compile(rf"^profile\.{_DATA}$", re.I), 2),
            ],
        ),
        (
            "about",
            [
                (re.compile(rf"^about\.{_DOC}$", re.I), 1),
                (re.compile(rf"^bio\.{_DOC}$", re.I), 2),
                (re.compile(rf"^profile\.{_DOC}$", re.I), 2),
                (re.compile(r"^readme\.md$", re.I), 3),
            ],
        ),
        (
            "projects",
            [
                (re.compile(rf"^projects\.{_DATA}$", re.I), 1),
                (re.compile(rf"^work\.{_DATA}$", re.I), 2),
                (re.compile(rf"^projects\.{_DOC}$", re.I), 4),
            ],
        ),
        (
            "skills",
            [
                (re.compile(rf"^skills\.{_DATA}$", re.I), 1),
                (re.compile(rf"^technologies\.{_DATA}$", re.I), 2),
                (re.compile(rf"^expertise\.{_DATA}$", re.I), 3),
            ],
        ),
        (
            "experience",
            [
                (re.compile(rf"^experience\.{_DATA}$", re.I), 1),
                (re.compile(rf"^work-history\.{_DATA}$", re.I), 2),
                (re.compile(rf"^career\.{_DATA}$", re.I), 3),
                (re.compile(rf"^resume\.{_DATA}$", re.I), 4),
            ],
        ),
        (
            "education",
            [
                (re.compile(rf"^education\.{_DATA}$", re.I), 1),
                (re.compile(rf"^academic\.{_DATA}$", re.I), 2),
                (re.compile(rf"^qualifications\.{_DATA}$", re.I), 3),
            ],
        ),
        (
            "contact",
            [
                (re.compile(rf"^contact\.{_DATA}$", re.I), 1),
                (re.compile(rf"^social\.{_DATA}$", re.I), 2),
                (re.compile(rf"^links\.{_DATA}$", re.I), 3),
            ],
        ),
        (
            "config",
            [
                (re.compile(rf"^config\.{_DATA}$", re.I), 1),
                (re.compile(rf"^settings\.{_DATA}$", re.I), 2),
                (re.compile(rf"^_config\.{_DATA}$", re.I), 3),
            ],
        ),
    ]
)

EXTENSION_FORMATS = {
    "json": FormatTag.JSON,
    "yaml": FormatTag.YAML,
    "yml": FormatTag.YAML,
    "md": FormatTag.MARKDOWN,
    "markdown": FormatTag.MARKDOWN,
    "txt": FormatTag.TEXT,
}


@dataclass
class RepositoryFile:
    """
    A file from a portfolio repository, already read into memory.

    Attributes:
        name: Base filename (e.g., 'about.md')
        content: Decoded file text
        path: Repository-relative path (defaults to name)
        size: Size in bytes (defaults to the UTF-8 length of content)
    """

    name: str
    content: str
    path: Optional[str] = None
    size: Optional[int] = None

    def __post_init__(self):
        if self.path is None:
            self.path = self.name
        if self.size is None:
            self.size = len(self.content.encode("utf-8"))


@dataclass
class CategorizedFile:
    file: RepositoryFile
    section: str
    priority: int


def file_format(filename: str) -> Optional[FormatTag]:
    """Content format implied by a filename's extension, or None if unsupported."""
    if "." not in filename:
        return None
    extension = filename.rsplit(".", 1)[1].lower()
    return EXTENSION_FORMATS.get(extension)


def match_section(filename: str) -> Optional[Tuple[str, int]]:
    """
    Find the section a filename belongs to.

    Returns:
        (section, priority) for the first matching pattern, or None
    """
    for section, patterns in FILE_PATTERNS.items():
        for pattern, priority in patterns:
            if pattern.match(filename):
                return section, priority
    return None


def categorize_files(
    files: Iterable[RepositoryFile], max_file_size: int = MAX_FILE_SIZE
) -> Dict[str, List[CategorizedFile]]:
    """
    Group repository files by portfolio section.

    Files over max_file_size or matching no pattern are skipped. Each section's
    list is sorted by priority (stable, so repository order breaks ties).

    Returns:
        Dict mapping every known section to its (possibly empty) file list
    """
    categorized: Dict[str, List[CategorizedFile]] = {section: [] for section in FILE_PATTERNS}

    for repo_file in files:
        if repo_file.size > max_file_size:
            _log_warning(f"Skipping {repo_file.path}: {repo_file.size} bytes exceeds {max_file_size}")
            continue

        match = match_section(repo_file.name)
        if match is None:
            _log_debug(f"No section matches {repo_file.path}")
            continue

        section, priority = match
        categorized[section].append(CategorizedFile(repo_file, section, priority))

    for section_files in categorized.values():
        section_files.sort(key=lambda entry: entry.priority)

    return categorized


def _tagged(repo_file: RepositoryFile) -> Dict[str, Any]:
    tag = file_format(repo_file.name) or FormatTag.TEXT
    return {"format": tag.value, "content": repo_file.content}


def map_files_to_content(
    files: Iterable[RepositoryFile], max_file_size: int = MAX_FILE_SIZE
) -> Dict[str, Any]:
    """
    Build a RawContentMap from repository files.

    The highest priority data file is parsed and its top-level keys seed the
    map. Every other section contributes its highest priority file as a
    format-tagged node, overriding a seeded key of the same name. Config files
    land under "config".

    Args:
        files: Repository files
        max_file_size: Files larger than this are ignored

    Returns:
        RawContentMap ready for PortfolioEngine.process_portfolio_data()
    """
    categorized = categorize_files(files, max_file_size=max_file_size)
    content: Dict[str, Any] = {}

    data_files = categorized.pop("data")
    if data_files:
        primary = data_files[0].file
        parsed = process_content(_tagged(primary)["format"], primary.content)
        if isinstance(parsed, dict):
            content.update(parsed)
            _log_info(f"Seeded portfolio from {primary.path} ({len(parsed)} keys)")
        else:
            _log_warning(f"Data file {primary.path} is not a mapping, ignoring it")

    for section, section_files in categorized.items():
        if not section_files:
            continue
        primary = section_files[0].file
        content[section] = _tagged(primary)
        _log_debug(f"Section '{section}' <- {primary.path}")

    return content
