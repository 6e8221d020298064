"""
FOLIO - Format-agnostic pOrtfolio Layout and Ingestion Orchestrator

A normalization and templating engine that turns loosely structured repository
content (JSON, YAML, Markdown with frontmatter, plain text) into a canonical
portfolio document and binds it to a named presentation template.

Architecture:
- Ingest Context: Format detection, parsing and section normalization
- Templating Context: Template registry, built-in layouts and style resolution
- Composition Context: Layout augmentation and per-section component props
"""

from folio.contexts.composition.engine import PortfolioEngine, create_engine

__version__ = "0.1.0"

__all__ = ["PortfolioEngine", "create_engine"]
