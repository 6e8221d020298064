"""
Composition Context

Responsibilities:
- Orchestrates normalization, template resolution and styling for one portfolio
- Synthesizes layout-specific content (hero block, navigation links)
- Generates per-section component props for the presentation layer

Owns: The ProcessedBundle output contract
Never: Renders UI or fetches repository content
"""

from folio.contexts.composition.bundle import BundleMetadata, ProcessedBundle
from folio.contexts.composition.engine import PortfolioEngine, create_engine

__all__ = ["PortfolioEngine", "create_engine", "ProcessedBundle", "BundleMetadata"]
