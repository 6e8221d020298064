"""
Portfolio Engine

Orchestrates one processing run:

1. Normalize the raw content map (ingest context)
2. Resolve the template, falling back to the default template
3. Apply layout-specific augmentation
4. Resolve styling (data color overrides win over the template scheme)
5. Generate component props for each template section
6. Assemble the ProcessedBundle with run metadata

process_portfolio_data() does not raise for malformed content or unknown
names; every step degrades to a documented default. The only structured
failure surface is validate_template() for caller-supplied descriptors.

Each engine owns its TemplateRegistry unless one is injected. Processing only
reads the registry, so concurrent calls are safe once registration is done.
"""

import time
from typing import Any, Dict, List, Mapping, Optional

from folio.contexts.composition.augmentation import apply_layout_augmentation
from folio.contexts.composition.bundle import BundleMetadata, ProcessedBundle
from folio.contexts.composition.component_props import generate_component_props
from folio.contexts.composition.logger import _log_debug, _log_warning, log_processing_result
from folio.contexts.ingest.section_normalizer import SectionNormalizer, missing_sections
from folio.contexts.templating.registries import TemplateRegistry
from folio.contexts.templating.style_resolver import resolve_styling
from folio.contexts.templating.template_data_structures import (
    TemplateDescriptor,
    ValidationResult,
)
from folio.utils.timestamp import now


class PortfolioEngine:
    """Normalization and templating engine for portfolio content."""

    def __init__(
        self,
        registry: TemplateRegistry = None,
        default_template: str = None,
        max_depth: int = None,
    ):
        """
        Initialize the engine.

        Args:
            registry: Template registry to use. A new one with the built-in
                      templates is created if omitted.
            default_template: Default template id for a newly created registry
                              (ignored when a registry is injected)
            max_depth: Depth guard for normalization (default 10)
        """
        self.registry = registry if registry is not None else TemplateRegistry(default_template)
        self.normalizer = SectionNormalizer(max_depth)

    @property
    def max_depth(self) -> int:
        return self.normalizer.max_depth

    def process_portfolio_data(
        self, raw_data: Mapping[str, Any], template_id: Optional[str] = None
    ) -> ProcessedBundle:
        """
        Turn raw portfolio content into template-bound render props.

        Args:
            raw_data: RawContentMap; values are plain data or
                      {"format": ..., "content": ...} wrappers, arbitrarily nested
            template_id: Template to render with (None or unknown -> default)

        Returns:
            ProcessedBundle with template, data, component_props and metadata

        Examples:
            >>> engine = PortfolioEngine()
            >>> bundle = engine.process_portfolio_data(
            ...     {"about": {"format": "markdown", "content": "# Hi\\nHello"}}
            ... )
            >>> bundle.component_props["about"]["content"]
            '<h1>Hi</h1>\\n<p>Hello</p>\\n'
        """
        start = time.perf_counter()

        if not isinstance(raw_data, Mapping):
            _log_warning(
                f"Portfolio data must be a mapping, got {type(raw_data).__name__}; using empty data"
            )
            raw_data = {}

        normalized = self.normalizer.normalize_map(raw_data)
        data: Dict[str, Any] = normalized.data

        absent = missing_sections(data)
        if absent:
            _log_debug(f"Sections without content: {', '.join(absent)}")

        template = self.registry.get(template_id)

        data = apply_layout_augmentation(data, template)
        data["styling"] = resolve_styling(data, template)

        component_props = generate_component_props(data, template)

        bundle = ProcessedBundle(
            template=template,
            data=data,
            component_props=component_props,
            metadata=BundleMetadata(
                processed_at=now(),
                template_id=template.id,
                data_formats=self.normalizer.detect_map_formats(raw_data),
                truncated_paths=normalized.truncated_paths,
            ),
        )

        log_processing_result(bundle, time.perf_counter() - start)
        return bundle

    # Registry pass-throughs

    def register_template(self, template_id: str, descriptor: Any) -> TemplateDescriptor:
        return self.registry.register(template_id, descriptor)

    def get_template(self, template_id: Optional[str] = None) -> TemplateDescriptor:
        return self.registry.get(template_id)

    def list_templates(self) -> List[TemplateDescriptor]:
        return self.registry.list()

    def validate_template(self, descriptor: Any) -> ValidationResult:
        return self.registry.validate(descriptor)


def create_engine(**options) -> PortfolioEngine:
    """Create a new engine instance (see PortfolioEngine for options)."""
    return PortfolioEngine(**options)
