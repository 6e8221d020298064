"""
Processed Bundle Data Structures

The output contract of PortfolioEngine.process_portfolio_data(). A presentation
layer maps template.id to a concrete layout and binds component_props[section]
to the matching UI unit.

Values that failed to parse are carried as their original, unsanitized text.
The presentation layer must sanitize anything it inserts as HTML.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from folio.contexts.templating.template_data_structures import TemplateDescriptor


@dataclass
class BundleMetadata:
    """
    Diagnostics about one processing run.

    Attributes:
        processed_at: ISO timestamp of the run
        template_id: Id of the template actually used (after default fallback)
        data_formats: Canonical formats of the tagged nodes found in the input
        truncated_paths: Paths of nodes left unprocessed by the depth guard
    """

    processed_at: str
    template_id: str
    data_formats: List[str] = field(default_factory=list)
    truncated_paths: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "processedAt": self.processed_at,
            "templateId": self.template_id,
            "dataFormats": list(self.data_formats),
            "truncatedPaths": list(self.truncated_paths),
        }


@dataclass
class ProcessedBundle:
    """
    Full result of one engine invocation.

    Attributes:
        template: Resolved template descriptor
        data: Normalized portfolio data plus layout augmentations and styling
        component_props: Section name -> render props, in template section order
        metadata: Run diagnostics
    """

    template: TemplateDescriptor
    data: Dict[str, Any]
    component_props: Dict[str, Dict[str, Any]]
    metadata: BundleMetadata

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the presentation layer's key spelling."""
        return {
            "template": self.template.to_dict(),
            "data": self.data,
            "componentProps": self.component_props,
            "metadata": self.metadata.to_dict(),
        }
