"""
Templating Context

Responsibilities:
- Holds template descriptors (built-in set from templates.yaml plus custom registrations)
- Resolves unknown template ids to the default template
- Validates caller-supplied descriptors
- Resolves named color, typography and layout styles with data overrides

Owns: Template registry, style tables
Never: Parses content or builds component props
"""

from folio.contexts.templating.exceptions import InvalidTemplateError
from folio.contexts.templating.registries import (
    TemplateRegistry,
    load_template_descriptors,
    validate_descriptor,
)
from folio.contexts.templating.style_resolver import (
    resolve_color_scheme,
    resolve_layout_style,
    resolve_styling,
    resolve_typography,
)
from folio.contexts.templating.template_data_structures import (
    TemplateDescriptor,
    TemplateStyling,
    ValidationResult,
)

__all__ = [
    # Registry
    "TemplateRegistry",
    "load_template_descriptors",
    "validate_descriptor",
    "InvalidTemplateError",
    # Data structures
    "TemplateDescriptor",
    "TemplateStyling",
    "ValidationResult",
    # Styles
    "resolve_color_scheme",
    "resolve_typography",
    "resolve_layout_style",
    "resolve_styling",
]
