"""
Style Resolution

Resolves named color schemes, typography styles and layout styles to concrete
style tables, and merges a template's default styling with overrides carried by
the portfolio data.

Every lookup is total: an unknown name resolves to the table's documented
default (blue / modern / standard).

Precedence: colors supplied by the portfolio itself (theme.colors, or a
top-level colors key) are used verbatim and replace the template's named
color scheme.
"""

import copy
from typing import Any, Dict, Optional

from folio.contexts.templating.defaults import (
    COLOR_SCHEMES,
    DEFAULT_COLOR_SCHEME,
    DEFAULT_LAYOUT,
    DEFAULT_TYPOGRAPHY,
    LAYOUT_STYLES,
    TYPOGRAPHY_STYLES,
)
from folio.contexts.templating.logger import log_unknown_reference
from folio.contexts.templating.template_data_structures import TemplateDescriptor


def _lookup(kind: str, table: Dict[str, Dict[str, str]], name: Any, fallback: str) -> Dict[str, str]:
    if isinstance(name, str) and name in table:
        return dict(table[name])
    log_unknown_reference(kind, name, fallback)
    return dict(table[fallback])


def resolve_color_scheme(name: Optional[str]) -> Dict[str, str]:
    """Palette for a color scheme name; unknown names get the blue palette."""
    return _lookup("color scheme", COLOR_SCHEMES, name, DEFAULT_COLOR_SCHEME)


def resolve_typography(name: Optional[str]) -> Dict[str, str]:
    """Typography style for a name; unknown names get the modern style."""
    return _lookup("typography", TYPOGRAPHY_STYLES, name, DEFAULT_TYPOGRAPHY)


def resolve_layout_style(layout: Optional[str]) -> Dict[str, str]:
    """Layout style for a layout kind; unknown kinds get the standard style."""
    return _lookup("layout", LAYOUT_STYLES, layout, DEFAULT_LAYOUT)


def find_color_override(data: Any) -> Optional[Any]:
    """
    Colors the portfolio data defines for itself, if any.

    Checks theme.colors first, then a top-level colors key.
    """
    if not isinstance(data, dict):
        return None

    theme = data.get("theme")
    if isinstance(theme, dict) and theme.get("colors"):
        return theme["colors"]

    if data.get("colors"):
        return data["colors"]

    return None


def resolve_styling(data: Any, template: TemplateDescriptor) -> Dict[str, Any]:
    """
    Resolve the final styling for a portfolio rendered with a template.

    Args:
        data: Normalized portfolio data
        template: Resolved template descriptor

    Returns:
        Template styling fields (theme, colorScheme, typography, flags) plus:
        - colors: Data override if present, else the template's palette
        - customStyles: {colors, typography, layout} resolved style tables
    """
    override = find_color_override(data)
    if override is not None:
        colors = override
    else:
        colors = resolve_color_scheme(template.styling.color_scheme)

    custom_styles = {
        "colors": colors,
        "typography": resolve_typography(template.styling.typography),
        "layout": resolve_layout_style(template.layout),
    }

    styling = copy.deepcopy(template.styling.to_dict())
    styling["colors"] = colors
    styling["customStyles"] = custom_styles
    return styling
