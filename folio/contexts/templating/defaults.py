"""
Default values for FOLIO templating.

Provides the named style tables shared by:
- style_resolver.py (color, typography and layout lookups)
- registries.py (default template id, built-in template file)

Every lookup table names its fallback entry; unknown names resolve to it.
"""

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv

load_dotenv()

BUILTIN_TEMPLATES_PATH = Path(__file__).parent / "templates.yaml"
TEMPLATES_PATH = Path(os.getenv("FOLIO_TEMPLATES_PATH", str(BUILTIN_TEMPLATES_PATH)))
DEFAULT_TEMPLATE_ID = os.getenv("FOLIO_DEFAULT_TEMPLATE", "default")

COLOR_SCHEMES: Dict[str, Dict[str, str]] = {
    "blue": {
        "primary": "#3B82F6",
        "secondary": "#1E40AF",
        "accent": "#60A5FA",
        "background": "#F8FAFC",
        "text": "#1F2937",
    },
    "blue-purple": {
        "primary": "#6366F1",
        "secondary": "#8B5CF6",
        "accent": "#A855F7",
        "background": "#F1F5F9",
        "text": "#1E293B",
    },
    "gray": {
        "primary": "#6B7280",
        "secondary": "#4B5563",
        "accent": "#9CA3AF",
        "background": "#F9FAFB",
        "text": "#111827",
    },
    "neutral": {
        "primary": "#525252",
        "secondary": "#404040",
        "accent": "#737373",
        "background": "#FAFAFA",
        "text": "#171717",
    },
}
DEFAULT_COLOR_SCHEME = "blue"

TYPOGRAPHY_STYLES: Dict[str, Dict[str, str]] = {
    "modern": {
        "fontFamily": "Inter, system-ui, sans-serif",
        "headingWeight": "700",
        "bodyWeight": "400",
    },
    "clean": {
        "fontFamily": "system-ui, sans-serif",
        "headingWeight": "600",
        "bodyWeight": "400",
    },
    "bold": {
        "fontFamily": "Inter, system-ui, sans-serif",
        "headingWeight": "800",
        "bodyWeight": "500",
    },
    "serif": {
        "fontFamily": "Georgia, serif",
        "headingWeight": "600",
        "bodyWeight": "400",
    },
}
DEFAULT_TYPOGRAPHY = "modern"

LAYOUT_STYLES: Dict[str, Dict[str, str]] = {
    "standard": {"maxWidth": "6xl", "spacing": "normal"},
    "centered": {"maxWidth": "4xl", "spacing": "comfortable"},
    "hero": {"maxWidth": "7xl", "spacing": "spacious"},
    "navigation": {"maxWidth": "6xl", "spacing": "compact"},
}
DEFAULT_LAYOUT = "standard"

# Hero call-to-action when the portfolio does not define one
DEFAULT_CALL_TO_ACTION = {"text": "View My Work", "link": "#projects"}


def get_default_call_to_action() -> Dict[str, Any]:
    """Fresh copy of the default hero call-to-action."""
    return DEFAULT_CALL_TO_ACTION.copy()
