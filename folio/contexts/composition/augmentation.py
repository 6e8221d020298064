"""
Layout Augmentation

Adds layout-specific content to normalized portfolio data before props are
generated:

- hero: synthesizes a hero block from top-level portfolio fields
- navigation: synthesizes a link list from the template's sections
- centered: marks the data as a centered, narrow layout
- anything else: marks the data as a standard layout
"""

from typing import Any, Dict, List

from folio.contexts.composition.logger import _log_debug
from folio.contexts.templating.defaults import get_default_call_to_action
from folio.contexts.templating.template_data_structures import TemplateDescriptor


def format_section_label(section: str) -> str:
    """Navigation label for a section name ('projects' -> 'Projects')."""
    return section[:1].upper() + section[1:]


def create_hero_section(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build the hero block from top-level portfolio fields.

    Title falls back to "<name>'s Portfolio" (an absent name formats as an empty
    string) and the call-to-action to "View My Work" linking to #projects.
    """
    name = data.get("name")
    return {
        "title": data.get("title") or f"{name or ''}'s Portfolio",
        "subtitle": data.get("description") or data.get("tagline"),
        "backgroundImage": data.get("heroImage") or data.get("coverImage"),
        "avatar": data.get("avatar"),
        "name": name,
        "callToAction": data.get("callToAction") or get_default_call_to_action(),
    }


def create_navigation_data(data: Dict[str, Any], template: TemplateDescriptor) -> Dict[str, Any]:
    """Build brand info and one link per template section, skipping navigation itself."""
    links: List[Dict[str, Any]] = [
        {"label": format_section_label(section), "href": f"#{section}", "active": False}
        for section in template.sections
        if section != "navigation"
    ]
    return {
        "brand": {"name": data.get("name"), "avatar": data.get("avatar")},
        "links": links,
    }


def apply_layout_augmentation(data: Dict[str, Any], template: TemplateDescriptor) -> Dict[str, Any]:
    """
    Return a copy of data with the template layout's additions.

    Args:
        data: Normalized portfolio data (not modified)
        template: Resolved template descriptor

    Returns:
        Shallow copy of data with hero/navigation/layout keys added
    """
    augmented = dict(data)

    if template.layout == "hero":
        augmented["hero"] = create_hero_section(data)
    elif template.layout == "navigation":
        augmented["navigation"] = create_navigation_data(data, template)
    elif template.layout == "centered":
        augmented["layout"] = {"centered": True, "maxWidth": "4xl"}
    else:
        augmented["layout"] = {"standard": True}

    _log_debug(f"Applied '{template.layout}' layout augmentation")
    return augmented
