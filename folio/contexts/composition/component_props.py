"""
Component Props Generation

Builds the render props for each section of a template. Every section gets the
base props {data, styling, template}; known sections add their own fields:

    header/hero -> name, title, description, avatar, repository
    about       -> content (rendered HTML when available), frontmatter
    projects    -> projects, showTechnologies
    skills      -> skills, groupByCategory
    contact     -> contact, social, showForm
"""

from typing import Any, Dict, List

from folio.contexts.templating.template_data_structures import TemplateDescriptor


def _unwrap_list(value: Any, key: str) -> Any:
    # A section file often nests its list under its own name ({projects: [...]})
    if isinstance(value, dict) and isinstance(value.get(key), list):
        return value[key]
    if value is None:
        return []
    return value


def _about_content(about: Any) -> Any:
    if isinstance(about, dict):
        # Parsed Markdown document: its HTML, even when the body is empty
        if "html" in about and "frontmatter" in about:
            return about["html"]
        for key in ("html", "content", "body"):
            if about.get(key):
                return about[key]
    return about


def _header_props(data: Dict[str, Any], template: TemplateDescriptor) -> Dict[str, Any]:
    return {
        "name": data.get("name"),
        "title": data.get("title"),
        "description": data.get("description"),
        "avatar": data.get("avatar"),
        "repository": data.get("repository"),
    }


def _about_props(data: Dict[str, Any], template: TemplateDescriptor) -> Dict[str, Any]:
    about = data.get("about")
    frontmatter = about.get("frontmatter") if isinstance(about, dict) else None
    return {
        "content": _about_content(about),
        "frontmatter": frontmatter or {},
    }


def _projects_props(data: Dict[str, Any], template: TemplateDescriptor) -> Dict[str, Any]:
    return {
        "projects": _unwrap_list(data.get("projects"), "projects"),
        "showTechnologies": template.styling.show_technologies is not False,
    }


def _skills_props(data: Dict[str, Any], template: TemplateDescriptor) -> Dict[str, Any]:
    return {
        "skills": _unwrap_list(data.get("skills"), "skills"),
        "groupByCategory": template.styling.group_skills is not False,
    }


def _contact_props(data: Dict[str, Any], template: TemplateDescriptor) -> Dict[str, Any]:
    contact = data.get("contact") or {}
    social = data.get("social")
    if not social and isinstance(contact, dict):
        social = contact.get("social")
    return {
        "contact": contact,
        "social": social or {},
        "showForm": template.styling.show_contact_form is True,
    }


SECTION_PROP_BUILDERS = {
    "header": _header_props,
    "hero": _header_props,
    "about": _about_props,
    "projects": _projects_props,
    "skills": _skills_props,
    "contact": _contact_props,
}


def generate_section_props(
    section: str, data: Dict[str, Any], template: TemplateDescriptor
) -> Dict[str, Any]:
    """
    Props for one section.

    Args:
        section: Section name
        data: Augmented portfolio data (with "styling")
        template: Resolved template descriptor

    Returns:
        Base props {data, styling, template} merged with section-specific props
    """
    props = {
        "data": data.get(section),
        "styling": data.get("styling"),
        "template": template.id,
    }
    builder = SECTION_PROP_BUILDERS.get(section)
    if builder is not None:
        props.update(builder(data, template))
    return props


def generate_component_props(
    data: Dict[str, Any], template: TemplateDescriptor
) -> Dict[str, Dict[str, Any]]:
    """Props for every template section that has a component binding, in section order."""
    rendered: List[str] = [section for section in template.sections if template.components.get(section)]
    return {section: generate_section_props(section, data, template) for section in rendered}
