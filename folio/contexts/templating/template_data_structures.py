"""
Template Data Structures

Defines data classes for template descriptors, their default styling and
validation results. Descriptors arrive either from the built-in templates.yaml
or as plain mappings from callers registering custom templates.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

# camelCase keys accepted from callers using the presentation layer's spelling
_STYLING_ALIASES = {
    "colorScheme": "color_scheme",
    "showTechnologies": "show_technologies",
    "groupSkills": "group_skills",
    "showContactForm": "show_contact_form",
}


@dataclass
class TemplateStyling:
    """
    Default styling of a template.

    Attributes:
        theme: Theme name (e.g., 'light', 'gradient')
        color_scheme: Named palette (see defaults.COLOR_SCHEMES)
        typography: Named typography style (see defaults.TYPOGRAPHY_STYLES)
        show_technologies: Projects section shows technologies unless False
        group_skills: Skills section groups by category unless False
        show_contact_form: Contact section shows a form only if True
        extra: Any other styling keys, passed through untouched
    """

    theme: str = "light"
    color_scheme: str = "blue"
    typography: str = "modern"
    show_technologies: Optional[bool] = None
    group_skills: Optional[bool] = None
    show_contact_form: Optional[bool] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "TemplateStyling":
        styling = cls()
        if not isinstance(data, Mapping):
            return styling
        for key, value in data.items():
            attr = _STYLING_ALIASES.get(key, key)
            if attr != "extra" and attr in cls.__dataclass_fields__:
                setattr(styling, attr, value)
            else:
                styling.extra[key] = value
        return styling

    def to_dict(self) -> Dict[str, Any]:
        """Styling in the presentation layer's key spelling (unset flags omitted)."""
        data = {
            "theme": self.theme,
            "colorScheme": self.color_scheme,
            "typography": self.typography,
        }
        flags = {
            "showTechnologies": self.show_technologies,
            "groupSkills": self.group_skills,
            "showContactForm": self.show_contact_form,
        }
        data.update({key: value for key, value in flags.items() if value is not None})
        data.update(self.extra)
        return data


@dataclass
class TemplateDescriptor:
    """
    A named presentation template.

    Attributes:
        id: Registry identifier (e.g., 'modern')
        name: Display name
        layout: Layout kind ('standard', 'centered', 'hero', 'navigation', ...)
        sections: Ordered section names rendered by the template
        components: Section name -> UI component name
        styling: Default styling
        description: Human-readable summary
        registered_at: ISO timestamp stamped by TemplateRegistry.register()
    """

    id: str
    name: str
    layout: str = "standard"
    sections: List[str] = field(default_factory=list)
    components: Dict[str, str] = field(default_factory=dict)
    styling: TemplateStyling = field(default_factory=TemplateStyling)
    description: str = ""
    registered_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], template_id: str = None) -> "TemplateDescriptor":
        """
        Build a descriptor from a plain mapping without validating it.

        Args:
            data: Descriptor fields (missing fields get empty defaults)
            template_id: Identifier to use; falls back to data["id"]
        """
        template_id = template_id or data.get("id")
        return cls(
            id=template_id,
            name=data.get("name") or template_id,
            layout=data.get("layout") or "standard",
            sections=list(data.get("sections") or []),
            components=dict(data.get("components") or {}),
            styling=TemplateStyling.from_dict(data.get("styling")),
            description=data.get("description") or "",
            registered_at=data.get("registered_at"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "layout": self.layout,
            "sections": list(self.sections),
            "components": dict(self.components),
            "styling": self.styling.to_dict(),
            "registeredAt": self.registered_at,
        }


@dataclass
class ValidationResult:
    """Result from TemplateRegistry.validate()."""

    valid: bool
    errors: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.valid
