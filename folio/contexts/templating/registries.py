"""
Template Registry

In-memory store of named template descriptors. Each registry is an ordinary
object owned by the engine that created it (or injected into it); nothing is
shared at module level, so engines with different custom templates can run
side by side.

Built-in templates are loaded from templates.yaml at construction. The file can
be swapped with the FOLIO_TEMPLATES_PATH environment variable or the
templates_path argument, and must define the default template.

Registration is not synchronized. Register custom templates before handing the
registry to concurrent readers.
"""

from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from omegaconf import OmegaConf

from folio.contexts.templating.defaults import DEFAULT_TEMPLATE_ID, TEMPLATES_PATH
from folio.contexts.templating.exceptions import InvalidTemplateError
from folio.contexts.templating.logger import (
    _log_debug,
    log_unknown_reference,
    log_validation_result,
)
from folio.contexts.templating.template_data_structures import (
    TemplateDescriptor,
    ValidationResult,
)
from folio.utils.timestamp import now

REQUIRED_FIELDS = ("name", "sections", "components")

DescriptorLike = Union[TemplateDescriptor, Mapping[str, Any]]


def validate_descriptor(descriptor: Any) -> ValidationResult:
    """
    Check a template descriptor for structural problems.

    Checks:
    - Required fields (name, sections, components) are present and non-empty
    - sections is a list and components is a mapping
    - Every component binding names a section listed in sections

    Never raises; problems are returned as messages.

    Args:
        descriptor: TemplateDescriptor or plain mapping

    Returns:
        ValidationResult with valid flag and error messages
    """
    if isinstance(descriptor, TemplateDescriptor):
        descriptor = {
            "name": descriptor.name,
            "sections": descriptor.sections,
            "components": descriptor.components,
        }

    if not isinstance(descriptor, Mapping):
        return ValidationResult(
            valid=False,
            errors=[f"Template descriptor must be a mapping, got {type(descriptor).__name__}"],
        )

    errors = []

    missing = [name for name in REQUIRED_FIELDS if not descriptor.get(name)]
    if missing:
        errors.append(f"Missing required fields: {', '.join(missing)}")

    sections = descriptor.get("sections")
    components = descriptor.get("components")

    if sections and not isinstance(sections, (list, tuple)):
        errors.append(f"'sections' must be a list, got {type(sections).__name__}")
        sections = None
    if components and not isinstance(components, Mapping):
        errors.append(f"'components' must be a mapping, got {type(components).__name__}")
        components = None

    if sections and components:
        for section in components:
            if section not in sections:
                errors.append(f"Component binding for '{section}' has no matching section")

    return ValidationResult(valid=not errors, errors=errors)


def load_template_descriptors(config_path: Path) -> Dict[str, TemplateDescriptor]:
    """
    Load and validate template descriptors from a YAML file.

    The file maps template ids to descriptor fields (see templates.yaml).

    Args:
        config_path: Path to the templates YAML file

    Returns:
        Dict mapping template id to descriptor, in file order

    Raises:
        InvalidTemplateError: If the file is not a mapping or a descriptor is invalid
    """
    config = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    if not isinstance(config, dict):
        raise InvalidTemplateError(
            "Templates file must map template ids to descriptors", source_path=config_path
        )

    descriptors = {}
    for template_id, fields in config.items():
        result = validate_descriptor(fields)
        if not result.valid:
            raise InvalidTemplateError(
                "Invalid template descriptor",
                template_id=str(template_id),
                errors=result.errors,
                source_path=config_path,
            )
        descriptors[str(template_id)] = TemplateDescriptor.from_dict(
            fields, template_id=str(template_id)
        )

    return descriptors


class TemplateRegistry:
    """
    Registry of template descriptors with default-template fallback.

    get() never returns None: an absent or unknown id resolves to the default
    template's descriptor object.
    """

    def __init__(
        self,
        default_template_id: str = None,
        templates_path: Path = None,
    ):
        """
        Initialize the registry with the built-in templates.

        Args:
            default_template_id: Template returned for unknown ids. Defaults to
                                 FOLIO_DEFAULT_TEMPLATE from environment, or 'default'
            templates_path: Built-in templates YAML. Defaults to
                            FOLIO_TEMPLATES_PATH from environment, or the packaged file

        Raises:
            InvalidTemplateError: If the templates file is invalid or lacks the
                                  default template
        """
        self.templates_path = Path(templates_path) if templates_path else TEMPLATES_PATH
        self._default_template_id = default_template_id or DEFAULT_TEMPLATE_ID
        self._templates: Dict[str, TemplateDescriptor] = {}

        for template_id, descriptor in load_template_descriptors(self.templates_path).items():
            self.register(template_id, descriptor)

        if self._default_template_id not in self._templates:
            raise InvalidTemplateError(
                f"Default template '{self._default_template_id}' is not defined",
                source_path=self.templates_path,
            )

    @property
    def default_template_id(self) -> str:
        return self._default_template_id

    def register(self, template_id: str, descriptor: DescriptorLike) -> TemplateDescriptor:
        """
        Add or replace a template. Does not validate (see register_validated).

        Args:
            template_id: Registry identifier
            descriptor: TemplateDescriptor or plain mapping of descriptor fields

        Returns:
            The stored descriptor, stamped with its registration time
        """
        if isinstance(descriptor, TemplateDescriptor):
            descriptor = replace(descriptor, id=template_id)
        else:
            descriptor = TemplateDescriptor.from_dict(descriptor, template_id=template_id)

        descriptor.registered_at = now()

        if template_id in self._templates:
            _log_debug(f"Replacing template '{template_id}'")
        self._templates[template_id] = descriptor
        return descriptor

    def register_validated(self, template_id: str, descriptor: DescriptorLike) -> TemplateDescriptor:
        """
        Validate a descriptor, then register it.

        Raises:
            InvalidTemplateError: If validation fails (nothing is registered)
        """
        result = self.validate(descriptor)
        log_validation_result(template_id, result)
        if not result.valid:
            raise InvalidTemplateError(
                "Invalid template descriptor", template_id=template_id, errors=result.errors
            )
        return self.register(template_id, descriptor)

    def get(self, template_id: Optional[str] = None) -> TemplateDescriptor:
        """
        Get a template by id, falling back to the default template.

        Args:
            template_id: Registry identifier (None or unknown -> default)

        Returns:
            The registered descriptor object
        """
        if template_id is not None and template_id in self._templates:
            return self._templates[template_id]
        if template_id is not None:
            log_unknown_reference("template", template_id, self._default_template_id)
        return self._templates[self._default_template_id]

    def list(self) -> List[TemplateDescriptor]:
        """Snapshot of all registered descriptors in registration order."""
        return list(self._templates.values())

    def validate(self, descriptor: Any) -> ValidationResult:
        """Check a descriptor's structure. See validate_descriptor()."""
        return validate_descriptor(descriptor)

    def __contains__(self, template_id: str) -> bool:
        return template_id in self._templates

    def __len__(self) -> int:
        return len(self._templates)
