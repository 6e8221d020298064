"""Custom exceptions for the templating context."""

from pathlib import Path
from typing import List, Optional


class InvalidTemplateError(ValueError):
    """
    Exception raised when a template descriptor fails structural validation.

    Only raised on opt-in strict paths (register_validated, loading template
    files); TemplateRegistry.validate() itself reports errors as data.

    Attributes:
        message: Error description
        template_id: Identifier of the offending template
        errors: Validation errors from TemplateRegistry.validate()
        source_path: Config file the descriptor was loaded from, if any
    """

    def __init__(
        self,
        message: str,
        template_id: Optional[str] = None,
        errors: Optional[List[str]] = None,
        source_path: Optional[Path] = None,
    ):
        self.message = message
        self.template_id = template_id
        self.errors = list(errors or [])
        self.source_path = source_path

        parts = [message]

        if template_id:
            parts.append(f"Template: {template_id}")

        if source_path:
            parts.append(f"Source: {source_path}")

        for error in self.errors:
            parts.append(f"  - {error}")

        super().__init__("\n".join(parts))
