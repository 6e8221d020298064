"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path, phase: str = "template") -> Path:
    """
    Setup logger for templating context.

    Args:
        log_dir: Directory for this templating session
        phase: Phase name for provenance (e.g. "validate", "list")

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Phase": phase},
    )


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [template] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_unknown_reference(kind: str, name, fallback: str) -> None:
    """Log an unknown template/style name resolved to its documented default."""
    _log_debug(f"Unknown {kind} '{name}', using '{fallback}'")


def log_validation_result(template_id: str, result) -> None:
    """
    Log template validation outcome.

    Args:
        template_id: Template identifier
        result: ValidationResult from TemplateRegistry.validate()
    """
    if result.valid:
        _log_success(f"Template '{template_id}' is valid")
    else:
        _log_error(f"Template '{template_id}' failed validation")
        for error in result.errors:
            _log_error(f"  {error}")
