"""
Composition context logger.

Provides logging interface for the composition context with automatic [compose]
prefix, plus the session setup used by scripts that drive the engine.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[compose]"


def setup_composition_logger(log_dir: Path, template_id: str = None) -> Path:
    """
    Setup logger for a processing session.

    Args:
        log_dir: Directory for this processing session
        template_id: Requested template, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="compose",
        log_dir=log_dir,
        extra_provenance={"Template": template_id or "<default>"},
    )


def _log_info(message: str) -> None:
    """Log info message with [compose] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [compose] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [compose] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [compose] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_processing_result(bundle, elapsed_time: float) -> None:
    """
    Log the outcome of one process_portfolio_data() call.

    Args:
        bundle: ProcessedBundle returned by the engine
        elapsed_time: Time taken in seconds
    """
    metadata = bundle.metadata
    _log_success(
        f"Processed portfolio with template '{metadata.template_id}' ({elapsed_time:.3f}s)"
    )
    _log_debug(f"  Sections: {', '.join(bundle.component_props) or '<none>'}")
    if metadata.data_formats:
        _log_debug(f"  Formats: {', '.join(metadata.data_formats)}")
    if metadata.truncated_paths:
        _log_warning(
            f"  Depth guard left {len(metadata.truncated_paths)} node(s) unprocessed: "
            f"{', '.join(metadata.truncated_paths)}"
        )
