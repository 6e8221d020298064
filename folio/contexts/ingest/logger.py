"""
Ingest context logger.

Provides logging interface for the ingest context with automatic [ingest] prefix.
All ingest modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[ingest]"


def _log_info(message: str) -> None:
    """Log info message with [ingest] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [ingest] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [ingest] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_parse_degradation(format_tag: str, error: Exception, content: str) -> None:
    """Log a parse failure that fell back to the original text."""
    snippet = content[:60] + "..." if len(content) > 60 else content
    _log_warning(f"Failed to parse {format_tag} content, passing text through: {error}")
    _log_debug(f"  Content: {snippet!r}")


def log_depth_truncation(path: str, max_depth: int) -> None:
    """Log a node left unprocessed by the depth guard."""
    _log_debug(f"Depth limit {max_depth} reached at '{path or '<root>'}', node left unprocessed")
