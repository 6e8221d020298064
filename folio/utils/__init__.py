"""
Shared utilities for FOLIO.

Common functionality used across contexts:
- Logger setup with provenance tracking
- Timestamps
"""

from folio.utils.timestamp import now

__all__ = ["now"]
