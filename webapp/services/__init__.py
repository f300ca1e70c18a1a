"""
Webapp services package.

This package provides modular services for the Flask application:
- logging: Application logging configuration
- msa: Per-session alignment storage
"""

# Re-export commonly used items for convenience
from webapp.services.logging import configure_logging
from webapp.services.msa import SessionStore, UnknownSessionError

__all__ = [
    # Logging
    "configure_logging",
    # MSA
    "SessionStore",
    "UnknownSessionError",
]
