"""
Logging configuration for the Flask application.
"""

from webapp.services.logging.config import configure_logging

__all__ = ["configure_logging"]
