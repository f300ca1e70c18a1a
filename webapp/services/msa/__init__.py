"""
MSA (Multiple Sequence Alignment) services.

This package keeps per-session alignments for the upload endpoints.
"""

from webapp.services.msa.sessions import SessionStore, UnknownSessionError

__all__ = [
    "SessionStore",
    "UnknownSessionError",
]
