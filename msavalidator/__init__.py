"""
Validation of FASTA multiple sequence alignments.

This package parses FASTA text into an in-memory alignment, checks that all
sequences share one length and that headers follow a pipe-delimited field
convention, and writes the validated alignment back as FASTA.
"""

from .exceptions import (
    EmptyAlignmentError,
    InvalidFormatError,
    LengthMismatchError,
    MalformedHeaderError,
    MSAError,
    NoDataError,
    ParseError,
)
from .models import ProblemHeader, Record
from .msa import MSA

__all__ = [
    "MSA",
    "Record",
    "ProblemHeader",
    "MSAError",
    "ParseError",
    "InvalidFormatError",
    "LengthMismatchError",
    "EmptyAlignmentError",
    "MalformedHeaderError",
    "NoDataError",
]
