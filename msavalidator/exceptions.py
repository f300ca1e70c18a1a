"""
Custom exceptions for parsing and querying multiple sequence alignments.
"""

from __future__ import annotations

from .constants import (
    EMPTY_ALIGNMENT_MESSAGE,
    INVALID_FORMAT_MESSAGE,
    LENGTH_MISMATCH_MESSAGE,
    MALFORMED_HEADER_MESSAGE,
    NO_DATA_MESSAGE,
)


class MSAError(Exception):
    """Base exception for all MSA validator errors."""

    kind = "msa_error"


class ParseError(MSAError):
    """Raised when uploaded text cannot be accepted as an alignment."""

    kind = "parse_error"


class InvalidFormatError(ParseError):
    """Raised when the text cannot be read as FASTA at all."""

    kind = "invalid_format"

    def __init__(self, message: str = INVALID_FORMAT_MESSAGE):
        super().__init__(message)


class LengthMismatchError(ParseError):
    """Raised when a sequence differs in length from the alignment width."""

    kind = "length_mismatch"

    def __init__(self, header: str):
        self.header = header
        super().__init__(LENGTH_MISMATCH_MESSAGE.format(header=header))


class EmptyAlignmentError(ParseError):
    """Raised when the text contains no usable records."""

    kind = "empty"

    def __init__(self, message: str = EMPTY_ALIGNMENT_MESSAGE):
        super().__init__(message)


class NoDataError(MSAError):
    """Raised when a query runs before any alignment was loaded."""

    kind = "no_data"

    def __init__(self, message: str = NO_DATA_MESSAGE):
        super().__init__(message)


class MalformedHeaderError(MSAError):
    """Raised for a single record whose header cannot be decoded.

    Never escapes ``MSA.set_seqs``; the record is skipped instead.
    """

    kind = "malformed_header"

    def __init__(self, index: int):
        self.index = index
        super().__init__(MALFORMED_HEADER_MESSAGE.format(index=index))
