"""
Multiple sequence alignment state: parse, validate, query, serialize.

An ``MSA`` starts empty. A successful ``set_seqs`` call loads an alignment,
and every later successful call replaces it wholesale. A failed call leaves
whatever was loaded before untouched.
"""

import logging
from typing import Optional

from .constants import HEADER_FIELD_DELIMITER
from .exceptions import (
    EmptyAlignmentError,
    LengthMismatchError,
    MalformedHeaderError,
    NoDataError,
)
from .models import ProblemHeader, Record
from .reader import RawText, decode_lossy, iter_fasta_records

logger = logging.getLogger(__name__)


class MSA:
    """Holds one validated alignment and answers queries about it."""

    def __init__(self) -> None:
        self._records: Optional[list[Record]] = None

    @property
    def is_loaded(self) -> bool:
        """Whether an alignment has been set successfully."""
        return self._records is not None

    @property
    def records(self) -> tuple[Record, ...]:
        return tuple(self._require_records())

    @property
    def alignment_width(self) -> int:
        """Common UTF-8 byte length of every sequence in the loaded alignment."""
        return self._require_records()[0].width

    def set_seqs(self, raw_text: RawText) -> None:
        """
        Parse and validate FASTA content, replacing the current alignment.

        Records whose header cannot be decoded are skipped, but still count
        towards the index of the records that follow them.

        Args:
            raw_text: FASTA content as text or undecoded bytes.

        Raises:
            InvalidFormatError: If the content cannot be read as FASTA.
            EmptyAlignmentError: If no usable record was found.
            LengthMismatchError: If a sequence differs in length from the first.
        """
        parsed: list[Record] = []

        for raw_record in iter_fasta_records(raw_text):
            try:
                identifier, description = raw_record.id_desc()
            except MalformedHeaderError as e:
                logger.warning("Skipping record: %s", e)
                continue

            header = identifier + description if description is not None else identifier
            parsed.append(
                Record(
                    index=raw_record.position,
                    header=header,
                    sequence=decode_lossy(raw_record.sequence),
                )
            )

        if not parsed:
            logger.info("Rejected upload without usable records")
            raise EmptyAlignmentError()

        width = parsed[0].width
        for record in parsed:
            if record.width != width:
                logger.info(
                    "Rejected upload: %r has length %d, expected %d",
                    record.header,
                    record.width,
                    width,
                )
                raise LengthMismatchError(record.header)

        self._records = parsed
        logger.debug("Loaded %d sequences of width %d", len(parsed), width)

    def check_headers(self, expected_field_count: int) -> list[ProblemHeader]:
        """
        Find headers that do not split into the expected number of fields.

        Args:
            expected_field_count: Number of ``|``-delimited fields every
                header should have.

        Returns:
            Problem headers in stored order; empty if every header matches.

        Raises:
            NoDataError: If no alignment has been loaded.
        """
        return [
            ProblemHeader.from_record(record)
            for record in self._require_records()
            if len(record.header.split(HEADER_FIELD_DELIMITER)) != expected_field_count
        ]

    def get_seq_count(self) -> int:
        """Number of sequences in the loaded alignment."""
        return len(self._require_records())

    def get_seqs(self) -> str:
        """
        Serialize the loaded alignment as FASTA text.

        Each sequence is written on a single line and no newline follows
        the last record.
        """
        return "\n".join(record.to_fasta() for record in self._require_records())

    def _require_records(self) -> list[Record]:
        if self._records is None:
            raise NoDataError()
        return self._records

    def __repr__(self) -> str:
        if self._records is None:
            return "MSA(empty)"
        return f"MSA(sequences={len(self._records)}, width={self.alignment_width})"
