"""Utilities for reading FASTA records from uploaded text."""

import logging
from dataclasses import dataclass
from io import StringIO
from typing import Iterator, Optional, Union

from Bio.SeqIO.FastaIO import SimpleFastaParser

from .constants import FASTA_HEADER_MARKER, HEADER_ID_SEPARATOR
from .exceptions import InvalidFormatError, MalformedHeaderError

logger = logging.getLogger(__name__)

RawText = Union[str, bytes]


@dataclass(frozen=True)
class RawRecord:
    """
    A FASTA record as produced by the reader, before validation.

    Attributes:
        position: 1-based position of the record in the input.
        title: Header line without the leading ``>``. May carry
            surrogate-escaped bytes when the input was not valid UTF-8.
        sequence: Joined sequence lines, possibly surrogate-escaped.
    """

    position: int
    title: str
    sequence: str

    def id_desc(self) -> tuple[str, Optional[str]]:
        """
        Split the title into identifier and optional description.

        The identifier runs up to the first space; everything after that
        space is the description.

        Returns:
            Tuple of (identifier, description or None).

        Raises:
            MalformedHeaderError: If the title is not valid UTF-8.
        """
        try:
            self.title.encode("utf-8")
        except UnicodeEncodeError as e:
            raise MalformedHeaderError(self.position) from e

        identifier, separator, description = self.title.partition(
            HEADER_ID_SEPARATOR
        )
        if not separator:
            return identifier, None
        return identifier, description


def decode_text(raw: RawText) -> str:
    """Decode uploaded bytes, keeping undecodable bytes as surrogate escapes."""
    if isinstance(raw, bytes):
        return raw.decode("utf-8", errors="surrogateescape")
    return raw


def decode_lossy(text: str) -> str:
    """
    Replace invalid byte sequences in ``text`` with U+FFFD.

    Args:
        text: String that may contain surrogate escapes or lone surrogates.

    Returns:
        A string that is safe to encode as UTF-8.
    """
    try:
        raw = text.encode("utf-8", errors="surrogateescape")
    except UnicodeEncodeError:
        raw = text.encode("utf-8", errors="surrogatepass")
    return raw.decode("utf-8", errors="replace")


def _strip_line_end(line: str) -> str:
    return line.rstrip("\r\n")


def _has_records(text: str) -> bool:
    # The first non-blank line has to open a record
    for line in StringIO(text):
        if not line.strip():
            continue
        if not line.startswith(FASTA_HEADER_MARKER):
            raise InvalidFormatError()
        return True
    return False


class _RecordingHandle(StringIO):
    """Text handle that keeps every line it hands out until they are taken."""

    def __init__(self, text: str):
        super().__init__(text)
        self.lines: list[str] = []

    def __next__(self) -> str:
        line = self.readline()
        if not line:
            raise StopIteration
        return line

    def readline(self, size: int = -1) -> str:
        line = super().readline(size)
        if line:
            self.lines.append(line)
        return line

    def take_record_lines(self) -> list[str]:
        """
        Remove and return the lines of the record the parser just finished.

        The parser reads the next header before it yields a record, so a
        trailing header line stays behind for the following record.
        """
        headers = [
            i for i, line in enumerate(self.lines) if line.startswith(FASTA_HEADER_MARKER)
        ]
        start = headers[0]
        end = headers[1] if len(headers) > 1 else len(self.lines)
        record_lines = self.lines[start:end]
        self.lines = self.lines[end:]
        return record_lines


def iter_fasta_records(raw: RawText) -> Iterator[RawRecord]:
    """
    Yield FASTA records one at a time, in file order.

    Biopython's ``SimpleFastaParser`` decides where records start and end.
    Titles and sequences are then rebuilt from the raw lines with only the
    line terminators removed, so spaces inside sequences and trailing
    description text are kept. Empty or whitespace-only input yields nothing.

    Args:
        raw: FASTA content as text or undecoded bytes.

    Yields:
        RawRecord for each header line in the input.

    Raises:
        InvalidFormatError: If the content cannot be read as FASTA.
    """
    text = decode_text(raw)
    if not _has_records(text):
        return

    handle = _RecordingHandle(text)
    try:
        for position, _ in enumerate(SimpleFastaParser(handle), start=1):
            title_line, *sequence_lines = handle.take_record_lines()
            yield RawRecord(
                position=position,
                title=_strip_line_end(title_line[len(FASTA_HEADER_MARKER):]),
                sequence="".join(_strip_line_end(line) for line in sequence_lines),
            )
    except ValueError as e:
        logger.debug("FASTA reader rejected input: %s", e)
        raise InvalidFormatError() from e
