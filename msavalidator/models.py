"""Data models for alignment records and header-check results."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Record:
    """One sequence of a parsed alignment."""

    index: int
    """1-based position of the record in the input, counting skipped records."""

    header: str
    """Identifier joined directly with the description, without a separator."""

    sequence: str
    """Residues as a single unwrapped string."""

    @property
    def width(self) -> int:
        """Length of the sequence in UTF-8 bytes."""
        return len(self.sequence.encode("utf-8"))

    def to_fasta(self) -> str:
        """Render the record as a two-line FASTA block without a trailing newline."""
        return f">{self.header}\n{self.sequence}"


@dataclass(frozen=True)
class ProblemHeader:
    """A record whose header does not match the expected field count."""

    index: int
    header: str

    @classmethod
    def from_record(cls, record: Record) -> "ProblemHeader":
        return cls(index=record.index, header=record.header)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "index": self.index,
            "header": self.header,
        }
