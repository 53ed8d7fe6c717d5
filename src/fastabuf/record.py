"""The FASTA record type and header tokenization."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TextIO, Tuple

from .config import HEADER_MARKER
from .errors import MalformedHeaderError
from .writer import format_record, write_record

PREVIEW_WIDTH = 40


def split_header(text: str) -> Tuple[str, str]:
    """Split header text (marker already removed) into (id, description)."""
    parts = text.split(maxsplit=1)
    if not parts or text[:1].isspace():
        return "", text.strip()
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].rstrip("\r\n")


@dataclass(frozen=True)
class Record:
    """One FASTA entry: identifier, free-text description and sequence."""

    id: str
    description: str = ""
    sequence: str = ""

    @classmethod
    def from_header(cls, line: str, sequence: str = "", line_number: Optional[int] = None) -> "Record":
        """Build a record from a header line, with or without its leading marker.

        Raises MalformedHeaderError when no identifier follows the marker.
        """
        text = line.rstrip("\r\n")
        if text.startswith(HEADER_MARKER):
            text = text[len(HEADER_MARKER):]
        identifier, description = split_header(text)
        if not identifier:
            raise MalformedHeaderError(line.rstrip("\r\n"), line_number=line_number)
        return cls(id=identifier, description=description, sequence=sequence)

    @property
    def header(self) -> str:
        if self.description:
            return f"{self.id} {self.description}"
        return self.id

    def __len__(self) -> int:
        return len(self.sequence)

    def preview(self, width: int = PREVIEW_WIDTH) -> str:
        """Header plus the first `width` residues, for logs and interactive display."""
        head = self.sequence[:width]
        suffix = "..." if len(self.sequence) > width else ""
        return f"{HEADER_MARKER}{self.header}\n{head}{suffix}"

    def __str__(self) -> str:
        return self.preview()

    def format(self, width: Optional[int] = None) -> str:
        return format_record(self, width=width)

    def write(self, handle: TextIO, width: Optional[int] = None) -> None:
        write_record(handle, self, width=width)
