"""Exception types raised while reading FASTA input."""

from __future__ import annotations

from typing import Optional


class FastaError(Exception):
    """Base error for FASTA parsing failures."""

    def __init__(self, message: str, line_number: Optional[int] = None, record_id: Optional[str] = None) -> None:
        self.message = message
        self.line_number = line_number
        self.record_id = record_id
        super().__init__(self._describe())

    def _describe(self) -> str:
        context = []
        if self.line_number is not None:
            context.append(f"line {self.line_number}")
        if self.record_id:
            context.append(f"record {self.record_id!r}")
        if not context:
            return self.message
        return f"{self.message} ({', '.join(context)})"


class MalformedHeaderError(FastaError, ValueError):
    """Raised when a header line has no identifier after the marker."""

    def __init__(self, line: str, line_number: Optional[int] = None) -> None:
        self.line = line
        super().__init__(f"Malformed FASTA header {line!r}: missing identifier", line_number=line_number)


class FastaIOError(FastaError, OSError):
    """Raised when the underlying source fails while being read."""


class FastaEncodingError(FastaError, UnicodeError):
    """Raised when a line cannot be decoded as text."""
