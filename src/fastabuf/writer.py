"""Canonical FASTA rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional, TextIO

from .config import HEADER_MARKER, get_default_config

if TYPE_CHECKING:
    from .record import Record


def wrap_sequence(sequence: str, width: int) -> List[str]:
    """Split a sequence into lines of at most `width` characters."""
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")
    return [sequence[idx : idx + width] for idx in range(0, len(sequence), width)]


def format_record(record: "Record", width: Optional[int] = None) -> str:
    """Render a record as a header line followed by wrapped sequence lines.

    Chunks are written verbatim, so a wrapped line that starts with ">" or
    holds only whitespace does not read back as sequence: the parser takes
    the first as a header and drops the second as blank.
    """
    if width is None:
        width = get_default_config().wrap_width
    lines = [f"{HEADER_MARKER}{record.header}"]
    lines.extend(wrap_sequence(record.sequence, width))
    return "\n".join(lines) + "\n"


def write_record(handle: TextIO, record: "Record", width: Optional[int] = None) -> None:
    """Write a FASTA record to an open text handle."""
    handle.write(format_record(record, width=width))


def write_records(handle: TextIO, records: Iterable["Record"], width: Optional[int] = None) -> int:
    """Write records in order and return how many were written."""
    if width is None:
        width = get_default_config().wrap_width
    count = 0
    for record in records:
        write_record(handle, record, width=width)
        count += 1
    return count
