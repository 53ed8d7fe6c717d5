"""Streaming FASTA parser.

`FastaBuffer` wraps any iterable of lines (an open text or binary file, an
``io.StringIO``, a list, a generator) and yields one `Record` per header,
reading only as far ahead as the next header line. Memory use is bounded by
the sequence of the record currently being assembled.

The parser is an explicit state machine:

* ``IDLE``: no header pending; sequence lines seen here are ignored.
* ``ACCUMULATING``: a header is pending and body lines are being collected.
* ``EXHAUSTED``: the source ended and every record was handed out.
* ``POISONED``: the source failed (I/O or decoding); the error is re-raised
  on every later call.

A malformed header is reported without poisoning the buffer. If a record was
pending when the bad header was read, that record is returned first and the
error is raised on the following call.
"""

from __future__ import annotations

import enum
from typing import Iterable, Iterator, List, Optional, Union

from .config import COMMENT_MARKER, HEADER_MARKER, FastaConfig, get_default_config
from .errors import FastaEncodingError, FastaError, FastaIOError, MalformedHeaderError
from .logging_utils import get_logger
from .record import Record

logger = get_logger("buffer")

Line = Union[str, bytes]


class ParserState(enum.Enum):
    IDLE = "idle"
    ACCUMULATING = "accumulating"
    EXHAUSTED = "exhausted"
    POISONED = "poisoned"


class FastaBuffer:
    """Lazy, pull-based reader producing `Record` values in file order."""

    def __init__(self, source: Iterable[Line], config: Optional[FastaConfig] = None) -> None:
        self._source = source
        self._lines = iter(source)
        self.config = config or get_default_config()
        self._state = ParserState.IDLE
        self._pending: Optional[Record] = None
        self._chunks: List[str] = []
        self._deferred: Optional[MalformedHeaderError] = None
        self._error: Optional[FastaError] = None
        self._line_number = 0

    @property
    def state(self) -> ParserState:
        return self._state

    @property
    def line_number(self) -> int:
        """Number of lines consumed from the source so far."""
        return self._line_number

    @property
    def exhausted(self) -> bool:
        return self._state is ParserState.EXHAUSTED

    def next_record(self) -> Optional[Record]:
        """Return the next record, or None once the source is exhausted.

        Raises MalformedHeaderError for a header without an identifier,
        FastaIOError when the source fails and FastaEncodingError when a line
        cannot be decoded. The last two are latched: every later call raises
        the same error again.
        """
        if self._state is ParserState.EXHAUSTED:
            return None
        if self._state is ParserState.POISONED:
            assert self._error is not None
            raise self._error
        if self._deferred is not None:
            error, self._deferred = self._deferred, None
            raise error

        while True:
            line = self._read_line()
            if line is None:
                return self._finish()

            text = line.rstrip("\r\n")
            if not text.strip():
                continue
            if self.config.skip_comments and text.startswith(COMMENT_MARKER):
                continue
            if text.startswith(HEADER_MARKER):
                finished = self._start_record(text)
                if finished is not None:
                    return finished
                continue

            if self._state is ParserState.ACCUMULATING:
                self._chunks.append(text)
            else:
                logger.debug("Skipping sequence line %d outside of any record", self._line_number)

    def collect(self) -> List[Record]:
        """Drain the remaining records into a list."""
        return list(self)

    def close(self) -> None:
        close = getattr(self._source, "close", None)
        if callable(close):
            close()

    def __iter__(self) -> Iterator[Record]:
        return self

    def __next__(self) -> Record:
        record = self.next_record()
        if record is None:
            raise StopIteration
        return record

    def __enter__(self) -> "FastaBuffer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<FastaBuffer state={self._state.value} line={self._line_number}>"

    def _read_line(self) -> Optional[str]:
        try:
            raw = next(self._lines)
        except StopIteration:
            return None
        except UnicodeDecodeError as exc:
            raise self._poison(FastaEncodingError(f"Cannot decode input: {exc.reason}", **self._context(1))) from exc
        except (OSError, ValueError) as exc:
            # closed handles raise ValueError rather than OSError
            raise self._poison(FastaIOError(f"Read failed: {exc}", **self._context(1))) from exc

        self._line_number += 1
        if isinstance(raw, bytes):
            try:
                return raw.decode(self.config.encoding)
            except UnicodeDecodeError as exc:
                raise self._poison(
                    FastaEncodingError(f"Cannot decode input as {self.config.encoding}: {exc.reason}", **self._context())
                ) from exc
        return raw

    def _start_record(self, text: str) -> Optional[Record]:
        """Make `text` the pending header; return the record it closes, if any."""
        finished = self._take_pending() if self._state is ParserState.ACCUMULATING else None
        try:
            self._pending = Record.from_header(text, line_number=self._line_number)
        except MalformedHeaderError as exc:
            if finished is None:
                raise
            self._deferred = exc
            return finished
        self._state = ParserState.ACCUMULATING
        return finished

    def _take_pending(self) -> Record:
        assert self._pending is not None
        record = Record(id=self._pending.id, description=self._pending.description, sequence="".join(self._chunks))
        self._pending = None
        self._chunks = []
        self._state = ParserState.IDLE
        logger.debug("Parsed record %s (%d residues)", record.id, len(record))
        return record

    def _finish(self) -> Optional[Record]:
        record = self._take_pending() if self._state is ParserState.ACCUMULATING else None
        self._state = ParserState.EXHAUSTED
        return record

    def _poison(self, error: FastaError) -> FastaError:
        if self._pending is not None:
            logger.warning("Abandoning partial record %s after a read failure", self._pending.id)
        self._pending = None
        self._chunks = []
        self._state = ParserState.POISONED
        self._error = error
        return error

    def _context(self, offset: int = 0) -> dict:
        return {
            "line_number": self._line_number + offset,
            "record_id": self._pending.id if self._pending is not None else None,
        }


def iter_fasta(source: Iterable[Line], config: Optional[FastaConfig] = None) -> Iterator[Record]:
    """Lazily iterate over the records of a FASTA source."""
    return FastaBuffer(source, config=config)


def parse_fasta(source: Iterable[Line], config: Optional[FastaConfig] = None) -> List[Record]:
    """Read every record of a FASTA source into a list."""
    return FastaBuffer(source, config=config).collect()
