"""Streaming FASTA parsing and canonical FASTA writing."""

from .buffer import FastaBuffer, ParserState, iter_fasta, parse_fasta
from .config import DEFAULT_WRAP_WIDTH, FastaConfig, load_config
from .errors import FastaEncodingError, FastaError, FastaIOError, MalformedHeaderError
from .record import Record, split_header
from .writer import format_record, wrap_sequence, write_record, write_records

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_WRAP_WIDTH",
    "FastaBuffer",
    "FastaConfig",
    "FastaEncodingError",
    "FastaError",
    "FastaIOError",
    "MalformedHeaderError",
    "ParserState",
    "Record",
    "format_record",
    "iter_fasta",
    "load_config",
    "parse_fasta",
    "split_header",
    "wrap_sequence",
    "write_record",
    "write_records",
]
