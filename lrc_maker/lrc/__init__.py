from .errors import InvalidOptionError, InvalidPrecisionError, InvalidTimeError, LrcError
from .export import FormatOptions, export_json, export_lrc, format_text, line_text
from .model import Document, Line, Word
from .parse import LrcParseStats, parse_lrc, parse_lrc_with_stats
from .timecode import decode_time, encode_time, get_formatter

__all__ = [
    "Document",
    "FormatOptions",
    "InvalidOptionError",
    "InvalidPrecisionError",
    "InvalidTimeError",
    "Line",
    "LrcError",
    "LrcParseStats",
    "Word",
    "decode_time",
    "encode_time",
    "export_json",
    "export_lrc",
    "format_text",
    "get_formatter",
    "line_text",
    "parse_lrc",
    "parse_lrc_with_stats",
]
