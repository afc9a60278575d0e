from lrc_maker.lrc import Document, FormatOptions, Line, Word, export_lrc, parse_lrc

__version__ = "0.1.0"

__all__ = ["Document", "FormatOptions", "Line", "Word", "export_lrc", "parse_lrc"]
