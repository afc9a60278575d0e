from __future__ import annotations

import json
from dataclasses import dataclass

from .errors import InvalidOptionError
from .model import Document, Line
from .timecode import encode_time, get_formatter

LINE_TERMINATORS = ("\n", "\r\n", "\r")


@dataclass(frozen=True, slots=True)
class FormatOptions:
    space_start: int = 1  # <0: leave leading whitespace as is
    space_end: int = 0  # <0: leave trailing whitespace as is
    precision: int = 3
    line_terminator: str = "\r\n"

    def __post_init__(self) -> None:
        get_formatter(self.precision)  # validates
        if self.line_terminator not in LINE_TERMINATORS:
            raise InvalidOptionError(f"Unsupported line terminator: {self.line_terminator!r}")


def format_text(text: str, space_start: int, space_end: int) -> str:
    if space_start >= 0:
        text = " " * space_start + text.lstrip()
    if space_end >= 0:
        text = text.rstrip() + " " * space_end
    return text


def line_text(line: Line, precision: int) -> str:
    """Word texts joined back, with word timestamps written as inline <mm:ss> tags."""
    out: list[str] = []
    for w in line.words:
        if w.time is not None:
            out.append(f"<{encode_time(w.time, precision, brackets=False)}>")
        out.append(w.text)
    return "".join(out)


def export_lrc(doc: Document, options: FormatOptions | None = None) -> str:
    opts = options or FormatOptions()
    out: list[str] = [f"[{k}: {v}]" for k, v in doc.info.items()]

    for ln in doc.lines:
        text = line_text(ln, opts.precision)
        if ln.time is None:
            out.append(text)
        else:
            padded = format_text(text, opts.space_start, opts.space_end)
            out.append(f"{encode_time(ln.time, opts.precision)}{padded}")
    return opts.line_terminator.join(out)


def export_json(doc: Document) -> str:
    return json.dumps(
        {
            "info": dict(doc.info),
            "lines": [
                {
                    "time": ln.time,
                    "text": ln.text,
                    "words": [{"time": w.time, "text": w.text} for w in ln.words],
                }
                for ln in doc.lines
            ],
        },
        ensure_ascii=False,
        indent=2,
    )
