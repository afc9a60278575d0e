from __future__ import annotations

import logging
from dataclasses import dataclass

from .classify import LineKind, classify_line, split_lines
from .model import Document, Line, Word
from .timecode import decode_time
from .words import parse_words

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LrcParseStats:
    lines_total: int
    lines_timed: int
    lines_metadata: int
    lines_untimed: int
    lines_plain: int
    words_timed: int


def _trimmer(trim_start: bool, trim_end: bool):
    if trim_start and trim_end:
        return str.strip
    if trim_start:
        return str.lstrip
    if trim_end:
        return str.rstrip
    return lambda s: s


def parse_lrc_with_stats(
    text: str, trim_start: bool = False, trim_end: bool = False
) -> tuple[Document, LrcParseStats]:
    trim = _trimmer(trim_start, trim_end)
    info: dict[str, str] = {}
    lines: list[Line] = []
    counts = {kind: 0 for kind in LineKind}

    for raw in split_lines(text):
        cl = classify_line(raw)
        counts[cl.kind] += 1

        if cl.kind is LineKind.PLAIN:
            lines.append(Line(words=(Word(trim(cl.text)),)))
        elif cl.kind is LineKind.TIMED:
            lines.append(
                Line(
                    words=tuple(parse_words(trim(cl.text))),
                    time=decode_time(cl.minutes, cl.seconds),
                )
            )
        elif cl.kind is LineKind.METADATA:
            if cl.value:
                info[cl.key] = cl.value
        else:
            lines.append(Line(words=tuple(parse_words(trim(cl.text)))))

    doc = Document(lines=tuple(lines), info=info)
    stats = LrcParseStats(
        lines_total=sum(counts.values()),
        lines_timed=counts[LineKind.TIMED],
        lines_metadata=counts[LineKind.METADATA],
        lines_untimed=counts[LineKind.UNTIMED],
        lines_plain=counts[LineKind.PLAIN],
        words_timed=sum(1 for ln in doc.lines for w in ln.words if w.time is not None),
    )
    logger.debug(
        "Parsed %d lines: %d timed, %d metadata, %d info keys",
        stats.lines_total,
        stats.lines_timed,
        stats.lines_metadata,
        len(info),
    )
    return doc, stats


def parse_lrc(text: str, trim_start: bool = False, trim_end: bool = False) -> Document:
    """
    Supported:
    - [mm:ss], [mm:ss.xx], [mm:ss:xx] at line start (minutes unbounded)
    - inline word tags <mm:ss.xx> (enhanced LRC)
    - info tags [ar: ...], [ti: ...], ... (last one wins, empty values dropped)

    Anything else is kept as a literal, untimed line. Never raises.
    """
    doc, _stats = parse_lrc_with_stats(text, trim_start=trim_start, trim_end=trim_end)
    return doc
