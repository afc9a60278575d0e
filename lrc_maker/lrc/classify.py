from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_EOL_RE = re.compile(r"\r\n|\n|\r")
_TIME_TAG_RE = re.compile(r"\[\s*(\d+):(\d{1,2}(?:[:.]\d+)?)\s*\]")  # [mm:ss] / [mm:ss.xx] / [mm:ss:xx]
_INFO_TAG_RE = re.compile(r"\[\s*(\w{1,6})\s*:(.*?)\]", re.ASCII)  # [ar: Artist]


class LineKind(str, Enum):
    PLAIN = "plain"
    TIMED = "timed"
    METADATA = "metadata"
    UNTIMED = "untimed"


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    kind: LineKind
    text: str = ""
    minutes: str | None = None
    seconds: str | None = None
    key: str | None = None
    value: str | None = None


def split_lines(text: str) -> list[str]:
    # unlike str.splitlines(), only \r\n, \n and \r count, and a trailing
    # terminator leaves an empty last line
    return _EOL_RE.split(text)


def classify_line(line: str) -> ClassifiedLine:
    """
    Precedence: plain (no leading "[") > timed > metadata > untimed.
    Only the time tag must lead; an info tag may sit anywhere in the line.
    Never raises; anything unrecognized is text.
    """
    if not line.startswith("["):
        return ClassifiedLine(LineKind.PLAIN, text=line)

    ts = _TIME_TAG_RE.match(line)
    if ts:
        return ClassifiedLine(
            LineKind.TIMED,
            text=line[ts.end() :],
            minutes=ts.group(1),
            seconds=ts.group(2),
        )

    tag = _INFO_TAG_RE.search(line)
    if tag:
        return ClassifiedLine(LineKind.METADATA, key=tag.group(1), value=tag.group(2).strip())

    return ClassifiedLine(LineKind.UNTIMED, text=line)
