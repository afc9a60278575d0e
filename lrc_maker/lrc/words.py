from __future__ import annotations

import regex

from .model import Word
from .timecode import decode_time

# \s already covers tab and NBSP; \p{Zs} adds the remaining Unicode space separators
_SPACES_RE = regex.compile(r"[\s\p{Zs}]+")
_INLINE_TAG_RE = regex.compile(r"<(\d+):(\d{1,2}(?:[:.]\d+)?)>")  # <mm:ss.xx>


def split_words(fragment: str) -> list[Word]:
    """
    Split at internal whitespace runs. Each run stays at the end of the word
    before it, and runs touching either end of the fragment are not
    boundaries, so joining the texts gives `fragment` back.
    """
    words: list[Word] = []
    start = 0
    for m in _SPACES_RE.finditer(fragment):
        if m.start() == 0 or m.end() == len(fragment):
            continue
        words.append(Word(fragment[start : m.end()]))
        start = m.end()
    if start < len(fragment):
        words.append(Word(fragment[start:]))
    return words


def parse_words(fragment: str) -> list[Word]:
    """
    "<00:01.00>Hello <00:01.50>world" -> [Word("Hello ", 1.0), Word("world", 1.5)]

    Text before the first tag is split on whitespace; every tag owns the text
    up to the next tag. Anything that does not look like a tag is kept as text.
    """
    if "<" not in fragment:
        return split_words(fragment)

    tags = list(_INLINE_TAG_RE.finditer(fragment))
    if not tags:
        return split_words(fragment)

    words = split_words(fragment[: tags[0].start()])
    for i, m in enumerate(tags):
        end = tags[i + 1].start() if i + 1 < len(tags) else len(fragment)
        words.append(Word(fragment[m.end() : end], time=decode_time(m.group(1), m.group(2))))
    return words
