import math

import pytest

from lrc_maker.lrc.errors import InvalidTimeError
from lrc_maker.lrc.export import export_lrc
from lrc_maker.lrc.model import Document, Line, Word
from lrc_maker.lrc.parse import parse_lrc, parse_lrc_with_stats


def test_parse_timed_line():
    doc = parse_lrc("[00:01.00]Hello world")
    assert doc.info == {}
    assert len(doc.lines) == 1
    line = doc.lines[0]
    assert line.time == 1.0
    assert line.words == (Word("Hello "), Word("world"))
    assert line.text == "Hello world"


def test_parse_metadata_line():
    doc = parse_lrc("[ar: Some Artist]")
    assert doc.info == {"ar": "Some Artist"}
    assert doc.lines == ()


def test_parse_metadata_empty_value_dropped():
    doc = parse_lrc("[ar:]\n[ti:   ]")
    assert doc.info == {}
    assert doc.lines == ()


def test_parse_metadata_last_write_wins_keeps_order():
    doc = parse_lrc("[ti:First]\n[ar:Artist]\n[ti:Second]")
    assert doc.info == {"ti": "Second", "ar": "Artist"}
    assert list(doc.info) == ["ti", "ar"]


def test_parse_minutes_not_range_checked():
    doc = parse_lrc("[99:59.999]x")
    assert doc.lines[0].time == pytest.approx(99 * 60 + 59.999)
    assert doc.lines[0].text == "x"


def test_parse_colon_fraction_separator():
    doc = parse_lrc("[01:02:50]x")
    assert doc.lines[0].time == pytest.approx(62.5)


def test_parse_plain_lines_kept_verbatim():
    doc = parse_lrc("hello world\n  second line \n")
    assert doc.info == {}
    assert doc.lines == (
        Line(words=(Word("hello world"),)),
        Line(words=(Word("  second line "),)),
        Line(words=(Word(""),)),
    )
    assert all(ln.time is None for ln in doc.lines)


def test_parse_plain_lines_trimmed():
    doc = parse_lrc("  a b  \n c ", trim_start=True, trim_end=True)
    assert [ln.words for ln in doc.lines] == [(Word("a b"),), (Word("c"),)]

    doc = parse_lrc("  a  ", trim_start=True)
    assert doc.lines[0].words == (Word("a  "),)

    doc = parse_lrc("  a  ", trim_end=True)
    assert doc.lines[0].words == (Word("  a"),)


def test_parse_trim_applies_to_timed_text():
    doc = parse_lrc("[00:02.00]  Hello world  ", trim_start=True, trim_end=True)
    assert doc.lines[0].text == "Hello world"

    doc = parse_lrc("[00:02.00]  Hello world  ")
    assert doc.lines[0].text == "  Hello world  "


def test_parse_untimed_bracket_line():
    doc = parse_lrc("[Chorus] la la")
    assert doc.info == {}
    (line,) = doc.lines
    assert line.time is None
    assert line.text == "[Chorus] la la"
    assert line.words == (Word("[Chorus] "), Word("la "), Word("la"))


def test_parse_mixed_line_terminators():
    doc = parse_lrc("[ti:T]\r\n[00:01.00]a\r[00:02.00]b\nc")
    assert doc.info == {"ti": "T"}
    assert [(ln.time, ln.text) for ln in doc.lines] == [(1.0, "a"), (2.0, "b"), (None, "c")]


def test_parse_inline_word_tags():
    doc = parse_lrc("[00:01.00]<00:01.00>Hello <00:01.50>world<00:02.00>")
    assert doc.lines[0].words == (
        Word("Hello ", 1.0),
        Word("world", 1.5),
        Word("", 2.0),
    )
    assert doc.lines[0].text == "Hello world"


def test_parse_never_raises_on_garbage():
    doc = parse_lrc("[\n]\n[:]\n[-1:00]x\n<<>>\n[ 1 2 ]")
    assert doc.info == {}
    assert len(doc.lines) == 6
    assert all(ln.time is None for ln in doc.lines)


def test_parse_empty_text():
    assert parse_lrc("") == Document(lines=(Line(words=(Word(""),)),))


def test_parse_with_stats():
    doc, stats = parse_lrc_with_stats("[ar:A]\n[00:01]<00:01>a <00:02>b\n[x]\nplain")
    assert doc.info == {"ar": "A"}
    assert stats.lines_total == 4
    assert stats.lines_timed == 1
    assert stats.lines_metadata == 1
    assert stats.lines_untimed == 1
    assert stats.lines_plain == 1
    assert stats.words_timed == 2


def test_parse_metadata_after_bracket_text():
    doc = parse_lrc("[Verse] [ar:Artist]\n[00:01.00]x")
    assert doc.info == {"ar": "Artist"}
    assert [ln.text for ln in doc.lines] == ["x"]


@pytest.mark.parametrize("digits", [400, 5000])
def test_parse_huge_minutes_does_not_raise(digits):
    doc = parse_lrc("[" + "9" * digits + ":00]x")
    (line,) = doc.lines
    assert line.time == math.inf
    assert line.text == "x"


def test_parse_huge_minutes_in_word_tag():
    doc = parse_lrc("[00:01]<" + "9" * 400 + ":00>x")
    assert doc.lines[0].time == 1.0
    assert doc.lines[0].words == (Word("x", math.inf),)


def test_export_refuses_huge_minutes():
    doc = parse_lrc("[" + "9" * 400 + ":00]x")
    with pytest.raises(InvalidTimeError):
        export_lrc(doc)
