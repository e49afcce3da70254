import pytest

from task_parsers.base import ParseError
from task_parsers.text import (
    decode_entities,
    markup_to_text,
    normalize_text,
    parse_html,
    replace_nbsp,
)


def test_decode_entities():
    assert decode_entities("a&nbsp;&lt;b&gt;") == "a <b>"
    assert normalize_text(decode_entities("a&nbsp;&lt;b&gt;")) == "a <b>"


def test_decode_entities_amp_decoded_once():
    assert decode_entities("x &amp;lt; y") == "x &lt; y"
    assert decode_entities("1&amp;2") == "1&2"


def test_replace_nbsp_only_touches_spaces():
    assert replace_nbsp("1\xa02&nbsp;&lt;") == "1 2 &lt;"


def test_normalize_line_endings():
    assert normalize_text("1\r\n2\r3\n4") == "1\n2\n3\n4"


def test_normalize_collapses_horizontal_whitespace():
    assert normalize_text("  1 \t 2\f\v3  \n\n4  ") == "1 2 3 \n\n4"


@pytest.mark.parametrize("text", ["", "6", "1 2 3\n4 5", "a <b>\nc & d"])
def test_normalize_idempotent(text):
    assert normalize_text(text) == text
    assert normalize_text(normalize_text(text)) == text


def test_markup_to_text_breaks():
    assert markup_to_text("1 2<br>3<br/>4<BR />5") == "1 2\n3\n4\n5"


def test_parse_html_rejects_non_text():
    with pytest.raises(ParseError) as exc_info:
        parse_html(None)  # type: ignore[arg-type]

    assert "NoneType" in str(exc_info.value)


def test_parse_html_accepts_bytes():
    soup = parse_html(b"<p id='x'>hi</p>")

    assert soup.find(id="x").get_text() == "hi"
