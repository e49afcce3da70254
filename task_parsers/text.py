import re

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from .base import ParseError

HTML_PARSER = "html.parser"

HORIZONTAL_WS_RE = re.compile(r"[ \t\f\v]+")
BR_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)

NBSP_ENTITIES = (("&nbsp;", " "), ("\xa0", " "))
MARKUP_ENTITIES = (("&lt;", "<"), ("&gt;", ">"), ("&amp;", "&"))


def parse_html(html: str | bytes) -> BeautifulSoup:
    """Build a document tree, raising ParseError when no tree can be made."""
    if not isinstance(html, (str, bytes)):
        raise ParseError(f"expected HTML text, got {type(html).__name__}")
    try:
        return BeautifulSoup(html, HTML_PARSER)
    except ParserRejectedMarkup as e:
        raise ParseError(f"unparseable HTML: {e}") from e


def replace_nbsp(text: str) -> str:
    for entity, char in NBSP_ENTITIES:
        text = text.replace(entity, char)
    return text


def decode_entities(text: str) -> str:
    # &amp; goes last so "&amp;lt;" decodes once, to "&lt;"
    text = replace_nbsp(text)
    for entity, char in MARKUP_ENTITIES:
        text = text.replace(entity, char)
    return text


def normalize_text(text: str) -> str:
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = HORIZONTAL_WS_RE.sub(" ", text)
    return text.strip()


def markup_to_text(markup: str) -> str:
    """Text of an HTML fragment with every <br> turned into a newline."""
    fragment = parse_html(BR_RE.sub("\n", markup))
    return fragment.get_text()
