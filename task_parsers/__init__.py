from .base import BaseParser, ParseError
from .nkoj import NKOJContestParser, NKOJProblemParser
from .patterns import matches_template

ALL_PARSERS: dict[str, type[BaseParser]] = {
    "nkoj_contest": NKOJContestParser,
    "nkoj_problem": NKOJProblemParser,
}


def get_parser(name: str) -> type[BaseParser]:
    if name not in ALL_PARSERS:
        available = ", ".join(sorted(ALL_PARSERS))
        raise KeyError(f"Unknown parser '{name}'. Available platforms: {available}")
    return ALL_PARSERS[name]


def list_platforms() -> list[str]:
    return list(ALL_PARSERS)


def pattern_table() -> dict[str, type[BaseParser]]:
    """Every published URL template mapped to the parser that owns it."""
    table: dict[str, type[BaseParser]] = {}
    for parser_class in ALL_PARSERS.values():
        for template in parser_class().match_patterns:
            table[template] = parser_class
    return table


def find_parser(url: str) -> type[BaseParser] | None:
    for template, parser_class in pattern_table().items():
        if matches_template(template, url):
            return parser_class
    return None


__all__ = [
    "ALL_PARSERS",
    "BaseParser",
    "NKOJContestParser",
    "NKOJProblemParser",
    "ParseError",
    "find_parser",
    "get_parser",
    "list_platforms",
    "pattern_table",
]
