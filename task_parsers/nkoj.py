#!/usr/bin/env python3

import asyncio
import copy
import logging
import re
import sys
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from .base import BaseParser
from .models import ContestResult, ProblemResult, TaskBuilder, TaskRecord
from .patterns import expand_templates
from .text import (
    decode_entities,
    markup_to_text,
    normalize_text,
    parse_html,
    replace_nbsp,
)

logger = logging.getLogger(__name__)

SOURCE_NAME = "NKOJ"
HOST = "oi.nks.edu.cn:19360"
SCHEMES = ("http", "https")
LANGUAGES = ("zh", "en")

CONTEST_PATTERNS = expand_templates(
    SCHEMES,
    HOST,
    LANGUAGES,
    ["Problem/Lists?cid=*", "Contest/Details?cid=*", "Contest/Problems?cid=*"],
)
PROBLEM_PATTERNS = expand_templates(SCHEMES, HOST, LANGUAGES, ["Problem/Details*"])

PROBLEM_DETAILS_MARKER = "/Problem/Details"
PROBLEM_LINK_SELECTOR = 'a[href*="/Problem/Details"], a[href*="tid="]'

TITLE_SELECTOR = "#TdMainTitle"
LABEL_SELECTOR = ".label"
LIMITS_SELECTOR = "#TblLimits"
SAMPLE_INPUT_ID = "SampleInput-{index}"
SAMPLE_OUTPUT_ID = "SampleOutput-{index}"

TIME_LIMIT_RE = re.compile(r"时间限制\s*[:：]\s*(\S+)")
MEMORY_LIMIT_RE = re.compile(r"空间限制\s*[:：]\s*(\S+)")
FLOAT_PREFIX_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
INT_PREFIX_RE = re.compile(r"[+-]?\d+")


def parse_time_limit(token: str) -> float | None:
    """Milliseconds for a limit token such as ``1000ms``, ``2s`` or ``1.5``.

    Anything without ``ms`` in it counts as seconds.
    """
    m = FLOAT_PREFIX_RE.match(token)
    if not m:
        return None
    value = float(m.group(0))
    if "ms" not in token:
        value *= 1000
    return value


def parse_memory_limit(token: str) -> int | None:
    """Megabytes for a limit token such as ``256MB``, ``256`` or ``1GB``."""
    m = INT_PREFIX_RE.match(token)
    if not m:
        return None
    value = int(m.group(0))
    if "GB" in token or "g" in token:
        value *= 1024
    return value


def _extract_title(soup: BeautifulSoup) -> str | None:
    t = soup.select_one(TITLE_SELECTOR)
    if not t:
        return None
    # work on a copy so the badge stays in the caller's tree
    clone = copy.copy(t)
    for label in clone.select(LABEL_SELECTOR):
        label.decompose()
    return clone.get_text().strip()


def _limits_text(soup: BeautifulSoup) -> str:
    table = soup.select_one(LIMITS_SELECTOR)
    if not table:
        return ""
    # cells are separated, inline markup inside a cell is not
    cells = table.find_all(["td", "th"])
    if cells:
        return " ".join(cell.get_text() for cell in cells)
    return table.get_text()


def _extract_limits(soup: BeautifulSoup) -> tuple[float | None, int | None]:
    txt = _limits_text(soup)
    tm = TIME_LIMIT_RE.search(txt)
    mm = MEMORY_LIMIT_RE.search(txt)
    timeout_ms = parse_time_limit(tm.group(1)) if tm else None
    memory_mb = parse_memory_limit(mm.group(1)) if mm else None
    return timeout_ms, memory_mb


def extract_sample_text(element: Tag) -> str:
    pres = element.find_all("pre")
    if pres:
        text = "\n".join(pre.get_text().strip() for pre in pres)
    else:
        p = element.find("p")
        if isinstance(p, Tag):
            text = decode_entities(markup_to_text(p.decode_contents()))
        else:
            text = replace_nbsp(element.get_text())
    return normalize_text(text)


def _find_by_id(soup: BeautifulSoup, element_id: str) -> Tag | None:
    el = soup.find(id=element_id)
    return el if isinstance(el, Tag) else None


def _extract_samples(soup: BeautifulSoup, max_samples: int) -> list[tuple[str, str]]:
    samples: list[tuple[str, str]] = []
    for index in range(max_samples):
        inp = _find_by_id(soup, SAMPLE_INPUT_ID.format(index=index))
        out = _find_by_id(soup, SAMPLE_OUTPUT_ID.format(index=index))
        if inp is None and out is None:
            break
        samples.append(
            (
                extract_sample_text(inp) if inp else "",
                extract_sample_text(out) if out else "",
            )
        )
    else:
        if _find_by_id(
            soup, SAMPLE_INPUT_ID.format(index=max_samples)
        ) or _find_by_id(soup, SAMPLE_OUTPUT_ID.format(index=max_samples)):
            logger.warning("Stopped probing samples at index %d", max_samples)
    return samples


def parse_contest_page(url: str, html: str) -> list[str]:
    soup = parse_html(html)
    links: list[str] = []
    for a in soup.select(PROBLEM_LINK_SELECTOR):
        href_attr = a.get("href")
        if not isinstance(href_attr, str):
            continue
        try:
            full_url = urljoin(url, href_attr.strip())
        except ValueError:
            logger.debug("Skipping malformed href %r on %s", href_attr, url)
            continue
        # tid= anchors only count when they resolve to a details page
        if PROBLEM_DETAILS_MARKER in full_url:
            links.append(full_url)
    logger.debug("Found %d problem links on %s", len(links), url)
    return links


def parse_problem_page(url: str, html: str, max_samples: int = 256) -> TaskRecord:
    soup = parse_html(html)
    task = TaskBuilder(SOURCE_NAME).set_url(url)

    name = _extract_title(soup)
    if name is not None:
        task.set_name(name)

    timeout_ms, memory_mb = _extract_limits(soup)
    if timeout_ms is not None:
        task.set_time_limit(timeout_ms)
    if memory_mb is not None:
        task.set_memory_limit(memory_mb)

    for sample_input, sample_output in _extract_samples(soup, max_samples):
        task.add_test(sample_input, sample_output)

    record = task.build()
    logger.debug(
        "Parsed %s: name=%r, %d samples", url, record.name, len(record.tests)
    )
    return record


class NKOJContestParser(BaseParser):
    @property
    def platform_name(self) -> str:
        return "nkoj"

    @property
    def kind(self) -> str:
        return "contest"

    @property
    def match_patterns(self) -> list[str]:
        return list(CONTEST_PATTERNS)

    async def parse(self, url: str, html: str) -> list[str]:
        return parse_contest_page(url, html)


class NKOJProblemParser(BaseParser):
    @property
    def platform_name(self) -> str:
        return "nkoj"

    @property
    def kind(self) -> str:
        return "problem"

    @property
    def match_patterns(self) -> list[str]:
        return list(PROBLEM_PATTERNS)

    async def parse(self, url: str, html: str) -> TaskRecord:
        return parse_problem_page(url, html, self.config.max_samples)


async def main_async() -> int:
    if len(sys.argv) < 2:
        result = ProblemResult(
            success=False,
            error="Usage: nkoj.py problem <url> OR nkoj.py contest <url> (page HTML on stdin)",
        )
        print(result.model_dump_json())
        return 1

    mode: str = sys.argv[1]

    if mode == "problem":
        if len(sys.argv) != 3:
            result = ProblemResult(
                success=False, error="Usage: nkoj.py problem <url>"
            )
            print(result.model_dump_json())
            return 1
        url = sys.argv[2]
        problem_parser = NKOJProblemParser()
        if not problem_parser.matches(url):
            logger.warning("%s is not an NKOJ problem page URL", url)
        result = await problem_parser.parse_result(url, sys.stdin.read())
        print(result.model_dump_json())
        return 0 if result.success else 1

    if mode == "contest":
        if len(sys.argv) != 3:
            contest_result = ContestResult(
                success=False, error="Usage: nkoj.py contest <url>"
            )
            print(contest_result.model_dump_json())
            return 1
        url = sys.argv[2]
        contest_parser = NKOJContestParser()
        if not contest_parser.matches(url):
            logger.warning("%s is not an NKOJ contest page URL", url)
        contest_result = await contest_parser.parse_result(url, sys.stdin.read())
        print(contest_result.model_dump_json())
        return 0 if contest_result.success else 1

    result = ProblemResult(
        success=False,
        error=f"Unknown mode: {mode}. Use 'problem <url>' or 'contest <url>'",
    )
    print(result.model_dump_json())
    return 1


def main() -> None:
    logging.basicConfig(level=logging.WARNING, stream=sys.stderr)
    sys.exit(asyncio.run(main_async()))


if __name__ == "__main__":
    main()
