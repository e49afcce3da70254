import re
from functools import lru_cache


@lru_cache(maxsize=None)
def _compile_template(template: str) -> re.Pattern[str]:
    # "*" is the only wildcard; everything else is literal, "?" included
    parts = (re.escape(part) for part in template.split("*"))
    return re.compile(".*".join(parts), re.DOTALL)


def matches_template(template: str, url: str) -> bool:
    return _compile_template(template).fullmatch(url) is not None


def matches_any(templates: list[str], url: str) -> bool:
    return any(matches_template(t, url) for t in templates)


def expand_templates(
    schemes: tuple[str, ...], host: str, prefixes: tuple[str, ...], paths: list[str]
) -> list[str]:
    """Cross product of scheme, language prefix and path; path varies slowest."""
    return [
        f"{scheme}://{host}/{prefix}/{path}"
        for path in paths
        for prefix in prefixes
        for scheme in schemes
    ]
