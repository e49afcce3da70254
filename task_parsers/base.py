import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, ParamSpec

P = ParamSpec("P")

from .models import ContestResult, ParserConfig, ProblemResult, TaskRecord
from .patterns import matches_any

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """The HTML could not be turned into a document tree."""


class BaseParser(ABC):
    def __init__(self, config: ParserConfig | None = None):
        self.config = config or ParserConfig()

    @property
    @abstractmethod
    def platform_name(self) -> str: ...

    @property
    @abstractmethod
    def kind(self) -> str: ...

    @property
    @abstractmethod
    def match_patterns(self) -> list[str]: ...

    @abstractmethod
    async def parse(self, url: str, html: str) -> Any: ...

    @property
    def parser_name(self) -> str:
        return f"{self.platform_name}_{self.kind}"

    def matches(self, url: str) -> bool:
        return matches_any(self.match_patterns, url)

    async def parse_result(self, url: str, html: str) -> ContestResult | ProblemResult:
        return await self._safe_execute(self.kind, self.parse, url, html)

    def _create_contest_error(self, error_msg: str, url: str = "") -> ContestResult:
        return ContestResult(
            success=False,
            error=f"{self.platform_name}: {error_msg}",
            url=url,
            problems=[],
        )

    def _create_problem_error(self, error_msg: str, url: str = "") -> ProblemResult:
        return ProblemResult(
            success=False,
            error=f"{self.platform_name}: {error_msg}",
            url=url,
            task=None,
        )

    async def _safe_execute(
        self,
        operation: str,
        func: Callable[P, Awaitable[Any]],
        *args: P.args,
        **kwargs: P.kwargs,
    ):
        url = str(args[0]) if args else ""
        try:
            result = await func(*args, **kwargs)
        except Exception as e:
            logger.warning("%s parse of %s failed: %s", self.parser_name, url, e)
            if operation == "contest":
                return self._create_contest_error(str(e), url)
            elif operation == "problem":
                return self._create_problem_error(str(e), url)
            else:
                raise
        if operation == "problem" and isinstance(result, TaskRecord):
            return ProblemResult(success=True, error="", url=url, task=result)
        if operation == "contest":
            return ContestResult(success=True, error="", url=url, problems=result)
        return result
