from pydantic import BaseModel, ConfigDict, Field


class TestCase(BaseModel):
    input: str
    output: str

    model_config = ConfigDict(extra="forbid", frozen=True)


class TaskRecord(BaseModel):
    source_name: str = "NKOJ"
    url: str = ""
    name: str = ""
    time_limit_ms: float = 0
    memory_limit_mb: int = 0
    tests: tuple[TestCase, ...] = ()

    model_config = ConfigDict(extra="forbid", frozen=True)


class TaskBuilder:
    """Accumulates task fields while a page is being scanned.

    Every setter returns the builder so calls can be chained. ``build`` hands
    out a frozen ``TaskRecord``; records already built are unaffected by
    later calls.
    """

    def __init__(self, source_name: str):
        self.source_name = source_name
        self.url = ""
        self.name = ""
        self.time_limit_ms = 0
        self.memory_limit_mb = 0
        self.tests: list[TestCase] = []

    def set_url(self, url: str) -> "TaskBuilder":
        self.url = url
        return self

    def set_name(self, name: str) -> "TaskBuilder":
        self.name = name
        return self

    def set_time_limit(self, time_limit_ms: float) -> "TaskBuilder":
        self.time_limit_ms = time_limit_ms
        return self

    def set_memory_limit(self, memory_limit_mb: int) -> "TaskBuilder":
        self.memory_limit_mb = memory_limit_mb
        return self

    def add_test(self, input: str, output: str) -> "TaskBuilder":
        self.tests.append(TestCase(input=input, output=output))
        return self

    def build(self) -> TaskRecord:
        return TaskRecord(
            source_name=self.source_name,
            url=self.url,
            name=self.name,
            time_limit_ms=self.time_limit_ms,
            memory_limit_mb=self.memory_limit_mb,
            tests=tuple(self.tests),
        )


class ParsingResult(BaseModel):
    success: bool
    error: str
    url: str = ""

    model_config = ConfigDict(extra="forbid")


class ContestResult(ParsingResult):
    problems: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class ProblemResult(ParsingResult):
    task: TaskRecord | None = None

    model_config = ConfigDict(extra="forbid")


class ParserConfig(BaseModel):
    max_samples: int = Field(default=256, gt=0)

    model_config = ConfigDict(extra="forbid")
