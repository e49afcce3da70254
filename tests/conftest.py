import io
import json
import sys

import pytest


@pytest.fixture
def run_parser_cli(monkeypatch, capsys):
    def _run(*args: str, stdin: str = ""):
        import asyncio

        from task_parsers.nkoj import main_async

        monkeypatch.setattr(sys, "argv", ["nkoj.py", *args])
        monkeypatch.setattr(sys, "stdin", io.StringIO(stdin))
        rc = asyncio.run(main_async())
        out = capsys.readouterr().out

        json_lines = []
        for line in (l for l in out.splitlines() if l.strip()):
            try:
                json_lines.append(json.loads(line))
            except json.JSONDecodeError as e:
                raise AssertionError(f"Invalid JSON from nkoj {args}: {line}") from e
        return rc, json_lines

    return _run
