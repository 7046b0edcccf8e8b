from __future__ import annotations

import io
from pathlib import Path

from branchenv.outputs import GitHubFileSink, MemorySink


def test_file_sink_appends_outputs(tmp_path: Path) -> None:
    output_file = tmp_path / "output"
    output_file.write_text("existing=1\n", encoding="utf-8")
    sink = GitHubFileSink({"GITHUB_OUTPUT": str(output_file)})

    sink.set_output("environment", "production")
    sink.set_output("branch", "main")

    assert output_file.read_text(encoding="utf-8") == (
        "existing=1\nenvironment=production\nbranch=main\n"
    )


def test_file_sink_exports_to_env_file(tmp_path: Path) -> None:
    env_file = tmp_path / "env"
    sink = GitHubFileSink({"GITHUB_ENV": str(env_file)})

    sink.export_variable("DEPLOY_ENV", "staging")

    assert env_file.read_text(encoding="utf-8") == "DEPLOY_ENV=staging\n"


def test_file_sink_uses_heredoc_for_multiline_values(tmp_path: Path) -> None:
    output_file = tmp_path / "output"
    sink = GitHubFileSink({"GITHUB_OUTPUT": str(output_file)})

    sink.set_output("notes", "first\nsecond")

    lines = output_file.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("notes<<ghadelimiter_")
    delimiter = lines[0].split("<<", 1)[1]
    assert lines[1:] == ["first", "second", delimiter]


def test_file_sink_prints_when_file_variable_missing() -> None:
    stream = io.StringIO()
    sink = GitHubFileSink({}, stream=stream)

    sink.set_output("environment", "dev")

    assert stream.getvalue() == "environment=dev\n"


def test_file_sink_fail_escapes_message() -> None:
    stream = io.StringIO()
    sink = GitHubFileSink({}, stream=stream)

    sink.fail("100% broken\nsecond line")

    assert stream.getvalue() == "::error::100%25 broken%0Asecond line\n"


def test_memory_sink_records_everything() -> None:
    sink = MemorySink()
    sink.set_output("environment", "dev")
    sink.export_variable("DEPLOY_ENV", "dev")
    sink.fail("boom")

    assert sink.outputs == {"environment": "dev"}
    assert sink.exports == {"DEPLOY_ENV": "dev"}
    assert sink.failures == ["boom"]
