"""Sinks that report resolution results to the calling workflow."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Mapping, Optional, TextIO
from uuid import uuid4

__all__ = ["GitHubFileSink", "MemorySink", "OutputSink"]


class OutputSink(ABC):
    """Destination for outputs, exported variables and failures."""

    @abstractmethod
    def set_output(self, name: str, value: str) -> None:
        """Publish a named output of the step."""

    @abstractmethod
    def export_variable(self, name: str, value: str) -> None:
        """Make ``value`` available as ``name`` to later steps."""

    @abstractmethod
    def fail(self, message: str) -> None:
        """Report a terminal failure."""


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _format_command(name: str, value: str) -> str:
    if "\n" not in value and "\r" not in value:
        return f"{name}={value}\n"
    delimiter = f"ghadelimiter_{uuid4()}"
    if delimiter in name or delimiter in value:
        raise ValueError("unexpected delimiter collision in command value")
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


class GitHubFileSink(OutputSink):
    """Write outputs through the GitHub Actions environment files.

    Outputs go to the file named by ``GITHUB_OUTPUT`` and exports to
    ``GITHUB_ENV``. When a file variable is missing the command is printed to
    ``stream`` instead, which keeps local runs readable.
    """

    def __init__(self, env: Mapping[str, str], stream: Optional[TextIO] = None) -> None:
        self._env = env
        self._stream = stream if stream is not None else sys.stdout

    def _append(self, file_variable: str, name: str, value: str) -> None:
        command = _format_command(name, value)
        target = self._env.get(file_variable)
        if not target:
            self._stream.write(command)
            return
        with Path(target).open("a", encoding="utf-8") as handle:
            handle.write(command)

    def set_output(self, name: str, value: str) -> None:
        self._append("GITHUB_OUTPUT", name, value)

    def export_variable(self, name: str, value: str) -> None:
        self._append("GITHUB_ENV", name, value)

    def fail(self, message: str) -> None:
        self._stream.write(f"::error::{_escape_data(message)}\n")


class MemorySink(OutputSink):
    """Keep everything in memory; handy for tests and library callers."""

    def __init__(self) -> None:
        self.outputs: dict[str, str] = {}
        self.exports: dict[str, str] = {}
        self.failures: list[str] = []

    def set_output(self, name: str, value: str) -> None:
        self.outputs[name] = value

    def export_variable(self, name: str, value: str) -> None:
        self.exports[name] = value

    def fail(self, message: str) -> None:
        self.failures.append(message)
