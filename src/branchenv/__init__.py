"""Pick a deployment environment for the branch or tag that triggered a CI run.

The ref of the run is reduced to a bare branch, tag or pull request name which
is then matched against an ordered mapping of wildcard patterns. The package can
be used as a library or through the ``branchenv`` command line tool.
"""

from __future__ import annotations

from .action import resolve, run
from .config import ActionConfig
from .errors import (
    BranchEnvError,
    ConfigError,
    InvalidMappingError,
    MalformedRefError,
    MissingInputError,
)
from .mapping import load_mapping, validate_mapping
from .matching import find_match, match_branch, sort_patterns, wildcard_to_regex
from .outputs import GitHubFileSink, MemorySink, OutputSink
from .refs import DEFAULT_REF_KINDS, parse_branch, resolve_branch, resolve_raw_ref
from .schema import ErrorKind, Failure, Outcome, Resolution

__all__ = [
    "ActionConfig",
    "BranchEnvError",
    "ConfigError",
    "DEFAULT_REF_KINDS",
    "ErrorKind",
    "Failure",
    "GitHubFileSink",
    "InvalidMappingError",
    "MalformedRefError",
    "MemorySink",
    "MissingInputError",
    "Outcome",
    "OutputSink",
    "Resolution",
    "find_match",
    "load_mapping",
    "match_branch",
    "parse_branch",
    "resolve",
    "resolve_branch",
    "resolve_raw_ref",
    "run",
    "sort_patterns",
    "validate_mapping",
    "wildcard_to_regex",
]

__version__ = "0.1.0"
