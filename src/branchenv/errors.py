"""Exception types raised while resolving a deployment environment."""

from __future__ import annotations

__all__ = [
    "BranchEnvError",
    "ConfigError",
    "InvalidMappingError",
    "MalformedRefError",
    "MissingInputError",
]


class BranchEnvError(RuntimeError):
    """Base class for failures that abort an environment resolution."""

    kind = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingInputError(BranchEnvError):
    """Raised when a required input or ref variable is unset or empty."""

    kind = "missing_input"


class ConfigError(MissingInputError):
    """Raised when an input is present but cannot be interpreted."""


class MalformedRefError(BranchEnvError):
    """Raised when a ref does not look like ``refs/<kind>/<name>``."""

    kind = "malformed_ref"


class InvalidMappingError(BranchEnvError):
    """Raised when the pattern mapping cannot be decoded or validated."""

    kind = "invalid_mapping"
