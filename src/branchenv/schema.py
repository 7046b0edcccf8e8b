"""Result models reported by an environment resolution."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .errors import BranchEnvError


class ErrorKind(str, Enum):
    """Categories of failures that abort a resolution."""

    MISSING_INPUT = "missing_input"
    MALFORMED_REF = "malformed_ref"
    INVALID_MAPPING = "invalid_mapping"


class Resolution(BaseModel):
    """Environment chosen for the triggering ref."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    environment: str = Field(..., description="Resolved environment name.")
    branch: str = Field(..., description="Branch, tag or pull request name parsed from the ref.")
    ref: str = Field(..., description="Raw ref the branch was parsed from.")
    ref_source: str = Field(..., description="Variable the raw ref was read from.")
    matched_pattern: Optional[str] = Field(None, description="Pattern that selected the environment, if any.")
    fallback_used: bool = Field(False, description="Whether no pattern matched and the fallback was returned.")


class Failure(BaseModel):
    """Terminal error surfaced to the caller."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: ErrorKind = Field(..., description="Category of the failure.")
    message: str = Field(..., description="Human-readable failure message.")

    @classmethod
    def from_error(cls, error: BranchEnvError) -> "Failure":
        return cls(kind=ErrorKind(error.kind), message=error.message)


class Outcome(BaseModel):
    """Either a :class:`Resolution` or a :class:`Failure`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    resolution: Optional[Resolution] = Field(None, description="Result of a successful resolution.")
    failure: Optional[Failure] = Field(None, description="Reason the resolution failed.")

    @property
    def ok(self) -> bool:
        return self.failure is None


__all__ = ["ErrorKind", "Failure", "Outcome", "Resolution"]
