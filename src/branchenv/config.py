"""Inputs of an environment resolution read from an injected environment."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .errors import ConfigError, MissingInputError
from .refs import (
    DEFAULT_REF_KINDS,
    EVENT_VARIABLE,
    HEAD_REF_VARIABLE,
    REF_VARIABLE,
)

__all__ = ["ActionConfig", "get_input", "get_boolean_input", "require_input"]

_TRUE_VALUES = frozenset({"true", "True", "TRUE"})
_FALSE_VALUES = frozenset({"false", "False", "FALSE"})


def _input_variable(name: str) -> str:
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(env: Mapping[str, str], name: str) -> str:
    """Return the action input ``name`` as exposed by the runner, stripped."""

    return env.get(_input_variable(name), "").strip()


def require_input(value: Optional[str], name: str) -> str:
    """Return ``value`` or fail when the required input ``name`` is blank."""

    if not value:
        raise MissingInputError(f"Input required and not supplied: {name}")
    return value


def get_boolean_input(env: Mapping[str, str], name: str, *, default: bool) -> bool:
    """Parse a boolean input using the YAML 1.2 core schema spellings."""

    value = get_input(env, name)
    if not value:
        return default
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(
        f"Input does not meet YAML 1.2 \"Core Schema\" specification: {name}\n"
        "Support boolean input list: `true | True | TRUE | false | False | FALSE`"
    )


@dataclass(slots=True, frozen=True)
class ActionConfig:
    """Everything a resolution needs besides the ref variables themselves.

    Attributes
    ----------
    mapping_text:
        JSON object text mapping wildcard patterns to environment names.
    fallback:
        Environment returned when no pattern matches the branch.
    export_variable:
        Optional name of a workflow variable that also receives the
        environment.
    emit_branch:
        Whether the resolved branch is reported as an output.
    use_head_ref:
        When ``True`` pull request events read the head ref variable instead
        of the primary ref.
    ref_kinds:
        Path segments accepted after ``refs/``.
    event_variable, head_ref_variable, ref_variable:
        Names of the variables holding the event type and the ref candidates.
    """

    mapping_text: Optional[str] = None
    fallback: Optional[str] = None
    export_variable: Optional[str] = None
    emit_branch: bool = True
    use_head_ref: bool = True
    ref_kinds: tuple[str, ...] = DEFAULT_REF_KINDS
    event_variable: str = EVENT_VARIABLE
    head_ref_variable: str = HEAD_REF_VARIABLE
    ref_variable: str = REF_VARIABLE

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "ActionConfig":
        """Build an :class:`ActionConfig` from ``INPUT_*`` variables in ``env``.

        Required inputs are only checked when the resolution runs so that
        failures surface in a fixed order.
        """

        return cls(
            mapping_text=get_input(env, "mapping") or None,
            fallback=get_input(env, "default") or None,
            export_variable=get_input(env, "export") or None,
            emit_branch=get_boolean_input(env, "branch-output", default=True),
        )

    def with_overrides(self, **changes: object) -> "ActionConfig":
        """Return a copy with every non-``None`` value in ``changes`` applied."""

        return replace(self, **{key: value for key, value in changes.items() if value is not None})
