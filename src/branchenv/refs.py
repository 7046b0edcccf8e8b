"""Extract the branch, tag or pull request name from a CI ref."""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Iterable, Mapping

from .errors import MalformedRefError, MissingInputError

__all__ = [
    "DEFAULT_REF_KINDS",
    "PULL_REQUEST_EVENT",
    "parse_branch",
    "resolve_branch",
    "resolve_raw_ref",
]

LOGGER = logging.getLogger(__name__)

DEFAULT_REF_KINDS: tuple[str, ...] = ("heads", "tags", "pull")
PULL_REQUEST_EVENT = "pull_request"

EVENT_VARIABLE = "GITHUB_EVENT_NAME"
HEAD_REF_VARIABLE = "GITHUB_HEAD_REF"
REF_VARIABLE = "GITHUB_REF"


def _get_variable(env: Mapping[str, str], key: str) -> str:
    value = env.get(key)
    if not value:
        raise MissingInputError(f"Unexpected empty value for {key}.")
    return value


def resolve_raw_ref(
    env: Mapping[str, str],
    *,
    event_variable: str = EVENT_VARIABLE,
    head_ref_variable: str = HEAD_REF_VARIABLE,
    ref_variable: str = REF_VARIABLE,
    use_head_ref: bool = True,
) -> tuple[str, str]:
    """Pick the ref that triggered the run.

    Pull request events carry the source branch in the head ref variable, every
    other event in the primary ref variable. With ``use_head_ref`` disabled the
    primary ref is always used.

    Returns
    -------
    tuple[str, str]
        The raw ref and the name of the variable it was read from.
    """

    if use_head_ref and env.get(event_variable) == PULL_REQUEST_EVENT:
        LOGGER.info(
            "Event type '%s', using %s for ref", PULL_REQUEST_EVENT, head_ref_variable
        )
        return _get_variable(env, head_ref_variable), head_ref_variable

    LOGGER.info("Using %s for ref", ref_variable)
    return _get_variable(env, ref_variable), ref_variable


@lru_cache(maxsize=None)
def _ref_pattern(kinds: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(kind) for kind in kinds)
    return re.compile(rf"refs/(?P<kind>{alternatives})/(?P<name>\S+)")


def parse_branch(ref: str, *, kinds: Iterable[str] = DEFAULT_REF_KINDS) -> str:
    """Return the name that follows ``refs/<kind>/`` in ``ref``.

    The name keeps any embedded ``/`` and must not contain whitespace.
    """

    kinds = tuple(kinds)
    match = _ref_pattern(kinds).fullmatch(ref) if kinds else None
    if match is None:
        raise MalformedRefError(f"Unexpected format of ref ({ref}).")
    return match.group("name")


def resolve_branch(
    env: Mapping[str, str],
    *,
    kinds: Iterable[str] = DEFAULT_REF_KINDS,
    event_variable: str = EVENT_VARIABLE,
    head_ref_variable: str = HEAD_REF_VARIABLE,
    ref_variable: str = REF_VARIABLE,
    use_head_ref: bool = True,
) -> tuple[str, str, str]:
    """Resolve the raw ref from ``env`` and parse the branch out of it.

    Returns the branch, the raw ref and the variable the ref came from.
    """

    ref, source = resolve_raw_ref(
        env,
        event_variable=event_variable,
        head_ref_variable=head_ref_variable,
        ref_variable=ref_variable,
        use_head_ref=use_head_ref,
    )
    return parse_branch(ref, kinds=kinds), ref, source
