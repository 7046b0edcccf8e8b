"""Resolve the deployment environment for the ref that triggered a run."""

from __future__ import annotations

import logging
from typing import Mapping

from .config import ActionConfig, require_input
from .errors import BranchEnvError
from .mapping import load_mapping
from .matching import find_match
from .outputs import OutputSink
from .refs import resolve_branch
from .schema import Failure, Outcome, Resolution

__all__ = ["BRANCH_OUTPUT", "ENVIRONMENT_OUTPUT", "resolve", "run"]

LOGGER = logging.getLogger(__name__)

ENVIRONMENT_OUTPUT = "environment"
BRANCH_OUTPUT = "branch"


def resolve(config: ActionConfig, env: Mapping[str, str]) -> Resolution:
    """Compute the :class:`Resolution` for ``config`` and ``env``.

    The mapping and fallback are checked before the ref so that a
    misconfigured step fails regardless of the triggering event.
    """

    mapping = load_mapping(require_input(config.mapping_text, "mapping"))
    fallback = require_input(config.fallback, "default")
    branch, ref, source = resolve_branch(
        env,
        kinds=config.ref_kinds,
        event_variable=config.event_variable,
        head_ref_variable=config.head_ref_variable,
        ref_variable=config.ref_variable,
        use_head_ref=config.use_head_ref,
    )

    LOGGER.info("Determine environment for branch %s", branch)

    pattern = find_match(branch, mapping)
    if pattern is None:
        LOGGER.debug("No pattern matched %s, using fallback %s", branch, fallback)
        environment = fallback
    else:
        LOGGER.debug("Pattern %s matched %s", pattern, branch)
        environment = mapping[pattern]

    return Resolution(
        environment=environment,
        branch=branch,
        ref=ref,
        ref_source=source,
        matched_pattern=pattern,
        fallback_used=pattern is None,
    )


def run(config: ActionConfig, env: Mapping[str, str], sink: OutputSink) -> Outcome:
    """Resolve and report the result through ``sink``.

    Nothing is written to ``sink`` except the failure message when the
    resolution fails.
    """

    try:
        resolution = resolve(config, env)
    except BranchEnvError as exc:
        LOGGER.debug("Resolution failed: %s", exc.kind)
        sink.fail(exc.message)
        return Outcome(failure=Failure.from_error(exc))

    sink.set_output(ENVIRONMENT_OUTPUT, resolution.environment)
    if config.emit_branch:
        sink.set_output(BRANCH_OUTPUT, resolution.branch)
    if config.export_variable:
        sink.export_variable(config.export_variable, resolution.environment)

    return Outcome(resolution=resolution)
