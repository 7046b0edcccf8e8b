"""Command line interface for branchenv."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Mapping, Sequence

from .action import run
from .config import ActionConfig
from .errors import ConfigError
from .outputs import GitHubFileSink, MemorySink, OutputSink
from .schema import Failure, Outcome


def _parse_kinds(value: str) -> tuple[str, ...]:
    kinds = tuple(part.strip() for part in value.split(",") if part.strip())
    if not kinds:
        raise argparse.ArgumentTypeError("at least one ref kind is required")
    for kind in kinds:
        if "/" in kind or any(char.isspace() for char in kind):
            raise argparse.ArgumentTypeError(f"invalid ref kind '{kind}'")
    return kinds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="branchenv",
        description="Determine the deployment environment for the current branch or tag",
    )
    parser.add_argument(
        "-m",
        "--mapping",
        help="JSON object mapping wildcard patterns to environments (defaults to $INPUT_MAPPING)",
    )
    parser.add_argument(
        "-d",
        "--default",
        dest="fallback",
        help="Environment used when no pattern matches (defaults to $INPUT_DEFAULT)",
    )
    parser.add_argument(
        "-e",
        "--export",
        dest="export_variable",
        metavar="NAME",
        help="Also export the environment to this workflow variable",
    )
    parser.add_argument("--ref", help="Override $GITHUB_REF")
    parser.add_argument("--head-ref", help="Override $GITHUB_HEAD_REF")
    parser.add_argument("--event-name", help="Override $GITHUB_EVENT_NAME")
    parser.add_argument(
        "--kinds",
        type=_parse_kinds,
        metavar="KIND[,KIND...]",
        help="Comma separated ref kinds accepted after refs/ (default: heads,tags,pull)",
    )
    parser.add_argument(
        "--no-branch-output",
        dest="emit_branch",
        action="store_false",
        default=None,
        help="Do not report the resolved branch as an output",
    )
    parser.add_argument(
        "--no-head-ref",
        dest="use_head_ref",
        action="store_false",
        default=None,
        help="Always read $GITHUB_REF, even for pull_request events",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the outcome as JSON instead of writing workflow outputs",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="info",
        help="Verbosity of diagnostic messages written to stderr",
    )
    return parser


def _apply_ref_overrides(
    env: Mapping[str, str], config: ActionConfig, args: argparse.Namespace
) -> dict[str, str]:
    merged = dict(env)
    overrides = {
        config.ref_variable: args.ref,
        config.head_ref_variable: args.head_ref,
        config.event_variable: args.event_name,
    }
    for key, value in overrides.items():
        if value is not None:
            merged[key] = value
    return merged


def _finish(outcome: Outcome, *, as_json: bool) -> int:
    if as_json:
        sys.stdout.write(outcome.model_dump_json(indent=2))
        sys.stdout.write("\n")
    return 0 if outcome.ok else 1


def main(argv: Sequence[str] | None = None, env: Mapping[str, str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    environment: Mapping[str, str] = env if env is not None else os.environ

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(message)s",
        stream=sys.stderr,
    )

    sink: OutputSink = MemorySink() if args.json else GitHubFileSink(environment)

    try:
        config = ActionConfig.from_env(environment)
    except ConfigError as exc:
        sink.fail(exc.message)
        return _finish(Outcome(failure=Failure.from_error(exc)), as_json=args.json)

    config = config.with_overrides(
        mapping_text=args.mapping,
        fallback=args.fallback,
        export_variable=args.export_variable,
        emit_branch=args.emit_branch,
        use_head_ref=args.use_head_ref,
        ref_kinds=args.kinds,
    )
    outcome = run(config, _apply_ref_overrides(environment, config, args), sink)
    return _finish(outcome, as_json=args.json)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
