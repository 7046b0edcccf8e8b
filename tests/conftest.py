from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture()
def push_env() -> dict[str, str]:
    """Variables the runner sets for a push to ``main``."""

    return {
        "GITHUB_EVENT_NAME": "push",
        "GITHUB_REF": "refs/heads/main",
        "INPUT_MAPPING": '{"main": "production", "release/*": "staging", "feature/*": "dev"}',
        "INPUT_DEFAULT": "sandbox",
    }
