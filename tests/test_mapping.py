from __future__ import annotations

import pytest

from branchenv.errors import InvalidMappingError
from branchenv.mapping import load_mapping, validate_mapping


def test_load_mapping_preserves_order() -> None:
    mapping = load_mapping('{"main": "production", "release/*": "staging", "*": "dev"}')
    assert list(mapping.items()) == [
        ("main", "production"),
        ("release/*", "staging"),
        ("*", "dev"),
    ]


def test_load_mapping_accepts_empty_object() -> None:
    assert load_mapping("{}") == {}


@pytest.mark.parametrize(
    "text",
    [
        '{"main": 1}',
        '{"main": "production", "dev": null}',
        '{"main": true}',
        '{"main": ["production"]}',
        '{"main": {"name": "production"}}',
    ],
)
def test_load_mapping_rejects_non_string_values(text: str) -> None:
    with pytest.raises(InvalidMappingError) as excinfo:
        load_mapping(text)
    assert str(excinfo.value) == "Environments in mapping should be strings."
    assert excinfo.value.kind == "invalid_mapping"


@pytest.mark.parametrize("text", ["", "{main: production}", '{"main": "production"'])
def test_load_mapping_rejects_invalid_json(text: str) -> None:
    with pytest.raises(InvalidMappingError, match="Invalid JSON in mapping"):
        load_mapping(text)


@pytest.mark.parametrize("text", ['["main"]', '"main"', "3"])
def test_load_mapping_requires_an_object(text: str) -> None:
    with pytest.raises(InvalidMappingError, match="JSON object"):
        load_mapping(text)


def test_validate_mapping_returns_plain_dict() -> None:
    raw = {"main": "production"}
    validated = validate_mapping(raw)
    assert validated == raw
    assert type(validated) is dict
