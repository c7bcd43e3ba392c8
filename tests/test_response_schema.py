"""Tests for the model output contract."""

from screener.schemas.analysis import RECOMMENDATIONS
from screener.schemas.response_schema import (
    ENVELOPE_KEY,
    REQUIRED_FIELDS,
    build_envelope_schema,
    build_response_schema,
)


def test_schema_is_array_of_candidate_objects() -> None:
    schema = build_response_schema()

    assert schema["type"] == "array"
    items = schema["items"]
    assert items["type"] == "object"
    assert set(items["required"]) == set(REQUIRED_FIELDS)
    assert set(items["properties"]) == set(REQUIRED_FIELDS)


def test_field_types() -> None:
    props = build_response_schema()["items"]["properties"]

    assert props["position"]["type"] == "integer"
    assert props["score"]["type"] == "integer"
    assert props["candidateName"]["type"] == "string"
    assert props["summary"]["type"] == "string"
    assert props["strengths"]["type"] == "array"
    assert props["strengths"]["items"] == {"type": "string"}
    assert props["gaps"]["items"] == {"type": "string"}
    assert props["recommendation"]["enum"] == list(RECOMMENDATIONS)


def test_schema_copies_are_independent() -> None:
    first = build_response_schema()
    first["items"]["required"].append("extra")

    assert "extra" not in build_response_schema()["items"]["required"]


def test_envelope_wraps_array() -> None:
    envelope = build_envelope_schema()

    assert envelope["type"] == "object"
    assert envelope["required"] == [ENVELOPE_KEY]
    assert envelope["properties"][ENVELOPE_KEY] == build_response_schema()


def test_envelope_wraps_given_items_schema() -> None:
    items = {"type": "array", "items": {"type": "string"}}

    envelope = build_envelope_schema(items)

    assert envelope["properties"][ENVELOPE_KEY] is items
    assert envelope["additionalProperties"] is False
