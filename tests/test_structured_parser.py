"""Tests for the strict JSON schema parser."""

import json

import pytest

from schemaforge.codegen.core.schema import Field, FieldType, Schema
from schemaforge.parsers import EXAMPLE_TEMPLATES, ParseError, StructuredTextParser


def parse(document):
    text = document if isinstance(document, str) else json.dumps(document)
    return StructuredTextParser().parse(text)


def error_for(document):
    with pytest.raises(ParseError) as excinfo:
        parse(document)
    return excinfo.value


def test_parses_example_document():
    schema = parse(EXAMPLE_TEMPLATES["schema"]["content"])
    assert schema == Schema(
        name="User",
        fields=[Field(name="id", type="string", required=True, unique=True)],
    )


def test_missing_field_name_names_index():
    error = error_for('{"name": "X", "fields": [{"type":"string"}]}')
    assert error.message == "Field at index 0 must have a valid name"
    assert error.kind == "semantic"


def test_invalid_json_is_syntax_error():
    error = error_for('{"name": "X", "fields": [')
    assert error.message == "Invalid JSON format"
    assert error.kind == "syntax"


def test_document_must_be_object():
    assert error_for("[1, 2]").message == "Schema must be a JSON object"


@pytest.mark.parametrize("name", [None, "", "   ", 42])
def test_schema_needs_valid_name(name):
    error = error_for({"name": name, "fields": []})
    assert error.message == "Schema must have a valid name"


def test_schema_needs_fields_array():
    assert error_for({"name": "X"}).message == "Schema must have a fields array"
    assert error_for({"name": "X", "fields": {}}).message == "Schema must have a fields array"


def test_field_must_be_object():
    assert error_for({"name": "X", "fields": ["email"]}).message == (
        "Field at index 0 must be an object"
    )


def test_invalid_type_lists_choices():
    error = error_for({"name": "X", "fields": [{"name": "age", "type": "integer"}]})
    assert error.message == (
        "Field 'age' has invalid type. "
        "Must be one of: string, number, boolean, date, array, object"
    )


@pytest.mark.parametrize("array_type", [None, "array", "tuple"])
def test_array_needs_valid_element_type(array_type):
    field = {"name": "tags", "type": "array"}
    if array_type:
        field["arrayType"] = array_type
    error = error_for({"name": "X", "fields": [field]})
    assert error.message == "Array field 'tags' must have a valid arrayType"


def test_array_of_objects_is_allowed():
    schema = parse(
        {"name": "X", "fields": [{"name": "rows", "type": "array", "arrayType": "object"}]}
    )
    assert schema.fields[0].array_type is FieldType.OBJECT


def test_nested_object_members_one_level():
    schema = parse(
        {
            "name": "Place",
            "fields": [
                {
                    "name": "address",
                    "type": "object",
                    "objectFields": [
                        {"name": "street", "type": "string", "required": True},
                        {"name": "zip", "type": "number"},
                    ],
                }
            ],
        }
    )
    address = schema.fields[0]
    assert [f.name for f in address.object_fields] == ["street", "zip"]
    assert address.object_fields[0].required is True


def test_second_nesting_level_is_rejected(nested_schema):
    error = error_for(nested_schema.to_json())
    assert error.message == (
        "Object field 'geo' has invalid type. Must be one of: string, number, boolean, date"
    )


def test_nested_member_needs_name():
    error = error_for(
        {
            "name": "X",
            "fields": [{"name": "address", "type": "object", "objectFields": [{"type": "string"}]}],
        }
    )
    assert error.message == "Object field at index 0 in 'address' must have a valid name"


def test_flags_need_literal_true():
    schema = parse(
        {
            "name": "X",
            "fields": [
                {"name": "a", "type": "string", "required": "yes", "unique": 1},
                {"name": "b", "type": "string", "required": True, "unique": True},
            ],
        }
    )
    assert (schema.fields[0].required, schema.fields[0].unique) == (False, False)
    assert (schema.fields[1].required, schema.fields[1].unique) == (True, True)


def test_validation_values():
    schema = parse(
        {
            "name": "X",
            "fields": [
                {
                    "name": "count",
                    "type": "number",
                    "validation": {"min": 1, "max": 9.5, "default": 3},
                },
                {"name": "flag", "type": "boolean", "validation": {"default": False}},
            ],
        }
    )
    count = schema.fields[0].validation
    assert (count.min, count.max, count.default) == (1, 9.5, "3")
    assert schema.fields[1].validation.default == "false"


@pytest.mark.parametrize(
    "validation, message",
    [
        ({"min": "5"}, "Field 'n' has invalid validation.min: must be a number"),
        ({"max": True}, "Field 'n' has invalid validation.max: must be a number"),
        ({"regex": 5}, "Field 'n' has invalid validation.regex: must be a string"),
        ([1], "Field 'n' has invalid validation: must be an object"),
    ],
)
def test_invalid_validation(validation, message):
    error = error_for(
        {"name": "X", "fields": [{"name": "n", "type": "string", "validation": validation}]}
    )
    assert error.message == message


def test_duplicate_names_are_rejected():
    error = error_for(
        {
            "name": "User",
            "fields": [
                {"name": "email", "type": "string"},
                {"name": "email", "type": "number"},
            ],
        }
    )
    assert error.message == "Duplicate field name 'email' in 'User'"
    assert error.kind == "semantic"


def test_duplicate_nested_names_are_rejected():
    error = error_for(
        {
            "name": "X",
            "fields": [
                {
                    "name": "address",
                    "type": "object",
                    "objectFields": [
                        {"name": "street", "type": "string"},
                        {"name": "street", "type": "string"},
                    ],
                }
            ],
        }
    )
    assert error.message == "Duplicate field name 'street' in 'address'"


def test_round_trip_through_document(full_schema):
    assert parse(full_schema.to_json()) == full_schema


def test_round_trip_keeps_empty_regex():
    schema = parse(
        {"name": "X", "fields": [{"name": "a", "type": "string", "validation": {"regex": ""}}]}
    )
    assert schema.fields[0].validation.regex == ""
    assert parse(schema.to_json()) == schema
