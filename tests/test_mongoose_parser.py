"""Tests for the best-effort Mongoose model parser."""

import pytest

from schemaforge.codegen.core.schema import Field, FieldType, Schema
from schemaforge.codegen.languages.mongoose import create_mongoose_generator
from schemaforge.parsers import EXAMPLE_TEMPLATES, DocumentModelParser, ParseError


def parse(text):
    return DocumentModelParser().parse(text)


def test_example_model():
    schema = parse(EXAMPLE_TEMPLATES["mongoose"]["content"])
    assert schema.name == "User"
    assert schema.field_names() == ["email", "name", "age", "tags", "profile"]

    email = schema.get_field("email")
    assert (email.type, email.required, email.unique) == (FieldType.STRING, True, True)
    assert schema.get_field("name").validation.max == 80
    assert schema.get_field("age").validation.min == 0
    assert schema.get_field("tags").array_type is FieldType.STRING

    profile = schema.get_field("profile")
    assert profile.type is FieldType.OBJECT
    assert [f.name for f in profile.object_fields] == ["bio", "website"]


def test_generated_model_round_trips(full_schema):
    parsed = parse(create_mongoose_generator().generate(full_schema))
    assert parsed.field_names() == full_schema.field_names()

    username = parsed.get_field("username")
    assert (username.required, username.unique) == (True, True)
    assert (username.validation.min, username.validation.max) == (3, 20)

    assert parsed.get_field("age").validation.max == 130
    assert parsed.get_field("active").validation.default == "true"
    assert parsed.get_field("joined").type is FieldType.DATE
    assert parsed.get_field("scores").array_type is FieldType.NUMBER
    assert parsed.get_field("meta").type is FieldType.OBJECT


def test_nested_objects_recovered_one_level(nested_schema):
    parsed = parse(create_mongoose_generator().generate(nested_schema))
    address = parsed.get_field("address")
    assert [f.name for f in address.object_fields] == ["street", "geo"]
    assert address.object_fields[0].required is True

    geo = address.object_fields[1]
    assert geo.type is FieldType.OBJECT
    assert geo.object_fields == ()


def test_member_named_type_keeps_object():
    place = Schema(
        name="Place",
        fields=[
            Field(
                name="address",
                type="object",
                object_fields=[
                    Field(name="type", type="string", required=True),
                    Field(name="zip", type="number"),
                ],
            )
        ],
    )
    parsed = parse(create_mongoose_generator().generate(place))
    address = parsed.get_field("address")
    assert address.type is FieldType.OBJECT
    assert [(f.name, f.type) for f in address.object_fields] == [
        ("type", FieldType.STRING),
        ("zip", FieldType.NUMBER),
    ]
    assert address.object_fields[0].required is True


def test_clause_forms():
    schema = parse(
        """const mongoose = require('mongoose');
const OrderSchema = new mongoose.Schema({
  // customer reference
  customer: { type: Schema.Types.ObjectId, required: [true, 'Customer is required'] },
  status: String,
  total: Number,
  paid: { type: Boolean, default: false },
  notes: { type: [String] },
  items: [{ type: Schema.Types.Mixed }],
  lines: [{ sku: String, qty: Number }],
  extra: {},
  note: { type: String, default: 'none, yet' },
});"""
    )
    fields = {f.name: f for f in schema.fields}
    assert fields["customer"].type is FieldType.STRING
    assert fields["customer"].required is True
    assert fields["status"].type is FieldType.STRING
    assert fields["total"].type is FieldType.NUMBER
    assert fields["paid"].validation.default == "false"
    assert (fields["notes"].type, fields["notes"].array_type) == (FieldType.ARRAY, FieldType.STRING)
    assert fields["items"].array_type is FieldType.OBJECT
    assert fields["lines"].array_type is FieldType.OBJECT
    assert fields["extra"] == Field(name="extra", type="object")
    assert fields["note"].validation.default == "none, yet"


def test_quoted_default_is_unquoted():
    schema = parse(
        "const TagSchema = new Schema({ label: { type: String, default: 'it\\'s' } });"
    )
    assert schema.fields[0].validation.default == "it's"


@pytest.mark.parametrize(
    "text, message",
    [
        ("const x = 1;", "No Mongoose schema found"),
        ("const UserSchema = new Schema(", "Invalid schema format"),
        ("const UserSchema = new Schema({ name: String", "Invalid schema format"),
    ],
)
def test_failures(text, message):
    with pytest.raises(ParseError) as excinfo:
        parse(text)
    assert excinfo.value.message == message
    assert excinfo.value.kind == "syntax"


def test_duplicate_keys_are_rejected():
    with pytest.raises(ParseError, match="Duplicate field name 'name' in 'User'"):
        parse("const UserSchema = new Schema({ name: String, name: Number });")
