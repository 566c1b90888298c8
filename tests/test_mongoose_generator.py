"""Tests for the Mongoose model generator."""

from schemaforge.codegen.core.schema import Field, Schema
from schemaforge.codegen.languages.mongoose import (
    MongooseGenerator,
    create_mongoose_generator,
)


def clause(field):
    return MongooseGenerator().render_clause(field)


def test_model_module(user_schema):
    code = create_mongoose_generator().generate(user_schema)
    assert code == (
        "import { Schema, model, Document } from 'mongoose';\n"
        "\n"
        "export interface UserDocument extends Document {\n"
        "  email: string;\n"
        "}\n"
        "\n"
        "const UserSchema = new Schema<UserDocument>({\n"
        "  email: { type: String, required: true, unique: true }\n"
        "}, {\n"
        "  timestamps: true\n"
        "});\n"
        "\n"
        "export const User = model<UserDocument>('User', UserSchema);"
    )


def test_timestamps_can_be_disabled(user_schema):
    code = create_mongoose_generator(timestamps=False).generate(user_schema)
    assert "timestamps" not in code
    assert "  email: { type: String, required: true, unique: true }\n});" in code


def test_string_options():
    field = Field(
        name="name",
        type="string",
        required=True,
        validation={"min": 2, "max": 10, "default": "it's"},
    )
    assert clause(field) == (
        "{ type: String, required: true, minlength: 2, maxlength: 10, default: 'it\\'s' }"
    )


def test_number_options():
    field = Field(name="qty", type="number", validation={"min": 0, "max": 5, "default": 1})
    assert clause(field) == "{ type: Number, min: 0, max: 5, default: 1 }"


def test_arrays_use_element_token():
    assert clause(Field(name="tags", type="array", array_type="string")) == "[{ type: String }]"
    assert clause(Field(name="when", type="array", array_type="date")) == "[{ type: Date }]"
    assert clause(Field(name="rows", type="array", array_type="object")) == (
        "[{ type: Schema.Types.Mixed }]"
    )


def test_fieldless_object_and_unknown_are_mixed():
    assert clause(Field(name="meta", type="object", required=True)) == (
        "{ type: Schema.Types.Mixed, required: true }"
    )
    assert clause(Field(name="blob", type="binary")) == "{ type: Schema.Types.Mixed }"


def test_nested_object_clause(nested_schema):
    code = create_mongoose_generator().generate(nested_schema)
    assert (
        "  address: {\n"
        "    street: { type: String, required: true },\n"
        "    geo: {\n"
        "      lat: { type: Number, required: true }\n"
        "    }\n"
        "  }\n"
        "}, {"
    ) in code


def test_empty_schema():
    code = MongooseGenerator().generate(Schema(name="Empty"))
    assert "const EmptySchema = new Schema<EmptyDocument>({}, {" in code
    assert "export interface EmptyDocument extends Document {\n}" in code
