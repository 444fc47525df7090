"""Generate JSON Schema documents with pydantic.

The generator is configured with three policies:
- property names are camel case, whatever the field naming in the source type
- fields with a default value are written without an explicit ``default``
- object schemas accept additional properties (``additionalProperties: false``
  is never emitted)
"""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter
from pydantic.json_schema import GenerateJsonSchema, JsonSchemaMode, JsonSchemaValue
from pydantic_core import CoreSchema, core_schema

from .errors import SchemaGenerationError, root_message
from .naming import to_camel_case


def _camelize_properties(json_schema: JsonSchemaValue) -> JsonSchemaValue:
    """Rename the properties (and required list) of an object schema."""
    properties = json_schema.get("properties")
    if isinstance(properties, dict):
        renamed: dict[str, Any] = {}
        for name, value in properties.items():
            camel = to_camel_case(name)
            if camel in renamed:
                raise ValueError(
                    f"Property '{name}' collides with another property named '{camel}'"
                )
            renamed[camel] = value
        json_schema["properties"] = renamed
    required = json_schema.get("required")
    if isinstance(required, list):
        json_schema["required"] = [to_camel_case(name) for name in required]
    return json_schema


def _open_object(json_schema: JsonSchemaValue) -> JsonSchemaValue:
    if json_schema.get("additionalProperties") is False:
        del json_schema["additionalProperties"]
    return json_schema


class ContractJsonSchema(GenerateJsonSchema):
    """GenerateJsonSchema with camel case names, no defaults and open objects."""

    def generate(self, schema: CoreSchema, mode: JsonSchemaMode = "validation") -> JsonSchemaValue:
        json_schema = super().generate(schema, mode=mode)
        return {"$schema": self.schema_dialect, **json_schema}

    def default_schema(self, schema: core_schema.WithDefaultSchema) -> JsonSchemaValue:
        return self.generate_inner(schema["schema"])

    def model_schema(self, schema: core_schema.ModelSchema) -> JsonSchemaValue:
        return _open_object(super().model_schema(schema))

    def model_fields_schema(self, schema: core_schema.ModelFieldsSchema) -> JsonSchemaValue:
        return _open_object(_camelize_properties(super().model_fields_schema(schema)))

    def dataclass_schema(self, schema: core_schema.DataclassSchema) -> JsonSchemaValue:
        return _open_object(super().dataclass_schema(schema))

    def dataclass_args_schema(self, schema: core_schema.DataclassArgsSchema) -> JsonSchemaValue:
        return _open_object(_camelize_properties(super().dataclass_args_schema(schema)))

    def typed_dict_schema(self, schema: core_schema.TypedDictSchema) -> JsonSchemaValue:
        return _open_object(_camelize_properties(super().typed_dict_schema(schema)))


def generate_schema(schema_type: type) -> dict[str, Any]:
    """Build the JSON Schema document for ``schema_type``."""
    try:
        adapter = TypeAdapter(schema_type)
        return adapter.json_schema(schema_generator=ContractJsonSchema)
    except Exception as exc:
        raise SchemaGenerationError(
            f"Error while generating schema: {root_message(exc)}"
        ) from exc
