"""JSON Schema for the serialized node tree, derived from the model dataclasses."""

from __future__ import annotations

import types
from dataclasses import fields, is_dataclass
from typing import Any, Union, get_args, get_origin, get_type_hints

from html_edit_tree.models import Element, Text

TREE_SCHEMA_NAME = "node-tree.schema.json"
SCHEMA_DRAFT = "https://json-schema.org/draft/2020-12/schema"


def _schema_for_type(annotation: Any, defs: dict[str, dict[str, Any]]) -> dict[str, Any]:
    if annotation in (Any, object):
        return {}

    origin = get_origin(annotation)

    if origin in (Union, types.UnionType):
        return {"anyOf": [_schema_for_type(arg, defs) for arg in get_args(annotation)]}

    if origin is list:
        args = get_args(annotation)
        item_schema = _schema_for_type(args[0], defs) if args else {}
        return {"type": "array", "items": item_schema}

    if origin is dict:
        args = get_args(annotation)
        value_schema = _schema_for_type(args[1], defs) if len(args) == 2 else {}
        return {"type": "object", "additionalProperties": value_schema}

    if origin is tuple:
        args = get_args(annotation)
        if len(args) == 2 and args[1] is Ellipsis:
            return {"type": "array", "items": _schema_for_type(args[0], defs)}
        return {
            "type": "array",
            "prefixItems": [_schema_for_type(arg, defs) for arg in args],
            "minItems": len(args),
            "maxItems": len(args),
        }

    primitive_map = {
        str: {"type": "string"},
        int: {"type": "integer"},
        float: {"type": "number"},
        bool: {"type": "boolean"},
    }
    if annotation in primitive_map:
        return dict(primitive_map[annotation])

    if is_dataclass(annotation):
        _ensure_dataclass_schema(annotation, defs)
        return {"$ref": f"#/$defs/{annotation.__name__}"}

    return {}


def _ensure_dataclass_schema(dataclass_type: type[Any], defs: dict[str, dict[str, Any]]) -> dict[str, Any]:
    class_name = dataclass_type.__name__
    if class_name in defs:
        return defs[class_name]

    schema: dict[str, Any] = {
        "title": class_name,
        "description": (dataclass_type.__doc__ or "").strip(),
        "type": "object",
        "additionalProperties": False,
        "properties": {},
        "required": [],
    }
    defs[class_name] = schema

    hints = get_type_hints(dataclass_type)
    for model_field in fields(dataclass_type):
        field_schema = _schema_for_type(hints[model_field.name], defs)

        field_description = model_field.metadata.get("description")
        if field_description:
            field_schema["description"] = field_description

        field_json_schema = model_field.metadata.get("json_schema")
        if field_json_schema:
            if any(key in field_json_schema for key in ("anyOf", "oneOf", "allOf")):
                field_schema.pop("type", None)
            field_schema = {**field_schema, **field_json_schema}

        json_name = model_field.metadata.get("json_name", model_field.name)
        schema["properties"][json_name] = field_schema
        schema["required"].append(json_name)

    return schema


def build_tree_schema() -> dict[str, Any]:
    """Build the schema every serialized node tree must satisfy."""
    defs: dict[str, dict[str, Any]] = {}
    node_schema = _schema_for_type(Union[Element, Text], defs)

    schema: dict[str, Any] = {
        "$schema": SCHEMA_DRAFT,
        "title": "HTML Edit Tree",
        "description": "Identifier-tagged node tree exchanged between conversion, chunking and rendering.",
    }
    schema.update(node_schema)
    schema["$defs"] = defs
    return schema
