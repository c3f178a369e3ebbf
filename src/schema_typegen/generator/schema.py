"""OpenAPI / Swagger schema table to TypeScript type aliases.

Every named schema becomes one ``export type`` alias. Nested object shapes
are rendered inline; only ``$ref`` targets are referred to by name, and those
names come from the same allocator as the top-level aliases.
"""

import json
import logging

from schema_typegen.generator.emitter import emit_schemas
from schema_typegen.generator.naming import NameAllocator, property_key
from schema_typegen.parser.base import Declaration, JsonValue, ParsedSpec, SchemaTypes

logger = logging.getLogger(__name__)

PRIMITIVES = {
    "string": "string",
    "integer": "number",
    "number": "number",
    "boolean": "boolean",
}


def literal(value: JsonValue) -> str:
    """Render an enum member as a TypeScript literal."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return json.dumps(value, ensure_ascii=False, default=str)


def resolve(schema: JsonValue, names: NameAllocator) -> str:
    """Convert one schema node into inline TypeScript type syntax."""
    if schema is None:
        return "unknown"
    if not isinstance(schema, dict):
        logger.debug("non-object schema node %r rendered as unknown", schema)
        return "unknown"

    if schema.get("$ref"):
        return names.resolve_ref(str(schema["$ref"]))
    if schema.get("enum"):
        return " | ".join(literal(v) for v in schema["enum"])
    for keyword in ("oneOf", "anyOf"):
        if schema.get(keyword):
            return " | ".join(resolve(member, names) for member in schema[keyword])
    if schema.get("allOf"):
        return " & ".join(resolve(member, names) for member in schema["allOf"])

    schema_type = schema.get("type")
    if isinstance(schema_type, str) and schema_type in PRIMITIVES:
        return PRIMITIVES[schema_type]
    if schema_type == "array":
        return f"{resolve(schema.get('items') or {}, names)}[]"
    return _resolve_object(schema, names)


def _resolve_object(schema: dict, names: NameAllocator) -> str:
    properties = schema.get("properties")
    if not isinstance(properties, dict):
        properties = {}
    required = schema.get("required")
    required = set(required) if isinstance(required, list) else set()
    entries = []
    for key, prop in properties.items():
        optional = "" if key in required else "?"
        entries.append(f"  {property_key(key)}{optional}: {resolve(prop, names)};")

    additional = schema.get("additionalProperties")
    if additional is not None and additional is not False:
        value_type = "unknown" if additional is True else resolve(additional, names)
        entries.append(f"  [key: string]: {value_type};")

    if not entries:
        return "{}"
    return "{\n" + "\n".join(entries) + "\n}"


def generate_types_from_schemas(spec: ParsedSpec) -> SchemaTypes:
    """One alias per schema-table entry, in table order."""
    names = NameAllocator()
    declarations = []
    for name, schema in spec.schemas.items():
        type_name = names.resolve_ref(f"{spec.ref_prefix}{name}")
        declarations.append(
            Declaration(name=type_name, kind="type-alias", body=resolve(schema, names))
        )

    declared = {decl.name for decl in declarations}
    for ref, type_name in names.refs().items():
        if type_name not in declared:
            logger.debug("$ref %s has no matching schema; %s left undeclared", ref, type_name)

    path_count = len(spec.paths) if spec.paths else 0
    logger.debug("generated %d type(s), %d path(s)", len(declarations), path_count)
    return SchemaTypes(
        code=emit_schemas(declarations),
        schema_count=len(spec.schemas),
        path_count=path_count,
    )
