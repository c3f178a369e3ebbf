"""Type inference from a concrete JSON sample.

Walks one JSON value and returns the TypeScript type reference for it plus
the interface declarations it needed along the way. Arrays whose elements
are all objects are unified into a single item interface, marking fields
that some elements omit as optional.
"""

import logging
import re
from typing import NamedTuple

from schema_typegen.config import DEFAULT_ROOT_NAME
from schema_typegen.generator.context import GenerationContext
from schema_typegen.generator.emitter import emit_sample
from schema_typegen.generator.enums import EnumRegistry
from schema_typegen.generator.naming import property_key
from schema_typegen.parser.base import Declaration, JsonValue, SampleGeneration

logger = logging.getLogger(__name__)

# ISO-8601-like only; whether the date is real is left to the user.
DATE_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}(?:[Tt ]\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:Z|[+-]\d{2}:?\d{2})?)?",
    re.ASCII,
)


class Inferred(NamedTuple):
    type_ref: str
    declarations: list[Declaration]


class MergedField(NamedTuple):
    values: list[JsonValue]
    optional: bool


def is_date_string(text: str) -> bool:
    return DATE_PATTERN.fullmatch(text) is not None


def unify_shapes(nodes: list[dict[str, JsonValue]]) -> dict[str, MergedField]:
    """Merge sibling objects into one field table.

    Keys keep first-seen order. A field is optional when fewer values were
    collected for it than there are siblings.
    """
    shape: dict[str, list[JsonValue]] = {}
    for node in nodes:
        for key, val in node.items():
            shape.setdefault(key, []).append(val)
    return {
        key: MergedField(values=vals, optional=len(vals) != len(nodes))
        for key, vals in shape.items()
    }


def _distinct_types(
    values: list[JsonValue], name: str, ctx: GenerationContext
) -> tuple[list[str], list[Declaration]]:
    types: list[str] = []
    declarations: list[Declaration] = []
    for val in values:
        type_ref, decls = infer(val, name, ctx)
        declarations.extend(decls)
        if type_ref not in types:
            types.append(type_ref)
    return types, declarations


def _infer_array(node: list[JsonValue], name: str, ctx: GenerationContext) -> Inferred:
    if not node:
        return Inferred("unknown[]", [])

    if all(isinstance(el, dict) for el in node):
        merged = unify_shapes(node)
        iface = ctx.names.allocate(name + "Item")
        lines = []
        declarations: list[Declaration] = []
        for key, field in merged.items():
            types, decls = _distinct_types(field.values, key, ctx)
            declarations.extend(decls)
            marker = "?" if field.optional else ""
            lines.append(f"  {property_key(key)}{marker}: {' | '.join(types)};")
        declarations.append(
            Declaration(name=iface, kind="interface", body="\n".join(lines))
        )
        return Inferred(f"{iface}[]", declarations)

    types, declarations = _distinct_types(node, name + "Item", ctx)
    if len(types) > 1:
        return Inferred(f"({' | '.join(types)})[]", declarations)
    return Inferred(f"{types[0]}[]", declarations)


def _infer_object(node: dict[str, JsonValue], name: str, ctx: GenerationContext) -> Inferred:
    iface = ctx.names.allocate(name)
    lines = []
    declarations: list[Declaration] = []
    for key, val in node.items():
        type_ref, decls = infer(val, key, ctx)
        declarations.extend(decls)
        lines.append(f"  {property_key(key)}: {type_ref};")
    declarations.append(Declaration(name=iface, kind="interface", body="\n".join(lines)))
    return Inferred(iface, declarations)


def infer(node: JsonValue, name: str, ctx: GenerationContext) -> Inferred:
    """Infer the type of ``node``, using ``name`` as the candidate type name.

    Declarations come back child-before-parent.
    """
    if node is None:
        return Inferred("null", [])
    if isinstance(node, bool):
        return Inferred("boolean", [])
    if isinstance(node, str):
        enum_name = ctx.enums.match(name, node)
        if enum_name:
            return Inferred(enum_name, [])
        return Inferred("Date" if is_date_string(node) else "string", [])
    if isinstance(node, (int, float)):
        return Inferred("number", [])
    if isinstance(node, list):
        return _infer_array(node, name, ctx)
    if isinstance(node, dict):
        return _infer_object(node, name, ctx)
    logger.debug("unexpected %s value under %r", type(node).__name__, name)
    return Inferred("any", [])


def infer_sample(
    value: JsonValue,
    root_name: str = DEFAULT_ROOT_NAME,
    enums_map: dict[str, list[str]] | None = None,
) -> SampleGeneration:
    """Infer every declaration for ``value`` without rendering them."""
    root_name = root_name or DEFAULT_ROOT_NAME
    ctx = GenerationContext(enums=EnumRegistry.for_input(value, enums_map))
    root, declarations = infer(value, root_name, ctx)

    # Array and primitive roots have no interface of their own; alias them.
    if not any(d.kind == "interface" and d.name == root for d in declarations):
        alias = ctx.names.allocate(root_name)
        declarations.append(Declaration(name=alias, kind="type-alias", body=root))
        root = alias

    logger.debug("inferred %d declaration(s) rooted at %s", len(declarations), root)
    return SampleGeneration(
        root=root, enums=ctx.enums.definitions(), declarations=declarations
    )


def generate_interfaces(
    value: JsonValue,
    root_name: str = DEFAULT_ROOT_NAME,
    enums_map: dict[str, list[str]] | None = None,
) -> str:
    """Render TypeScript enums and interfaces describing ``value``."""
    return emit_sample(infer_sample(value, root_name, enums_map))
