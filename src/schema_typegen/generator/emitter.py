"""Joins accumulated declarations into final source text."""

from schema_typegen.config import NO_SCHEMAS_PLACEHOLDER
from schema_typegen.parser.base import Declaration, SampleGeneration

SEPARATOR = "\n\n"


def emit_sample(generation: SampleGeneration) -> str:
    """Enums first, then declarations in reverse accumulation order.

    Declarations accumulate child-before-parent, so reversing puts the root
    first followed by its field types and then deeper nested types.
    """
    blocks = [enum.render() for enum in generation.enums]
    blocks.extend(decl.render() for decl in reversed(generation.declarations))
    return SEPARATOR.join(blocks)


def emit_schemas(declarations: list[Declaration]) -> str:
    """Schema-table order, untouched."""
    return SEPARATOR.join(decl.render() for decl in declarations) or NO_SCHEMAS_PLACEHOLDER
