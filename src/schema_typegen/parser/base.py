"""Unified data models shared by the parsers and the generators.

Sample-based and schema-based generation both reduce their input to these
models before any text is rendered.
"""

from typing import Any, Literal, Union

from pydantic import BaseModel

JsonPrimitive = Union[str, int, float, bool, None]
JsonValue = Union[JsonPrimitive, list["JsonValue"], dict[str, "JsonValue"]]

DeclarationKind = Literal["interface", "enum", "type-alias"]


class Declaration(BaseModel):
    """One named, emittable unit of output source."""

    name: str
    kind: DeclarationKind
    body: str  # field lines for interfaces/enums, type expression for aliases

    def render(self) -> str:
        if self.kind == "type-alias":
            return f"export type {self.name} = {self.body};"
        if not self.body:
            return f"export {self.kind} {self.name} {{}}"
        return f"export {self.kind} {self.name} {{\n{self.body}\n}}"


class EnumDefinition(BaseModel):
    """A named set of literal string values."""

    name: str
    values: list[str]

    def to_declaration(self) -> Declaration:
        body = "\n".join(f'  {v} = "{v}",' for v in self.values)
        return Declaration(name=self.name, kind="enum", body=body)

    def render(self) -> str:
        return self.to_declaration().render()


class SampleGeneration(BaseModel):
    """Everything inferred from one JSON sample, before rendering."""

    root: str
    enums: list[EnumDefinition] = []
    declarations: list[Declaration] = []  # child-before-parent accumulation order


class ParsedSpec(BaseModel):
    """A decoded OpenAPI 3.x or Swagger 2.0 document."""

    raw: Any
    schemas: dict
    paths: dict | None = None
    version: str = "unknown"

    @property
    def ref_prefix(self) -> str:
        """Local `$ref` prefix pointing into this document's schema table."""
        components = self.raw.get("components") if isinstance(self.raw, dict) else None
        if isinstance(components, dict) and components.get("schemas") is not None:
            return "#/components/schemas/"
        return "#/definitions/"


class SchemaTypes(BaseModel):
    """Result of schema-table generation plus counts for status messages."""

    code: str
    schema_count: int
    path_count: int


class SampleInput(BaseModel):
    """A decoded JSON sample plus the enum map found under its ``enums`` key."""

    value: Any
    enums: dict[str, list[str]] | None = None
