from pathlib import Path

from schema_typegen.generator.naming import NameAllocator
from schema_typegen.generator.schema import generate_types_from_schemas, literal, resolve
from schema_typegen.parser.openapi import parse_openapi, parse_openapi_object

FIXTURES = Path(__file__).parent / "fixtures"


def _resolve(schema):
    return resolve(schema, NameAllocator())


class TestResolvePrimitives:
    def test_scalar_types(self):
        assert _resolve({"type": "string"}) == "string"
        assert _resolve({"type": "integer"}) == "number"
        assert _resolve({"type": "number"}) == "number"
        assert _resolve({"type": "boolean"}) == "boolean"

    def test_missing_schema(self):
        assert _resolve(None) == "unknown"

    def test_untyped_schema_is_empty_object(self):
        assert _resolve({}) == "{}"
        assert _resolve({"description": "anything"}) == "{}"


class TestResolveComposites:
    def test_ref_uses_last_segment(self):
        assert _resolve({"$ref": "#/components/schemas/B"}) == "B"

    def test_empty_ref_falls_through(self):
        assert _resolve({"$ref": "", "type": "string"}) == "string"

    def test_enum_literals(self):
        assert _resolve({"enum": ["a", 1, None, True]}) == '"a" | 1 | null | true'

    def test_literal_integral_float(self):
        assert literal(2.0) == "2"
        assert literal("é") == '"é"'

    def test_one_of(self):
        schema = {"oneOf": [{"type": "string"}, {"type": "number"}]}
        assert _resolve(schema) == "string | number"

    def test_any_of(self):
        schema = {"anyOf": [{"type": "boolean"}, {"$ref": "#/definitions/Flag"}]}
        assert _resolve(schema) == "boolean | Flag"

    def test_all_of_refs(self):
        schema = {"allOf": [
            {"$ref": "#/components/schemas/A"},
            {"$ref": "#/components/schemas/B"},
        ]}
        assert _resolve(schema) == "A & B"

    def test_array(self):
        assert _resolve({"type": "array", "items": {"type": "string"}}) == "string[]"
        assert _resolve({"type": "array"}) == "{}[]"


class TestResolveObjects:
    def test_required_and_optional(self):
        schema = {
            "type": "object",
            "properties": {"id": {"type": "integer"}, "name": {"type": "string"}},
            "required": ["id"],
        }
        assert _resolve(schema) == "{\n  id: number;\n  name?: string;\n}"

    def test_additional_properties_true(self):
        schema = {"type": "object", "additionalProperties": True}
        assert _resolve(schema) == "{\n  [key: string]: unknown;\n}"

    def test_additional_properties_schema(self):
        schema = {"type": "object", "additionalProperties": {"type": "integer"}}
        assert _resolve(schema) == "{\n  [key: string]: number;\n}"

    def test_additional_properties_false(self):
        assert _resolve({"type": "object", "additionalProperties": False}) == "{}"

    def test_nested_objects_stay_inline(self):
        schema = {
            "properties": {
                "inner": {"properties": {"x": {"type": "string"}}, "required": ["x"]},
            },
        }
        assert _resolve(schema) == "{\n  inner?: {\n  x: string;\n};\n}"


class TestGenerateTypes:
    def test_ref_resolution_in_table_order(self):
        spec = parse_openapi_object({
            "openapi": "3.0.0",
            "components": {"schemas": {
                "A": {"properties": {"b": {"$ref": "#/components/schemas/B"}}},
                "B": {"type": "string"},
            }},
        })
        result = generate_types_from_schemas(spec)
        assert result.code == "export type A = {\n  b?: B;\n};\n\nexport type B = string;"
        assert result.schema_count == 2
        assert result.path_count == 0

    def test_repeated_refs_share_one_name(self):
        spec = parse_openapi_object({"components": {"schemas": {
            "Pair": {
                "properties": {
                    "left": {"$ref": "#/components/schemas/Node"},
                    "right": {"$ref": "#/components/schemas/Node"},
                },
            },
            "Node": {"type": "integer"},
        }}})
        code = generate_types_from_schemas(spec).code
        assert "  left?: Node;\n  right?: Node;" in code
        assert "export type Node = number;" in code
        assert "Node2" not in code

    def test_colliding_schema_names(self):
        spec = parse_openapi_object({"definitions": {
            "Foo-Bar": {"type": "string"},
            "FooBar": {"type": "number"},
        }})
        code = generate_types_from_schemas(spec).code
        assert code == "export type FooBar = string;\n\nexport type FooBar2 = number;"

    def test_dangling_ref_is_kept(self):
        spec = parse_openapi_object({"components": {"schemas": {
            "A": {"$ref": "#/components/schemas/Missing"},
        }}})
        assert generate_types_from_schemas(spec).code == "export type A = Missing;"

    def test_empty_table_placeholder(self):
        result = generate_types_from_schemas(parse_openapi_object({"openapi": "3.1.0"}))
        assert result.code == "// no schemas"
        assert result.schema_count == 0

    def test_petstore_yaml(self):
        result = generate_types_from_schemas(parse_openapi(FIXTURES / "petstore.yaml"))
        assert result.schema_count == 5
        assert result.path_count == 2
        assert result.code == "\n\n".join([
            "export type Pet = {\n  id: number;\n  name: string;\n"
            "  status?: PetStatus;\n  tags?: string[];\n};",
            'export type PetStatus = "available" | "sold";',
            "export type NewPet = Pet & {\n  owner?: string;\n};",
            "export type Pets = Pet[];",
            "export type Labels = {\n  [key: string]: string;\n};",
        ])

    def test_swagger_json(self):
        spec = parse_openapi(FIXTURES / "swagger.json")
        result = generate_types_from_schemas(spec)
        assert result.path_count == 1
        assert result.code == (
            "export type User = {\n  id: number;\n  email?: string;\n  role?: Role;\n"
            "  meta?: {\n  [key: string]: unknown;\n};\n};\n\n"
            'export type Role = "admin" | "member";'
        )

    def test_deterministic(self):
        spec = parse_openapi(FIXTURES / "petstore.yaml")
        assert generate_types_from_schemas(spec) == generate_types_from_schemas(spec)
