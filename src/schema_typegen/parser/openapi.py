"""OpenAPI / Swagger document parser.

Decodes OpenAPI 3.x and Swagger 2.0 documents (JSON or YAML) into a
ParsedSpec carrying the named schema table.
"""

import json
import logging
from pathlib import Path

import yaml

from schema_typegen.errors import InvalidSpecRoot, SpecParseError
from schema_typegen.parser.base import ParsedSpec

logger = logging.getLogger(__name__)


def parse_openapi(file_path: Path) -> ParsedSpec:
    """Parse an OpenAPI/Swagger file into a ParsedSpec."""
    return parse_openapi_text(file_path.read_text(encoding="utf-8"))


def parse_openapi_text(text: str) -> ParsedSpec:
    """Decode spec text as JSON, falling back to YAML."""
    try:
        raw = json.loads(text)
        logger.debug("spec decoded as JSON")
    except json.JSONDecodeError:
        try:
            raw = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise SpecParseError(f"Spec is neither JSON nor YAML: {e}") from e
        logger.debug("spec decoded as YAML")
    return parse_openapi_object(raw)


def parse_openapi_object(raw: object) -> ParsedSpec:
    """Build a ParsedSpec from an already-decoded document."""
    if not isinstance(raw, dict):
        raise InvalidSpecRoot("Spec is empty or not an object.")

    version = raw.get("openapi") or raw.get("swagger") or "unknown"
    paths = raw.get("paths")
    return ParsedSpec(
        raw=raw,
        schemas=_schema_table(raw),
        paths=paths if isinstance(paths, dict) else None,
        version=str(version),
    )


def _schema_table(raw: dict) -> dict:
    # OpenAPI 3.x first, then Swagger 2.0
    components = raw.get("components")
    table = components.get("schemas") if isinstance(components, dict) else None
    if table is None:
        table = raw.get("definitions")
    if not isinstance(table, dict):
        return {}
    return {str(name): schema for name, schema in table.items()}
