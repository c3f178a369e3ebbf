"""JSON sample loader.

A sample may carry a reserved top-level ``enums`` key mapping enum names to
their allowed values. That map is lifted out for the generator; the sample
itself is passed on untouched.
"""

import json
import logging
from pathlib import Path

from schema_typegen.errors import InputParseError
from schema_typegen.parser.base import JsonValue, SampleInput

logger = logging.getLogger(__name__)

ENUMS_KEY = "enums"


def parse_sample(file_path: Path) -> SampleInput:
    """Parse a JSON sample file."""
    return parse_sample_text(file_path.read_text(encoding="utf-8"))


def parse_sample_text(text: str) -> SampleInput:
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise InputParseError(f"Invalid JSON sample: {e}") from e
    return SampleInput(value=value, enums=extract_enums(value))


def extract_enums(value: JsonValue) -> dict[str, list[str]] | None:
    """Return the reserved ``enums`` map, or None when absent or malformed."""
    if not isinstance(value, dict) or ENUMS_KEY not in value:
        return None
    enums = value[ENUMS_KEY]
    if not isinstance(enums, dict) or not all(
        isinstance(values, list) for values in enums.values()
    ):
        logger.debug("ignoring malformed %r key", ENUMS_KEY)
        return None
    return {str(name): [str(v) for v in values] for name, values in enums.items()}
