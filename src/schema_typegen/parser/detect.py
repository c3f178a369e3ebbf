"""Auto-detect whether an input file is an API spec or a plain JSON sample."""

import json
from pathlib import Path

import yaml

SPEC_MARKERS = ("openapi", "swagger")


def detect_format(file_path: Path) -> str:
    """Detect the format of an input file.

    Returns: 'openapi' or 'json'.
    """
    text = file_path.read_text(encoding="utf-8")

    # Try YAML/JSON parsing
    try:
        data = yaml.safe_load(text)
        if isinstance(data, dict) and any(k in data for k in SPEC_MARKERS):
            return "openapi"
    except yaml.YAMLError:
        pass

    # Try JSON specifically (for files not parseable as YAML)
    try:
        data = json.loads(text)
        if isinstance(data, dict) and any(k in data for k in SPEC_MARKERS):
            return "openapi"
    except json.JSONDecodeError:
        pass

    return "json"
