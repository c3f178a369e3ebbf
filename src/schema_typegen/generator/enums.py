"""Named string enumerations used while walking JSON samples.

A registry is filled either from an explicit ``{name: [values]}`` map handed
in by the caller, or, when no map is given, by scanning the sample for fields
whose value is a non-empty list of non-empty strings.
"""

import logging
import re

from schema_typegen.parser.base import EnumDefinition, JsonValue

logger = logging.getLogger(__name__)


def _normalize(name: str) -> str:
    return re.sub(r"[^a-z0-9]", "", name, flags=re.IGNORECASE).lower()


def _is_string_list(value: JsonValue) -> bool:
    return (
        isinstance(value, list)
        and len(value) > 0
        and all(isinstance(v, str) and v.strip() for v in value)
    )


class EnumRegistry:
    """Ordered name -> values table with fuzzy field-name matching."""

    def __init__(self, enums: dict[str, list[str]] | None = None):
        self._enums: dict[str, list[str]] = dict(enums or {})

    @classmethod
    def from_sample(cls, value: JsonValue) -> "EnumRegistry":
        """Build a registry by scanning every object field in ``value``."""
        registry = cls()
        registry._collect(value)
        logger.debug("collected %d inline enum(s)", len(registry._enums))
        return registry

    @classmethod
    def for_input(
        cls, value: JsonValue, enums_map: dict[str, list[str]] | None
    ) -> "EnumRegistry":
        """Explicit map wins; the sample is only scanned when no map is given."""
        if enums_map is not None:
            return cls(enums_map)
        return cls.from_sample(value)

    def _collect(self, node: JsonValue) -> None:
        if isinstance(node, list):
            for item in node:
                self._collect(item)
            return
        if not isinstance(node, dict):
            return
        for key, val in node.items():
            if _is_string_list(val):
                self._enums[key] = list(dict.fromkeys(val))
            else:
                self._collect(val)

    def __len__(self) -> int:
        return len(self._enums)

    def match(self, key: str, sample: str | None = None) -> str | None:
        """Return the first enum whose name fits ``key`` and contains ``sample``.

        Names match when their normalized forms are equal or one is a suffix
        of the other (``status`` fits ``UserStatus``). A non-empty sample must
        appear, case-insensitively, among the enum's values.
        """
        wanted = _normalize(key)
        for name, values in self._enums.items():
            normalized = _normalize(name)
            if not (
                normalized == wanted
                or wanted.endswith(normalized)
                or normalized.endswith(wanted)
            ):
                continue
            if sample and sample.lower() not in (str(v).lower() for v in values):
                continue
            logger.debug("field %r matched enum %s", key, name)
            return name
        return None

    def definitions(self) -> list[EnumDefinition]:
        return [
            EnumDefinition(name=name, values=[str(v) for v in values])
            for name, values in self._enums.items()
        ]
