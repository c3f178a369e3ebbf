"""Unique, readable type-name allocation.

One NameAllocator lives for exactly one generation call and is passed down
every recursive call. The same normalized base always yields the sequence
Base, Base2, Base3, ... for the lifetime of the allocator.
"""

import json
import logging
import re

logger = logging.getLogger(__name__)

SAMPLE_FALLBACK = "Generated"
REF_FALLBACK = "GeneratedType"


def pascal_case(text: str) -> str:
    """Split on anything non-alphanumeric and upper-case each token's first letter."""
    tokens = re.sub(r"[^A-Za-z0-9]", " ", text).split()
    return "".join(t[0].upper() + t[1:] for t in tokens) or SAMPLE_FALLBACK


def identifier(text: str) -> str:
    """Strip characters that can't appear in an identifier, keep casing as-is."""
    return re.sub(r"[^A-Za-z0-9_]", "", text) or REF_FALLBACK


def ref_basename(ref: str) -> str:
    """`#/components/schemas/User` -> `User`."""
    return ref.split("/")[-1]


class NameAllocator:
    """Hands out collision-free names and memoizes `$ref` lookups."""

    def __init__(self):
        self._usage: dict[str, int] = {}
        self._refs: dict[str, str] = {}

    def _take(self, base: str) -> str:
        count = self._usage.get(base, 0)
        self._usage[base] = count + 1
        name = base if count == 0 else f"{base}{count + 1}"
        logger.debug("allocated %s (base %s)", name, base)
        return name

    def allocate(self, candidate: str) -> str:
        """Name for a sample-derived declaration (PascalCased)."""
        return self._take(pascal_case(candidate))

    def allocate_identifier(self, candidate: str) -> str:
        """Name for a schema-derived declaration (identifier chars only)."""
        return self._take(identifier(candidate))

    def resolve_ref(self, ref: str) -> str:
        """Name for a `$ref` string; identical refs always get the identical name."""
        if ref not in self._refs:
            self._refs[ref] = self.allocate_identifier(ref_basename(ref))
        return self._refs[ref]

    def refs(self) -> dict[str, str]:
        """Every `$ref` resolved so far, in first-seen order."""
        return dict(self._refs)


def property_key(key: object) -> str:
    """Render an object key, quoting it when it isn't a bare identifier."""
    text = str(key)
    if re.fullmatch(r"[A-Za-z_$][A-Za-z0-9_$]*", text):
        return text
    return json.dumps(text, ensure_ascii=False)
