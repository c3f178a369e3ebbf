"""Per-call generation state threaded through every recursive step."""

from dataclasses import dataclass, field

from schema_typegen.generator.enums import EnumRegistry
from schema_typegen.generator.naming import NameAllocator


@dataclass
class GenerationContext:
    """Allocator and enum registry owned by a single generation call.

    Never share an instance between calls: naming stays deterministic only
    because each call starts from an empty allocator.
    """

    names: NameAllocator = field(default_factory=NameAllocator)
    enums: EnumRegistry = field(default_factory=EnumRegistry)
