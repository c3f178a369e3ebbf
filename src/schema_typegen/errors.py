"""Exceptions raised while turning samples and specs into type declarations."""


class TypegenError(Exception):
    """Base class for every error raised by schema-typegen."""


class InputParseError(TypegenError):
    """Raw input text could not be decoded (JSON sample or spec text)."""


class SpecParseError(InputParseError):
    """Spec text is neither valid JSON nor valid YAML."""


class InvalidSpecRoot(SpecParseError):
    """Spec decoded fine but its root is not a mapping."""
