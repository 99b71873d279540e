"""Flag records controlling loading and variable substitution."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

__all__ = [
    "THROW",
    "ENCODING_SHIFT",
    "ENCODING_MASK",
    "RECURSIVE_EXPANSION",
    "SHADOW_ENVIRONMENT",
    "ALLOW_EMPTY_VARS",
    "Encoding",
    "LoadFlags",
    "SubstitutionFlags",
]

# Legacy load bit-field layout.
THROW = 0x1
ENCODING_SHIFT = 3
ENCODING_MASK = 0x3

# Legacy substitution bit-field layout.
RECURSIVE_EXPANSION = 0x1
SHADOW_ENVIRONMENT = 0x2
ALLOW_EMPTY_VARS = 0x4


class Encoding(str, Enum):
    """Text encoding assumed when decoding a properties file."""

    UNSPECIFIED = "unspecified"
    UTF8 = "utf-8"
    UTF16 = "utf-16"
    UTF32 = "utf-32"


# Value of each encoding inside the encoding sub-field.
_ENCODING_ORDER: tuple[Encoding, ...] = (
    Encoding.UNSPECIFIED,
    Encoding.UTF8,
    Encoding.UTF16,
    Encoding.UTF32,
)


class LoadFlags(BaseModel):
    """Per-store options for opening property files.

    Attributes:
        encoding: Decoder applied to the raw file bytes.
        raise_on_open_failure: Whether failing to open the top-level file
            is fatal instead of merely reported.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    encoding: Encoding = Encoding.UNSPECIFIED
    raise_on_open_failure: bool = False

    @classmethod
    def from_bits(cls, bits: int) -> LoadFlags:
        """Build flags from the legacy ``fThrow | fUTFn`` bit-field."""
        index = (bits >> ENCODING_SHIFT) & ENCODING_MASK
        return cls(
            encoding=_ENCODING_ORDER[index],
            raise_on_open_failure=bool(bits & THROW),
        )

    def to_bits(self) -> int:
        """Encode these flags in the legacy bit-field layout."""
        bits = _ENCODING_ORDER.index(self.encoding) << ENCODING_SHIFT
        if self.raise_on_open_failure:
            bits |= THROW
        return bits


class SubstitutionFlags(BaseModel):
    """Per-call options for ``${name}`` substitution.

    Attributes:
        allow_empty_substitution: Replace unresolved or empty variables with
            empty text instead of leaving ``${name}`` in place.
        shadow_environment: Look the name up in the store before the
            environment.
        recursive_expansion: Rescan the same position after a replacement
            so replacements containing ``${...}`` expand too.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    allow_empty_substitution: bool = False
    shadow_environment: bool = False
    recursive_expansion: bool = False

    @classmethod
    def from_bits(cls, bits: int) -> SubstitutionFlags:
        """Build flags from the legacy configurator bit-field."""
        return cls(
            recursive_expansion=bool(bits & RECURSIVE_EXPANSION),
            shadow_environment=bool(bits & SHADOW_ENVIRONMENT),
            allow_empty_substitution=bool(bits & ALLOW_EMPTY_VARS),
        )

    def to_bits(self) -> int:
        """Encode these flags in the legacy bit-field layout."""
        bits = 0
        if self.recursive_expansion:
            bits |= RECURSIVE_EXPANSION
        if self.shadow_environment:
            bits |= SHADOW_ENVIRONMENT
        if self.allow_empty_substitution:
            bits |= ALLOW_EMPTY_VARS
        return bits
