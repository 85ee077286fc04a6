"""
Naming utilities for safe code generation.

Turns arbitrary schema keys (spaces, hyphens, underscores, digits) into
identifiers and type names, and keeps generated type names unique.
"""

import re
from typing import Dict, Set
from enum import Enum


_WHITESPACE = re.compile(r"\s+")
_SEGMENT_SEPARATORS = re.compile(r"[\s_\-]+")
_TYPE_NAME_SEPARATORS = re.compile(r"[\W_]+")
_INVALID_IDENTIFIER_CHARS = re.compile(r"[^\w$]")
_IDENTIFIER = re.compile(r"^[^\W\d][\w$]*$|^\$[\w$]*$")
_LEADING_MARKERS = re.compile(r"^[_$]*")


class NamingCase(Enum):
    """Naming case styles used for generated names."""

    ORIGINAL = "original"  # profile_image (kept as-is)
    PASCAL_CASE = "pascal"  # ProfileImage


def replace_whitespace(raw: str) -> str:
    """Replace every whitespace run with a single underscore."""
    return _WHITESPACE.sub("_", raw.strip())


def _upper_first(segment: str) -> str:
    return segment[:1].upper() + segment[1:]


def _lower_first(segment: str) -> str:
    return segment[:1].lower() + segment[1:]


def to_camel_case(raw: str) -> str:
    """
    Convert a key to camelCase.

    Splits on whitespace, underscore and hyphen boundaries. The first
    segment gets a lower-case first letter, later segments an upper-case
    one; the rest of each segment is left untouched so already camel-cased
    input comes back unchanged. Leading ``_``/``$`` markers are kept.
    """
    prefix = _LEADING_MARKERS.match(raw).group(0)
    segments = [s for s in _SEGMENT_SEPARATORS.split(raw[len(prefix):]) if s]
    if not segments:
        return raw
    return prefix + _lower_first(segments[0]) + "".join(
        _upper_first(s) for s in segments[1:]
    )


def to_pascal_case(raw: str) -> str:
    """Convert a key to PascalCase, dropping every non-word separator."""
    segments = [s for s in _TYPE_NAME_SEPARATORS.split(raw) if s]
    return "".join(_upper_first(s) for s in segments)


def to_identifier(raw: str, camel_case: bool = False) -> str:
    """
    Turn a schema key into a property name.

    Without camel-casing the key is preserved verbatim (the emitter quotes it
    when it is not a bare identifier).
    """
    if not camel_case:
        return raw
    return to_camel_case(replace_whitespace(raw))


def is_identifier(name: str) -> bool:
    """Check whether ``name`` can be written as a bare identifier."""
    return bool(_IDENTIFIER.match(name))


def to_type_name(raw: str, camel_case: bool = False) -> str:
    """
    Turn a definition name into a valid type name.

    Args:
        raw: Definition name or synthesized context name
        camel_case: PascalCase the name instead of only replacing whitespace

    Returns:
        A name that is always a valid identifier
    """
    name = to_pascal_case(raw) if camel_case else replace_whitespace(raw)
    name = _INVALID_IDENTIFIER_CHARS.sub("_", name)

    if name and name[0].isdigit():
        name = f"_{name}"

    if not name:
        name = "Type"

    return name


class NameSanitizer:
    """Hands out unique type names for a single generation run."""

    def __init__(self, reserved_words: Set[str] = None, builtin_types: Set[str] = None):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            builtin_types: Set of builtin type names that might conflict
        """
        self.reserved_words = reserved_words or set()
        self.builtin_types = builtin_types or set()
        self._used_names: Set[str] = set()
        self._renamed: Dict[str, str] = {}

    def sanitize_name(
        self,
        name: str,
        target_case: NamingCase = NamingCase.ORIGINAL,
        suffix_on_conflict: str = "_",
    ) -> str:
        """
        Sanitize a type name and claim it.

        Args:
            name: Original name to sanitize
            target_case: ORIGINAL keeps the spelling, anything else PascalCases
            suffix_on_conflict: Suffix added to reserved words

        Returns:
            Unique sanitized name
        """
        converted = to_type_name(name, target_case != NamingCase.ORIGINAL)
        final_name = self._resolve_conflicts(converted, suffix_on_conflict)

        self._used_names.add(final_name)
        if final_name != converted:
            self._renamed[name] = final_name

        return final_name

    def _resolve_conflicts(self, name: str, suffix: str) -> str:
        """Resolve naming conflicts with reserved words and existing names."""
        if name in self.reserved_words or name in self.builtin_types:
            name = f"{name}{suffix}"

        original_name = name
        counter = 2
        while name in self._used_names:
            name = f"{original_name}{counter}"
            counter += 1

        return name

    @property
    def renamed(self) -> Dict[str, str]:
        """Names that had to change to stay unique or legal."""
        return dict(self._renamed)


def unique_identifier(name: str, used: Set[str]) -> str:
    """Suffix ``name`` with 2, 3, ... until it is not in ``used``."""
    candidate = name
    counter = 2
    while candidate in used:
        candidate = f"{name}{counter}"
        counter += 1
    return candidate
