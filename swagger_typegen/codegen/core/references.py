"""
Reference resolution for Swagger definitions.

Rewrites every ``$ref`` in the document into a canonical lookup path in a
single pre-pass and dereferences those paths in O(1). Cycle handling is
left to the shape builder.
"""

from typing import Any, Dict, Iterator, List, Mapping
from urllib.parse import unquote

from .generator import MissingDefinitionsError, UnresolvedReferenceError
from .schema import SchemaNode, parse_node
from ...logging_config import get_logger

logger = get_logger(__name__)

DEFINITIONS_PREFIX = "#/definitions/"


def canonical_path(ref: str) -> str:
    """
    Turn a local ``#/definitions/<name>`` pointer into a definition key.

    Raises:
        UnresolvedReferenceError: If the pointer is not a local definition
    """
    if not ref.startswith(DEFINITIONS_PREFIX):
        raise UnresolvedReferenceError(ref)

    name = unquote(ref[len(DEFINITIONS_PREFIX):])
    if not name:
        raise UnresolvedReferenceError(ref)

    # JSON pointer escapes, in RFC 6901 order
    return name.replace("~1", "/").replace("~0", "~")


def rewrite_reference_paths(document: Mapping[str, Any]) -> Dict[str, SchemaNode]:
    """
    Parse every definition, replacing references with canonical paths.

    Args:
        document: Full Swagger document (must carry ``definitions``)

    Returns:
        Ordered mapping of definition name to SchemaNode

    Raises:
        MissingDefinitionsError: If the document has no definitions root
        UnresolvedReferenceError: If any reference points nowhere
    """
    definitions = document.get("definitions") if isinstance(document, Mapping) else None
    if definitions is None:
        raise MissingDefinitionsError()
    if not isinstance(definitions, Mapping):
        raise MissingDefinitionsError(
            f"definitions must be a mapping, got {type(definitions).__name__}"
        )

    known = {str(name) for name in definitions}
    seen: List[str] = []

    def rewrite(ref: str) -> str:
        path = canonical_path(ref)
        if path not in known:
            raise UnresolvedReferenceError(ref)
        seen.append(path)
        return path

    rewritten = {
        str(name): parse_node(node, rewrite) for name, node in definitions.items()
    }
    logger.debug(
        "Rewrote %d reference(s) across %d definition(s)", len(seen), len(rewritten)
    )
    return rewritten


class ReferenceResolver:
    """Name-indexed lookup of definitions by canonical path."""

    def __init__(self, definitions: Dict[str, SchemaNode]):
        self._definitions = dict(definitions)

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "ReferenceResolver":
        """Build a resolver from a raw Swagger document."""
        return cls(rewrite_reference_paths(document))

    def resolve(self, path: str) -> SchemaNode:
        """
        Dereference a canonical path.

        Raises:
            UnresolvedReferenceError: If no definition has that path
        """
        try:
            return self._definitions[path]
        except KeyError:
            raise UnresolvedReferenceError(path) from None

    def __contains__(self, path: str) -> bool:
        return path in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def paths(self) -> Iterator[str]:
        """Canonical paths in document order."""
        return iter(self._definitions)
