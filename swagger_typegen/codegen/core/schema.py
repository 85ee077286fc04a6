"""
Core schema representation for code generation.

Parses raw Swagger definition nodes into an immutable internal format,
classifies them once, and defines the name-bearing type shapes the
builder produces and the emitters consume.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union
from enum import Enum


# Swagger primitive type/format names and the structural primitive they map to
PRIMITIVES: Dict[str, str] = {
    # boolean types
    "boolean": "boolean",
    # string types
    "binary": "string",
    "byte": "string",
    "date": "string",
    "dateTime": "string",
    "date-time": "string",
    "password": "string",
    "string": "string",
    # number types
    "double": "number",
    "float": "number",
    "integer": "number",
    "number": "number",
}

ANY = "any"
OBJECT = "object"


class NodeKind(Enum):
    """Structural kind of a schema node, in classification precedence order."""

    ENUM = "enum"
    PRIMITIVE = "primitive"
    ARRAY = "array"
    ALL_OF = "all_of"
    OBJECT = "object"
    ONE_OF = "one_of"
    REFERENCE = "reference"
    UNKNOWN = "unknown"


class ShapeKind(Enum):
    """Kinds of type shapes produced by the builder."""

    ALIAS = "alias"  # primitive, "any" or the "object" placeholder
    LITERAL = "literal"  # single enum value
    ARRAY = "array"
    UNION = "union"
    RECORD = "record"
    OPEN_MAP = "open_map"
    REFERENCE = "reference"  # pointer to a RECORD by name


@dataclass(frozen=True)
class SchemaNode:
    """
    Immutable snapshot of one schema fragment.

    ``ref`` holds the canonical lookup path produced by the reference
    resolver, never the raw ``$ref`` string. ``raw`` is the untouched input
    mapping, handed to property mappers.
    """

    type: Optional[str] = None
    format: Optional[str] = None
    description: Optional[str] = None
    properties: Optional[Dict[str, "SchemaNode"]] = None
    required: Tuple[str, ...] = ()
    items: Optional["SchemaNode"] = None
    enum: Optional[Tuple[Any, ...]] = None
    all_of: Optional[Tuple["SchemaNode", ...]] = None
    one_of: Optional[Tuple["SchemaNode", ...]] = None
    additional_properties: Union[bool, "SchemaNode", None] = None
    ref: Optional[str] = None
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def has_open_map(self) -> bool:
        """Whether ``additionalProperties`` asks for an index signature."""
        return self.additional_properties is True or isinstance(
            self.additional_properties, SchemaNode
        )


def parse_node(
    raw: Any, rewrite_ref: Callable[[str], str] = lambda ref: ref
) -> SchemaNode:
    """
    Convert a raw schema mapping into a SchemaNode tree.

    Unknown keys (including ``x-`` vendor extensions) are ignored and
    malformed fields are dropped rather than rejected.

    Args:
        raw: Schema fragment as parsed from JSON/YAML
        rewrite_ref: Turns a raw ``$ref`` string into a canonical path

    Returns:
        SchemaNode snapshot of ``raw``
    """
    if not isinstance(raw, Mapping):
        return SchemaNode(raw={})

    def child(value: Any) -> Optional[SchemaNode]:
        if isinstance(value, Mapping):
            return parse_node(value, rewrite_ref)
        return None

    def children(value: Any) -> Optional[Tuple[SchemaNode, ...]]:
        if not isinstance(value, (list, tuple)) or not value:
            return None
        return tuple(parse_node(item, rewrite_ref) for item in value)

    properties = None
    if isinstance(raw.get("properties"), Mapping):
        properties = {
            str(key): parse_node(value, rewrite_ref)
            for key, value in raw["properties"].items()
        }

    required = raw.get("required")
    if not isinstance(required, (list, tuple)):
        required = ()

    enum = raw.get("enum")
    if not isinstance(enum, (list, tuple)) or not enum:
        enum = None

    additional = raw.get("additionalProperties")
    if isinstance(additional, Mapping):
        additional = parse_node(additional, rewrite_ref)
    elif additional is not True:
        additional = None

    ref = raw.get("$ref")
    schema_type = raw.get("type")
    description = raw.get("description")

    return SchemaNode(
        type=schema_type if isinstance(schema_type, str) else None,
        format=raw.get("format") if isinstance(raw.get("format"), str) else None,
        description=description if isinstance(description, str) else None,
        properties=properties,
        required=tuple(str(name) for name in required),
        items=child(raw.get("items")),
        enum=tuple(enum) if enum is not None else None,
        all_of=children(raw.get("allOf")),
        one_of=children(raw.get("oneOf")),
        additional_properties=additional,
        ref=rewrite_ref(ref) if isinstance(ref, str) else None,
        raw=raw,
    )


def classify(node: SchemaNode) -> NodeKind:
    """Determine the structural kind of a node (first matching rule wins)."""
    if node.enum:
        return NodeKind.ENUM

    if node.type in PRIMITIVES:
        return NodeKind.PRIMITIVE

    if node.type == "array" and node.items is not None:
        return NodeKind.ARRAY

    # a sibling type: object only restates what the composition builds
    if node.all_of:
        return NodeKind.ALL_OF

    if node.properties is not None or node.has_open_map:
        return NodeKind.OBJECT

    if node.type == "object":
        return NodeKind.ONE_OF if node.one_of else NodeKind.OBJECT

    if node.one_of:
        return NodeKind.ONE_OF

    if node.ref is not None:
        return NodeKind.REFERENCE

    if node.type == "array":
        return NodeKind.ARRAY

    return NodeKind.UNKNOWN


@dataclass(frozen=True)
class TypeShape:
    """
    Internal, syntax-independent representation of a resolved type.

    Shapes point at each other only by name (``ShapeKind.REFERENCE``), so
    cyclic schemas never turn into cyclic object graphs.
    """

    kind: ShapeKind
    name: Optional[str] = None
    primitive: Optional[str] = None  # ALIAS
    value: Any = None  # LITERAL
    element: Optional["TypeShape"] = None  # ARRAY
    members: Tuple["TypeShape", ...] = ()  # UNION
    properties: Tuple["PropertyShape", ...] = ()  # RECORD
    extends: Tuple[str, ...] = ()  # RECORD
    index: Optional["TypeShape"] = None  # RECORD index signature, OPEN_MAP value
    description: Optional[str] = None

    @property
    def is_declaration(self) -> bool:
        """Only named records become standalone declarations."""
        return self.kind == ShapeKind.RECORD and self.name is not None

    @property
    def depth(self) -> int:
        """Array nesting depth (0 for non-arrays)."""
        if self.kind != ShapeKind.ARRAY or self.element is None:
            return 0
        return 1 + self.element.depth

    @classmethod
    def alias(cls, primitive: str) -> "TypeShape":
        return cls(kind=ShapeKind.ALIAS, primitive=primitive)

    @classmethod
    def reference(cls, name: str) -> "TypeShape":
        return cls(kind=ShapeKind.REFERENCE, name=name)

    @classmethod
    def array_of(cls, element: "TypeShape") -> "TypeShape":
        return cls(kind=ShapeKind.ARRAY, element=element)

    @classmethod
    def open_map(cls, value: "TypeShape") -> "TypeShape":
        return cls(kind=ShapeKind.OPEN_MAP, index=value)


@dataclass(frozen=True)
class PropertyShape:
    """One property of a RECORD shape."""

    original_name: str  # schema key, kept verbatim
    identifier_name: str  # normalized name
    type_ref: TypeShape
    optional: bool = True
    description: Optional[str] = None
    node: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)


@dataclass(frozen=True)
class Property:
    """
    Draft property handed to property mappers.

    ``type`` is the rendered type annotation. Whatever a mapper returns is
    what gets emitted.
    """

    name: str
    original_name: str
    type: str
    optional: bool = True
    description: Optional[str] = None


PropertyMapper = Callable[[Mapping[str, Any], Property], Property]
