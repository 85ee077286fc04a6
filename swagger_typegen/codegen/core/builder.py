"""
Shape builder: turns classified schema nodes into named type shapes.

Walks every definition once, synthesizes names for anonymous nested
objects, decides how compositions are represented, and collects the
forest of shapes in emission order.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from .naming import NameSanitizer, NamingCase, to_identifier, to_pascal_case, unique_identifier
from .references import ReferenceResolver
from .schema import (
    ANY,
    OBJECT,
    PRIMITIVES,
    NodeKind,
    PropertyShape,
    SchemaNode,
    ShapeKind,
    TypeShape,
    classify,
)
from ...logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class Composition:
    """Flattened ``allOf``: referenced bases plus merged inline members."""

    extends: List[str] = field(default_factory=list)
    properties: Dict[str, SchemaNode] = field(default_factory=dict)
    required: Set[str] = field(default_factory=set)
    additional: object = None
    description: Optional[str] = None

    def merge(self, node: SchemaNode):
        """Fold an inline object member into the composition."""
        self.properties.update(node.properties or {})
        self.required.update(node.required)
        if node.additional_properties is not None:
            self.additional = node.additional_properties
        if node.description and not self.description:
            self.description = node.description


class ShapeBuilder:
    """
    Builds the TypeShape forest for one generation run.

    Object-kind definitions are referenced by name and never recursed into
    from a use site, so cycles between records are harmless. Other
    definitions are inlined from a memoized build; an in-progress guard
    stops recursive aliases.
    """

    def __init__(
        self,
        resolver: ReferenceResolver,
        sanitizer: Optional[NameSanitizer] = None,
        camel_case: bool = False,
    ):
        self.resolver = resolver
        self.sanitizer = sanitizer or NameSanitizer()
        self.camel_case = camel_case
        self.warnings: List[str] = []

        self._type_names: Dict[str, str] = {}
        self._record_kinds: Dict[str, bool] = {}
        self._checking: Set[str] = set()
        self._built: Dict[str, TypeShape] = {}
        self._building: Set[str] = set()
        self._forest: List[Optional[TypeShape]] = []

    def build(self) -> List[TypeShape]:
        """
        Build every definition.

        Returns:
            Declarations in emission order: each record definition in
            document order, followed by the records synthesized inside it
        """
        case = NamingCase.PASCAL_CASE if self.camel_case else NamingCase.ORIGINAL

        # Definitions claim their names before any synthesized name can
        for path in self.resolver.paths():
            if self._is_record_definition(path):
                self._type_names[path] = self.sanitizer.sanitize_name(path, case)

        for original, renamed in self.sanitizer.renamed.items():
            self._warn(f"Definition '{original}' renamed to '{renamed}'")

        for path in self.resolver.paths():
            self.build_definition(path)

        return [shape for shape in self._forest if shape is not None]

    def build_definition(self, path: str) -> TypeShape:
        """Build (or fetch the memoized shape of) one top-level definition."""
        if path in self._built:
            return self._built[path]

        node = self.resolver.resolve(path)
        context = to_pascal_case(path)
        self._building.add(path)
        logger.debug("Building definition %s", path)

        try:
            if path in self._type_names:
                shape = self._build_record(node, self._type_names[path], context)
            else:
                logger.debug("Definition %s is not declared, inlined at use sites", path)
                shape = self._build_node(node, context)
        finally:
            self._building.discard(path)

        self._built[path] = shape
        return shape

    def type_name(self, path: str) -> Optional[str]:
        """Declared type name for an object-kind definition path."""
        return self._type_names.get(path)

    # Classification helpers

    def _is_record_definition(self, path: str) -> bool:
        """Whether a definition is declared as a record (memoized)."""
        if path in self._record_kinds:
            return self._record_kinds[path]
        if path in self._checking:
            # allOf chain that loops back on itself
            return False

        self._checking.add(path)
        try:
            node = self.resolver.resolve(path)
            kind = classify(node)
            if kind == NodeKind.OBJECT:
                result = True
            elif kind == NodeKind.ALL_OF:
                result = self._flatten_composition(node) is not None
            else:
                result = False
        finally:
            self._checking.discard(path)

        self._record_kinds[path] = result
        return result

    def _flatten_composition(self, node: SchemaNode) -> Optional[Composition]:
        """
        Split an ``allOf`` into bases and inline members.

        Returns:
            Composition, or None when a member is neither a reference to an
            object-kind definition nor an inline object
        """
        composition = Composition()
        composition.merge(node)

        if not self._collect_members(node.all_of or (), composition):
            return None
        return composition

    def _collect_members(self, members, composition: Composition) -> bool:
        for member in members:
            kind = classify(member)

            if kind == NodeKind.REFERENCE:
                if not self._is_record_definition(member.ref):
                    return False
                if member.ref not in composition.extends:
                    composition.extends.append(member.ref)
            elif kind == NodeKind.OBJECT:
                composition.merge(member)
            elif kind == NodeKind.ALL_OF:
                composition.merge(member)
                if not self._collect_members(member.all_of, composition):
                    return False
            else:
                return False

        return True

    # Shape construction

    def _build_node(self, node: SchemaNode, context: str) -> TypeShape:
        """Build the shape of a node found at a use site."""
        kind = classify(node)

        if kind == NodeKind.ENUM:
            return self._build_enum(node)

        if kind == NodeKind.PRIMITIVE:
            return TypeShape.alias(PRIMITIVES[node.type])

        if kind == NodeKind.ARRAY:
            if node.items is None:
                return TypeShape.array_of(TypeShape.alias(ANY))
            return TypeShape.array_of(self._build_node(node.items, context))

        if kind == NodeKind.OBJECT:
            if node.properties is None:
                return TypeShape.open_map(self._build_index(node.additional_properties, context))
            name = self._synthesize_name(context)
            self._build_record(node, name, context)
            return TypeShape.reference(name)

        if kind == NodeKind.ALL_OF:
            if self._flatten_composition(node) is None:
                self._warn(f"allOf at '{context}' degraded to '{OBJECT}'")
                return TypeShape.alias(OBJECT)
            name = self._synthesize_name(context)
            self._build_record(node, name, context)
            return TypeShape.reference(name)

        if kind == NodeKind.ONE_OF:
            return TypeShape(
                kind=ShapeKind.UNION,
                members=tuple(
                    self._build_node(member, f"{context}{position}")
                    for position, member in enumerate(node.one_of, start=1)
                ),
            )

        if kind == NodeKind.REFERENCE:
            return self._build_reference(node.ref)

        return TypeShape.alias(ANY)

    def _build_enum(self, node: SchemaNode) -> TypeShape:
        values = []
        for value in node.enum:
            # 1 == True in Python, so compare type as well
            if not any(type(value) is type(seen) and value == seen for seen in values):
                values.append(value)

        return TypeShape(
            kind=ShapeKind.UNION,
            members=tuple(TypeShape(kind=ShapeKind.LITERAL, value=v) for v in values),
        )

    def _build_reference(self, path: str) -> TypeShape:
        if path in self._type_names:
            return TypeShape.reference(self._type_names[path])

        if path in self._building:
            self._warn(f"Recursive reference to '{path}' replaced with '{ANY}'")
            return TypeShape.alias(ANY)

        return self.build_definition(path)

    def _build_index(self, additional, context: str) -> TypeShape:
        if isinstance(additional, SchemaNode):
            return self._build_node(additional, f"{context}Value")
        return TypeShape.alias(ANY)

    def _build_record(self, node: SchemaNode, name: str, context: str) -> TypeShape:
        """Build a named record and place it in the forest."""
        slot = self._reserve_slot()

        if node.all_of:
            composition = self._flatten_composition(node)
        else:
            composition = Composition()
            composition.merge(node)

        properties = self._build_properties(name, composition, context)
        index = None
        if composition.additional is not None:
            index = self._build_index(composition.additional, context)

        shape = TypeShape(
            kind=ShapeKind.RECORD,
            name=name,
            properties=properties,
            extends=tuple(self._type_names[path] for path in composition.extends),
            index=index,
            description=composition.description,
        )
        self._forest[slot] = shape
        logger.debug("Built record %s with %d properties", name, len(properties))
        return shape

    def _build_properties(
        self, owner: str, composition: Composition, context: str
    ) -> Tuple[PropertyShape, ...]:
        used: Set[str] = set()
        properties = []

        for key, prop_node in composition.properties.items():
            identifier = to_identifier(key, self.camel_case)
            if identifier in used:
                unique = unique_identifier(identifier, used)
                self._warn(f"Property {owner}.{key} renamed to '{unique}'")
                identifier = unique
            used.add(identifier)

            properties.append(
                PropertyShape(
                    original_name=key,
                    identifier_name=identifier,
                    type_ref=self._build_node(prop_node, context + to_pascal_case(key)),
                    optional=key not in composition.required,
                    description=prop_node.description,
                    node=prop_node.raw,
                )
            )

        return tuple(properties)

    def _synthesize_name(self, context: str) -> str:
        name = self.sanitizer.sanitize_name(context, NamingCase.PASCAL_CASE)
        logger.debug("Synthesized type name %s", name)
        return name

    def _reserve_slot(self) -> int:
        self._forest.append(None)
        return len(self._forest) - 1

    def _warn(self, message: str):
        logger.warning(message)
        self.warnings.append(message)
