"""
TypeScript-specific type rendering.

Maps syntax-independent TypeShapes to TypeScript type expressions.
"""

import json
from datetime import date
from typing import Any

from ...core.schema import ANY, ShapeKind, TypeShape
from .naming import quote_string


class TypeScriptTypeMapper:
    """Renders TypeShapes as TypeScript type annotations."""

    def __init__(self, unknown_type: str = ANY):
        self.unknown_type = unknown_type

    def render(self, shape: TypeShape) -> str:
        """
        Render a shape found at a use site.

        Args:
            shape: Shape to render

        Returns:
            TypeScript type expression
        """
        if shape.kind == ShapeKind.ALIAS:
            return shape.primitive or self.unknown_type

        if shape.kind == ShapeKind.LITERAL:
            return self.render_literal(shape.value)

        if shape.kind == ShapeKind.ARRAY:
            element = self.render(shape.element)
            if self._needs_parentheses(shape.element):
                element = f"({element})"
            return f"{element}[]"

        if shape.kind == ShapeKind.UNION:
            if not shape.members:
                return "never"
            return " | ".join(self.render(member) for member in shape.members)

        if shape.kind == ShapeKind.OPEN_MAP:
            return f"{{ [key: string]: {self.render_index(shape)} }}"

        # RECORD and REFERENCE are always written by name
        return shape.name or self.unknown_type

    def render_index(self, shape: TypeShape) -> str:
        """Value type of a record's or open map's index signature."""
        if shape.index is None:
            return self.unknown_type
        return self.render(shape.index)

    def render_literal(self, value: Any) -> str:
        if isinstance(value, str):
            return quote_string(value)
        # YAML timestamps arrive as date/datetime objects
        if isinstance(value, date):
            return quote_string(value.isoformat())
        if value is None or isinstance(value, (bool, int, float)):
            return json.dumps(value)
        return quote_string(str(value))

    def _needs_parentheses(self, shape: TypeShape) -> bool:
        return shape.kind == ShapeKind.UNION and len(shape.members) > 1
