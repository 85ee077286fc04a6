"""
TypeScript declaration generator implementation.

Generates ``export interface`` declarations from Swagger 2 definitions,
wraps them in a namespace/module block and formats the result.
"""

from typing import Any, Dict, Mapping, Optional, Union
from pathlib import Path

from ...core.builder import ShapeBuilder
from ...core.config import GeneratorConfig
from ...core.formatter import format_typescript
from ...core.generator import CodeGenerator
from ...core.references import ReferenceResolver
from ...core.schema import Property, PropertyShape, TypeShape
from ....logging_config import get_logger
from .naming import create_typescript_sanitizer, render_property_key
from .types import TypeScriptTypeMapper

logger = get_logger(__name__)

WARNING_MESSAGE = """/**
 * This file was auto-generated by swagger-typegen.
 * Do not make direct changes to the file.
 */"""


class TypeScriptGenerator(CodeGenerator):
    """Code generator for TypeScript interfaces."""

    def __init__(
        self, config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None
    ):
        """Initialize TypeScript generator with configuration."""
        super().__init__(config)

        self.type_mapper = TypeScriptTypeMapper()
        self.declaration_count = 0

    def get_template_directory(self) -> Optional[Path]:
        """Return the TypeScript templates directory."""
        template_dir = Path(__file__).parent / "templates"
        return template_dir if template_dir.exists() else None

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "typescript"

    @property
    def file_extension(self) -> str:
        """Return TypeScript file extension."""
        return ".ts"

    def generate(self, document: Mapping[str, Any]) -> str:
        """
        Generate formatted declarations for a whole Swagger document.

        Args:
            document: Parsed Swagger 2 document

        Returns:
            Formatted TypeScript source ("" when there is nothing to write)

        Raises:
            MissingDefinitionsError: If the document has no definitions
            UnresolvedReferenceError: If a reference points nowhere
            FormatterError: If the emitted text is malformed
        """
        # Reset state
        self.warnings = []
        self.declaration_count = 0

        resolver = ReferenceResolver.from_document(document)
        builder = ShapeBuilder(
            resolver,
            create_typescript_sanitizer(),
            camel_case=bool(self.config.camelcase),
        )
        shapes = builder.build()
        self.warnings.extend(builder.warnings)

        for warning in self.validate_shapes(shapes):
            logger.info(warning)
            self.warnings.append(warning)

        declarations = [self.generate_single_schema(shape) for shape in shapes]
        self.declaration_count = len(declarations)

        code = self.render_template(
            "document.ts.j2",
            {
                "banner": WARNING_MESSAGE if self.config.warning else None,
                "wrapper": self.config.wrapper_line,
                "declarations": declarations,
            },
        )

        logger.info(
            "Generated %d declaration(s) from %d definition(s)",
            self.declaration_count,
            len(resolver),
        )
        return format_typescript(code, self.config.indent_size)

    def generate_single_schema(self, shape: TypeShape) -> str:
        """Generate an unformatted ``export interface`` for one record."""
        properties = [self._generate_property_data(prop) for prop in shape.properties]

        template_context = {
            "name": shape.name,
            "extends": list(shape.extends),
            "description": shape.description if self.config.add_comments else None,
            "properties": properties,
            "index": (
                self.type_mapper.render_index(shape) if shape.index is not None else None
            ),
        }

        logger.debug("Emitting interface %s", shape.name)
        return self.render_template("interface.ts.j2", template_context)

    def _generate_property_data(self, prop: PropertyShape) -> Dict[str, Any]:
        """Build template data for one property, passing it through the mapper."""
        draft = Property(
            name=prop.identifier_name,
            original_name=prop.original_name,
            type=self.type_mapper.render(prop.type_ref),
            optional=prop.optional,
            description=prop.description,
        )

        mapper = self.config.property_mapper
        final = mapper(prop.node, draft) if mapper is not None else draft

        return {
            "key": render_property_key(final.name),
            "type": final.type,
            "optional": final.optional,
            "description": final.description if self.config.add_comments else None,
        }


def create_typescript_generator(
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None
) -> TypeScriptGenerator:
    """Create a TypeScript generator with default configuration."""
    return TypeScriptGenerator(config)
