"""
Core code generation components.

Provides the schema model, reference resolution, shape building and base
classes used by language generators.
"""

from .generator import (
    CodeGenerator,
    GeneratorError,
    GenerationResult,
    MissingDefinitionsError,
    UnresolvedReferenceError,
    generate_code,
)
from .schema import (
    NodeKind,
    Property,
    PropertyMapper,
    PropertyShape,
    SchemaNode,
    ShapeKind,
    TypeShape,
    classify,
    parse_node,
)
from .naming import NameSanitizer, NamingCase, to_identifier, to_type_name
from .references import ReferenceResolver, rewrite_reference_paths
from .builder import ShapeBuilder
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .formatter import FormatterError, format_typescript
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "MissingDefinitionsError",
    "UnresolvedReferenceError",
    "generate_code",
    # Schema system - core data structures
    "NodeKind",
    "Property",
    "PropertyMapper",
    "PropertyShape",
    "SchemaNode",
    "ShapeKind",
    "TypeShape",
    "classify",
    "parse_node",
    # Naming utilities - language-agnostic
    "NameSanitizer",
    "NamingCase",
    "to_identifier",
    "to_type_name",
    # Reference resolution and shape building
    "ReferenceResolver",
    "rewrite_reference_paths",
    "ShapeBuilder",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Formatting
    "FormatterError",
    "format_typescript",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
