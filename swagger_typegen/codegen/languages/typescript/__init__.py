"""
TypeScript code generator module.

Generates TypeScript interfaces from Swagger 2 definitions.
"""

from .generator import TypeScriptGenerator, WARNING_MESSAGE, create_typescript_generator
from .naming import (
    TS_BUILTIN_TYPES,
    TS_RESERVED_WORDS,
    create_typescript_sanitizer,
    quote_string,
    render_property_key,
)
from .types import TypeScriptTypeMapper

__all__ = [
    "TypeScriptGenerator",
    "TypeScriptTypeMapper",
    "WARNING_MESSAGE",
    "TS_BUILTIN_TYPES",
    "TS_RESERVED_WORDS",
    "create_typescript_generator",
    "create_typescript_sanitizer",
    "quote_string",
    "render_property_key",
]
