"""
swagger-typegen: TypeScript declarations from Swagger 2 schema documents.
"""

__version__ = "0.1.0"

from .codegen import (  # noqa: E402
    GeneratorConfig,
    GeneratorError,
    MissingDefinitionsError,
    Property,
    UnresolvedReferenceError,
    WARNING_MESSAGE,
    generate,
)

__all__ = [
    "__version__",
    "GeneratorConfig",
    "GeneratorError",
    "MissingDefinitionsError",
    "Property",
    "UnresolvedReferenceError",
    "WARNING_MESSAGE",
    "generate",
]
