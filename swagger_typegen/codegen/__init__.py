"""
swagger-typegen code generation module.

Generates TypeScript declarations from Swagger 2 schema documents.
"""

from typing import Any, Dict, Mapping, Optional, Union

from .core.generator import (
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    MissingDefinitionsError,
    UnresolvedReferenceError,
    generate_code,
)
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .core.formatter import FormatterError
from .core.schema import Property
from .languages.typescript import TypeScriptGenerator, WARNING_MESSAGE


def generate(
    document: Mapping[str, Any],
    options: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
    **kwargs: Any,
) -> str:
    """
    Generate TypeScript declarations for a Swagger 2 document.

    Args:
        document: Parsed Swagger document with a ``definitions`` root
        options: GeneratorConfig or dict of options
        **kwargs: Options given as keywords (``camelcase``, ``wrapper``,
            ``warning``, ``property_mapper``, ...); they override ``options``

    Returns:
        Formatted declaration text

    Raises:
        MissingDefinitionsError: If ``definitions`` is absent
        UnresolvedReferenceError: If a ``$ref`` cannot be resolved
        FormatterError: If the emitted text is malformed
    """
    if isinstance(options, GeneratorConfig) and not kwargs:
        config = options
    else:
        merged: Dict[str, Any] = {}
        if isinstance(options, GeneratorConfig):
            merged.update(vars(options))
        elif options:
            merged.update(options)
        merged.update(kwargs)
        config = load_config(custom_config=merged)

    return TypeScriptGenerator(config).generate(document)


# Export main interfaces
__all__ = [
    "CodeGenerator",
    "ConfigError",
    "ConfigManager",
    "FormatterError",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "MissingDefinitionsError",
    "Property",
    "TypeScriptGenerator",
    "UnresolvedReferenceError",
    "WARNING_MESSAGE",
    "generate",
    "generate_code",
    "load_config",
]
