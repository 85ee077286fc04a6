"""
Base generator interface for all code generation targets.

Defines the contract language generators implement, the engine's error
types, and the non-raising ``generate_code`` wrapper.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Union
from pathlib import Path

from .config import GeneratorConfig, load_config
from .schema import ShapeKind, TypeShape
from .templates import TemplateEngine, create_template_engine


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class MissingDefinitionsError(GeneratorError):
    """The input document has no ``definitions`` root."""

    def __init__(self, message: str = "no definitions in schema"):
        super().__init__(message)


class UnresolvedReferenceError(GeneratorError):
    """A reference points at no known definition."""

    def __init__(self, reference: str):
        super().__init__(f"unresolved reference: {reference}")
        self.reference = reference


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(
        self, config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None
    ):
        """Initialize generator with optional configuration."""
        if isinstance(config, GeneratorConfig):
            self.config = config
        else:
            self.config = load_config(custom_config=config)
        self.warnings: List[str] = []
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'typescript')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.ts')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.

        Returns:
            Path to template directory or None
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(self, document: Mapping[str, Any]) -> str:
        """
        Generate formatted code for a whole schema document.

        Args:
            document: Parsed Swagger document

        Returns:
            Generated code as a string
        """
        pass

    @abstractmethod
    def generate_single_schema(self, shape: TypeShape) -> str:
        """
        Generate the declaration for a single named shape.

        Args:
            shape: Declaration shape to render

        Returns:
            Unformatted declaration text
        """
        pass

    def validate_shapes(self, shapes: List[TypeShape]) -> List[str]:
        """
        Check built shapes for structural oddities worth reporting.

        Args:
            shapes: Forest produced by the shape builder

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for shape in shapes:
            if not shape.is_declaration:
                continue

            if not shape.properties and shape.index is None and not shape.extends:
                warnings.append(f"Schema '{shape.name}' has no properties")

            for prop in shape.properties:
                if (
                    prop.type_ref.kind == ShapeKind.ALIAS
                    and prop.type_ref.primitive == "any"
                ):
                    warnings.append(
                        f"Unknown type in {shape.name}.{prop.original_name}"
                    )

        return warnings

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template file name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator, document: Mapping[str, Any]
) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        document: Parsed Swagger document

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        code = generator.generate(document)

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "definition_count": len(document.get("definitions") or {}),
            "declaration_count": getattr(generator, "declaration_count", 0),
            "camelcase": generator.config.camelcase,
            "wrapper": generator.config.wrapper_line or "none",
        }

        return GenerationResult(code, list(generator.warnings), metadata)

    except Exception as e:
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
