"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Any, Optional

from ...logging_config import get_logger
from .config import GeneratorConfig, load_config
from .model import Model
from .templates import TemplateEngine, TemplateError, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class RoleMismatchError(GeneratorError):
    """A role generator was handed a model element of the wrong kind.

    Signals a wiring defect in the caller, not a problem with the model data.
    """

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or load_config()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        template_dir = self.get_template_directory()
        self._template_engine = create_template_engine(template_dir)

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'cpp')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.h')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(self, model: Model) -> Dict[str, str]:
        """
        Generate code for the whole model.

        Args:
            model: The model to generate code for

        Returns:
            Mapping of output file name to file content
        """
        pass

    def validate_model(self, model: Model) -> List[str]:
        """
        Report structural oddities of the model as warnings.

        The model is never rejected here; language generators may extend
        the list.

        Args:
            model: Model to inspect

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for model_class in model.classes:
            if not model_class.properties and model_class.base is None:
                warnings.append(f"Class '{model_class.name}' has no properties")

        for model_enum in model.enums:
            if not model_enum.members:
                warnings.append(f"Enumeration '{model_enum.name}' has no members")
            implicit = [m.name for m in model_enum.members if not m.has_value]
            if implicit:
                warnings.append(
                    f"Enumeration '{model_enum.name}' has members without explicit "
                    f"values ({', '.join(implicit)}); 0 is assumed when sizing the "
                    f"backing type"
                )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        # Basic cleanup - remove excessive blank lines
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines)

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
        self,
        files: Dict[str, str],
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            files: Generated files keyed by file name
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.files = files
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(files={})
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, model: Model) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        model: Model to generate code for

    Returns:
        GenerationResult with files, warnings, and metadata

    Raises:
        RoleMismatchError: If an entity is read through the wrong role view
    """
    try:
        warnings = generator.validate_model(model)
        for warning in warnings:
            logger.warning(warning)

        files = generator.generate(model)

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "namespace": model.namespace or generator.config.namespace,
            "class_count": len(model.classes),
            "enum_count": len(model.enums),
            "has_client": model.client is not None,
            "file_count": len(files),
        }

        logger.info("Generated %d files for %s", len(files), generator.language_name)
        return GenerationResult(files, warnings, metadata)

    except RoleMismatchError:
        # Role binding bugs are not model problems
        raise
    except (GeneratorError, TemplateError) as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
