"""
SDK code generation module.

Generates typed client SDK sources from an abstract API data model.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from .core.config import ConfigManager, GeneratorConfig, load_config
from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.model import Model, model_from_dict
from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_registry,
    list_supported_languages,
)


def generate_from_model(
    model: Union[Model, Dict[str, Any]],
    language: str = "cpp",
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
) -> GenerationResult:
    """
    Generate code for a model.

    Args:
        model: Model, or a JSON model description
        language: Target language name
        config: Generator configuration, dict of overrides or config file path

    Returns:
        GenerationResult with the generated files
    """
    if isinstance(model, dict):
        model = model_from_dict(model)

    generator = get_generator(language, config)
    return generate_code(generator, model)


def quick_generate(model_data: Dict[str, Any], language: str = "cpp", **options) -> Dict[str, str]:
    """
    Generate files from a JSON model description.

    Args:
        model_data: JSON model description
        language: Target language
        **options: Configuration overrides

    Returns:
        Mapping of file name to content

    Raises:
        RuntimeError: If generation fails
    """
    result = generate_from_model(model_data, language, options)

    if result.success:
        return result.files
    raise RuntimeError(f"Code generation failed: {result.error_message}")


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "ConfigManager",
    "GenerationResult",
    "GeneratorConfig",
    "Model",
    "generate_from_model",
    "quick_generate",
    "get_generator",
    "get_registry",
    "list_supported_languages",
    "load_config",
    "model_from_dict",
]
