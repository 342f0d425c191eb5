"""
Typed client SDK code generator.

Turns an abstract API data model (classes, enumerations and a service
client) into a family of C++ header files.
"""

__version__ = "0.1.0"

from .codegen import (
    GenerationResult,
    GeneratorConfig,
    Model,
    generate_from_model,
    list_supported_languages,
    load_config,
    model_from_dict,
    quick_generate,
)
from .utils import ModelLoadError, load_model, parse_model

__all__ = [
    "__version__",
    "GenerationResult",
    "GeneratorConfig",
    "Model",
    "ModelLoadError",
    "generate_from_model",
    "list_supported_languages",
    "load_config",
    "load_model",
    "model_from_dict",
    "parse_model",
    "quick_generate",
]
