"""
Core code generation components.

Provides the model view, base classes and utilities used by all language
generators.
"""

from .code_block import CodeBlock
from .config import ConfigError, ConfigManager, GeneratorConfig, load_config
from .generator import (
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    RoleMismatchError,
    generate_code,
)
from .model import (
    Model,
    ModelClass,
    ModelEnum,
    ModelEnumMember,
    ModelError,
    ModelProperty,
    model_from_dict,
)
from .naming import NameSanitizer, capitalize_name, split_name
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "RoleMismatchError",
    "GenerationResult",
    "generate_code",
    # Model view
    "Model",
    "ModelClass",
    "ModelEnum",
    "ModelEnumMember",
    "ModelError",
    "ModelProperty",
    "model_from_dict",
    # Text emission
    "CodeBlock",
    "NameSanitizer",
    "capitalize_name",
    "split_name",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
