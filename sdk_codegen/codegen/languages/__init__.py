"""
Language-specific code generators.

Each subpackage implements ``CodeGenerator`` for one target language.
"""

from .cpp import CppGenerator

__all__ = ["CppGenerator"]
