"""
C++ code generator module.

Generates typed C++ SDK headers (model types, requests, request builders,
collection pages and the service client) from a data model.
"""

from .entities import EntityOutput, EnumCodec, RenderContext, build_entity
from .generator import CppGenerator, bind_roles
from .includes import Dependencies, resolve_includes
from .naming import CPP_RESERVED_WORDS, create_cpp_sanitizer, derive_name
from .roles import EntityDescriptor, Role
from .types import resolve_type

__all__ = [
    "CppGenerator",
    "CPP_RESERVED_WORDS",
    "Dependencies",
    "EntityDescriptor",
    "EntityOutput",
    "EnumCodec",
    "RenderContext",
    "Role",
    "bind_roles",
    "build_entity",
    "create_cpp_sanitizer",
    "derive_name",
    "resolve_includes",
    "resolve_type",
]
