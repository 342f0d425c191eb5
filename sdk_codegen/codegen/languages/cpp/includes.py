"""
Include resolution for generated C++ headers.

Entities declare what they reference as a ``Dependencies`` value: library
symbols (``std::wstring``, ``web::json::value``) and names of other
entities. The resolver turns them into a deduplicated, sorted include list.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, Iterable, List, Mapping, Tuple

from .types import BasicType, LibrarySymbol


class IncludeFile:
    """Header files of the standard and third-party libraries."""

    CPPREST_HTTP_CLIENT = "cpprest/http_client.h"
    CPPREST_HTTP_MSG = "cpprest/http_msg.h"
    CPPREST_JSON = "cpprest/json.h"
    PPLX_CANCELLATION_TOKEN = "pplx/pplxcancellation_token.h"
    STD_INTEGRAL = "cstdint"
    STD_ANY = "any"
    STD_FUTURE = "future"
    STD_MAP = "map"
    STD_MEMORY = "memory"
    STD_STRING = "string"
    STD_STRING_VIEW = "string_view"
    STD_TYPE_TRAITS = "type_traits"
    STD_VECTOR = "vector"


# Symbols mapped to "" are built in and need no include
SYSTEM_TYPE_HEADERS: Mapping[str, str] = MappingProxyType(
    {
        BasicType.BOOLEAN: "",
        BasicType.SIGNED_CHAR: "",
        BasicType.UNSIGNED_CHAR: "",
        BasicType.FLOAT: "",
        BasicType.DOUBLE: "",
        BasicType.SIGNED_INT8: IncludeFile.STD_INTEGRAL,
        BasicType.SIGNED_INT16: IncludeFile.STD_INTEGRAL,
        BasicType.SIGNED_INT32: IncludeFile.STD_INTEGRAL,
        BasicType.SIGNED_INT64: IncludeFile.STD_INTEGRAL,
        BasicType.UNSIGNED_INT8: IncludeFile.STD_INTEGRAL,
        BasicType.UNSIGNED_INT16: IncludeFile.STD_INTEGRAL,
        BasicType.UNSIGNED_INT32: IncludeFile.STD_INTEGRAL,
        BasicType.UNSIGNED_INT64: IncludeFile.STD_INTEGRAL,
        BasicType.ANY: IncludeFile.STD_ANY,
        BasicType.STRING: IncludeFile.STD_STRING,
        BasicType.WIDE_STRING: IncludeFile.STD_STRING,
        BasicType.WIDE_STRING_VIEW: IncludeFile.STD_STRING_VIEW,
        BasicType.VECTOR: IncludeFile.STD_VECTOR,
        BasicType.MAP: IncludeFile.STD_MAP,
        BasicType.DICTIONARY: IncludeFile.STD_MAP,
        LibrarySymbol.FUTURE: IncludeFile.STD_FUTURE,
        LibrarySymbol.UNIQUE_PTR: IncludeFile.STD_MEMORY,
        LibrarySymbol.SHARED_PTR: IncludeFile.STD_MEMORY,
        LibrarySymbol.UNDERLYING_TYPE: IncludeFile.STD_TYPE_TRAITS,
        LibrarySymbol.JSON_VALUE: IncludeFile.CPPREST_JSON,
        LibrarySymbol.HTTP_METHODS: IncludeFile.CPPREST_HTTP_MSG,
        LibrarySymbol.HTTP_CLIENT: IncludeFile.CPPREST_HTTP_CLIENT,
        LibrarySymbol.CANCELLATION_TOKEN: IncludeFile.PPLX_CANCELLATION_TOKEN,
    }
)

_QUALIFIED_NAME = re.compile(r"[A-Za-z_][\w]*(?:::[A-Za-z_]\w*)*")

# Tokens of a type spelling that are neither library symbols nor entities
_BUILTIN_TOKENS = frozenset({"bool", "char", "const", "double", "float", "unsigned", "void"})


@dataclass(frozen=True)
class Dependencies:
    """What an entity's declaration references.

    Attributes:
        system: Library symbols, looked up in ``SYSTEM_TYPE_HEADERS``
        user: Names of generated or framework entities
    """

    system: FrozenSet[str] = frozenset()
    user: FrozenSet[str] = frozenset()

    @classmethod
    def of(cls, system: Iterable[str] = (), user: Iterable[str] = ()) -> "Dependencies":
        return cls(frozenset(system), frozenset(user))

    def merge(self, *others: "Dependencies") -> "Dependencies":
        system = set(self.system)
        user = set(self.user)
        for other in others:
            system.update(other.system)
            user.update(other.user)
        return Dependencies(frozenset(system), frozenset(user))

    def without(self, name: str) -> "Dependencies":
        """Drop a user reference, typically the entity's own name."""
        return Dependencies(self.system, self.user - {name})


def split_type_refs(type_spelling: str) -> Dependencies:
    """
    Split a C++ type spelling into the symbols it references.

    Example:
        "std::vector<DriveItem>" -> system {"std::vector"}, user {"DriveItem"}
    """
    # Template arguments are resolved separately below
    if "<" not in type_spelling and type_spelling in SYSTEM_TYPE_HEADERS:
        return Dependencies.of(system=[type_spelling])

    system = set()
    user = set()
    for token in _QUALIFIED_NAME.findall(type_spelling):
        if token in _BUILTIN_TOKENS:
            continue
        if token in SYSTEM_TYPE_HEADERS or "::" in token:
            system.add(token)
        else:
            user.add(token)
    return Dependencies.of(system, user)


def types_dependencies(type_spellings: Iterable[str]) -> Dependencies:
    return Dependencies().merge(*(split_type_refs(spelling) for spelling in type_spellings))


def resolve_includes(
    system_refs: Iterable[str],
    user_refs: Iterable[str],
    header_extension: str = ".h",
) -> Tuple[List[str], List[str]]:
    """
    Resolve referenced symbols into header files.

    System symbols are looked up in ``SYSTEM_TYPE_HEADERS``; unmapped and
    built-in symbols are dropped. Each user reference maps to its own
    header. Both lists are deduplicated and sorted.

    Args:
        system_refs: Library symbols
        user_refs: Entity names
        header_extension: Extension of generated headers

    Returns:
        Tuple of (system headers, user headers)
    """
    system_headers = {
        SYSTEM_TYPE_HEADERS[ref] for ref in system_refs if SYSTEM_TYPE_HEADERS.get(ref)
    }
    user_headers = {f"{ref}{header_extension}" for ref in user_refs}
    return sorted(system_headers), sorted(user_headers)


def render_include_block(system_headers: List[str], user_headers: List[str]) -> str:
    """Render include directives, system headers first."""
    lines = [f"#include <{header}>" for header in system_headers]
    if system_headers and user_headers:
        lines.append("")
    lines.extend(f'#include "{header}"' for header in user_headers)
    return "\n".join(lines)
