"""
C++ type system for code generation.

Basic C++ type spellings and the fixed table mapping abstract primitive
type names of the model onto them.
"""

from types import MappingProxyType
from typing import Mapping

from ...core.naming import capitalize_name


class BasicType:
    """Spellings of the C++ types the generated code relies on."""

    BOOLEAN = "bool"
    SIGNED_CHAR = "char"
    SIGNED_INT8 = "std::int8_t"
    SIGNED_INT16 = "std::int16_t"
    SIGNED_INT32 = "std::int32_t"
    SIGNED_INT64 = "std::int64_t"
    UNSIGNED_CHAR = "unsigned char"
    UNSIGNED_INT8 = "std::uint8_t"
    UNSIGNED_INT16 = "std::uint16_t"
    UNSIGNED_INT32 = "std::uint32_t"
    UNSIGNED_INT64 = "std::uint64_t"
    FLOAT = "float"
    DOUBLE = "double"
    STRING = "std::string"
    WIDE_STRING = "std::wstring"
    WIDE_STRING_VIEW = "std::wstring_view"
    ANY = "std::any"
    VECTOR = "std::vector"
    MAP = "std::map"
    DICTIONARY = "std::map<std::wstring, std::any>"


# Library symbols referenced by generated signatures and bodies
class LibrarySymbol:
    FUTURE = "std::future"
    UNIQUE_PTR = "std::unique_ptr"
    SHARED_PTR = "std::shared_ptr"
    UNDERLYING_TYPE = "std::underlying_type_t"
    JSON_VALUE = "web::json::value"
    HTTP_METHODS = "web::http::methods"
    HTTP_CLIENT = "web::http::client::http_client"
    CANCELLATION_TOKEN = "pplx::cancellation_token"


# Framework entities of the client runtime the generated code builds on
class FrameworkType:
    BASE_CLIENT = "BaseClient"
    BASE_CLIENT_INTERFACE = "IBaseClient"
    BASE_REQUEST = "BaseRequest"
    BASE_REQUEST_INTERFACE = "IBaseRequest"
    BASE_REQUEST_BUILDER = "BaseRequestBuilder"
    BASE_REQUEST_BUILDER_INTERFACE = "IBaseRequestBuilder"
    COLLECTION_PAGE = "CollectionPage"
    COLLECTION_PAGE_INTERFACE = "ICollectionPage"
    AUTHENTICATION_PROVIDER = "IAuthenticationProvider"
    HTTP_PROVIDER = "IHttpProvider"
    STRING_UTILS = "StringUtils"


PRIMITIVE_TYPE_MAP: Mapping[str, str] = MappingProxyType(
    {
        "binary": BasicType.WIDE_STRING,
        "boolean": BasicType.BOOLEAN,
        "byte": BasicType.UNSIGNED_CHAR,
        "date": BasicType.WIDE_STRING,
        "datetimeoffset": BasicType.WIDE_STRING,
        "double": BasicType.DOUBLE,
        "duration": BasicType.WIDE_STRING,
        "float": BasicType.FLOAT,
        "guid": BasicType.WIDE_STRING,
        "int16": BasicType.SIGNED_INT16,
        "int32": BasicType.SIGNED_INT32,
        "int64": BasicType.SIGNED_INT64,
        "json": BasicType.WIDE_STRING,
        "nsdictionary": BasicType.DICTIONARY,
        "single": BasicType.FLOAT,
        "stream": BasicType.WIDE_STRING,
        "string": BasicType.WIDE_STRING,
        "timeofday": BasicType.WIDE_STRING,
    }
)


def is_primitive(type_name: str) -> bool:
    """Whether a model type name is one of the mapped primitives."""
    return type_name.lower() in PRIMITIVE_TYPE_MAP


def resolve_type(type_name: str) -> str:
    """
    Resolve a model type name to its C++ spelling.

    Primitive names match case-insensitively; any other name is taken as
    a generated model type and returned capitalized.

    Args:
        type_name: Primitive or model type name

    Returns:
        The C++ type spelling
    """
    basic_type = PRIMITIVE_TYPE_MAP.get(type_name.lower())
    if basic_type is not None:
        return basic_type
    return capitalize_name(type_name)


def sequence_of(element_type: str) -> str:
    """Wrap an element type into the sequence container."""
    return f"{BasicType.VECTOR}<{element_type}>"
