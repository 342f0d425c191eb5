"""
C++-specific naming: reserved keywords and derived entity names.

Every name produced here is a pure function of the model element and the
role it is generated for.
"""

from typing import List, Optional

from ...core.model import ModelProperty
from ...core.naming import NameSanitizer, capitalize_name
from .roles import ElementKind, EntityDescriptor, Role
from .types import resolve_type


# Reserved keywords of C++20
CPP_RESERVED_WORDS = frozenset(
    {
        "alignas",
        "alignof",
        "and",
        "and_eq",
        "asm",
        "atomic_cancel",
        "atomic_commit",
        "atomic_noexcept",
        "auto",
        "bitand",
        "bitor",
        "bool",
        "break",
        "case",
        "catch",
        "char",
        "char8_t",
        "char16_t",
        "char32_t",
        "class",
        "compl",
        "concept",
        "const",
        "consteval",
        "constexpr",
        "const_cast",
        "continue",
        "co_await",
        "co_return",
        "co_yield",
        "decltype",
        "default",
        "delete",
        "do",
        "double",
        "dynamic_cast",
        "else",
        "enum",
        "explicit",
        "export",
        "extern",
        "false",
        "float",
        "for",
        "friend",
        "goto",
        "if",
        "inline",
        "int",
        "long",
        "mutable",
        "namespace",
        "new",
        "noexcept",
        "not",
        "not_eq",
        "nullptr",
        "operator",
        "or",
        "or_eq",
        "private",
        "protected",
        "public",
        "reflexpr",
        "register",
        "reinterpret_cast",
        "requires",
        "return",
        "short",
        "signed",
        "sizeof",
        "static",
        "static_assert",
        "static_cast",
        "struct",
        "switch",
        "synchronized",
        "template",
        "this",
        "thread_local",
        "throw",
        "true",
        "try",
        "typedef",
        "typeid",
        "typename",
        "union",
        "unsigned",
        "using",
        "virtual",
        "void",
        "volatile",
        "wchar_t",
        "while",
        "xor",
        "xor_eq",
    }
)


def create_cpp_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for C++."""
    return NameSanitizer(CPP_RESERVED_WORDS)


_sanitizer = create_cpp_sanitizer()


def sanitize_name(name: str) -> str:
    """Append ``_`` to a name that collides with a C++ keyword."""
    return _sanitizer.sanitize_name(name)


def entity_name(name: str) -> str:
    """Capitalized, keyword-safe identifier for a model element name."""
    return _sanitizer.capitalized(name)


def collection_name(prop: ModelProperty) -> str:
    """
    Compound name shared by all collection roles of a property.

    Example:
        property "children" owned by "folder" -> "FolderChildrenCollection"
    """
    if prop.owner is None:
        raise ValueError(f"Property '{prop.name}' has no owning class")
    return f"{capitalize_name(prop.owner.name)}{capitalize_name(prop.name)}Collection"


def derive_name(descriptor: EntityDescriptor) -> str:
    """
    Derive the canonical identifier of a generated entity.

    Args:
        descriptor: Model element and role

    Returns:
        The identifier, ``I``-prefixed for interface roles
    """
    role = descriptor.role
    traits = role.traits

    if traits.collection:
        base_name = collection_name(descriptor.as_property())
    else:
        base_name = capitalize_name(descriptor.element.name)

    prefix = "I" if traits.interface else ""
    return sanitize_name(f"{prefix}{base_name}{traits.suffix}")


def linked_entity_name(prop: ModelProperty, for_client: bool = False) -> str:
    """
    Name of the entity a navigation accessor leads to.

    Collections link to the compound collection name. Single-valued
    properties link to the property's own name, except on the client,
    where they link to the referenced class.
    """
    if prop.is_collection:
        return collection_name(prop)
    if for_client:
        return capitalize_name(prop.type_name)
    return capitalize_name(prop.name)


def placeholders(descriptor: EntityDescriptor) -> dict:
    """Values for the format placeholders of the role traits table."""
    if descriptor.kind is ElementKind.PROPERTY:
        prop = descriptor.as_property()
        return {
            "entity": capitalize_name(prop.projection_type_name),
            "owner": capitalize_name(prop.owner.name),
            "collection": collection_name(prop),
            "element": resolve_type(prop.projection_type_name),
        }

    name = capitalize_name(descriptor.element.name)
    return {"entity": name, "owner": name, "collection": name, "element": name}


def header_comment(descriptor: EntityDescriptor) -> str:
    """One-line description used in the entity header comment."""
    traits = descriptor.role.traits
    if descriptor.kind is ElementKind.ENUM:
        return "{entity} model enumeration.".format(**placeholders(descriptor))
    return traits.comment.format(**placeholders(descriptor))


def interface_base(descriptor: EntityDescriptor) -> Optional[str]:
    template = descriptor.role.traits.interface_base
    if template is None:
        return None
    return template.format(**placeholders(descriptor))


def primary_base(descriptor: EntityDescriptor) -> Optional[str]:
    """Implementation base; interface roles never have one."""
    if descriptor.is_interface:
        return None

    if descriptor.role is Role.TYPE:
        if descriptor.kind is not ElementKind.CLASS:
            return None
        base = descriptor.as_class().base
        return entity_name(base.name) if base is not None else None

    template = descriptor.role.traits.primary_base
    if template is None:
        return None
    return template.format(**placeholders(descriptor))


def base_list(descriptor: EntityDescriptor) -> List[str]:
    """Base types in declaration order: interface base first, then primary."""
    return [
        base
        for base in (interface_base(descriptor), primary_base(descriptor))
        if base
    ]


def format_base_clause(bases: List[str]) -> str:
    """
    Render a base-clause.

    Returns:
        ``": public A, public B"``, or the empty string without bases
    """
    if not bases:
        return ""
    return ": " + ", ".join(f"public {base}" for base in bases)


def namespace_name(namespace: str) -> str:
    """
    Convert a dotted model namespace into a C++ namespace.

    Example:
        "microsoft.graph" -> "Microsoft::Graph"
    """
    return "::".join(capitalize_name(segment) for segment in namespace.split(".") if segment)


def namespace_declaration(namespace: str) -> str:
    return f"namespace {namespace_name(namespace)}"


def member_name(prop: ModelProperty) -> str:
    """Keyword-safe data member name, keeping the model's casing."""
    return sanitize_name(prop.name)

