"""
Roles of generated C++ entities.

A generated entity is described by a single ``EntityDescriptor``: the model
element it is derived from plus its ``Role``. Everything that differs
between roles (name suffix, interface flag, framework bases, header
comment) lives in the ``ROLE_TRAITS`` table rather than in subclasses.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

from ...core.generator import RoleMismatchError
from ...core.model import ModelClass, ModelEnum, ModelProperty

ModelElement = Union[ModelClass, ModelEnum, ModelProperty]


class ElementKind(Enum):
    """Kind of model element a role is derived from."""

    CLASS = "class"
    ENUM = "enum"
    PROPERTY = "property"


class Role(Enum):
    """Kinds of generated artifacts."""

    TYPE = "type"
    REQUEST = "request"
    REQUEST_INTERFACE = "request_interface"
    REQUEST_BUILDER = "request_builder"
    REQUEST_BUILDER_INTERFACE = "request_builder_interface"
    COLLECTION_REQUEST = "collection_request"
    COLLECTION_REQUEST_INTERFACE = "collection_request_interface"
    COLLECTION_REQUEST_BUILDER = "collection_request_builder"
    COLLECTION_REQUEST_BUILDER_INTERFACE = "collection_request_builder_interface"
    COLLECTION_PAGE = "collection_page"
    COLLECTION_PAGE_INTERFACE = "collection_page_interface"
    COLLECTION_RESPONSE = "collection_response"
    CLIENT = "client"
    CLIENT_INTERFACE = "client_interface"

    @property
    def traits(self) -> "RoleTraits":
        return ROLE_TRAITS[self]

    @property
    def is_interface(self) -> bool:
        return self.traits.interface

    @property
    def is_collection(self) -> bool:
        return self.traits.collection


@dataclass(frozen=True)
class RoleTraits:
    """
    Static description of a role.

    Base and comment templates are ``str.format`` patterns over the
    placeholders ``entity`` (capitalized element name, or the element type
    for collection roles), ``owner`` (capitalized owning class name),
    ``collection`` (``{owner}{property}Collection``) and ``element``
    (resolved C++ element type).
    """

    suffix: str
    interface: bool
    collection: bool
    comment: str
    interface_base: Optional[str] = None
    primary_base: Optional[str] = None


ROLE_TRAITS: Mapping[Role, RoleTraits] = MappingProxyType(
    {
        # Type bases come from the model, not from this table
        Role.TYPE: RoleTraits(
            suffix="",
            interface=False,
            collection=False,
            comment="{entity} model type.",
        ),
        Role.REQUEST: RoleTraits(
            suffix="Request",
            interface=False,
            collection=False,
            comment="A request for {entity} entity.",
            interface_base="I{entity}Request",
            primary_base="BaseRequest",
        ),
        Role.REQUEST_INTERFACE: RoleTraits(
            suffix="Request",
            interface=True,
            collection=False,
            comment="An interface of a request for {entity} entity.",
            interface_base="IBaseRequest",
        ),
        Role.REQUEST_BUILDER: RoleTraits(
            suffix="RequestBuilder",
            interface=False,
            collection=False,
            comment="A builder to create a request for {entity} entity.",
            interface_base="I{entity}RequestBuilder",
            primary_base="BaseRequestBuilder",
        ),
        Role.REQUEST_BUILDER_INTERFACE: RoleTraits(
            suffix="RequestBuilder",
            interface=True,
            collection=False,
            comment="An interface of a builder to create a request for {entity} entity.",
            interface_base="IBaseRequestBuilder",
        ),
        Role.COLLECTION_REQUEST: RoleTraits(
            suffix="Request",
            interface=False,
            collection=True,
            comment="A request for {entity} collection for {owner} entity.",
            interface_base="I{collection}Request",
            primary_base="BaseRequest",
        ),
        Role.COLLECTION_REQUEST_INTERFACE: RoleTraits(
            suffix="Request",
            interface=True,
            collection=True,
            comment="An interface of a request for {entity} collection for {owner} entity.",
            interface_base="IBaseRequest",
        ),
        Role.COLLECTION_REQUEST_BUILDER: RoleTraits(
            suffix="RequestBuilder",
            interface=False,
            collection=True,
            comment="A request builder for {entity} collection for {owner} entity.",
            interface_base="I{collection}RequestBuilder",
            primary_base="BaseRequestBuilder",
        ),
        Role.COLLECTION_REQUEST_BUILDER_INTERFACE: RoleTraits(
            suffix="RequestBuilder",
            interface=True,
            collection=True,
            comment=(
                "An interface of a request builder for {entity} collection "
                "for {owner} entity."
            ),
            interface_base="IBaseRequestBuilder",
        ),
        Role.COLLECTION_PAGE: RoleTraits(
            suffix="Page",
            interface=False,
            collection=True,
            comment="A page of {entity} collection for {owner} entity.",
            interface_base="I{collection}Page",
            primary_base="CollectionPage<{element}>",
        ),
        Role.COLLECTION_PAGE_INTERFACE: RoleTraits(
            suffix="Page",
            interface=True,
            collection=True,
            comment="An interface of a page of {entity} collection for {owner} entity.",
            interface_base="ICollectionPage<{element}>",
        ),
        Role.COLLECTION_RESPONSE: RoleTraits(
            suffix="Response",
            interface=False,
            collection=True,
            comment="A response for {entity} collection for {owner} entity.",
        ),
        Role.CLIENT: RoleTraits(
            suffix="",
            interface=False,
            collection=False,
            comment="A service client for {entity} entity set.",
            interface_base="I{entity}",
            primary_base="BaseClient",
        ),
        Role.CLIENT_INTERFACE: RoleTraits(
            suffix="",
            interface=True,
            collection=False,
            comment="An interface of a service client for {entity} entity set.",
            interface_base="IBaseClient",
        ),
    }
)

# Roles generated for every model class
CLASS_ROLES: Tuple[Role, ...] = (
    Role.TYPE,
    Role.REQUEST_INTERFACE,
    Role.REQUEST,
    Role.REQUEST_BUILDER_INTERFACE,
    Role.REQUEST_BUILDER,
)

# Roles generated for every collection-valued navigation property
COLLECTION_ROLES: Tuple[Role, ...] = (
    Role.COLLECTION_REQUEST_INTERFACE,
    Role.COLLECTION_REQUEST,
    Role.COLLECTION_REQUEST_BUILDER_INTERFACE,
    Role.COLLECTION_REQUEST_BUILDER,
    Role.COLLECTION_PAGE_INTERFACE,
    Role.COLLECTION_PAGE,
    Role.COLLECTION_RESPONSE,
)

CLIENT_ROLES: Tuple[Role, ...] = (Role.CLIENT_INTERFACE, Role.CLIENT)


@dataclass(frozen=True)
class EntityDescriptor:
    """
    A model element bound to the role it is generated for.

    Attributes:
        element: Class, enum or (for collection roles) navigation property
        role: Generated artifact kind
        linked: Top-level linked entities; only used by client roles
    """

    element: ModelElement
    role: Role
    linked: Tuple[ModelProperty, ...] = ()

    @property
    def kind(self) -> ElementKind:
        if isinstance(self.element, ModelEnum):
            return ElementKind.ENUM
        if isinstance(self.element, ModelProperty):
            return ElementKind.PROPERTY
        return ElementKind.CLASS

    @property
    def is_interface(self) -> bool:
        return self.role.is_interface

    def as_class(self) -> ModelClass:
        """Class view of the element; raises if the element is not a class."""
        if not isinstance(self.element, ModelClass):
            raise RoleMismatchError(
                f"{self.role.value} entity for '{self.element.name}' is not class based"
            )
        return self.element

    def as_enum(self) -> ModelEnum:
        """Enum view of the element; raises if the element is not an enum."""
        if not isinstance(self.element, ModelEnum):
            raise RoleMismatchError(
                f"{self.role.value} entity for '{self.element.name}' is not enum based"
            )
        return self.element

    def as_property(self) -> ModelProperty:
        """Property view for collection roles.

        Raises:
            RoleMismatchError: If the element is not a collection-valued
                property owned by a class.
        """
        prop = self.element
        if not isinstance(prop, ModelProperty):
            raise RoleMismatchError(
                f"{self.role.value} entity for '{prop.name}' is not property based"
            )
        if not prop.is_collection:
            raise RoleMismatchError(
                f"{self.role.value} entity requires a collection property, "
                f"'{prop.name}' is single-valued"
            )
        if prop.owner is None:
            raise RoleMismatchError(f"Property '{prop.name}' has no owning class")
        return prop

    def linked_properties(self) -> Tuple[ModelProperty, ...]:
        """Navigation properties the entity exposes accessors for."""
        if self.linked:
            return self.linked
        return tuple(self.as_class().navigation_properties())
