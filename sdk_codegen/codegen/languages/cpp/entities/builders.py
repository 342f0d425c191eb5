"""
Request builders.

A builder holds a resource path and a client. It creates the request for
its own resource and, for every navigation property, a builder for the
linked resource one path segment further down.
"""

from typing import Iterable, List

from ....core.code_block import CodeBlock
from ....core.model import ModelProperty
from ..includes import Dependencies
from ..naming import derive_name, entity_name, linked_entity_name
from ..roles import EntityDescriptor, Role
from ..types import BasicType, FrameworkType, LibrarySymbol
from .base import (
    RenderContext,
    Writer,
    append_prototype,
    base_dependencies,
    constructor_writer,
    destructor_writer,
    lifetime_dependencies,
    method_scope,
    render_class,
)


def builder_name(linked_name: str, interface: bool) -> str:
    prefix = "I" if interface else ""
    return f"{prefix}{linked_name}RequestBuilder"


def navigation_writer(prop: ModelProperty, interface: bool, for_client: bool = False) -> Writer:
    """
    Accessor returning the builder of the entity a navigation property leads to.

    Args:
        prop: Navigation property
        interface: Emit a pure virtual prototype instead of the body
        for_client: The accessor lives on the client, which is its own
            transport context
    """
    linked_name = linked_entity_name(prop, for_client=for_client)
    signature = (
        f"{LibrarySymbol.UNIQUE_PTR}<{builder_name(linked_name, interface=True)}> "
        f"{entity_name(prop.name)}() noexcept"
    )

    def write(block: CodeBlock) -> None:
        if interface:
            append_prototype(block, signature)
            return

        client = "*this" if for_client else "GetBaseClient()"
        with method_scope(block, f"{signature} override"):
            block.append_line(
                f'const {BasicType.WIDE_STRING} requestUrl{{ GetBaseUrl() + L"/{prop.name}" }};'
            )
            block.append_line(f"{FrameworkType.BASE_CLIENT_INTERFACE}& baseClient{{ {client} }};")
            block.append_line()
            block.append_line(
                f"return std::make_unique<{builder_name(linked_name, interface=False)}>"
                f"(requestUrl, baseClient);"
            )

    return write


def navigation_dependencies(
    props: Iterable[ModelProperty], interface: bool, for_client: bool = False
) -> Dependencies:
    user = set()
    for prop in props:
        linked_name = linked_entity_name(prop, for_client=for_client)
        user.add(builder_name(linked_name, interface=True))
        if not interface:
            user.add(builder_name(linked_name, interface=False))

    system = [LibrarySymbol.UNIQUE_PTR]
    if not interface and user:
        system.append(BasicType.WIDE_STRING)
    return Dependencies.of(system=system, user=user)


def create_request_writer(request_interface: str, request: str, interface: bool) -> Writer:
    """Accessor creating the request for the builder's own resource."""
    signature = f"{LibrarySymbol.UNIQUE_PTR}<{request_interface}> CreateRequest() noexcept"

    def write(block: CodeBlock) -> None:
        if interface:
            append_prototype(block, signature)
            return
        with method_scope(block, f"{signature} override"):
            block.append_line(f"const {BasicType.WIDE_STRING}& baseUrl{{ GetBaseUrl() }};")
            block.append_line(
                f"{FrameworkType.BASE_CLIENT_INTERFACE}& baseClient{{ GetBaseClient() }};"
            )
            block.append_line()
            block.append_line(f"return std::make_unique<{request}>(baseUrl, baseClient);")

    return write


def request_names(descriptor: EntityDescriptor, collection: bool) -> List[str]:
    """Interface and concrete request names for a builder's element."""
    if collection:
        roles = (Role.COLLECTION_REQUEST_INTERFACE, Role.COLLECTION_REQUEST)
    else:
        roles = (Role.REQUEST_INTERFACE, Role.REQUEST)
    return [derive_name(EntityDescriptor(descriptor.element, role)) for role in roles]


def builder_writers(
    descriptor: EntityDescriptor,
    interface: bool,
    navigation: Iterable[ModelProperty] = (),
    collection: bool = False,
) -> List[Writer]:
    """Lifetime, ``CreateRequest`` and navigation writers of a builder."""
    request_interface, request = request_names(descriptor, collection)

    writers: List[Writer] = []
    if not interface:
        writers.append(constructor_writer(descriptor))
    writers.append(destructor_writer(descriptor))
    writers.append(create_request_writer(request_interface, request, interface))
    writers.extend(navigation_writer(prop, interface) for prop in navigation)
    return writers


def builder_dependencies(
    descriptor: EntityDescriptor,
    interface: bool,
    navigation: Iterable[ModelProperty] = (),
    collection: bool = False,
) -> Dependencies:
    request_interface, request = request_names(descriptor, collection)
    user = [request_interface] if interface else [request_interface, request]
    if not interface:
        user.append(FrameworkType.BASE_CLIENT_INTERFACE)

    return (
        Dependencies.of(system=[LibrarySymbol.UNIQUE_PTR], user=user)
        .merge(
            navigation_dependencies(navigation, interface),
            base_dependencies(descriptor),
            lifetime_dependencies(descriptor),
        )
        .without(derive_name(descriptor))
    )


def render_interface(descriptor: EntityDescriptor, context: RenderContext) -> str:
    navigation = descriptor.as_class().navigation_properties()
    return render_class(
        descriptor, context, builder_writers(descriptor, interface=True, navigation=navigation)
    )


def render_implementation(descriptor: EntityDescriptor, context: RenderContext) -> str:
    navigation = descriptor.as_class().navigation_properties()
    return render_class(
        descriptor, context, builder_writers(descriptor, interface=False, navigation=navigation)
    )


def dependencies(descriptor: EntityDescriptor, context: RenderContext) -> Dependencies:
    return builder_dependencies(
        descriptor,
        interface=descriptor.is_interface,
        navigation=descriptor.as_class().navigation_properties(),
    )
