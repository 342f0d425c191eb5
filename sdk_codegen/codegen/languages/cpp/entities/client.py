"""Service client: entry point exposing builders for the top-level entities."""

from typing import List

from ....core.code_block import CodeBlock
from ..includes import Dependencies
from ..naming import base_list, derive_name
from ..roles import EntityDescriptor
from ..types import BasicType, FrameworkType, LibrarySymbol
from .base import (
    RenderContext,
    Writer,
    base_dependencies,
    destructor_writer,
    render_class,
)
from .builders import navigation_dependencies, navigation_writer

AUTHENTICATION_PARAMETER = (
    f"const {LibrarySymbol.SHARED_PTR}<{FrameworkType.AUTHENTICATION_PROVIDER}>& "
    f"authenticationProvider"
)
HTTP_PROVIDER_PARAMETER = (
    f"const {LibrarySymbol.SHARED_PTR}<{FrameworkType.HTTP_PROVIDER}>& httpProvider = nullptr"
)
HTTP_CLIENT_TYPE = "HttpClient"


def _constructor(name: str, parameters: List[str], initializer: str) -> Writer:
    def write(block: CodeBlock) -> None:
        block.append_line(f"explicit {name}({', '.join(parameters)}) noexcept")
        block.append_shifted(initializer)
        with block.block():
            pass

    return write


def constructor_writers(descriptor: EntityDescriptor, service_url: str) -> List[Writer]:
    """
    Constructors of the concrete client.

    Three variants: default service URL with an authentication provider,
    custom URL with an authentication provider, and a preconfigured
    transport client.
    """
    name = derive_name(descriptor)
    primary = base_list(descriptor)[-1]
    default_url = f'L"{service_url}"'

    return [
        _constructor(
            name,
            [AUTHENTICATION_PARAMETER, HTTP_PROVIDER_PARAMETER],
            f": {primary}{{ {default_url}, authenticationProvider, httpProvider }}",
        ),
        _constructor(
            name,
            [
                f"const {BasicType.WIDE_STRING}& baseUrl",
                AUTHENTICATION_PARAMETER,
                HTTP_PROVIDER_PARAMETER,
            ],
            f": {primary}{{ baseUrl, authenticationProvider, httpProvider }}",
        ),
        _constructor(
            name,
            [f"const {LibrarySymbol.SHARED_PTR}<{HTTP_CLIENT_TYPE}>& httpClient"],
            f": {primary}{{ {default_url}, httpClient }}",
        ),
    ]


def _navigation_writers(descriptor: EntityDescriptor, interface: bool) -> List[Writer]:
    return [
        navigation_writer(prop, interface, for_client=True)
        for prop in descriptor.linked_properties()
    ]


def render_interface(descriptor: EntityDescriptor, context: RenderContext) -> str:
    writers = [destructor_writer(descriptor)]
    writers.extend(_navigation_writers(descriptor, interface=True))
    return render_class(descriptor, context, writers)


def render_implementation(descriptor: EntityDescriptor, context: RenderContext) -> str:
    writers = constructor_writers(descriptor, context.service_url)
    writers.extend(_navigation_writers(descriptor, interface=False))
    return render_class(descriptor, context, writers)


def dependencies(descriptor: EntityDescriptor, context: RenderContext) -> Dependencies:
    interface = descriptor.is_interface
    own = Dependencies()
    if not interface:
        own = Dependencies.of(
            system=[LibrarySymbol.SHARED_PTR, BasicType.WIDE_STRING],
            user=[
                FrameworkType.AUTHENTICATION_PROVIDER,
                FrameworkType.HTTP_PROVIDER,
                HTTP_CLIENT_TYPE,
            ],
        )

    return (
        navigation_dependencies(descriptor.linked_properties(), interface, for_client=True)
        .merge(base_dependencies(descriptor), own)
        .without(derive_name(descriptor))
    )
