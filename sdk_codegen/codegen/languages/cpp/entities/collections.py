"""
Entities generated for collection-valued navigation properties.

All of them share the compound ``{Owner}{Property}Collection`` name and
are typed by the property's element type.
"""

from typing import List

from ....core.code_block import CodeBlock
from ..includes import Dependencies, split_type_refs
from ..naming import derive_name
from ..roles import EntityDescriptor
from ..types import BasicType, FrameworkType, LibrarySymbol, resolve_type, sequence_of
from .base import (
    RenderContext,
    Writer,
    append_failure_check,
    append_summary,
    base_dependencies,
    constructor_writer,
    destructor_writer,
    lifetime_dependencies,
    method_scope,
    render_class,
)
from .builders import builder_dependencies, builder_writers

VALUE_KEY = "value"
NEXT_LINK_KEY = "@odata.nextLink"


def element_type(descriptor: EntityDescriptor) -> str:
    return resolve_type(descriptor.as_property().projection_type_name)


def element_dependencies(descriptor: EntityDescriptor) -> Dependencies:
    return split_type_refs(element_type(descriptor))


# Collection requests


def _request_writers(descriptor: EntityDescriptor, interface: bool) -> List[Writer]:
    writers: List[Writer] = []
    if not interface:
        writers.append(constructor_writer(descriptor))
    writers.append(destructor_writer(descriptor))
    return writers


def render_request_interface(descriptor: EntityDescriptor, context: RenderContext) -> str:
    return render_class(descriptor, context, _request_writers(descriptor, interface=True))


def render_request(descriptor: EntityDescriptor, context: RenderContext) -> str:
    return render_class(descriptor, context, _request_writers(descriptor, interface=False))


def request_dependencies(descriptor: EntityDescriptor, context: RenderContext) -> Dependencies:
    return (
        element_dependencies(descriptor)
        .merge(base_dependencies(descriptor), lifetime_dependencies(descriptor))
        .without(derive_name(descriptor))
    )


# Collection request builders


def render_request_builder_interface(
    descriptor: EntityDescriptor, context: RenderContext
) -> str:
    return render_class(
        descriptor, context, builder_writers(descriptor, interface=True, collection=True)
    )


def render_request_builder(descriptor: EntityDescriptor, context: RenderContext) -> str:
    return render_class(
        descriptor, context, builder_writers(descriptor, interface=False, collection=True)
    )


def request_builder_dependencies(
    descriptor: EntityDescriptor, context: RenderContext
) -> Dependencies:
    return builder_dependencies(descriptor, interface=descriptor.is_interface, collection=True)


# Collection pages


def _page_writers(descriptor: EntityDescriptor, interface: bool) -> List[Writer]:
    if interface:
        return [destructor_writer(descriptor)]

    page_base = f"CollectionPage<{element_type(descriptor)}>"

    def inherit_constructors(block: CodeBlock) -> None:
        block.append_line(f"using {page_base}::CollectionPage;")

    return [inherit_constructors]


def render_page_interface(descriptor: EntityDescriptor, context: RenderContext) -> str:
    return render_class(descriptor, context, _page_writers(descriptor, interface=True))


def render_page(descriptor: EntityDescriptor, context: RenderContext) -> str:
    return render_class(descriptor, context, _page_writers(descriptor, interface=False))


def page_dependencies(descriptor: EntityDescriptor, context: RenderContext) -> Dependencies:
    return (
        element_dependencies(descriptor)
        .merge(base_dependencies(descriptor))
        .without(derive_name(descriptor))
    )


# Collection responses


def _response_members_writer(descriptor: EntityDescriptor) -> Writer:
    value_type = sequence_of(element_type(descriptor))

    def write(block: CodeBlock) -> None:
        append_summary(block, "The collection of entities in the page.")
        block.append_line(f"{value_type} value;")
        block.append_line()
        append_summary(block, "The link to the next page, empty for the last page.")
        block.append_line(f"{BasicType.WIDE_STRING} nextLink;")

    return write


def _response_deserialize_writer(descriptor: EntityDescriptor) -> Writer:
    name = derive_name(descriptor)
    item_type = element_type(descriptor)

    def write(block: CodeBlock) -> None:
        signature = (
            f"inline bool Deserialize(const {LibrarySymbol.JSON_VALUE}& jsonValue, "
            f"{name}& object) noexcept"
        )
        with method_scope(block, signature):
            append_failure_check(
                block,
                f'!Deserialize<{item_type}>(jsonValue.at(L"{VALUE_KEY}"), object.value)',
            )
            block.append_line()
            # The last page carries no next link
            append_failure_check(
                block,
                f'jsonValue.has_field(L"{NEXT_LINK_KEY}") && '
                f'!Deserialize(jsonValue.at(L"{NEXT_LINK_KEY}"), object.nextLink)',
            )
            block.append_line()
            block.append_line("return true;")

    return write


def render_response(descriptor: EntityDescriptor, context: RenderContext) -> str:
    return render_class(
        descriptor,
        context,
        writers=[_response_members_writer(descriptor)],
        trailing=[_response_deserialize_writer(descriptor)],
    )


def response_dependencies(descriptor: EntityDescriptor, context: RenderContext) -> Dependencies:
    return (
        split_type_refs(sequence_of(element_type(descriptor)))
        .merge(
            Dependencies.of(
                system=[BasicType.WIDE_STRING, LibrarySymbol.JSON_VALUE],
                user=[FrameworkType.STRING_UTILS],
            )
        )
        .without(derive_name(descriptor))
    )
