"""Model data types: members plus a JSON deserialize function."""

from typing import List

from ....core.code_block import CodeBlock
from ....core.model import ModelClass, ModelProperty
from ....core.naming import split_name
from ..includes import Dependencies, types_dependencies
from ..naming import derive_name, entity_name, member_name
from ..roles import EntityDescriptor
from ..types import BasicType, FrameworkType, LibrarySymbol, resolve_type, sequence_of
from .base import (
    RenderContext,
    Writer,
    append_failure_check,
    append_summary,
    base_dependencies,
    method_scope,
    render_class,
)

ODATA_TYPE_KEY = "@odata.type"


def member_type(prop: ModelProperty) -> str:
    """C++ type of the data member backing a property."""
    element_type = resolve_type(prop.projection_type_name)
    if prop.is_collection:
        return sequence_of(element_type)
    return element_type


def member_comment(prop: ModelProperty) -> str:
    if prop.description and prop.description.strip():
        return prop.description.strip()
    return f"The {split_name(prop.name)}."


def _members_writer(model_class: ModelClass) -> Writer:
    def write(block: CodeBlock) -> None:
        entries = [
            (member_comment(prop), f"{member_type(prop)} {member_name(prop)};")
            for prop in model_class.properties
        ]
        if model_class.base is None:
            entries.append(("Open data protocol payload.", f"{BasicType.WIDE_STRING} odata;"))
            entries.append(("Additional data.", f"{BasicType.DICTIONARY} additionalData;"))

        for index, (comment, declaration) in enumerate(entries):
            if index:
                block.append_line()
            append_summary(block, comment)
            block.append_line(declaration)

    return write


def deserialize_writer(model_class: ModelClass) -> Writer:
    """
    Deserialize function of a model type.

    The base part is converted first through an upcast, then each own
    property in declaration order; the first failing conversion returns
    ``false`` without touching the remaining properties.
    """
    name = entity_name(model_class.name)

    def write(block: CodeBlock) -> None:
        signature = (
            f"inline bool Deserialize(const {LibrarySymbol.JSON_VALUE}& jsonValue, "
            f"{name}& object) noexcept"
        )
        with method_scope(block, signature):
            if model_class.base is not None:
                base_name = entity_name(model_class.base.name)
                append_failure_check(
                    block, f"!Deserialize(jsonValue, static_cast<{base_name}&>(object))"
                )
                block.append_line()

            for prop in model_class.properties:
                value = f'jsonValue.at(L"{prop.name}")'
                target = f"object.{member_name(prop)}"
                if prop.is_collection:
                    element_type = resolve_type(prop.projection_type_name)
                    condition = f"!Deserialize<{element_type}>({value}, {target})"
                else:
                    condition = f"!Deserialize({value}, {target})"
                append_failure_check(block, condition)
                block.append_line()

            if model_class.base is None:
                append_failure_check(
                    block, f'!Deserialize(jsonValue.at(L"{ODATA_TYPE_KEY}"), object.odata)'
                )
                block.append_line()

            block.append_line("return true;")

    return write


def render(descriptor: EntityDescriptor, context: RenderContext) -> str:
    model_class = descriptor.as_class()
    return render_class(
        descriptor,
        context,
        writers=[_members_writer(model_class)],
        trailing=[deserialize_writer(model_class)],
    )


def dependencies(descriptor: EntityDescriptor, context: RenderContext) -> Dependencies:
    model_class = descriptor.as_class()

    types: List[str] = [member_type(prop) for prop in model_class.properties]
    if model_class.base is None:
        types.extend([BasicType.WIDE_STRING, BasicType.DICTIONARY])

    return (
        types_dependencies(types)
        .merge(
            base_dependencies(descriptor),
            Dependencies.of(
                system=[LibrarySymbol.JSON_VALUE], user=[FrameworkType.STRING_UTILS]
            ),
        )
        .without(derive_name(descriptor))
    )
