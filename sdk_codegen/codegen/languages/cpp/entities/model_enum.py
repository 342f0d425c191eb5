"""
Model enumerations.

``EnumCodec`` is the Python model of the code emitted for an enumeration:
the backing integer type, the member table and the string parsing rules.
The C++ text is rendered from the same member table, so both agree on
member order and on which names parse.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ....core.code_block import CodeBlock
from ....core.generator import GeneratorError
from ....core.model import ModelEnum
from ..includes import Dependencies
from ..naming import derive_name, entity_name
from ..roles import EntityDescriptor
from ..types import BasicType, FrameworkType, LibrarySymbol
from .base import (
    RenderContext,
    Writer,
    append_failure_check,
    append_header,
    method_scope,
    namespace_scope,
    new_block,
)

FLAG_SEPARATOR = ","

UNSIGNED_BACKING_TYPES: Tuple[Tuple[int, str], ...] = (
    (8, BasicType.UNSIGNED_INT8),
    (16, BasicType.UNSIGNED_INT16),
    (32, BasicType.UNSIGNED_INT32),
    (64, BasicType.UNSIGNED_INT64),
)

SIGNED_BACKING_TYPES: Tuple[Tuple[int, str], ...] = (
    (8, BasicType.SIGNED_INT8),
    (16, BasicType.SIGNED_INT16),
    (32, BasicType.SIGNED_INT32),
    (64, BasicType.SIGNED_INT64),
)


def select_backing_type(min_value: int, max_value: int) -> str:
    """
    Select the narrowest integer type holding ``[min_value, max_value]``.

    Unsigned types are preferred whenever the range has no negative value.

    Raises:
        GeneratorError: If no 64-bit type can hold the range
    """
    if min_value >= 0:
        for bits, type_name in UNSIGNED_BACKING_TYPES:
            if max_value < 2**bits:
                return type_name
    else:
        for bits, type_name in SIGNED_BACKING_TYPES:
            lower, upper = -(2 ** (bits - 1)), 2 ** (bits - 1) - 1
            if lower <= min_value and max_value <= upper:
                return type_name

    raise GeneratorError(f"Enumeration range [{min_value}, {max_value}] exceeds 64 bits")


@dataclass(frozen=True)
class EnumCodecMember:
    name: str
    identifier: str
    value: Optional[int] = None
    number: int = 0

    @property
    def effective_value(self) -> int:
        """Explicit value, or 0 when the model leaves it unspecified."""
        return self.value if self.value is not None else 0


def _number_members(model_enum: ModelEnum) -> Tuple[EnumCodecMember, ...]:
    # Unvalued members follow the previous member, starting from 0.
    members = []
    next_number = 0
    for member in model_enum.members:
        number = member.value if member.value is not None else next_number
        members.append(
            EnumCodecMember(
                name=member.name,
                identifier=entity_name(member.name),
                value=member.value,
                number=number,
            )
        )
        next_number = number + 1
    return tuple(members)


class EnumCodec:
    """Backing type, members and parsing rules of a generated enumeration."""

    def __init__(self, model_enum: ModelEnum):
        self.name = entity_name(model_enum.name)
        self.is_flags = model_enum.is_flags
        self.members: Tuple[EnumCodecMember, ...] = _number_members(model_enum)

    @property
    def min_value(self) -> int:
        return min((member.effective_value for member in self.members), default=0)

    @property
    def max_value(self) -> int:
        return max((member.effective_value for member in self.members), default=0)

    @property
    def backing_type(self) -> str:
        return select_backing_type(self.min_value, self.max_value)

    def parse_value(self, token: str) -> Optional[EnumCodecMember]:
        """
        Find the member whose original name equals the trimmed token.

        Matching is exact and case-sensitive; the first match in member
        order wins.
        """
        trimmed = token.strip()
        for member in self.members:
            if member.name == trimmed:
                return member
        return None

    def deserialize(self, text: str) -> Optional[int]:
        """
        Convert a serialized value to its integer representation.

        Flag enumerations accept a comma separated list and combine the
        members with bitwise OR. Returns None as soon as one token does
        not name a member.
        """
        if not self.is_flags:
            member = self.parse_value(text)
            return member.number if member is not None else None

        result = 0
        tokens = text.split(FLAG_SEPARATOR) if text.strip() else []
        for token in tokens:
            member = self.parse_value(token)
            if member is None:
                return None
            result |= member.number
        return result


def _members_lines(codec: EnumCodec) -> List[str]:
    lines = []
    for index, member in enumerate(codec.members):
        value = f" = {member.value}" if member.value is not None else ""
        separator = "," if index < len(codec.members) - 1 else ""
        lines.append(f"{member.identifier}{value}{separator}")
    return lines


def _operator_writers(codec: EnumCodec) -> List[Writer]:
    name = codec.name
    underlying = f"{LibrarySymbol.UNDERLYING_TYPE}<{name}>"

    def combine(operator: str, lhs: str = "lhs") -> str:
        return (
            f"static_cast<{name}>(static_cast<{underlying}>({lhs}) {operator} "
            f"static_cast<{underlying}>(rhs))"
        )

    def bitwise_or(block: CodeBlock) -> None:
        with method_scope(
            block, f"inline {name} operator|(const {name} lhs, const {name} rhs) noexcept"
        ):
            block.append_line(f"return {combine('|')};")

    def bitwise_and(block: CodeBlock) -> None:
        with method_scope(
            block, f"inline {name} operator&(const {name} lhs, const {name} rhs) noexcept"
        ):
            block.append_line(f"return {combine('&')};")

    def bitwise_or_assignment(block: CodeBlock) -> None:
        with method_scope(
            block, f"inline {name}& operator|=({name}& lhs, const {name} rhs) noexcept"
        ):
            block.append_line(f"lhs = {combine('|')};")
            block.append_line()
            block.append_line("return lhs;")

    return [bitwise_or, bitwise_and, bitwise_or_assignment]


def _parse_value_writer(codec: EnumCodec) -> Writer:
    def write(block: CodeBlock) -> None:
        signature = (
            f"inline bool ParseEnumValue(const {BasicType.WIDE_STRING_VIEW} value, "
            f"{codec.name}& object) noexcept"
        )
        with method_scope(block, signature):
            block.append_line("const auto trimmedValue{ Utils::TrimString(value) };")
            block.append_line()
            for index, member in enumerate(codec.members):
                keyword = "if" if index == 0 else "else if"
                block.append_line(f'{keyword} (trimmedValue == L"{member.name}")')
                with block.block():
                    block.append_line(f"object = {codec.name}::{member.identifier};")
                    block.append_line()
                    block.append_line("return true;")
            if codec.members:
                block.append_line()
            block.append_line("return false;")

    return write


def _deserialize_writer(codec: EnumCodec) -> Writer:
    name = codec.name

    def write(block: CodeBlock) -> None:
        signature = (
            f"inline bool Deserialize(const {LibrarySymbol.JSON_VALUE}& jsonValue, "
            f"{name}& object) noexcept"
        )
        with method_scope(block, signature):
            if not codec.is_flags:
                block.append_line("const auto enumValue{ jsonValue.as_string() };")
                block.append_line()
                block.append_line("return ParseEnumValue(enumValue, object);")
                return

            block.append_line(f"object = static_cast<{name}>(0);")
            block.append_line(f"{name} enumObject{{ static_cast<{name}>(0) }};")
            block.append_line()
            block.append_line("const auto enumValues{ Utils::SplitLine(jsonValue.as_string()) };")
            block.append_line("for (const auto& enumValue : enumValues)")
            with block.block():
                append_failure_check(block, "!ParseEnumValue(enumValue, enumObject)")
                block.append_line()
                block.append_line("object |= enumObject;")
            block.append_line()
            block.append_line("return true;")

    return write


def render(descriptor: EntityDescriptor, context: RenderContext) -> str:
    codec = EnumCodec(descriptor.as_enum())

    block = new_block(context)
    with namespace_scope(block, descriptor, context):
        append_header(
            block, descriptor, signature=f"enum class {codec.name} : {codec.backing_type}"
        )
        with block.block("};"):
            for index, line in enumerate(_members_lines(codec)):
                if index:
                    block.append_line()
                block.append_line(line)

        trailing: List[Writer] = []
        if codec.is_flags:
            trailing.extend(_operator_writers(codec))
        trailing.extend([_parse_value_writer(codec), _deserialize_writer(codec)])
        for writer in trailing:
            block.append_line()
            writer(block)

    return str(block)


def dependencies(descriptor: EntityDescriptor, context: RenderContext) -> Dependencies:
    codec = EnumCodec(descriptor.as_enum())

    system = [
        codec.backing_type,
        BasicType.WIDE_STRING_VIEW,
        LibrarySymbol.JSON_VALUE,
    ]
    if codec.is_flags:
        system.append(LibrarySymbol.UNDERLYING_TYPE)

    return Dependencies.of(system=system, user=[FrameworkType.STRING_UTILS]).without(
        derive_name(descriptor)
    )
