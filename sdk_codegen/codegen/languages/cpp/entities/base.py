"""
Shared building blocks of all role renderers.

A renderer is a pair of pure functions over an ``EntityDescriptor``: one
producing the declaration text, one producing the ``Dependencies``. The
helpers here emit the parts every entity has in common: the namespace
scope, the header comment, the signature with its base-clause and the
class scope.
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, NamedTuple, Optional, Sequence

from ....core.code_block import CodeBlock
from ....core.config import DEFAULT_NAMESPACE, DEFAULT_SERVICE_URL, GeneratorConfig
from ..includes import Dependencies, render_include_block, split_type_refs
from ..naming import (
    base_list,
    derive_name,
    format_base_clause,
    header_comment,
    namespace_declaration,
)
from ..roles import ElementKind, EntityDescriptor, Role


@dataclass(frozen=True)
class RenderContext:
    """Settings shared by all entities of one generation run."""

    namespace: str = DEFAULT_NAMESPACE
    service_url: str = DEFAULT_SERVICE_URL
    header_extension: str = ".h"
    indent: str = "\t"

    @classmethod
    def from_config(cls, config: GeneratorConfig, namespace: str = "") -> "RenderContext":
        return cls(
            namespace=namespace or config.namespace,
            service_url=config.service_url,
            header_extension=config.header_extension,
            indent=config.indent,
        )


@dataclass(frozen=True)
class EntityOutput:
    """Generated text of one entity."""

    name: str
    role: Role
    system_includes: List[str] = field(default_factory=list)
    user_includes: List[str] = field(default_factory=list)
    declaration: str = ""
    header_extension: str = ".h"

    @property
    def file_name(self) -> str:
        return f"{self.name}{self.header_extension}"

    @property
    def include_block(self) -> str:
        return render_include_block(self.system_includes, self.user_includes)


class RoleRenderer(NamedTuple):
    """Render and dependency functions of one role."""

    render: Callable[[EntityDescriptor, RenderContext], str]
    dependencies: Callable[[EntityDescriptor, RenderContext], Dependencies]


Writer = Callable[[CodeBlock], None]


def element_namespace(descriptor: EntityDescriptor, context: RenderContext) -> str:
    element = descriptor.element
    if descriptor.kind is ElementKind.PROPERTY:
        element = descriptor.as_property().owner
    return element.namespace or context.namespace


def new_block(context: RenderContext) -> CodeBlock:
    return CodeBlock(indent=context.indent)


def signature_line(descriptor: EntityDescriptor) -> str:
    """Type keyword and name: ``struct`` for interfaces, ``final`` for concrete roles."""
    name = derive_name(descriptor)
    if descriptor.is_interface:
        return f"struct {name}"
    # Model types stay open for derived model types
    if descriptor.role is Role.TYPE:
        return f"class {name}"
    return f"class {name} final"


def base_dependencies(descriptor: EntityDescriptor) -> Dependencies:
    return Dependencies().merge(*(split_type_refs(base) for base in base_list(descriptor)))


def append_summary(block: CodeBlock, text: str) -> None:
    block.append_line("/// <summary>")
    block.append_line(f"/// {text}")
    block.append_line("/// </summary>")


def append_header(
    block: CodeBlock, descriptor: EntityDescriptor, signature: Optional[str] = None
) -> None:
    """Write the header comment, the signature and the base-clause, if any."""
    append_summary(block, header_comment(descriptor))
    block.append_line(signature or signature_line(descriptor))
    base_clause = format_base_clause(base_list(descriptor))
    if base_clause:
        block.append_shifted(base_clause)


@contextmanager
def namespace_scope(
    block: CodeBlock, descriptor: EntityDescriptor, context: RenderContext
) -> Iterator[CodeBlock]:
    block.append_line(namespace_declaration(element_namespace(descriptor, context)))
    with block.block():
        yield block


@contextmanager
def class_scope(block: CodeBlock, descriptor: EntityDescriptor) -> Iterator[CodeBlock]:
    """Header plus braced class body opened with the ``public:`` label."""
    append_header(block, descriptor)
    with block.block("};"):
        block.append_label("public:")
        yield block


def append_separated(block: CodeBlock, writers: Sequence[Writer]) -> None:
    """Call each writer in turn with a blank line between their output."""
    for index, writer in enumerate(writers):
        if index:
            block.append_line()
        writer(block)


@contextmanager
def method_scope(block: CodeBlock, signature: str) -> Iterator[CodeBlock]:
    block.append_line(signature)
    with block.block():
        yield block


def append_prototype(block: CodeBlock, signature: str) -> None:
    """Pure virtual declaration of an interface method."""
    block.append_line(f"virtual {signature} = 0;")


def append_failure_check(block: CodeBlock, condition: str) -> None:
    """``if (condition) { return false; }`` short-circuit."""
    block.append_line(f"if ({condition})")
    with block.block():
        block.append_line("return false;")


def constructor_writer(descriptor: EntityDescriptor) -> Writer:
    """Constructor forwarding the resource URL and client to the primary base."""
    name = derive_name(descriptor)
    primary = base_list(descriptor)[-1]

    def write(block: CodeBlock) -> None:
        block.append_line(
            f"explicit {name}(const std::wstring& requestUrl, IBaseClient& baseClient) noexcept"
        )
        block.append_shifted(f": {primary}{{ requestUrl, baseClient }}")
        with block.block():
            pass

    return write


def destructor_writer(descriptor: EntityDescriptor) -> Writer:
    name = derive_name(descriptor)

    def write(block: CodeBlock) -> None:
        if descriptor.is_interface:
            block.append_line(f"virtual ~{name}() noexcept = default;")
            return
        block.append_line(f"~{name}() noexcept override")
        with block.block():
            pass

    return write


def lifetime_dependencies(descriptor: EntityDescriptor) -> Dependencies:
    """What the constructor and destructor reference."""
    if descriptor.is_interface:
        return Dependencies()
    return Dependencies.of(system=["std::wstring"], user=["IBaseClient"])


def render_class(
    descriptor: EntityDescriptor,
    context: RenderContext,
    writers: Sequence[Writer],
    trailing: Sequence[Writer] = (),
) -> str:
    """
    Render a complete class declaration inside its namespace.

    Args:
        descriptor: Entity being rendered
        context: Generation settings
        writers: Member writers emitted inside the class body
        trailing: Free function writers emitted after the class

    Returns:
        The declaration text
    """
    block = new_block(context)
    with namespace_scope(block, descriptor, context):
        with class_scope(block, descriptor):
            append_separated(block, writers)
        for writer in trailing:
            block.append_line()
            writer(block)
    return str(block)
