"""Request entities exposing the asynchronous CRUD operations of a model class."""

from typing import List, NamedTuple

from ....core.code_block import CodeBlock
from ..includes import Dependencies
from ..naming import derive_name, entity_name
from ..roles import EntityDescriptor
from ..types import LibrarySymbol
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

TOKEN_PARAMETER = f"const {LibrarySymbol.CANCELLATION_TOKEN}& token"


class Verb(NamedTuple):
    """A CRUD operation and the HTTP method it is sent with."""

    name: str
    http_method: str
    takes_entity: bool
    returns_entity: bool


VERBS = (
    Verb("Get", "GET", takes_entity=False, returns_entity=True),
    Verb("Create", "POST", takes_entity=True, returns_entity=True),
    Verb("Update", "PATCH", takes_entity=True, returns_entity=True),
    Verb("Delete", "DELETE", takes_entity=True, returns_entity=False),
)


def verb_signature(verb: Verb, entity: str) -> str:
    result = entity if verb.returns_entity else "void"
    parameters = [TOKEN_PARAMETER]
    if verb.takes_entity:
        parameters.insert(0, f"const {entity}& entity")
    return (
        f"{LibrarySymbol.FUTURE}<{result}> {verb.name}Async({', '.join(parameters)}) noexcept"
    )


def _verb_body(block: CodeBlock, verb: Verb, entity: str) -> None:
    block.append_line(f"constexpr auto method{{ {LibrarySymbol.HTTP_METHODS}::{verb.http_method} }};")
    block.append_line()

    arguments = "entity, method, token" if verb.takes_entity else "method, token"
    send = f"co_await SendAsync<{entity}>({arguments})"
    if not verb.returns_entity:
        block.append_line(f"{send};")
        return

    block.append_line(f"const {entity} responseEntity{{ {send} }};")
    block.append_line()
    block.append_line("co_return responseEntity;")


def verb_writer(verb: Verb, entity: str, interface: bool) -> Writer:
    signature = verb_signature(verb, entity)

    def write(block: CodeBlock) -> None:
        if interface:
            append_prototype(block, signature)
            return
        with method_scope(block, f"{signature} override"):
            _verb_body(block, verb, entity)

    return write


def _writers(descriptor: EntityDescriptor, interface: bool) -> List[Writer]:
    entity = entity_name(descriptor.as_class().name)
    writers: List[Writer] = []
    if not interface:
        writers.append(constructor_writer(descriptor))
    writers.append(destructor_writer(descriptor))
    writers.extend(verb_writer(verb, entity, interface) for verb in VERBS)
    return writers


def render_interface(descriptor: EntityDescriptor, context: RenderContext) -> str:
    return render_class(descriptor, context, _writers(descriptor, interface=True))


def render_implementation(descriptor: EntityDescriptor, context: RenderContext) -> str:
    return render_class(descriptor, context, _writers(descriptor, interface=False))


def dependencies(descriptor: EntityDescriptor, context: RenderContext) -> Dependencies:
    entity = entity_name(descriptor.as_class().name)

    system = [LibrarySymbol.FUTURE, LibrarySymbol.CANCELLATION_TOKEN]
    if not descriptor.is_interface:
        system.append(LibrarySymbol.HTTP_METHODS)

    return (
        Dependencies.of(system=system, user=[entity])
        .merge(base_dependencies(descriptor), lifetime_dependencies(descriptor))
        .without(derive_name(descriptor))
    )

