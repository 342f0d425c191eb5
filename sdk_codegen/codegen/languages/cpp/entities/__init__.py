"""
Role renderers for C++ entities.

``RENDERERS`` maps every role to its render and dependency functions;
``build_entity`` assembles the complete output of one descriptor.
"""

from types import MappingProxyType
from typing import Mapping

from ..includes import resolve_includes
from ..naming import derive_name
from ..roles import ElementKind, EntityDescriptor, Role
from . import builders, client, collections, model_enum, model_type, requests
from .base import EntityOutput, RenderContext, RoleRenderer
from .model_enum import EnumCodec, select_backing_type

RENDERERS: Mapping[Role, RoleRenderer] = MappingProxyType(
    {
        Role.TYPE: RoleRenderer(model_type.render, model_type.dependencies),
        Role.REQUEST: RoleRenderer(requests.render_implementation, requests.dependencies),
        Role.REQUEST_INTERFACE: RoleRenderer(requests.render_interface, requests.dependencies),
        Role.REQUEST_BUILDER: RoleRenderer(
            builders.render_implementation, builders.dependencies
        ),
        Role.REQUEST_BUILDER_INTERFACE: RoleRenderer(
            builders.render_interface, builders.dependencies
        ),
        Role.COLLECTION_REQUEST: RoleRenderer(
            collections.render_request, collections.request_dependencies
        ),
        Role.COLLECTION_REQUEST_INTERFACE: RoleRenderer(
            collections.render_request_interface, collections.request_dependencies
        ),
        Role.COLLECTION_REQUEST_BUILDER: RoleRenderer(
            collections.render_request_builder, collections.request_builder_dependencies
        ),
        Role.COLLECTION_REQUEST_BUILDER_INTERFACE: RoleRenderer(
            collections.render_request_builder_interface,
            collections.request_builder_dependencies,
        ),
        Role.COLLECTION_PAGE: RoleRenderer(collections.render_page, collections.page_dependencies),
        Role.COLLECTION_PAGE_INTERFACE: RoleRenderer(
            collections.render_page_interface, collections.page_dependencies
        ),
        Role.COLLECTION_RESPONSE: RoleRenderer(
            collections.render_response, collections.response_dependencies
        ),
        Role.CLIENT: RoleRenderer(client.render_implementation, client.dependencies),
        Role.CLIENT_INTERFACE: RoleRenderer(client.render_interface, client.dependencies),
    }
)

ENUM_RENDERER = RoleRenderer(model_enum.render, model_enum.dependencies)


def renderer_for(descriptor: EntityDescriptor) -> RoleRenderer:
    """Renderer of a descriptor; enumerations share the Type role."""
    if descriptor.role is Role.TYPE and descriptor.kind is ElementKind.ENUM:
        return ENUM_RENDERER
    return RENDERERS[descriptor.role]


def build_entity(descriptor: EntityDescriptor, context: RenderContext) -> EntityOutput:
    """
    Generate the include lists and the declaration of one entity.

    Raises:
        RoleMismatchError: If the element does not fit the role
    """
    renderer = renderer_for(descriptor)
    name = derive_name(descriptor)

    refs = renderer.dependencies(descriptor, context).without(name)
    system_includes, user_includes = resolve_includes(
        refs.system, refs.user, context.header_extension
    )

    return EntityOutput(
        name=name,
        role=descriptor.role,
        system_includes=system_includes,
        user_includes=user_includes,
        declaration=renderer.render(descriptor, context),
        header_extension=context.header_extension,
    )


__all__ = [
    "RENDERERS",
    "EntityOutput",
    "EnumCodec",
    "RenderContext",
    "RoleRenderer",
    "build_entity",
    "renderer_for",
    "select_backing_type",
]
