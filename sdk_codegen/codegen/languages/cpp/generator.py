"""
C++ code generator implementation.

Binds every model element to the roles it is generated for and renders one
header file per derived entity.
"""

from pathlib import Path
from typing import Dict, List, Optional

from ....logging_config import get_logger
from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator, GeneratorError
from ...core.model import Model
from .entities import EntityOutput, RenderContext, build_entity
from .naming import CPP_RESERVED_WORDS, derive_name
from .roles import CLASS_ROLES, CLIENT_ROLES, COLLECTION_ROLES, EntityDescriptor, Role

logger = get_logger(__name__)

ENTITY_TEMPLATE = "entity.h.j2"
BANNER_WIDTH = 79


def bind_roles(model: Model) -> List[EntityDescriptor]:
    """
    Bind model elements to their roles.

    Order: enumerations, then each class followed by the collection
    entities of its collection-valued navigation properties, then the
    client with the collection entities of its linked entity sets.

    Args:
        model: Model to generate

    Returns:
        Ordered descriptors, one per generated entity
    """
    descriptors: List[EntityDescriptor] = []

    for model_enum in model.enums:
        descriptors.append(EntityDescriptor(model_enum, Role.TYPE))

    for model_class in model.classes:
        descriptors.extend(EntityDescriptor(model_class, role) for role in CLASS_ROLES)
        for prop in model_class.collection_navigation_properties():
            descriptors.extend(EntityDescriptor(prop, role) for role in COLLECTION_ROLES)

    client = model.client
    if client is not None:
        linked = tuple(client.properties)
        descriptors.extend(
            EntityDescriptor(client, role, linked=linked) for role in CLIENT_ROLES
        )
        for prop in client.properties:
            if prop.is_collection:
                descriptors.extend(EntityDescriptor(prop, role) for role in COLLECTION_ROLES)

    return descriptors


class CppGenerator(CodeGenerator):
    """Code generator for C++ SDK headers."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize C++ generator with configuration."""
        super().__init__(config)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "cpp"

    @property
    def file_extension(self) -> str:
        """Return C++ header extension."""
        return self.config.header_extension

    def get_template_directory(self) -> Optional[Path]:
        """Return the C++ templates directory."""
        template_dir = Path(__file__).parent / "templates"
        return template_dir if template_dir.exists() else None

    def render_context(self, model: Model) -> RenderContext:
        return RenderContext.from_config(self.config, model.namespace)

    def bind_roles(self, model: Model) -> List[EntityDescriptor]:
        return bind_roles(model)

    def generate_entity(
        self, descriptor: EntityDescriptor, context: Optional[RenderContext] = None
    ) -> EntityOutput:
        """Generate a single entity; ``context`` defaults to the configured settings."""
        return build_entity(descriptor, context or RenderContext.from_config(self.config))

    def render_file(self, entity: EntityOutput) -> str:
        """Render the complete header file of an entity."""
        banner = self.config.banner if self.config.add_comments else ""
        content = self.render_template(
            ENTITY_TEMPLATE,
            {
                "banner": banner,
                "stars": "*" * BANNER_WIDTH,
                "include_block": entity.include_block,
                "declaration": entity.declaration,
            },
        )
        return self.format_code(content)

    def generate(self, model: Model) -> Dict[str, str]:
        """
        Generate one header per derived entity.

        Args:
            model: Model to generate

        Returns:
            Mapping of file name to file content, in binding order

        Raises:
            GeneratorError: If two entities derive the same name
            RoleMismatchError: If an element is bound to a role it cannot fill
        """
        context = self.render_context(model)
        descriptors = self.bind_roles(model)
        logger.debug("Bound %d entities", len(descriptors))

        files: Dict[str, str] = {}
        owners: Dict[str, EntityDescriptor] = {}
        for descriptor in descriptors:
            entity = self.generate_entity(descriptor, context)
            if entity.name in owners:
                previous = owners[entity.name]
                raise GeneratorError(
                    f"Entity name '{entity.name}' derived twice: for {previous.role.value} "
                    f"of '{previous.element.name}' and {descriptor.role.value} of "
                    f"'{descriptor.element.name}'"
                )
            owners[entity.name] = descriptor
            files[entity.file_name] = self.render_file(entity)
            logger.debug("Generated %s (%s)", entity.file_name, descriptor.role.value)

        return files

    def validate_model(self, model: Model) -> List[str]:
        """Base model checks plus C++ specific naming issues."""
        warnings = super().validate_model(model)

        for model_class in model.classes:
            for prop in model_class.properties:
                if prop.name in CPP_RESERVED_WORDS:
                    warnings.append(
                        f"Property '{model_class.name}.{prop.name}' is a C++ keyword; "
                        f"the member is renamed to '{prop.name}_'"
                    )
            if model_class.base is None and model_class.get_property("odata"):
                warnings.append(
                    f"Class '{model_class.name}' declares 'odata', which clashes with "
                    f"the generated payload member"
                )

        if model.client is not None:
            client_name = derive_name(EntityDescriptor(model.client, Role.CLIENT))
            if model.get_class(client_name):
                warnings.append(
                    f"Client '{client_name}' has the same name as a model class"
                )

        return warnings
