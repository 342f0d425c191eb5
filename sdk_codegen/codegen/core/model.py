"""
Core model representation for code generation.

Read-only view over the abstract API data model: classes with properties
and navigation relationships, enumerations with members. Also converts
JSON model descriptions into this normalized form.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union, Any


class ModelError(ValueError):
    """Exception raised for malformed model descriptions."""

    pass


@dataclass(frozen=True)
class ModelEnumMember:
    """A single enumeration member."""

    name: str
    value: Optional[int] = None

    @property
    def has_value(self) -> bool:
        return self.value is not None


@dataclass(eq=False)
class ModelEnum:
    """Represents an enumeration of the data model."""

    name: str
    members: List[ModelEnumMember] = field(default_factory=list)
    is_flags: bool = False
    namespace: str = ""
    description: Optional[str] = None


@dataclass(eq=False)
class ModelProperty:
    """Represents a property of a model class."""

    name: str
    type: Union[str, "ModelClass", ModelEnum]
    is_collection: bool = False
    owner: Optional["ModelClass"] = None
    is_navigation: bool = False
    description: Optional[str] = None

    @property
    def type_name(self) -> str:
        """Name of the referenced type (primitive name or model type name)."""
        if isinstance(self.type, str):
            return self.type
        return self.type.name

    @property
    def projection_type_name(self) -> str:
        """Element type name used for typing collection members."""
        return self.type_name

    @property
    def references_class(self) -> bool:
        return isinstance(self.type, ModelClass)


@dataclass(eq=False)
class ModelClass:
    """Represents a class (entity or complex type) of the data model."""

    name: str
    base: Optional["ModelClass"] = None
    properties: List[ModelProperty] = field(default_factory=list)
    namespace: str = ""
    description: Optional[str] = None

    def add_property(self, prop: ModelProperty) -> None:
        """Add a property to this class and claim ownership of it."""
        prop.owner = self
        self.properties.append(prop)

    def get_property(self, name: str) -> Optional[ModelProperty]:
        """Get property by name."""
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

    def navigation_properties(self) -> List[ModelProperty]:
        """Properties that reference another class rather than a value."""
        return [prop for prop in self.properties if prop.is_navigation]

    def collection_navigation_properties(self) -> List[ModelProperty]:
        return [prop for prop in self.navigation_properties() if prop.is_collection]


@dataclass(eq=False)
class Model:
    """The complete data model handed to a generator."""

    namespace: str = ""
    classes: List[ModelClass] = field(default_factory=list)
    enums: List[ModelEnum] = field(default_factory=list)
    client: Optional[ModelClass] = None

    def get_class(self, name: str) -> Optional[ModelClass]:
        """Get class by name (case-insensitive)."""
        for model_class in self.classes:
            if model_class.name.lower() == name.lower():
                return model_class
        return None

    def get_enum(self, name: str) -> Optional[ModelEnum]:
        """Get enumeration by name (case-insensitive)."""
        for model_enum in self.enums:
            if model_enum.name.lower() == name.lower():
                return model_enum
        return None


def model_from_dict(data: Dict[str, Any]) -> Model:
    """
    Convert a JSON model description into a Model.

    Expected shape::

        {
          "namespace": "microsoft.graph",
          "enums": [{"name": "color", "flags": false,
                     "members": [{"name": "red", "value": 0}]}],
          "classes": [{"name": "entity", "base": null,
                       "properties": [{"name": "id", "type": "String"}]}],
          "client": {"name": "graphServiceClient",
                     "properties": [{"name": "users", "type": "user",
                                     "collection": true}]}
        }

    Type references are resolved by name against declared classes and
    enumerations; anything else is kept as a primitive type name.

    Args:
        data: Parsed JSON model description

    Returns:
        Model: Normalized model graph

    Raises:
        ModelError: If the description is malformed
    """
    if not isinstance(data, dict):
        raise ModelError("Model description must be a JSON object")

    namespace = data.get("namespace", "")
    model = Model(namespace=namespace)

    # First pass: declare every named type so references can resolve
    for enum_data in _require_list(data, "enums", "model"):
        enum_name = _require_name(enum_data, "enum")
        members = [
            _convert_enum_member(member_data, enum_name)
            for member_data in _require_list(enum_data, "members", f"enum '{enum_name}'")
        ]
        model.enums.append(
            ModelEnum(
                name=enum_name,
                members=members,
                is_flags=bool(enum_data.get("flags", False)),
                namespace=enum_data.get("namespace", namespace),
                description=enum_data.get("description"),
            )
        )

    class_data_by_name: Dict[str, Dict[str, Any]] = {}
    for class_data in _require_list(data, "classes", "model"):
        name = _require_name(class_data, "class")
        model.classes.append(
            ModelClass(
                name=name,
                namespace=class_data.get("namespace", namespace),
                description=class_data.get("description"),
            )
        )
        class_data_by_name[name] = class_data

    # Second pass: bases and properties
    for model_class in model.classes:
        class_data = class_data_by_name[model_class.name]

        base_name = class_data.get("base")
        if base_name:
            base = model.get_class(base_name)
            if base is None:
                raise ModelError(
                    f"Unknown base class '{base_name}' for class '{model_class.name}'"
                )
            model_class.base = base

        for prop_data in _require_list(
            class_data, "properties", f"class '{model_class.name}'"
        ):
            model_class.add_property(_convert_property(prop_data, model))

    client_data = data.get("client")
    if client_data:
        client = ModelClass(
            name=_require_name(client_data, "client"),
            namespace=client_data.get("namespace", namespace),
            description=client_data.get("description"),
        )
        for prop_data in _require_list(client_data, "properties", f"client '{client.name}'"):
            client.add_property(_convert_property(prop_data, model))
        model.client = client

    return model


def _require_name(node: Dict[str, Any], kind: str) -> str:
    name = node.get("name") if isinstance(node, dict) else None
    if not name or not isinstance(name, str):
        raise ModelError(f"Every {kind} requires a non-empty 'name'")
    return name


def _require_list(node: Dict[str, Any], key: str, owner: str) -> List[Any]:
    """Return the list stored under ``key``; a missing key reads as empty."""
    if key not in node:
        return []
    items = node[key]
    if not isinstance(items, list):
        raise ModelError(f"'{key}' of {owner} must be a list")
    return items


def _convert_enum_member(member_data: Dict[str, Any], enum_name: str) -> ModelEnumMember:
    name = _require_name(member_data, f"member of enum '{enum_name}'")
    value = member_data.get("value")
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise ModelError(
            f"Member '{name}' of enum '{enum_name}' has a non-integer value: {value!r}"
        )
    return ModelEnumMember(name=name, value=value)


def _convert_property(prop_data: Dict[str, Any], model: Model) -> ModelProperty:
    """Convert a property description, resolving its type reference."""
    name = _require_name(prop_data, "property")
    type_name = prop_data.get("type")
    if not type_name:
        raise ModelError(f"Property '{name}' has no type")
    if not isinstance(type_name, str):
        raise ModelError(f"Type of property '{name}' must be a name: {type_name!r}")

    resolved: Union[str, ModelClass, ModelEnum] = (
        model.get_class(type_name) or model.get_enum(type_name) or type_name
    )

    is_navigation = prop_data.get("navigation")
    if is_navigation is None:
        is_navigation = isinstance(resolved, ModelClass)

    return ModelProperty(
        name=name,
        type=resolved,
        is_collection=bool(prop_data.get("collection", False)),
        is_navigation=bool(is_navigation),
        description=prop_data.get("description"),
    )

