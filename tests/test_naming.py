import pytest

from sdk_codegen.codegen.core.generator import RoleMismatchError
from sdk_codegen.codegen.core.model import ModelClass, ModelProperty
from sdk_codegen.codegen.core.naming import NameSanitizer, capitalize_name, split_name
from sdk_codegen.codegen.languages.cpp.naming import (
    CPP_RESERVED_WORDS,
    base_list,
    collection_name,
    derive_name,
    format_base_clause,
    header_comment,
    linked_entity_name,
    member_name,
    namespace_declaration,
    namespace_name,
    primary_base,
    sanitize_name,
)
from sdk_codegen.codegen.languages.cpp.roles import (
    CLASS_ROLES,
    COLLECTION_ROLES,
    EntityDescriptor,
    Role,
)


class TestNameHelpers:
    def test_capitalize_keeps_rest(self):
        assert capitalize_name("driveItem") == "DriveItem"
        assert capitalize_name("") == ""

    def test_split_name(self):
        assert split_name("displayName") == "display name"
        assert split_name("id") == "id"

    def test_sanitizer_appends_suffix(self):
        sanitizer = NameSanitizer({"class"}, suffix="__")
        assert sanitizer.sanitize_name("class") == "class__"
        assert sanitizer.sanitize_name("Class") == "Class"

    def test_cpp_keywords(self):
        assert "co_await" in CPP_RESERVED_WORDS
        assert sanitize_name("default") == "default_"
        assert sanitize_name("Default") == "Default"

    def test_member_name_keeps_casing(self):
        assert member_name(ModelProperty("delete", "Boolean")) == "delete_"
        assert member_name(ModelProperty("displayName", "String")) == "displayName"


class TestDeriveName:
    def test_class_roles(self, folder):
        names = [derive_name(EntityDescriptor(folder, role)) for role in CLASS_ROLES]
        assert names == [
            "Folder",
            "IFolderRequest",
            "FolderRequest",
            "IFolderRequestBuilder",
            "FolderRequestBuilder",
        ]

    def test_collection_roles(self, children):
        names = {role: derive_name(EntityDescriptor(children, role)) for role in COLLECTION_ROLES}
        assert names[Role.COLLECTION_REQUEST] == "FolderChildrenCollectionRequest"
        assert names[Role.COLLECTION_REQUEST_INTERFACE] == "IFolderChildrenCollectionRequest"
        assert names[Role.COLLECTION_REQUEST_BUILDER] == "FolderChildrenCollectionRequestBuilder"
        assert (
            names[Role.COLLECTION_REQUEST_BUILDER_INTERFACE]
            == "IFolderChildrenCollectionRequestBuilder"
        )
        assert names[Role.COLLECTION_PAGE] == "FolderChildrenCollectionPage"
        assert names[Role.COLLECTION_PAGE_INTERFACE] == "IFolderChildrenCollectionPage"
        assert names[Role.COLLECTION_RESPONSE] == "FolderChildrenCollectionResponse"

    def test_interface_prefix_applied_once(self, folder):
        name = derive_name(EntityDescriptor(folder, Role.REQUEST_INTERFACE))
        assert name.startswith("I")
        assert not name.startswith("II")

    def test_client_roles(self, model):
        assert derive_name(EntityDescriptor(model.client, Role.CLIENT)) == "GraphServiceClient"
        assert (
            derive_name(EntityDescriptor(model.client, Role.CLIENT_INTERFACE))
            == "IGraphServiceClient"
        )

    def test_collection_role_needs_property(self, folder):
        with pytest.raises(RoleMismatchError):
            derive_name(EntityDescriptor(folder, Role.COLLECTION_PAGE))

    def test_collection_role_rejects_single_valued_property(self, folder):
        parent = folder.get_property("parent")
        with pytest.raises(RoleMismatchError):
            derive_name(EntityDescriptor(parent, Role.COLLECTION_REQUEST))

    def test_collection_name_requires_owner(self):
        with pytest.raises(ValueError):
            collection_name(ModelProperty("items", "String", is_collection=True))


class TestLinkedEntityName:
    def test_collection_property(self, children):
        assert linked_entity_name(children) == "FolderChildrenCollection"

    def test_single_valued_property_uses_property_name(self, folder):
        assert linked_entity_name(folder.get_property("parent")) == "Parent"

    def test_client_property_uses_referenced_class(self, model):
        root = model.client.get_property("root")
        assert linked_entity_name(root, for_client=True) == "Folder"

    def test_client_collection_property(self, model):
        drives = model.client.get_property("drives")
        assert linked_entity_name(drives, for_client=True) == "GraphServiceClientDrivesCollection"


class TestBases:
    def test_interface_base_listed_first(self, folder, children, model):
        descriptors = [
            EntityDescriptor(folder, Role.REQUEST),
            EntityDescriptor(folder, Role.REQUEST_BUILDER),
            EntityDescriptor(children, Role.COLLECTION_PAGE),
            EntityDescriptor(model.client, Role.CLIENT),
        ]
        for descriptor in descriptors:
            bases = base_list(descriptor)
            assert len(bases) == 2
            assert bases[0].startswith("I")
            assert not bases[1].startswith("I")

    def test_request_bases(self, folder):
        assert base_list(EntityDescriptor(folder, Role.REQUEST)) == [
            "IFolderRequest",
            "BaseRequest",
        ]

    def test_page_bases_typed_by_element(self, children):
        assert base_list(EntityDescriptor(children, Role.COLLECTION_PAGE)) == [
            "IFolderChildrenCollectionPage",
            "CollectionPage<DriveItem>",
        ]
        assert base_list(EntityDescriptor(children, Role.COLLECTION_PAGE_INTERFACE)) == [
            "ICollectionPage<DriveItem>"
        ]

    def test_type_base_is_model_base(self, folder, model):
        assert base_list(EntityDescriptor(folder, Role.TYPE)) == ["Entity"]
        assert base_list(EntityDescriptor(model.get_class("entity"), Role.TYPE)) == []

    def test_interface_roles_have_no_primary_base(self, folder, children):
        for descriptor in (
            EntityDescriptor(folder, Role.REQUEST_INTERFACE),
            EntityDescriptor(folder, Role.REQUEST_BUILDER_INTERFACE),
            EntityDescriptor(children, Role.COLLECTION_PAGE_INTERFACE),
        ):
            assert primary_base(descriptor) is None

    def test_response_has_no_bases(self, children):
        assert base_list(EntityDescriptor(children, Role.COLLECTION_RESPONSE)) == []

    def test_base_clause(self):
        assert format_base_clause([]) == ""
        assert format_base_clause(["IA"]) == ": public IA"
        assert format_base_clause(["IA", "B"]) == ": public IA, public B"


class TestHeaderComment:
    def test_class_role(self, folder):
        assert (
            header_comment(EntityDescriptor(folder, Role.REQUEST))
            == "A request for Folder entity."
        )

    def test_collection_role_mentions_owner(self, children):
        assert (
            header_comment(EntityDescriptor(children, Role.COLLECTION_REQUEST))
            == "A request for DriveItem collection for Folder entity."
        )

    def test_enum(self, model):
        color = model.get_enum("color")
        assert header_comment(EntityDescriptor(color, Role.TYPE)) == "Color model enumeration."


class TestNamespace:
    def test_segments_capitalized(self):
        assert namespace_name("microsoft.graph") == "Microsoft::Graph"
        assert namespace_declaration("contoso") == "namespace Contoso"

    def test_empty_segments_skipped(self):
        assert namespace_name("a..b") == "A::B"


class TestEntityDescriptor:
    def test_views(self, model, folder):
        color = model.get_enum("color")
        assert EntityDescriptor(folder, Role.TYPE).as_class() is folder
        assert EntityDescriptor(color, Role.TYPE).as_enum() is color

    def test_wrong_view_raises(self, model, folder):
        color = model.get_enum("color")
        with pytest.raises(RoleMismatchError):
            EntityDescriptor(color, Role.REQUEST).as_class()
        with pytest.raises(RoleMismatchError):
            EntityDescriptor(folder, Role.TYPE).as_enum()

    def test_property_without_owner(self):
        prop = ModelProperty("items", ModelClass("item"), is_collection=True)
        with pytest.raises(RoleMismatchError):
            EntityDescriptor(prop, Role.COLLECTION_PAGE).as_property()

    def test_linked_properties_default_to_navigation(self, folder):
        linked = EntityDescriptor(folder, Role.REQUEST_BUILDER).linked_properties()
        assert [prop.name for prop in linked] == ["children", "parent"]
