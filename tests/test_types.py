import pytest

from sdk_codegen.codegen.languages.cpp.types import (
    PRIMITIVE_TYPE_MAP,
    BasicType,
    is_primitive,
    resolve_type,
    sequence_of,
)


class TestResolveType:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Boolean", "bool"),
            ("Byte", "unsigned char"),
            ("Int16", "std::int16_t"),
            ("Int32", "std::int32_t"),
            ("Int64", "std::int64_t"),
            ("Single", "float"),
            ("Double", "double"),
            ("String", "std::wstring"),
            ("Guid", "std::wstring"),
            ("DateTimeOffset", "std::wstring"),
            ("Binary", "std::wstring"),
            ("Stream", "std::wstring"),
            ("NSDictionary", "std::map<std::wstring, std::any>"),
        ],
    )
    def test_primitives(self, name, expected):
        assert resolve_type(name) == expected

    def test_case_insensitive(self):
        assert resolve_type("STRING") == resolve_type("string") == BasicType.WIDE_STRING

    def test_unknown_name_is_model_type(self):
        assert resolve_type("driveItem") == "DriveItem"
        assert not is_primitive("driveItem")

    def test_is_primitive(self):
        assert is_primitive("Int32")
        assert is_primitive("timeOfDay")

    def test_sequence_wraps_at_call_site(self):
        assert resolve_type("String") == "std::wstring"
        assert sequence_of(resolve_type("String")) == "std::vector<std::wstring>"

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            PRIMITIVE_TYPE_MAP["custom"] = "int"
