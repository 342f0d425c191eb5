import pytest

from sdk_codegen.codegen.core.generator import CodeGenerator
from sdk_codegen.codegen.languages.cpp import CppGenerator
from sdk_codegen.codegen.registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
)


class DummyGenerator(CodeGenerator):
    @property
    def language_name(self):
        return "dummy"

    @property
    def file_extension(self):
        return ".txt"

    def generate(self, model):
        return {}


@pytest.fixture
def registry():
    registry = GeneratorRegistry()
    registry.register("cpp", CppGenerator, aliases=["c++"])
    return registry


class TestGeneratorRegistry:
    def test_resolve_aliases(self, registry):
        assert registry.resolve_language("CPP") == "cpp"
        assert registry.resolve_language("c++") == "cpp"
        assert registry.get_generator_class("c++") is CppGenerator

    def test_unknown_language(self, registry):
        with pytest.raises(RegistryError, match="Available: cpp"):
            registry.resolve_language("cobol")

    def test_rejects_non_generator(self, registry):
        with pytest.raises(RegistryError):
            registry.register("bad", dict)

    def test_alias_conflict(self, registry):
        with pytest.raises(RegistryError):
            registry.register("dummy", DummyGenerator, aliases=["c++"])

    def test_register_and_unregister(self, registry):
        registry.register("dummy", DummyGenerator, aliases=["dm"])
        assert registry.list_languages() == ["cpp", "dummy"]
        assert registry.get_aliases_for_language("dummy") == ["dm"]

        registry.unregister("dummy")
        assert not registry.is_supported("dummy")
        assert not registry.is_supported("dm")

    def test_create_generator_configs(self, registry, tmp_path):
        generator = registry.create_generator("cpp", {"header_extension": ".hpp"})
        assert generator.file_extension == ".hpp"

        path = tmp_path / "config.json"
        path.write_text('{"namespace": "Contoso"}', encoding="utf-8")
        assert registry.create_generator("cpp", path).config.namespace == "Contoso"

        with pytest.raises(RegistryError):
            registry.create_generator("cpp", 42)

    def test_language_info(self, registry):
        info = registry.get_language_info("c++")
        assert info["name"] == "cpp"
        assert info["class"] == "CppGenerator"
        assert info["file_extension"] == ".h"
        assert info["aliases"] == ["c++"]


class TestGlobalRegistry:
    def test_builtin_languages(self):
        assert "cpp" in list_supported_languages()
        assert is_language_supported("cxx")

    def test_get_generator(self):
        assert isinstance(get_generator("c++"), CppGenerator)

    def test_info(self):
        assert get_language_info("cpp")["aliases"] == ["c++", "cxx"]
        assert "cpp" in list_all_language_info()
