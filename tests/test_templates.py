import pytest

from sdk_codegen.codegen.core.templates import TemplateError, create_template_engine


@pytest.fixture
def template_dir(tmp_path):
    (tmp_path / "greeting.j2").write_text(
        "{{ banner | comment }}\nHello {{ name }}\n", encoding="utf-8"
    )
    return tmp_path


class TestTemplateEngine:
    def test_renders_from_directory(self, template_dir):
        engine = create_template_engine(template_dir)
        rendered = engine.render_template("greeting.j2", {"banner": "one\n\ntwo", "name": "C++"})
        assert rendered == "// one\n//\n// two\nHello C++\n"

    def test_directory_stays_loaded(self, template_dir):
        engine = create_template_engine(template_dir)
        engine.render_template("greeting.j2", {"banner": "", "name": "a"})
        assert engine.template_exists("greeting.j2")
        assert not engine.template_exists("missing.j2")

    def test_without_directory(self, tmp_path):
        engine = create_template_engine(tmp_path / "absent")
        assert not engine.template_exists("greeting.j2")
        with pytest.raises(TemplateError, match="missing.j2"):
            engine.render_template("missing.j2", {})

    def test_undefined_variable_fails(self, template_dir):
        engine = create_template_engine(template_dir)
        with pytest.raises(TemplateError):
            engine.render_template("greeting.j2", {"banner": ""})

