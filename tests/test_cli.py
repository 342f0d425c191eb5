import json

import pytest

from sdk_codegen.cli import build_config, create_parser, main, write_files

from .conftest import SAMPLE_FILE_COUNT


class TestParser:
    def test_generate_arguments(self):
        args = create_parser().parse_args(
            ["generate", "model.json", "-o", "out", "--namespace", "contoso", "--dry-run"]
        )
        assert args.command == "generate"
        assert args.model == "model.json"
        assert args.output == "out"
        assert args.language == "cpp"
        assert args.dry_run

    def test_model_and_url_are_exclusive(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["generate", "model.json", "--url", "https://x/m.json"])

    def test_build_config(self):
        args = create_parser().parse_args(
            ["generate", "model.json", "--service-url", "https://api.contoso.com", "--no-comments"]
        )
        config = build_config(args)
        assert config.service_url == "https://api.contoso.com"
        assert config.add_comments is False


class TestMain:
    def test_no_command(self):
        assert main([]) == 1

    def test_languages(self, capsys):
        assert main(["languages"]) == 0
        assert "cpp" in capsys.readouterr().out

    def test_generate_writes_files(self, model_file, tmp_path):
        output_dir = tmp_path / "include"

        assert main(["generate", str(model_file), "-o", str(output_dir)]) == 0

        written = sorted(path.name for path in output_dir.iterdir())
        assert len(written) == SAMPLE_FILE_COUNT
        assert "FolderChildrenCollectionResponse.h" in written
        assert (output_dir / "Folder.h").read_text(encoding="utf-8").count("#pragma once") == 1

    def test_dry_run_writes_nothing(self, model_file, tmp_path, capsys):
        output_dir = tmp_path / "include"

        assert main(["generate", str(model_file), "-o", str(output_dir), "--dry-run"]) == 0

        assert not output_dir.exists()
        assert "GraphServiceClient.h" in capsys.readouterr().out

    def test_config_file(self, model_file, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"header_extension": ".hpp"}), encoding="utf-8")
        output_dir = tmp_path / "include"

        code = main(
            ["generate", str(model_file), "--config", str(config_path), "-o", str(output_dir)]
        )

        assert code == 0
        assert (output_dir / "Folder.hpp").exists()

    def test_missing_model_file(self, tmp_path):
        assert main(["generate", str(tmp_path / "missing.json"), "--dry-run"]) == 1

    def test_invalid_model(self, tmp_path, capsys):
        path = tmp_path / "model.json"
        path.write_text(json.dumps({"classes": [{"name": "a", "base": "b"}]}), encoding="utf-8")
        assert main(["generate", str(path), "--dry-run"]) == 1
        assert "Invalid model in" in capsys.readouterr().out

    def test_unknown_language(self, model_file):
        assert main(["generate", str(model_file), "--language", "cobol", "--dry-run"]) == 1

    def test_generation_failure(self, tmp_path):
        path = tmp_path / "model.json"
        path.write_text(json.dumps({"classes": [{"name": "a"}, {"name": "A"}]}), encoding="utf-8")
        assert main(["generate", str(path), "--dry-run"]) == 1


class TestWriteFiles:
    def test_creates_directory(self, tmp_path):
        output_dir = tmp_path / "nested" / "dir"
        written = write_files({"A.h": "a", "B.h": "b"}, output_dir)

        assert [path.name for path in written] == ["A.h", "B.h"]
        assert (output_dir / "B.h").read_text(encoding="utf-8") == "b"
