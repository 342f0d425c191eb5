import json
import re
from unittest import mock

import pytest
import requests

from sdk_codegen.codegen.core.model import ModelError
from sdk_codegen.utils import ModelLoadError, load_model, parse_model

URL = "https://example.com/model.json"


def fake_response(payload, status=200, content_type="application/json"):
    response = mock.Mock()
    response.headers = {"content-type": content_type}
    response.text = payload if isinstance(payload, str) else json.dumps(payload)
    if status >= 400:
        error = requests.exceptions.HTTPError(response=mock.Mock(status_code=status))
        response.raise_for_status.side_effect = error
    return response


class TestParseModel:
    def test_builds_model(self, model_data):
        model = parse_model(json.dumps(model_data))
        assert len(model.classes) == 3
        assert model.get_enum("permission").is_flags

    def test_invalid_json(self):
        with pytest.raises(ModelLoadError, match="Invalid JSON in memo.json"):
            parse_model("{", source="memo.json")

    def test_model_errors_name_the_source(self):
        with pytest.raises(ModelError, match="Invalid model in memo.json: .*Unknown base"):
            parse_model(
                json.dumps({"classes": [{"name": "a", "base": "b"}]}), source="memo.json"
            )


class TestLoadFromFile:
    def test_loads(self, model_file):
        source, model = load_model(file_path=model_file)
        assert source == str(model_file)
        assert len(model.classes) == 3
        assert model.client is not None

    def test_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_model(file_path=tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(ModelLoadError, match="Invalid JSON"):
            load_model(file_path=path)

    def test_malformed_model(self, tmp_path):
        path = tmp_path / "model.json"
        path.write_text(json.dumps({"enums": None}), encoding="utf-8")
        with pytest.raises(ModelError, match=re.escape(str(path))):
            load_model(file_path=path)


class TestLoadFromUrl:
    def test_invalid_url(self):
        with pytest.raises(ModelLoadError, match="Invalid URL"):
            load_model(url="not a url")

    def test_loads(self, model_data):
        with mock.patch("sdk_codegen.utils.requests.get", return_value=fake_response(model_data)):
            source, model = load_model(url=URL)

        assert source == URL
        assert model.get_enum("permission").is_flags

    def test_http_error(self):
        with mock.patch(
            "sdk_codegen.utils.requests.get", return_value=fake_response({}, status=404)
        ):
            with pytest.raises(ModelLoadError, match="HTTP error 404"):
                load_model(url=URL)

    def test_timeout(self):
        with mock.patch(
            "sdk_codegen.utils.requests.get", side_effect=requests.exceptions.Timeout()
        ):
            with pytest.raises(ModelLoadError, match="timeout"):
                load_model(url=URL)

    def test_invalid_body(self):
        response = fake_response("<html></html>", content_type="text/html")
        with mock.patch("sdk_codegen.utils.requests.get", return_value=response):
            with pytest.raises(ModelLoadError, match=f"Invalid JSON in {URL}"):
                load_model(url=URL)

    def test_malformed_model(self):
        payload = {"classes": [{"name": "a", "properties": "x"}]}
        with mock.patch("sdk_codegen.utils.requests.get", return_value=fake_response(payload)):
            with pytest.raises(ModelError, match="must be a list"):
                load_model(url=URL)


class TestSourceSelection:
    def test_requires_exactly_one_source(self, model_file):
        with pytest.raises(ModelLoadError):
            load_model()
        with pytest.raises(ModelLoadError):
            load_model(model_file, URL)
