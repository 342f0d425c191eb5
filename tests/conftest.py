import json

import pytest

from sdk_codegen.codegen.core.model import model_from_dict
from sdk_codegen.codegen.languages.cpp.entities import RenderContext

SAMPLE_MODEL = {
    "namespace": "microsoft.graph",
    "enums": [
        {
            "name": "color",
            "members": [
                {"name": "red", "value": 0},
                {"name": "green", "value": 1},
                {"name": "blue", "value": 300},
            ],
        },
        {
            "name": "offset",
            "members": [
                {"name": "low", "value": -5},
                {"name": "high", "value": 300},
            ],
        },
        {
            "name": "permission",
            "flags": True,
            "members": [
                {"name": "read", "value": 1},
                {"name": "write", "value": 2},
                {"name": "execute", "value": 4},
            ],
        },
    ],
    "classes": [
        {
            "name": "entity",
            "properties": [
                {"name": "id", "type": "String", "description": "The unique identifier."}
            ],
        },
        {
            "name": "driveItem",
            "base": "entity",
            "properties": [
                {"name": "displayName", "type": "String"},
                {"name": "size", "type": "Int64"},
            ],
        },
        {
            "name": "folder",
            "base": "entity",
            "properties": [
                {"name": "childCount", "type": "Int32"},
                {"name": "children", "type": "driveItem", "collection": True},
                {"name": "parent", "type": "driveItem"},
                {"name": "color", "type": "color"},
            ],
        },
    ],
    "client": {
        "name": "graphServiceClient",
        "properties": [
            {"name": "drives", "type": "driveItem", "collection": True},
            {"name": "root", "type": "folder"},
        ],
    },
}

# 3 enums, 5 roles per class, 7 per collection property, 2 for the client
SAMPLE_FILE_COUNT = 3 + 3 * 5 + 7 + 7 + 2


@pytest.fixture
def model_data():
    return json.loads(json.dumps(SAMPLE_MODEL))


@pytest.fixture
def model(model_data):
    return model_from_dict(model_data)


@pytest.fixture
def context():
    return RenderContext()


@pytest.fixture
def folder(model):
    return model.get_class("folder")


@pytest.fixture
def drive_item(model):
    return model.get_class("driveItem")


@pytest.fixture
def children(folder):
    return folder.get_property("children")


@pytest.fixture
def model_file(tmp_path, model_data):
    path = tmp_path / "model.json"
    path.write_text(json.dumps(model_data), encoding="utf-8")
    return path
