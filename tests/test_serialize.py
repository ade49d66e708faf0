import json

from ruamel.yaml import YAML

from tfen import parse, tokenize
from tfen.serialize import dumps_json, dumps_yaml, to_data

SOURCE = 'resource "web" has { attribute "tag" with "required" of ["prod","dev"] }'


def test_program_to_data():
    data = to_data(parse(SOURCE))
    assert data["type"] == "Program"
    assert data["position"] == {"line": 1, "char": 1}

    resource = data["resources"][0]
    assert resource["type"] == "Resource"
    assert resource["id"] == {"type": "Identifier", "position": {"line": 1, "char": 10}, "name": "web"}

    attribute = resource["attributes"][0]
    assert attribute["condition"]["text"] == "required"
    assert [v["text"] for v in attribute["values"]] == ["prod", "dev"]


def test_tokens_to_data():
    data = to_data(tokenize("{ }"))
    assert data == [
        {"kind": "LBrace", "position": {"line": 1, "char": 1}, "text": "{"},
        {"kind": "RBrace", "position": {"line": 1, "char": 3}, "text": "}"},
        {"kind": "EndOfInput", "position": {"line": 1, "char": 4}, "text": ""},
    ]


def test_dumps_json():
    text = dumps_json(parse(SOURCE))
    assert json.loads(text) == to_data(parse(SOURCE))


def test_dumps_json_keeps_unicode():
    text = dumps_json(parse('resource "café" has { }'), indent=None)
    assert "café" in text


def test_dumps_yaml():
    text = dumps_yaml(parse(SOURCE))
    loaded = YAML(typ="safe").load(text)
    assert loaded == to_data(parse(SOURCE))
    # Field order follows the node definitions
    assert text.splitlines()[0] == "type: Program"
