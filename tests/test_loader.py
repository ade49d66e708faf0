import io
import logging

import pytest

from tfen import LexError, SourceNotFoundError, TfenError, TfenSyntaxError
from tfen.loader import parse_file, parse_files, read_source


def test_parse_file(fixtures_dir):
    program = parse_file(fixtures_dir / "web.tfen")
    assert [r.id.name for r in program.resources] == ["web"]
    assert program.resources[0].attributes[0].value_texts == ("prod", "dev")


def test_parse_file_accepts_str_path(fixtures_dir):
    program = parse_file(str(fixtures_dir / "policy.tfen"))
    assert len(program.resources) == 3


def test_missing_file(tmp_path):
    with pytest.raises(SourceNotFoundError) as exc:
        read_source(tmp_path / "nope.tfen")
    assert isinstance(exc.value, TfenError)
    assert "nope.tfen" in str(exc.value)


def test_syntax_error_from_file(fixtures_dir):
    with pytest.raises(TfenSyntaxError):
        parse_file(fixtures_dir / "missing_has.tfen")


def test_lex_error_from_file(fixtures_dir):
    with pytest.raises(LexError) as exc:
        parse_file(fixtures_dir / "invalid_char.tfen")
    assert exc.value.position.line == 2


def test_other_suffix_warns(tmp_path, caplog):
    doc = tmp_path / "policy.txt"
    doc.write_text('resource "A" has { }', encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="tfen.loader"):
        program = parse_file(doc)
    assert program.resources[0].id.name == "A"
    assert any(".tfen" in r.getMessage() for r in caplog.records)


def test_read_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO('resource "S" has { }'))
    assert read_source("-") == 'resource "S" has { }'


def test_utf8_content(tmp_path):
    doc = tmp_path / "unicode.tfen"
    doc.write_text('resource "café" has { attribute "région" with "required" of ["été"] }', encoding="utf-8")
    program = parse_file(doc)
    assert program.resources[0].id.name == "café"
    assert program.resources[0].attributes[0].value_texts == ("été",)


def test_parse_files_in_order(fixtures_dir):
    paths = [fixtures_dir / "web.tfen", fixtures_dir / "policy.tfen"]
    result = parse_files(paths)
    assert list(result) == [str(p) for p in paths]
    assert len(result[str(paths[1])].resources) == 3


def test_parse_file_logs_resource_names(fixtures_dir, caplog):
    with caplog.at_level(logging.DEBUG, logger="tfen.loader"):
        parse_file(fixtures_dir / "policy.tfen")
    messages = [r.getMessage() for r in caplog.records]
    assert any("[aws_instance, aws_s3_bucket, aws_vpc]" in m for m in messages)
