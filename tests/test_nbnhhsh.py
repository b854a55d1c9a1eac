import json

from chatplugins.nbnhhsh import COMMAND, parse_nbnhhsh


def test_trans_preferred():
    data = json.dumps([{"name": "yyds", "trans": ["x1", "x2"], "inputting": ["y"]}])
    assert parse_nbnhhsh(data) == ["x1", "x2"]


def test_inputting_fallback():
    data = json.dumps([{"name": "abc", "inputting": ["p", "q"]}])
    assert parse_nbnhhsh(data) == ["p", "q"]


def test_bytes_input():
    data = json.dumps([{"trans": ["词"]}], ensure_ascii=False).encode("utf-8")
    assert parse_nbnhhsh(data) == ["词"]


def test_missing_and_invalid():
    assert parse_nbnhhsh(json.dumps([{"name": "zz"}])) == []
    assert parse_nbnhhsh("not json") == []
    assert parse_nbnhhsh("[]") == []


def test_command_pattern():
    match = COMMAND.match("?? yyds")
    assert match.group(1) == "yyds"
    assert COMMAND.match("??YYDS") is None