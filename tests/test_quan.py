import pytest

from chatplugins.quan import MAINTENANCE, PREFIX_BYTES, parse_quan

PREFIX = "x" * PREFIX_BYTES


def test_parse_success_bytes():
    body = (PREFIX + "85").encode()
    assert parse_quan(body, 12345) == "查询账号:12345\n查询状态:成功\n您的权重为:85"


def test_parse_success_str_and_qq_text():
    result = parse_quan(PREFIX + "7", "999")
    assert result.startswith("查询账号:999\n")
    assert result.endswith("您的权重为:7")


def test_short_body_is_maintenance():
    with pytest.raises(ValueError, match=MAINTENANCE):
        parse_quan(PREFIX, 1)


def test_non_integer_is_maintenance():
    with pytest.raises(ValueError, match=MAINTENANCE):
        parse_quan(PREFIX + "abc", 1)


def test_whitespace_is_rejected():
    with pytest.raises(ValueError):
        parse_quan(PREFIX + " 5", 1)