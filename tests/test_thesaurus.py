import pytest

from chatplugins.thesaurus import (
    Mode,
    can_match,
    load_simai,
    match,
    render_reply,
    set_mode,
    set_probability,
)


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value


@pytest.mark.parametrize("mode", list(Mode))
def test_set_mode_keeps_high_bits(mode):
    data = set_probability(0, 5) | 0b1100
    result = set_mode(data, mode)
    assert result & 3 == mode
    assert result >> 2 == data >> 2


@pytest.mark.parametrize("digit", range(1, 9))
def test_set_probability_round_trip(digit):
    data = set_probability(set_mode(0, Mode.KAWA), digit)
    assert data >> 59 == digit - 1
    assert data & 3 == Mode.KAWA


@pytest.mark.parametrize("digit", [0, 9])
def test_set_probability_out_of_range(digit):
    with pytest.raises(ValueError, match="概率越界"):
        set_probability(0, digit)


def test_can_match_requires_mode():
    data = set_probability(set_mode(0, Mode.DERE), 8)
    assert can_match(data, Mode.KIMO, FixedRng(0)) is False
    assert can_match(data, Mode.DERE, FixedRng(0)) is True


def test_can_match_respects_probability():
    data = set_probability(set_mode(0, Mode.KIMO), 3)
    assert can_match(data, Mode.KIMO, FixedRng(2)) is True
    assert can_match(data, Mode.KIMO, FixedRng(3)) is False


def test_load_simai():
    dere, kawa = load_simai("傲娇:\n  早:\n    - 哼\n可爱:\n  晚安:\n    - 好梦\n    - 晚安{segment}喵\n")
    assert dere == {"早": ["哼"]}
    assert kawa["晚安"] == ["好梦", "晚安{segment}喵"]


def test_load_simai_empty():
    assert load_simai("") == ({}, {})


def test_match_full_text():
    assert match("你好", ["你好", "好"]) == "你好"


def test_match_leftmost_longest_key():
    assert match("今天早上好呀", ["早", "早上好", "呀"]) == "早上好"


def test_match_none():
    assert match("abc", ["xyz"]) is None


def test_render_reply_fills_and_splits():
    parts = render_reply("{name}你好{segment}我是{me}", "Alice", "Bot")
    assert parts == ["Alice你好", "我是Bot"]


def test_render_reply_without_segments():
    assert render_reply("plain", "a", "b") == ["plain"]