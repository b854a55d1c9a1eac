from datetime import date

import pytest

from chatplugins.nativewife import WifeStore, can_add, extract_name


@pytest.fixture
def store(tmp_path):
    return WifeStore(tmp_path)


def test_folder_uses_base36(store, tmp_path):
    assert store.folder(35) == tmp_path / "z"


def test_add_and_names_round_trip(store):
    store.add(1, "b", b"x")
    path = store.add(1, "a", b"yy")
    assert store.names(1) == ["a", "b"]
    assert path.read_bytes() == b"yy"


def test_names_of_unknown_group_empty(store):
    assert store.names(42) == []


def test_add_empty_name_rejected(store):
    with pytest.raises(ValueError):
        store.add(1, "", b"x")


def test_remove(store):
    store.add(1, "a", b"x")
    store.remove(1, "a")
    assert store.names(1) == []


def test_remove_missing_raises(store):
    with pytest.raises(FileNotFoundError):
        store.remove(1, "nobody")


def test_draw_empty_raises(store):
    with pytest.raises(LookupError):
        store.draw(1, "nick", date(2023, 1, 1))


def test_draw_single(store):
    store.add(1, "only", b"x")
    assert store.draw(1, "anyone", date(2023, 1, 1)) == "only"


def test_draw_is_stable_per_day(store):
    for name in ("a", "b", "c", "d"):
        store.add(7, name, b"x")
    first = store.draw(7, "nick", date(2023, 5, 6))
    assert first in store.names(7)
    assert store.draw(7, "nick", date(2023, 5, 6)) == first


def test_extract_name_strips_spaces_and_slashes():
    assert extract_name("添加wife 老婆/a\\b", "添加wife") == "老婆ab"


def test_extract_name_uses_last_command():
    assert extract_name("删除wife删除wifex", "删除wife") == "x"


def test_extract_name_empty():
    assert extract_name("添加wife", "添加wife") == ""


@pytest.mark.parametrize(
    "data,gid,admin,expected",
    [(1, 5, False, True), (0, 5, False, False), (0, 5, True, True), (1, 0, True, False)],
)
def test_can_add(data, gid, admin, expected):
    assert can_add(data, gid, admin) is expected