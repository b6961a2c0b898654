import pytest

from sandengine.window import _KeyState, _VirtualCursor, _key_symbol


def test_key_symbol_case_insensitive():
    assert _key_symbol("W") == _key_symbol("w")


def test_key_symbol_distinct_keys():
    assert _key_symbol("a") != _key_symbol("d")


@pytest.mark.parametrize("bad", ["", "ab", " ", "é"])
def test_key_symbol_rejects_bad_names(bad):
    with pytest.raises(ValueError):
        _key_symbol(bad)


def test_key_state_press_release():
    keys = _KeyState()
    sym = _key_symbol("e")
    assert keys.is_down(sym) is False
    keys.press(sym)
    assert keys.is_down(sym) is True
    keys.release(sym)
    assert keys.is_down(sym) is False


def test_key_state_release_unpressed_is_harmless():
    keys = _KeyState()
    keys.release(5)
    assert keys.is_down(5) is False


def test_cursor_starts_at_origin():
    assert _VirtualCursor().position == (0.0, 0.0)


def test_cursor_accumulates_and_flips_y():
    cur = _VirtualCursor()
    cur.move(3, 2)
    cur.move(1, -5)
    assert cur.position == (4.0, 3.0)