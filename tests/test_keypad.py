import pytest

from ui.keypad import Keypad


def test_basic_layout():
    keypad = Keypad(480, 820)
    gids = [b.gid for b in keypad.buttons]
    assert len(gids) == 22
    assert "mode_basic" in gids and "mode_advanced" in gids
    assert "sqrt" not in gids
    for digit in range(10):
        assert f"num_{digit}" in gids
    assert {"add", "subtract", "multiply", "divide", "equal", "decimal",
            "clear_all", "backspace", "percent", "negate"} <= set(gids)


def test_advanced_layout_adds_functions_and_memory():
    keypad = Keypad(480, 820, mode="advanced")
    gids = {b.gid for b in keypad.buttons}
    assert len(keypad.buttons) == 29
    assert {"sqrt", "square", "reciprocal", "memory_clear", "memory_recall",
            "memory_add", "memory_subtract"} <= gids
    assert keypad.find("sqrt").y < keypad.find("num_7").y


def test_buttons_fit_in_window():
    for mode in ("basic", "advanced"):
        keypad = Keypad(480, 820, mode=mode)
        for b in keypad.buttons:
            assert b.x >= 0 and b.y >= keypad.top
            assert b.x + b.w <= 480
            assert b.y + b.h <= 820
            assert b.h > 0 and b.w > 0


def test_button_at_hits_center():
    keypad = Keypad(480, 820)
    seven = keypad.find("num_7")
    hit = keypad.button_at(seven.x + seven.w // 2, seven.y + seven.h // 2)
    assert hit.gid == "num_7"


def test_button_at_misses_gaps_and_display():
    keypad = Keypad(480, 820)
    seven = keypad.find("num_7")
    assert keypad.button_at(seven.x + seven.w + 1, seven.y + 1) is None
    assert keypad.button_at(100, 50) is None


def test_toggle_mode():
    keypad = Keypad(480, 820)
    assert keypad.toggle_mode() == "advanced"
    assert keypad.find("memory_recall") is not None
    assert keypad.toggle_mode() == "basic"
    assert keypad.find("memory_recall") is None


def test_unknown_mode():
    with pytest.raises(ValueError):
        Keypad(480, 820, mode="scientific")
