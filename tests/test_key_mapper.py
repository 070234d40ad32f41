import pytest

from core.key_mapper import KeyMapper


@pytest.fixture
def keys():
    return KeyMapper()


@pytest.mark.parametrize("digit", "0123456789")
def test_digits(keys, digit):
    assert keys.translate(ord(digit)) == f"num_{digit}"
    assert keys.translate(digit) == f"num_{digit}"


@pytest.mark.parametrize("char, gid", [
    ("+", "add"),
    ("-", "subtract"),
    ("*", "multiply"),
    ("/", "divide"),
    (".", "decimal"),
    (",", "decimal"),
    ("=", "equal"),
    ("%", "percent"),
    ("c", "clear_all"),
    ("C", "clear_all"),
])
def test_characters(keys, char, gid):
    assert keys.translate(ord(char)) == gid
    assert keys.translate(char) == gid


@pytest.mark.parametrize("code, gid", [
    (13, "equal"),
    (10, "equal"),
    (27, "clear_all"),
    (8, "backspace"),
    (127, "backspace"),
    (0xFF08, "backspace"),
    (0xFF0D, "equal"),
    (0xFF8D, "equal"),
    (0xFF1B, "clear_all"),
    (0xFFAB, "add"),
    (0xFFAF, "divide"),
    (0xFFAE, "decimal"),
    (0xFFB7, "num_7"),
])
def test_special_codes(keys, code, gid):
    assert keys.translate(code) == gid


def test_modifier_bits_are_ignored(keys):
    shift = 1 << 16
    assert keys.translate(ord("+") | shift) == "add"
    assert keys.translate(ord("*") | shift) == "multiply"
    assert keys.translate(ord("%") | shift) == "percent"
    assert keys.translate(0xFF08 | shift) == "backspace"


def test_named_keys(keys):
    assert keys.translate("Enter") == "equal"
    assert keys.translate("Escape") == "clear_all"
    assert keys.translate("Backspace") == "backspace"


def test_unmapped_keys(keys):
    assert keys.translate(-1) is None
    assert keys.translate(None) is None
    assert keys.translate(ord("x")) is None
    assert keys.translate(0x250000) is None
    assert keys.translate("Tab") is None
