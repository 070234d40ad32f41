import pytest

from core.calculator import Calculator


class FakeClock:
    """Reloj manual para temporizadores."""

    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def enter(calc, keys):
    """Teclea una secuencia ("2+3*4=") y retorna el último snapshot."""
    snapshot = calc.last_snapshot
    for key in keys:
        if key.isdigit():
            snapshot = calc.input_digit(key)
        elif key in "+-*/":
            snapshot = calc.set_operator(key)
        elif key == ".":
            snapshot = calc.input_decimal()
        elif key == "=":
            snapshot = calc.evaluate()
        elif key == "%":
            snapshot = calc.percent()
        else:
            raise ValueError(key)
    return snapshot


@pytest.fixture
def calc():
    return Calculator()


@pytest.fixture
def clock():
    return FakeClock()
