"""
Lógica de calculadora aritmética de acumulador secuencial.

Este módulo contiene la clase Calculator, una máquina de estados sin I/O:
cada acción (dígito, operador, igual, memoria...) muta el estado y devuelve
un RenderSnapshot con todo lo que la interfaz necesita para pintar.
"""

import functools
import math
from collections import namedtuple

from .errors import (
    CalculatorError,
    DivideByZero,
    InputTooLong,
    NegativeSqrt,
    ResultOverflow,
)
from .number_format import (
    format_number,
    number_to_text,
    operator_symbol,
    parse_number,
    round_result,
)


OPERATORS = ("+", "-", "*", "/")
MAX_DIGITS = 15
EDITABLE_CHARS = set("-.0123456789")


# Lo que la interfaz pinta tras cada acción
RenderSnapshot = namedtuple(
    "RenderSnapshot",
    ["display_text", "history_text", "memory_text", "is_error", "error"],
)


# ============================================================================
# CLASE: CalculatorState
# Propósito: Estado completo de la calculadora
# ============================================================================
class CalculatorState:
    """
    Estado mutable de la calculadora.

    Variables de estado:
        - current_operand: Literal en pantalla ("0", "12.", "-3.5")
        - pending_operand: Operando izquierdo capturado al elegir operador
        - pending_operator: "+", "-", "*", "/" o None
        - awaiting_fresh_operand: El próximo dígito empieza un número nuevo
        - memory: Memoria (M+, M-, MR, MC); sobrevive a clear()
        - history_text: Traza legible de la última operación
        - carried_value: Valor completo del último resultado calculado
        - repeat_operator / repeat_operand: Par reaplicado por "=" repetido
    """

    def __init__(self):
        self.memory = 0.0
        self.reset()

    def reset(self):
        """Vuelve a los valores por defecto (excepto la memoria)."""
        self.current_operand = "0"
        self.pending_operand = None
        self.pending_operator = None
        self.awaiting_fresh_operand = False
        self.history_text = ""
        self.carried_value = None
        self.repeat_operator = None
        self.repeat_operand = None

    def digit_count(self):
        return sum(1 for ch in self.current_operand if ch.isdigit())

    def is_editable(self):
        """True si current_operand es un literal decimal simple (sin "e", "Infinity")."""
        return all(ch in EDITABLE_CHARS for ch in self.current_operand)


def action(method):
    """
    Marca un método como acción de usuario.

    Tras ejecutar la acción emite el snapshot resultante. Si la acción
    lanza un CalculatorError el estado no se toca y se emite un snapshot
    de error en su lugar.
    """
    @functools.wraps(method)
    def wrapper(self, *args):
        try:
            method(self, *args)
        except CalculatorError as error:
            return self._emit(self.error_snapshot(error))
        return self._emit(self.snapshot())
    return wrapper


# ============================================================================
# CLASE: Calculator
# Propósito: Máquina de estados del acumulador
# Responsabilidades:
#   - Construir el operando dígito a dígito
#   - Evaluar de izquierda a derecha, sin precedencia (2 + 3 * 4 = 20)
#   - Operaciones unarias, porcentaje y memoria
#   - Convertir errores en un display de error transitorio
# ============================================================================
class Calculator:
    """
    Calculadora de acumulador con un único operador pendiente.

    Modelo de operación:
        1. Usuario ingresa dígitos → se acumulan en current_operand
        2. Usuario elige operador → current_operand pasa a pending_operand
        3. Usuario ingresa el segundo operando
        4. "=" (u otro operador) aplica la operación pendiente

    Cada acción devuelve un RenderSnapshot y, si se configuró, lo entrega
    también al callback render.
    """

    def __init__(self, render=None, max_digits=MAX_DIGITS):
        """
        Args:
            render (callable): Recibe cada RenderSnapshot emitido (opcional)
            max_digits (int): Límite de dígitos del operando
        """
        self.state = CalculatorState()
        self.render = render
        self.max_digits = max_digits
        self.last_snapshot = self.snapshot()

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------
    def snapshot(self):
        """Construye el snapshot del estado actual."""
        state = self.state
        return RenderSnapshot(
            display_text=self.display_text(),
            history_text=state.history_text,
            memory_text=self.memory_text(),
            is_error=False,
            error=None,
        )

    def error_snapshot(self, error):
        """Snapshot de error: el display muestra el mensaje del error."""
        return RenderSnapshot(
            display_text=str(error),
            history_text=self.state.history_text,
            memory_text=self.memory_text(),
            is_error=True,
            error=error,
        )

    def display_text(self):
        """
        Texto del display principal.

        Un literal tecleado se muestra tal cual ("0.", "1.50"); un valor
        calculado pasa por format_number.
        """
        state = self.state
        if state.carried_value is None:
            return state.current_operand
        return format_number(parse_number(state.current_operand))

    def memory_text(self):
        memory = self.state.memory
        return f"M: {format_number(memory)}" if memory != 0 else ""

    def _emit(self, snapshot):
        self.last_snapshot = snapshot
        if self.render:
            self.render(snapshot)
        return snapshot

    # ------------------------------------------------------------------
    # Helpers de operandos
    # ------------------------------------------------------------------
    def current_value(self):
        """Valor numérico del operando actual (operandos de operaciones binarias)."""
        state = self.state
        if state.carried_value is not None:
            return state.carried_value
        return parse_number(state.current_operand)

    def shown_value(self):
        """Valor que muestra el display (unarias, porcentaje y memoria)."""
        return parse_number(self.state.current_operand)

    def _store_value(self, value, shown=None):
        """
        Guarda un valor calculado como nuevo operando actual.

        Args:
            value (float): Valor completo, usado en la siguiente operación
            shown (float): Valor redondeado que se muestra (por defecto value)
        """
        if shown is None:
            shown = value
        self.state.current_operand = number_to_text(shown)
        # Un resultado que se muestra como 0 vale exactamente 0
        self.state.carried_value = value if shown != 0 else 0.0

    def _start_literal(self, text):
        state = self.state
        state.current_operand = text
        state.awaiting_fresh_operand = False
        state.carried_value = None

    # ------------------------------------------------------------------
    # Entrada
    # ------------------------------------------------------------------
    @action
    def input_digit(self, digit):
        """
        Añade un dígito al operando actual.

        Args:
            digit (int | str): Dígito 0-9

        Raises (capturado → snapshot de error):
            InputTooLong: Si el operando ya tiene max_digits dígitos
        """
        digit = str(digit)
        if len(digit) != 1 or not digit.isdigit():
            raise ValueError(f"Digito invalido: {digit!r}")

        state = self.state
        if state.digit_count() >= self.max_digits:
            raise InputTooLong()

        fresh = state.awaiting_fresh_operand or not state.is_editable()
        if fresh or state.current_operand == "0":
            self._start_literal(digit)
        else:
            self._start_literal(state.current_operand + digit)

    @action
    def input_decimal(self):
        """Añade el punto decimal (solo uno por operando)."""
        state = self.state
        if state.awaiting_fresh_operand or not state.is_editable():
            self._start_literal("0.")
        elif "." not in state.current_operand:
            self._start_literal(state.current_operand + ".")

    @action
    def backspace(self):
        """Borra el último carácter del literal en construcción."""
        state = self.state
        if state.awaiting_fresh_operand:
            return
        text = state.current_operand[:-1] if state.is_editable() else ""
        if text in ("", "-"):
            text = "0"
        self._start_literal(text)

    @action
    def clear(self):
        """Borra todo el estado excepto la memoria (C / Escape)."""
        self.state.reset()

    # ------------------------------------------------------------------
    # Operadores binarios
    # ------------------------------------------------------------------
    @action
    def set_operator(self, op):
        """
        Selecciona un operador binario.

        Args:
            op (str): "+", "-", "*" o "/"

        Si ya había una operación pendiente y el usuario tecleó el segundo
        operando, se evalúa primero (encadenado de izquierda a derecha).
        """
        if op not in OPERATORS:
            raise ValueError(f"Operador invalido: {op!r}")

        state = self.state
        if state.pending_operator is not None and not state.awaiting_fresh_operand:
            self._evaluate()

        state.pending_operand = self.current_value()
        state.pending_operator = op
        state.awaiting_fresh_operand = True
        state.repeat_operator = None
        state.repeat_operand = None
        state.history_text = f"{format_number(state.pending_operand)} {operator_symbol(op)}"

    @action
    def evaluate(self):
        """Tecla "=": aplica la operación pendiente o repite la última."""
        self._evaluate()

    def _evaluate(self):
        state = self.state
        if state.pending_operator is not None:
            left = state.pending_operand
            op = state.pending_operator
            # "=" sin segundo operando reutiliza el operando izquierdo
            if state.awaiting_fresh_operand:
                right = state.pending_operand
            else:
                right = self.current_value()
        elif state.repeat_operator is not None:
            left = self.current_value()
            op = state.repeat_operator
            right = state.repeat_operand
        else:
            return

        result = apply_operator(left, op, right)

        state.history_text = (
            f"{format_number(left)} {operator_symbol(op)} {format_number(right)} ="
        )
        self._store_value(result, shown=round_result(result))
        state.pending_operand = None
        state.pending_operator = None
        state.awaiting_fresh_operand = True
        state.repeat_operator = op
        state.repeat_operand = right

    # ------------------------------------------------------------------
    # Operaciones unarias
    # ------------------------------------------------------------------
    @action
    def negate(self):
        """Cambia el signo del operando actual (±)."""
        self._store_value(-self.current_value(), shown=-self.shown_value())

    @action
    def percent(self):
        """
        Porcentaje.

        Con operador pendiente calcula el porcentaje DEL operando izquierdo
        (200 + 10 % → 20); sin él divide entre 100.
        """
        state = self.state
        value = self.shown_value()
        if state.pending_operator is not None:
            self._store_value(state.pending_operand * value / 100)
        else:
            self._store_value(value / 100)

    @action
    def sqrt(self):
        value = self.shown_value()
        if value < 0:
            raise NegativeSqrt()
        self._finish_unary(math.sqrt(value), f"√{format_number(value)}")

    @action
    def square(self):
        value = self.shown_value()
        try:
            result = value * value
        except OverflowError:
            result = math.inf
        self._finish_unary(result, f"{format_number(value)}²")

    @action
    def reciprocal(self):
        value = self.shown_value()
        if value == 0:
            raise DivideByZero()
        self._finish_unary(1 / value, f"1/{format_number(value)}")

    def _finish_unary(self, result, history):
        state = self.state
        state.history_text = history
        self._store_value(result)
        state.awaiting_fresh_operand = True

    # ------------------------------------------------------------------
    # Memoria
    # ------------------------------------------------------------------
    @action
    def memory_clear(self):
        self.state.memory = 0.0

    @action
    def memory_recall(self):
        self._store_value(self.state.memory)
        self.state.awaiting_fresh_operand = True

    @action
    def memory_add(self):
        self.state.memory += self.shown_value()
        self.state.awaiting_fresh_operand = True

    @action
    def memory_subtract(self):
        self.state.memory -= self.shown_value()
        self.state.awaiting_fresh_operand = True


def apply_operator(left, op, right):
    """
    Aplica un operador binario.

    Raises:
        DivideByZero: División con divisor 0
        ResultOverflow: Resultado no finito
    """
    try:
        if op == "+":
            result = left + right
        elif op == "-":
            result = left - right
        elif op == "*":
            result = left * right
        elif op == "/":
            if right == 0:
                raise DivideByZero()
            result = left / right
        else:
            raise ValueError(f"Operador invalido: {op!r}")
    except OverflowError:
        raise ResultOverflow() from None

    if not math.isfinite(result):
        raise ResultOverflow()
    return result
