"""
Formateo y redondeo de números para el display.

Funciones compartidas por la calculadora y el renderizador:
    - round_result: redondeo a 10 decimales tras cada operación binaria
    - number_to_text: representación textual más corta de un float
    - format_number: texto que se muestra en pantalla (máx. 12 cifras)
"""

import math

import numpy as np


# Símbolos de operadores para el historial
OPERATOR_SYMBOLS = {
    "+": "+",
    "-": "−",
    "*": "×",
    "/": "÷",
}

ROUND_SCALE = 1e10          # 10 decimales
MAX_PLAIN = 999999999999    # Por encima: notación científica
MIN_PLAIN = 0.000001        # Por debajo (y distinto de 0): notación científica
MAX_DISPLAY_CHARS = 12


def operator_symbol(op):
    """Retorna el símbolo de display de un operador ("*" → "×")."""
    return OPERATOR_SYMBOLS.get(op, op)


def round_result(value):
    """
    Redondea un resultado a 10 decimales (mitad lejos de cero).

    Args:
        value (float): Resultado bruto de la operación

    Returns:
        float: Valor redondeado

    Elimina el ruido de coma flotante binaria (ej: 0.1 + 0.2 → 0.3).
    Magnitudes tan grandes que no tienen precisión por debajo de 1e-10
    se devuelven sin tocar.
    """
    scaled = abs(value) * ROUND_SCALE
    if not math.isfinite(scaled) or scaled >= 2 ** 53:
        return value
    return math.copysign(math.floor(scaled + 0.5), value) / ROUND_SCALE


def number_to_text(value):
    """
    Convierte un float al texto más corto que lo representa.

    Args:
        value (float): Número a convertir

    Returns:
        str: "8" para 8.0, "0.00001" para 1e-05, "1e-07" para valores
             diminutos, "Infinity" para infinito

    El texto siempre se puede volver a leer con float().
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    magnitude = abs(value)
    if magnitude >= 1e21 or magnitude < MIN_PLAIN:
        return repr(value)
    return np.format_float_positional(value, trim="-")


def format_number(value):
    """
    Formatea un número para mostrarlo en pantalla.

    Args:
        value (float): Número a formatear

    Returns:
        str: Texto para el display

    Reglas:
        - |x| > 999.999.999.999 o 0 < |x| < 0.000001 → científica, 6 decimales
        - Si el texto supera 12 caracteres → se reduce a 12 cifras significativas
        - 42.0 → "42"
    """
    if not math.isfinite(value):
        return number_to_text(value)

    magnitude = abs(value)
    if magnitude > MAX_PLAIN or (value != 0 and magnitude < MIN_PLAIN):
        return to_exponential(value)

    text = number_to_text(value)
    if len(text) > MAX_DISPLAY_CHARS:
        # Re-parsear tras redondear para quitar ceros finales
        return number_to_text(float(f"{value:.12g}"))
    return text


def to_exponential(value, digits=6):
    """Notación científica con exponente sin ceros a la izquierda (1.000000e-7)."""
    mantissa, exponent = f"{value:.{digits}e}".split("e")
    return f"{mantissa}e{int(exponent):+d}"


def parse_number(text):
    """Lee un literal del display ("12.", "-0.5", "1e+21") como float."""
    try:
        return float(text)
    except ValueError:
        return 0.0
