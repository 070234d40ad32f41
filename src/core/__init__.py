"""
Módulo core con la lógica principal de la calculadora.
Contiene la máquina de estados, el formateo de números y el mapeo de teclas.
"""

from .calculator import Calculator, CalculatorState, RenderSnapshot
from .errors import (
    CalculatorError,
    DivideByZero,
    InputTooLong,
    NegativeSqrt,
    ResultOverflow,
)
from .key_mapper import KeyMapper
from .number_format import format_number

__all__ = [
    'Calculator', 'CalculatorState', 'RenderSnapshot',
    'CalculatorError', 'InputTooLong', 'DivideByZero', 'ResultOverflow', 'NegativeSqrt',
    'KeyMapper', 'format_number',
]
