"""
Errores recuperables de la calculadora.

Todos derivan de CalculatorError y llevan el mensaje que se muestra en el
display mientras dura el error transitorio.
"""


class CalculatorError(Exception):
    """Error local de una acción: la acción se aborta sin tocar el estado."""

    message = "Error"

    def __init__(self, message=None):
        super().__init__(message or self.message)

    @property
    def kind(self):
        """Nombre del tipo de error (ej: "DivideByZero")."""
        return type(self).__name__


class InputTooLong(CalculatorError):
    message = "Maximo de digitos alcanzado"


class DivideByZero(CalculatorError):
    message = "No se puede dividir por cero"


class ResultOverflow(CalculatorError):
    message = "Resultado demasiado grande"


class NegativeSqrt(CalculatorError):
    message = "Raiz de numero negativo"
