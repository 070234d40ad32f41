"""
Traducción de teclas físicas a acciones de la calculadora.

Este módulo contiene la clase KeyMapper, que convierte el código devuelto
por cv2.waitKeyEx() (o el nombre de una tecla) en un ID de acción.
"""


# IDs de acción para caracteres simples
CHAR_ACTIONS = {
    "+": "add",
    "-": "subtract",
    "*": "multiply",
    "/": "divide",
    ".": "decimal",
    ",": "decimal",
    "=": "equal",
    "%": "percent",
    "c": "clear_all",
    "C": "clear_all",
}

# Teclas especiales (códigos de cv2.waitKeyEx)
CODE_ACTIONS = {
    13: "equal",        # Enter
    10: "equal",        # Enter (Linux)
    27: "clear_all",    # Escape
    8: "backspace",     # Backspace
    127: "backspace",   # Backspace (macOS)
    # Keysyms X11 (cv2.waitKeyEx en Linux)
    0xFF08: "backspace",  # BackSpace
    0xFF0D: "equal",      # Return
    0xFF8D: "equal",      # KP_Enter
    0xFF1B: "clear_all",  # Escape
    0xFFAB: "add",        # KP_Add
    0xFFAD: "subtract",   # KP_Subtract
    0xFFAA: "multiply",   # KP_Multiply
    0xFFAF: "divide",     # KP_Divide
    0xFFAE: "decimal",    # KP_Decimal
    0xFFBD: "equal",      # KP_Equal
}

# Teclado numérico: KP_0 .. KP_9
KEYPAD_DIGITS = range(0xFFB0, 0xFFBA)

# GTK añade el estado de los modificadores (Shift, Bloq Num...) en los bits altos
KEY_MASK = 0xFFFF

# Teclas por nombre (ej: eventos de otros frontends)
NAMED_ACTIONS = {
    "Enter": "equal",
    "Escape": "clear_all",
    "Backspace": "backspace",
}


# ============================================================================
# CLASE: KeyMapper
# Propósito: Convertir eventos de teclado en IDs de acción
# Responsabilidades:
#   - Dígitos 0-9 → "num_0".."num_9"
#   - + - * / → operadores
#   - . , → decimal; Enter = → igual; Escape c C → borrar; Backspace; %
# ============================================================================
class KeyMapper:
    """
    Mapeo de teclas a acciones.

    Los IDs devueltos son los mismos que usan los botones en pantalla,
    de modo que la aplicación procesa ambos con un solo dispatcher.
    """

    def translate(self, key):
        """
        Traduce una tecla a ID de acción.

        Args:
            key (int | str): Código de cv2.waitKeyEx() o nombre de la tecla
                             ("5", "+", "Enter", "Backspace"...)

        Returns:
            str | None: ID de acción (ej: "num_5", "add") o None si la
                        tecla no tiene acción asociada
        """
        if isinstance(key, str):
            if len(key) == 1:
                return self._translate_char(key)
            return NAMED_ACTIONS.get(key)

        # -1 = ninguna tecla presionada
        if key is None or key < 0:
            return None
        key &= KEY_MASK
        if key in KEYPAD_DIGITS:
            return f"num_{key - KEYPAD_DIGITS.start}"
        if key in CODE_ACTIONS:
            return CODE_ACTIONS[key]
        if key < 256:
            return self._translate_char(chr(key))
        return None

    def _translate_char(self, char):
        if "0" <= char <= "9":
            return f"num_{char}"
        return CHAR_ACTIONS.get(char)
