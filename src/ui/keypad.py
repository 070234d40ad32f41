"""
Distribución de botones en pantalla.

Este módulo contiene la clase Keypad, que calcula la posición de cada botón
según el modo (básico/avanzado) y resuelve qué botón hay bajo un clic.
"""

from collections import namedtuple


Button = namedtuple("Button", ["label", "gid", "kind", "x", "y", "w", "h"])

# Filas del modo básico: (etiqueta, ID de acción, tipo)
BASIC_ROWS = [
    [("C", "clear_all", "control"), ("<-", "backspace", "control"),
     ("%", "percent", "function"), ("/", "divide", "operator")],
    [("7", "num_7", "digit"), ("8", "num_8", "digit"),
     ("9", "num_9", "digit"), ("x", "multiply", "operator")],
    [("4", "num_4", "digit"), ("5", "num_5", "digit"),
     ("6", "num_6", "digit"), ("-", "subtract", "operator")],
    [("1", "num_1", "digit"), ("2", "num_2", "digit"),
     ("3", "num_3", "digit"), ("+", "add", "operator")],
    [("+/-", "negate", "function"), ("0", "num_0", "digit"),
     (".", "decimal", "digit"), ("=", "equal", "equal")],
]

# Filas extra del modo avanzado
ADVANCED_ROWS = [
    [("sqrt", "sqrt", "function"), ("x^2", "square", "function"),
     ("1/x", "reciprocal", "function")],
    [("MC", "memory_clear", "memory"), ("MR", "memory_recall", "memory"),
     ("M+", "memory_add", "memory"), ("M-", "memory_subtract", "memory")],
]

MODE_ROW = [("BASICO", "mode_basic", "mode"), ("AVANZADO", "mode_advanced", "mode")]

MODES = ("basic", "advanced")


# ============================================================================
# CLASE: Keypad
# Propósito: Geometría del teclado en pantalla
# Responsabilidades:
#   - Posicionar botones de modo, filas avanzadas y filas básicas
#   - Resolver clics de ratón → ID de acción
# ============================================================================
class Keypad:
    """
    Teclado en pantalla.

    Estructura (de arriba abajo):
        1. Fila de modo: BASICO / AVANZADO
        2. Filas avanzadas (solo en modo avanzado): sqrt, x^2, 1/x, memoria
        3. Filas básicas: dígitos, operadores, C, <-, %, +/-, =
    """

    def __init__(self, width, height, top=230, margin=20, gap=10, mode="basic"):
        """
        Args:
            width (int): Ancho de la ventana en píxeles
            height (int): Alto de la ventana en píxeles
            top (int): Coordenada Y donde empieza el teclado
            margin (int): Margen lateral e inferior
            gap (int): Separación entre botones
            mode (str): 'basic' o 'advanced'
        """
        self.width = width
        self.height = height
        self.top = top
        self.margin = margin
        self.gap = gap
        self.mode = None
        self.buttons = []
        self.set_mode(mode)

    def set_mode(self, mode):
        """Cambia de modo y recalcula la posición de los botones."""
        if mode not in MODES:
            raise ValueError(f"Modo desconocido: {mode!r}")
        self.mode = mode
        self.buttons = self._layout()

    def toggle_mode(self):
        self.set_mode("advanced" if self.mode == "basic" else "basic")
        return self.mode

    def rows(self):
        """Filas visibles en el modo actual (sin la fila de modo)."""
        if self.mode == "advanced":
            return ADVANCED_ROWS + BASIC_ROWS
        return list(BASIC_ROWS)

    def _layout(self):
        buttons = []
        inner_w = self.width - 2 * self.margin
        y = self.top

        # Fila de modo (más baja que el resto)
        mode_h = 44
        buttons.extend(self._layout_row(MODE_ROW, y, mode_h, inner_w))
        y += mode_h + self.gap

        rows = self.rows()
        available = self.height - self.margin - y
        row_h = min(72, (available - self.gap * (len(rows) - 1)) // len(rows))
        for row in rows:
            buttons.extend(self._layout_row(row, y, row_h, inner_w))
            y += row_h + self.gap
        return buttons

    def _layout_row(self, row, y, h, inner_w):
        # Fila de modo: 2 columnas; el resto: rejilla de 4
        cols = 2 if len(row) == 2 else 4
        w = (inner_w - self.gap * (cols - 1)) // cols
        result = []
        for i, (label, gid, kind) in enumerate(row):
            x = self.margin + i * (w + self.gap)
            result.append(Button(label, gid, kind, x, y, w, h))
        return result

    def button_at(self, px, py):
        """
        Busca el botón bajo un punto.

        Args:
            px (int): Coordenada X del clic
            py (int): Coordenada Y del clic

        Returns:
            Button | None: Botón encontrado o None
        """
        for button in self.buttons:
            if button.x <= px < button.x + button.w and button.y <= py < button.y + button.h:
                return button
        return None

    def find(self, gid):
        """Retorna el botón con el ID dado (o None si no está visible)."""
        for button in self.buttons:
            if button.gid == gid:
                return button
        return None
