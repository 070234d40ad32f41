"""
Módulo de interfaz de usuario.
Contiene la distribución del teclado en pantalla y el renderizador
(ui.renderer, que requiere OpenCV).
"""

from .keypad import Keypad, Button

__all__ = ['Keypad', 'Button']
