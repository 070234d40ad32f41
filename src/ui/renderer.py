"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer que dibuja todos los elementos visuales.
"""

import math

import cv2
import numpy as np

from config.settings import CalculatorConfig


# Las fuentes Hershey de OpenCV solo cubren ASCII
ASCII_REPLACEMENTS = {
    "√": "sqrt ",
    "²": "^2",
    "×": "x",
    "÷": "/",
    "−": "-",
}

# Colores BGR por tipo de botón
BUTTON_COLORS = {
    "digit": (70, 70, 70),
    "operator": (0, 140, 255),
    "equal": (60, 180, 60),
    "function": (110, 90, 70),
    "memory": (120, 70, 120),
    "control": (60, 60, 170),
    "mode": (55, 55, 55),
}

BACKGROUND = (25, 25, 25)
ERROR_COLOR = (80, 80, 255)


def to_ascii(text):
    """Sustituye los símbolos del historial por equivalentes ASCII dibujables."""
    for symbol, replacement in ASCII_REPLACEMENTS.items():
        text = text.replace(symbol, replacement)
    return text


# ============================================================================
class UIRenderer:
    """
    Renderizador de interfaz gráfica para la calculadora.

    Componentes visuales:
        1. Display principal: Historial, número actual y memoria
        2. Teclado: Botones del modo activo (resalta el último pulsado)
        3. Feedback: Mensajes temporales de confirmación
        4. Sacudida del display mientras se muestra un error
    """

    def __init__(self, width, height, config=None):
        """
        Inicializa el renderizador con dimensiones de la ventana.

        Args:
            width (int): Ancho de la ventana en píxeles
            height (int): Alto de la ventana en píxeles
            config (CalculatorConfig): Configuración (opcional)
        """
        self.width = width
        self.height = height
        self.config = config if config else CalculatorConfig()
        self.feedback_msg = ""               # Mensaje de feedback actual
        self.feedback_timer = 0              # Frames restantes para mostrar feedback
        self.feedback_color = (0, 255, 0)    # Color del feedback

        self.flash_gid = None                # Botón resaltado
        self.flash_timer = 0                 # Frames restantes de resaltado
        self.shake_timer = 0                 # Frames restantes de sacudida

    def new_canvas(self):
        """Crea un frame vacío del tamaño de la ventana."""
        return np.full((self.height, self.width, 3), BACKGROUND, dtype=np.uint8)

    def show_feedback(self, msg, color=(0, 255, 0), duration=None):
        """
        Muestra mensaje de feedback temporal.

        Args:
            msg (str): Mensaje a mostrar
            color (tuple): Color BGR del mensaje
            duration (int): Duración en frames (por defecto config.feedback_frames)
        """
        self.feedback_msg = msg
        self.feedback_color = color
        self.feedback_timer = duration if duration is not None else self.config.feedback_frames

    def flash_button(self, gid, duration=6):
        """Resalta brevemente un botón pulsado (clic o tecla)."""
        self.flash_gid = gid
        self.flash_timer = duration

    def start_shake(self, duration=15):
        self.shake_timer = duration

    def shake_offset(self):
        """Desplazamiento horizontal del display durante la sacudida."""
        if self.shake_timer <= 0:
            return 0
        return int(self.config.shake_amplitude * math.sin(self.shake_timer * 1.7))

    def draw(self, img, snapshot, keypad):
        """Dibuja un frame completo: display, teclado y feedback."""
        self.draw_display(img, snapshot)
        self.draw_keypad(img, keypad)
        self.draw_feedback(img)
        return img

    def draw_display(self, img, snapshot):
        """
        Dibuja el display principal de la calculadora.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            snapshot (RenderSnapshot): Estado a mostrar

        Componentes:
            1. Fondo oscuro con borde (rojo si hay error)
            2. Indicador de memoria (esquina superior izquierda)
            3. Historial (parte superior derecha)
            4. Número actual o mensaje de error (grande, alineado a la derecha)
        """
        offset = self.shake_offset()
        if self.shake_timer > 0:
            self.shake_timer -= 1

        x, y, w, h = 20 + offset, 20, self.width - 40, 190

        overlay = img.copy()
        cv2.rectangle(overlay, (x, y), (x + w, y + h), (35, 35, 35), -1)
        cv2.addWeighted(overlay, 0.92, img, 0.08, 0, img)
        border = ERROR_COLOR if snapshot.is_error else (100, 200, 255)
        cv2.rectangle(img, (x, y), (x + w, y + h), border, 3)

        if snapshot.memory_text:
            cv2.putText(img, to_ascii(snapshot.memory_text), (x + 15, y + 30),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.6, (100, 200, 255), 1)

        if snapshot.history_text:
            history = to_ascii(snapshot.history_text)
            self._put_right(img, history, x + w - 15, y + 70,
                            cv2.FONT_HERSHEY_SIMPLEX, 0.8, (180, 180, 180), 2, w - 30)

        color = ERROR_COLOR if snapshot.is_error else (255, 255, 255)
        start_scale = 1.0 if snapshot.is_error else 2.6
        self._put_right(img, to_ascii(snapshot.display_text), x + w - 15, y + 160,
                        cv2.FONT_HERSHEY_DUPLEX, start_scale, color, 3, w - 30)

    def _put_right(self, img, text, right, baseline, font, scale, color, thickness, max_w):
        # Reduce la fuente hasta que el texto quepa en max_w
        text_w = cv2.getTextSize(text, font, scale, thickness)[0][0]
        while text_w > max_w and scale > 0.4:
            scale -= 0.1
            text_w = cv2.getTextSize(text, font, scale, thickness)[0][0]
        cv2.putText(img, text, (right - text_w, baseline), font, scale, color, thickness)

    def draw_keypad(self, img, keypad):
        """
        Dibuja los botones del teclado.

        El botón del modo activo y el último botón pulsado se dibujan
        más claros.
        """
        if self.flash_timer > 0:
            self.flash_timer -= 1
        else:
            self.flash_gid = None

        active_mode = "mode_" + keypad.mode
        for button in keypad.buttons:
            color = BUTTON_COLORS.get(button.kind, (70, 70, 70))
            if button.gid == self.flash_gid or button.gid == active_mode:
                color = tuple(min(255, c + 70) for c in color)

            x, y, w, h = button.x, button.y, button.w, button.h
            cv2.rectangle(img, (x, y), (x + w, y + h), color, -1)
            cv2.rectangle(img, (x, y), (x + w, y + h), (200, 200, 200), 1)

            scale = 0.6 if button.kind == "mode" else 0.9
            size = cv2.getTextSize(button.label, cv2.FONT_HERSHEY_DUPLEX, scale, 2)[0]
            tx = x + (w - size[0]) // 2
            ty = y + (h + size[1]) // 2
            cv2.putText(img, button.label, (tx, ty),
                        cv2.FONT_HERSHEY_DUPLEX, scale, (255, 255, 255), 2)

    def draw_feedback(self, img):
        """
        Dibuja mensaje de feedback temporal en la parte inferior de la pantalla.

        Efecto:
            - Fade-out usando alpha blending
            - Duración controlada por feedback_timer
        """
        if self.feedback_timer > 0:
            self.feedback_timer -= 1
            alpha = min(self.feedback_timer / 20.0, 1.0)

            x, y = 30, self.height - 30

            overlay = img.copy()
            cv2.rectangle(overlay, (x - 10, y - 32), (self.width - 20, y + 10), (40, 40, 40), -1)
            cv2.addWeighted(overlay, alpha * 0.88, img, 1 - alpha * 0.88, 0, img)

            color = tuple(int(c * alpha) for c in self.feedback_color)
            cv2.putText(img, to_ascii(self.feedback_msg), (x, y),
                        cv2.FONT_HERSHEY_DUPLEX, 0.8, color, 2)

    def draw_status(self, img, voice_enabled):
        """Línea de ayuda con los atajos del shell."""
        voice = "ON" if voice_enabled else "OFF"
        cv2.putText(img, f"q: salir | m: modo | v: voz {voice}",
                    (20, 222), cv2.FONT_HERSHEY_SIMPLEX, 0.45, (150, 150, 150), 1)
