"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase CalculatorApp.
"""

import cv2

from app.error_timer import ErrorRecoveryTimer
from config.settings import CalculatorConfig
from core.calculator import Calculator
from core.key_mapper import KEY_MASK, KeyMapper
from ui.keypad import Keypad
from ui.renderer import UIRenderer
from voice.feedback import VoiceFeedback


OPERATOR_IDS = {
    "add": "+",
    "subtract": "-",
    "multiply": "*",
    "divide": "/",
}

MODE_NAMES = {"basic": "BASICO", "advanced": "AVANZADO"}


# ============================================================================
class CalculatorApp:
    """
    Aplicación principal de la calculadora.

    Arquitectura:
        - Calculator: Máquina de estados pura (sin I/O)
        - KeyMapper / Keypad: Teclas y clics → IDs de acción
        - UIRenderer: Renderizado del snapshot con OpenCV
        - VoiceFeedback: Confirmación por voz
        - CalculatorApp: Coordinador, bucle principal y temporizador de error

    Errores transitorios:
        - Un snapshot con is_error programa un clear() a los 1.5 s
        - Cualquier acción posterior cancela ese clear() pendiente
    """

    def __init__(self, config=None):
        """
        Inicializa la aplicación (la ventana se crea en run()).

        Args:
            config (CalculatorConfig): Configuración (opcional)
        """
        self.config = config if config else CalculatorConfig()
        self.width = self.config.window_width
        self.height = self.config.window_height

        self.timer = ErrorRecoveryTimer(self.config.error_clear_delay)
        self.keys = KeyMapper()
        self.keypad = Keypad(self.width, self.height, mode=self.config.start_mode)
        self.ui = UIRenderer(self.width, self.height, self.config)
        self.voice = VoiceFeedback(self.config)
        self.calc = Calculator(render=self.on_render, max_digits=self.config.max_digits)

        self.snapshot = self.calc.last_snapshot
        self.running = False

        self.actions = {
            "decimal": self.calc.input_decimal,
            "equal": self.calc.evaluate,
            "clear_all": self.calc.clear,
            "backspace": self.calc.backspace,
            "negate": self.calc.negate,
            "percent": self.calc.percent,
            "sqrt": self.calc.sqrt,
            "square": self.calc.square,
            "reciprocal": self.calc.reciprocal,
            "memory_clear": self.calc.memory_clear,
            "memory_recall": self.calc.memory_recall,
            "memory_add": self.calc.memory_add,
            "memory_subtract": self.calc.memory_subtract,
        }

    def on_render(self, snapshot):
        """Recibe cada snapshot emitido por la calculadora."""
        self.snapshot = snapshot
        if snapshot.is_error:
            self.timer.schedule()
            self.ui.start_shake()
            self.voice.speak_error(snapshot.error)

    def process(self, gid):
        """
        Procesa un ID de acción (de teclado o de botón).

        Args:
            gid (str): ID de acción (ej: "num_5", "add", "equal", "mode_advanced")

        Returns:
            bool: True si el ID era conocido

        Toda acción que toca el estado cancela el auto-borrado pendiente.
        """
        # ====================================================================
        # MODO: solo afecta al teclado en pantalla
        # ====================================================================
        if gid in ("mode_basic", "mode_advanced"):
            self.keypad.set_mode(gid.split("_")[1])
            self.ui.show_feedback(f"MODO {MODE_NAMES[self.keypad.mode]}", (0, 255, 255))
            return True

        # ====================================================================
        # NÚMEROS (0-9)
        # ====================================================================
        if gid.startswith("num_"):
            digit = int(gid.split("_")[1])
            self.timer.cancel()
            snapshot = self.calc.input_digit(digit)
            if not snapshot.is_error:
                self.voice.speak_number(digit)

        # ====================================================================
        # OPERADORES (+ - x /)
        # ====================================================================
        elif gid in OPERATOR_IDS:
            op = OPERATOR_IDS[gid]
            self.timer.cancel()
            snapshot = self.calc.set_operator(op)
            if not snapshot.is_error:
                self.voice.speak_operation(op)

        # ====================================================================
        # RESTO DE ACCIONES
        # ====================================================================
        elif gid in self.actions:
            self.timer.cancel()
            snapshot = self.actions[gid]()
            if snapshot.is_error:
                return True
            if gid == "equal":
                self.voice.speak_result(snapshot.display_text)
            elif gid == "clear_all":
                self.ui.show_feedback("TODO BORRADO", (80, 80, 255))
                self.voice.speak("todo borrado")
            elif gid.startswith("memory_"):
                self.ui.show_feedback(f"MEMORIA: {self.calc.memory_text() or '0'}",
                                      (255, 200, 100))
        else:
            return False

        self.ui.flash_button(gid)
        return True

    def tick(self):
        """Avanza un frame: dispara el auto-borrado si venció el error."""
        if self.timer.poll():
            self.calc.clear()

    def handle_key(self, key):
        """
        Procesa una tecla de cv2.waitKeyEx().

        Atajos del shell (no son acciones de la calculadora):
            - 'q': Salir
            - 'm': Alternar modo básico/avanzado
            - 'v': Activar/desactivar voz
        """
        if key < 0:
            return
        key &= KEY_MASK
        char = chr(key) if key < 256 else ""

        if char == "q":
            self.running = False
        elif char == "m":
            mode = self.keypad.toggle_mode()
            self.ui.show_feedback(f"MODO {MODE_NAMES[mode]}", (0, 255, 255))
        elif char == "v":
            enabled = self.voice.set_enabled(not self.config.voice_enabled)
            status = "ACTIVADA" if enabled else "DESACTIVADA"
            print(f"🔊 Voz: {status}")
            self.ui.show_feedback(f"VOZ {status}", (0, 255, 255), 60)
            if enabled:
                self.voice.speak("voz activada")
        else:
            gid = self.keys.translate(key)
            if gid:
                self.process(gid)

    def on_mouse(self, event, x, y, flags, param):
        """Callback de ratón de OpenCV: un clic pulsa el botón bajo el cursor."""
        if event != cv2.EVENT_LBUTTONDOWN:
            return
        button = self.keypad.button_at(x, y)
        if button:
            self.process(button.gid)

    def render_frame(self):
        """Dibuja el estado actual en un frame nuevo y lo retorna."""
        frame = self.ui.new_canvas()
        self.ui.draw(frame, self.snapshot, self.keypad)
        self.ui.draw_status(frame, self.config.voice_enabled)
        return frame

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Disparar auto-borrado si venció un error
            2. Renderizar el snapshot actual
            3. Mostrar frame y procesar teclado (los clics llegan por callback)
            4. Repetir hasta 'q' o cerrar la ventana
        """
        print("\n" + "=" * 60)
        print("CALCULADORA")
        print("=" * 60)
        print("\nDigitos: 0-9 | Operadores: + - * / | Decimal: . ,")
        print("Igual: Enter o = | Borrar: Esc o c | Retroceso | Porcentaje: %")
        print("Clic en los botones para el resto de funciones")
        print("\nPresiona 'q' para salir, 'm' para cambiar de modo, 'v' para la voz")
        print("=" * 60 + "\n")

        title = self.config.window_title
        cv2.namedWindow(title)
        cv2.setMouseCallback(title, self.on_mouse)

        self.running = True
        while self.running:
            self.tick()
            cv2.imshow(title, self.render_frame())

            key = cv2.waitKeyEx(self.config.frame_delay_ms)
            self.handle_key(key)

            # Ventana cerrada con el botón del sistema
            if cv2.getWindowProperty(title, cv2.WND_PROP_VISIBLE) < 1:
                break

        cv2.destroyAllWindows()
        print("\nOK Aplicacion cerrada correctamente")
