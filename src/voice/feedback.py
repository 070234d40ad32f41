"""
Sistema de feedback por voz usando pyttsx3.

Este módulo proporciona síntesis de voz para feedback auditivo,
ejecutándose de forma asíncrona para no bloquear la interfaz.
"""

import threading
from collections import deque

import pyttsx3


NUMBERS_ES = {
    0: "cero", 1: "uno", 2: "dos", 3: "tres", 4: "cuatro",
    5: "cinco", 6: "seis", 7: "siete", 8: "ocho", 9: "nueve"
}

OPERATIONS_ES = {
    "+": "más",
    "-": "menos",
    "*": "por",
    "/": "dividido",
}


def result_to_speech(text):
    """
    Convierte el texto del display en una frase pronunciable.

    Args:
        text (str): Texto del display (ej: "-3.5", "1.234568e+12")

    Returns:
        str: Frase (ej: "menos 3 coma 5")
    """
    spoken = text.replace("e+", " por diez a la ").replace("e-", " por diez a la menos ")
    if spoken.startswith("-"):
        spoken = "menos " + spoken[1:]
    return spoken.replace(".", " coma ")


# ============================================================================
# CLASE: VoiceFeedback
# Propósito: Síntesis de voz para feedback auditivo
# Responsabilidades:
#   - Sintetizar texto a voz en el idioma configurado
#   - Ejecutar en hilo separado para no bloquear UI
#   - Gestionar cola de mensajes para evitar solapamiento
# ============================================================================
class VoiceFeedback:
    """
    Sistema de feedback por voz usando pyttsx3.

    Características:
        - Ejecución asíncrona (no bloquea la aplicación)
        - Cola de mensajes (un mensaje a la vez)
        - El motor solo se inicializa si la voz está activada
    """

    def __init__(self, config):
        """
        Inicializa el motor de síntesis de voz.

        Args:
            config (CalculatorConfig): Configuración de la calculadora
        """
        self.config = config
        self.engine = None
        self.is_speaking = False
        self.message_queue = deque(maxlen=5)  # Cola de máximo 5 mensajes

        if self.config.voice_enabled:
            self._init_engine()

    def _init_engine(self):
        try:
            self.engine = pyttsx3.init()
            self._configure_engine()
            print("✓ Sistema de voz inicializado correctamente")
        except Exception as e:
            print(f"⚠ Advertencia: No se pudo inicializar el sistema de voz: {e}")
            self.engine = None
            self.config.voice_enabled = False

    def _configure_engine(self):
        """
        Configura el motor de voz con las preferencias del usuario.
        Busca una voz cuyo ID o idiomas coincidan con config.voice_language.
        """
        self.engine.setProperty('volume', self.config.voice_volume)
        self.engine.setProperty('rate', self.config.voice_rate)

        language = self.config.voice_language.lower()
        for voice in self.engine.getProperty('voices'):
            languages = [
                lang.decode(errors="ignore") if isinstance(lang, bytes) else str(lang)
                for lang in (getattr(voice, 'languages', None) or [])
            ]
            if (any(lang.lower().lstrip("\x05").startswith(language) for lang in languages)
                    or f"{language}-" in voice.id.lower()):
                self.engine.setProperty('voice', voice.id)
                print(f"✓ Voz seleccionada: {voice.name}")
                return

        print(f"⚠ No se encontró voz para '{language}'. Usando voz predeterminada.")

    def set_enabled(self, enabled):
        """
        Activa o desactiva la voz en caliente.

        Returns:
            bool: Estado final (False si el motor no pudo iniciarse)
        """
        self.config.voice_enabled = enabled
        if enabled and self.engine is None:
            self._init_engine()
        return self.config.voice_enabled

    def speak(self, text):
        """
        Reproduce un mensaje de voz de forma asíncrona.

        Args:
            text (str): Texto a sintetizar
        """
        if not self.config.voice_enabled or not self.engine:
            return

        self.message_queue.append(text)

        if not self.is_speaking:
            self.is_speaking = True
            thread = threading.Thread(target=self._process_queue, daemon=True)
            thread.start()

    def _process_queue(self):
        """Procesa la cola de mensajes uno por uno."""
        while len(self.message_queue) > 0:
            message = self.message_queue.popleft()
            try:
                self.engine.say(message)
                self.engine.runAndWait()
            except Exception as e:
                print(f"⚠ Error al reproducir voz: {e}")

        self.is_speaking = False

    def speak_number(self, number):
        """Reproduce un dígito del 0 al 9."""
        self.speak(NUMBERS_ES.get(number, str(number)))

    def speak_operation(self, operation):
        """Reproduce el nombre de una operación (+, -, *, /)."""
        self.speak(OPERATIONS_ES.get(operation, operation))

    def speak_result(self, display_text):
        """Reproduce el resultado mostrado: "igual a ..."."""
        self.speak(f"igual a {result_to_speech(display_text)}")

    def speak_error(self, error):
        """Reproduce el mensaje de un CalculatorError."""
        self.speak(f"error, {str(error).lower()}")
