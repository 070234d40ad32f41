"""
Configuración de la calculadora.

Este módulo contiene la configuración centralizada de la calculadora:
ventana, comportamiento del núcleo y feedback por voz.
"""


# ============================================================================
# CLASE: CalculatorConfig
# Propósito: Preferencias de la calculadora
# Responsabilidades:
#   - Dimensiones de la ventana y modo inicial del teclado
#   - Límite de dígitos y duración del error transitorio
#   - Preferencias de voz (volumen, velocidad, idioma)
# ============================================================================
class CalculatorConfig:
    """
    Configuración de la calculadora con valores por defecto.

    Opciones disponibles:
        - Ventana: tamaño y modo de teclado (básico/avanzado)
        - Núcleo: máximo de dígitos y retardo de auto-borrado tras error
        - Feedback por voz configurable (volumen, velocidad, idioma)
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # VENTANA
        # ====================================================================
        self.window_title = "Calculadora"
        self.window_width = 480             # Ancho en píxeles
        self.window_height = 820            # Alto en píxeles
        self.start_mode = "basic"           # 'basic' o 'advanced'
        self.frame_delay_ms = 30            # Espera de cv2.waitKeyEx por frame

        # ====================================================================
        # NÚCLEO
        # ====================================================================
        self.max_digits = 15                # Dígitos máximos por operando
        self.error_clear_delay = 1.5        # Segundos hasta auto-borrar tras error

        # ====================================================================
        # CONFIGURACIÓN DE VOZ
        # ====================================================================
        self.voice_enabled = True           # Activar/desactivar feedback por voz
        self.voice_volume = 0.8             # Volumen (0.0-1.0)
        self.voice_rate = 150               # Velocidad de habla (palabras por minuto)
        self.voice_language = 'es'          # Idioma ('es', 'en', etc.)

        # ====================================================================
        # FEEDBACK VISUAL
        # ====================================================================
        self.feedback_frames = 40           # Frames que dura un mensaje (~1.2s)
        self.shake_amplitude = 12           # Píxeles de la sacudida en error

