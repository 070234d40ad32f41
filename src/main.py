"""
Punto de entrada de la calculadora.

Ejecución:
    python src/main.py            (o el comando `calculadora` instalado)

Requisitos:
    - Python 3.9+
    - opencv-python, numpy, pyttsx3
"""

import sys

from app.calculator_app import CalculatorApp
from config.settings import CalculatorConfig


def main(argv=None):
    """
    Crea la aplicación y ejecuta el bucle principal.

    Args:
        argv (list): Argumentos; "--sin-voz" desactiva el feedback por voz
                     y "--avanzado" arranca en modo avanzado

    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre graceful por usuario
        - Exception general: Muestra el traceback y retorna 1
    """
    argv = sys.argv[1:] if argv is None else argv

    config = CalculatorConfig()
    if "--sin-voz" in argv:
        config.voice_enabled = False
    if "--avanzado" in argv:
        config.start_mode = "advanced"

    try:
        app = CalculatorApp(config)
        app.run()
    except KeyboardInterrupt:
        print("\nInterrumpido por el usuario")
    except Exception as e:
        print(f"\nError: {e}")
        import traceback
        traceback.print_exc()
        return 1
    return 0


# ============================================================================
# PUNTO DE ENTRADA PRINCIPAL
# ============================================================================
if __name__ == "__main__":
    sys.exit(main())
