"""
Módulo de la aplicación principal.
Contiene el temporizador de errores; la clase que integra todos los
componentes está en app.calculator_app (requiere OpenCV).
"""

from .error_timer import ErrorRecoveryTimer

__all__ = ['ErrorRecoveryTimer']
