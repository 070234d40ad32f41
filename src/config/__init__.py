"""
Módulo de configuración para la calculadora.
Contiene la clase de configuración y preferencias.
"""

from .settings import CalculatorConfig

__all__ = ['CalculatorConfig']
