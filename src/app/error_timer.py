"""
Temporizador de recuperación tras error.

Este módulo contiene la clase ErrorRecoveryTimer: un temporizador de un solo
disparo que el bucle principal consulta en cada frame (sin hilos).
"""

import time


class ErrorRecoveryTimer:
    """
    Temporizador cancelable de un solo disparo.

    Uso:
        timer.schedule()          # Tras mostrar un error
        timer.cancel()            # Si el usuario sigue tecleando
        if timer.poll():          # En cada frame
            calc.clear()
    """

    def __init__(self, delay=1.5, clock=time.monotonic):
        """
        Args:
            delay (float): Segundos hasta el disparo
            clock (callable): Reloj en segundos (inyectable para tests)
        """
        self.delay = delay
        self.clock = clock
        self.deadline = None

    @property
    def active(self):
        return self.deadline is not None

    def schedule(self):
        """Programa (o reprograma) el disparo dentro de delay segundos."""
        self.deadline = self.clock() + self.delay

    def cancel(self):
        self.deadline = None

    def remaining(self):
        """Segundos que faltan para el disparo (0 si no está programado)."""
        if self.deadline is None:
            return 0.0
        return max(0.0, self.deadline - self.clock())

    def poll(self):
        """
        Comprueba si venció el plazo.

        Returns:
            bool: True una sola vez cuando vence; luego queda desactivado
        """
        if self.deadline is None or self.clock() < self.deadline:
            return False
        self.deadline = None
        return True
