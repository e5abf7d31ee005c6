"""Errores del motor de asignación."""


class SchedulingError(Exception):
    """Base de los errores del motor."""


class InvalidProblemConfig(SchedulingError, ValueError):
    """Parámetros del problema inválidos (aulas, eventos o rango horario)."""


class NoRoomAvailable(SchedulingError):
    """Ninguna aula está disponible en la franja sorteada."""

    def __init__(self, time_slot: int):
        super().__init__(f"No hay aulas disponibles para la franja {time_slot}")
        self.time_slot = time_slot
