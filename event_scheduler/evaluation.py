# event_scheduler/evaluation.py
from typing import Sequence

import numpy as np

from .model import Event
from .problem import ProblemInstance


def count_conflicts(events: Sequence[Event], problem: ProblemInstance) -> int:
    """
    Conflictos = eventos en un aula no disponible en su franja
               + pares de eventos distintos que comparten aula y franja.

    Los choques se cuentan con una matriz de ocupación [aula][franja]:
    una celda con c eventos aporta c*(c-1)/2 pares.
    """
    occupancy = np.zeros((len(problem.rooms), problem.n_slots), dtype=int)
    unavailable = 0
    for ev in events:
        if not ev.is_assigned:
            raise ValueError(f"El evento {ev.id} no tiene asignación")
        if not ev.room.is_available(ev.time_slot):
            unavailable += 1
        occupancy[ev.room.id, ev.time_slot] += 1

    double_booked = int((occupancy * (occupancy - 1) // 2).sum())
    return unavailable + double_booked


def fitness_from_conflicts(conflicts: int) -> float:
    return 1.0 / (1.0 * (conflicts + 1))


def evaluate(schedule) -> float:
    """Aptitud pura de un horario, sin tocar su caché."""
    return fitness_from_conflicts(count_conflicts(schedule.events, schedule.problem))
