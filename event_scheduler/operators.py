import random
from typing import List, Sequence

from .chromosome import Schedule
from .model import Event


def tournament_select(population: Sequence[Schedule], size: int, rng: random.Random) -> Schedule:
    """Torneo con reemplazo sobre toda la población; gana el de mayor aptitud."""
    contenders = [population[rng.randrange(len(population))] for _ in range(size)]
    contenders.sort(key=lambda s: s.fitness, reverse=True)
    return contenders[0]


def uniform_crossover(p1: Schedule, p2: Schedule, rng: random.Random, rate: float = 0.5) -> Schedule:
    """
    Cruce uniforme: cada gen viene del padre 1 con probabilidad ``rate``
    y del padre 2 en caso contrario. El hijo recibe copias, nunca los
    eventos de los padres (Schedule copia lo que recibe).
    """
    if len(p1) != len(p2):
        raise ValueError("Los padres deben tener el mismo número de eventos")
    genes: List[Event] = []
    for g1, g2 in zip(p1.events, p2.events):
        source = g1 if rng.random() < rate else g2
        genes.append(source)
    return Schedule(p1.problem, genes)


def mutate(schedule: Schedule, mutation_rate: float, rng: random.Random):
    """
    Reasigna cada gen con probabilidad ``mutation_rate`` a un (aula, franja)
    sorteado como en la inicialización.
    """
    for idx in range(len(schedule)):
        if rng.random() < mutation_rate:
            room, slot = schedule.problem.random_assignment(rng)
            schedule.assign(idx, room, slot)
