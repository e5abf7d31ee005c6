# event_scheduler/population.py
import random
from typing import Iterator, List, Optional

from .chromosome import Schedule
from .problem import ProblemInstance


class Population:
    """
    Secuencia ordenada de horarios. Sólo está ordenada (mejor primero)
    justo después de ``sort()``.
    """

    def __init__(self, problem: ProblemInstance, schedules: Optional[List[Schedule]] = None):
        self.problem = problem
        self.schedules: List[Schedule] = list(schedules or [])

    @classmethod
    def seed(cls, size: int, problem: ProblemInstance, rng: random.Random) -> "Population":
        return cls(problem, [Schedule.random_for(problem, rng) for _ in range(size)])

    def sort(self) -> "Population":
        self.schedules.sort(key=lambda s: s.fitness, reverse=True)
        return self

    def average_fitness(self) -> float:
        return sum(s.fitness for s in self.schedules) / len(self.schedules)

    def __len__(self) -> int:
        return len(self.schedules)

    def __iter__(self) -> Iterator[Schedule]:
        return iter(self.schedules)

    def __getitem__(self, idx: int) -> Schedule:
        return self.schedules[idx]
