"""
Cromosoma: un horario completo, un gen (aula, franja) por evento.

La aptitud se calcula bajo demanda y queda en caché hasta la próxima
escritura sobre cualquiera de sus eventos.
"""
import random
from typing import Iterable, List, Optional, Tuple

from .evaluation import count_conflicts, fitness_from_conflicts
from .model import Event, Room
from .problem import ProblemInstance


class Schedule:
    def __init__(self, problem: ProblemInstance, events: Optional[Iterable[Event]] = None):
        self.problem = problem
        self._events: List[Event] = []
        self._fitness: Optional[float] = None
        self._conflicts: Optional[int] = None
        for ev in events or ():
            self._append(ev.copy())

    def _append(self, ev: Event):
        ev.bind(self)
        self._events.append(ev)
        self.invalidate_fitness()

    @classmethod
    def random_for(cls, problem: ProblemInstance, rng: random.Random) -> "Schedule":
        return cls(problem).initialize(rng)

    def initialize(self, rng: random.Random) -> "Schedule":
        self._events = []
        for template in self.problem.events:
            room, slot = self.problem.random_assignment(rng)
            self._append(Event(template.id, template.name, room, slot))
        return self

    @property
    def events(self) -> Tuple[Event, ...]:
        return tuple(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def assignment_at(self, index: int) -> Tuple[Room, int]:
        ev = self._events[index]
        return ev.room, ev.time_slot

    def assign(self, index: int, room: Room, slot: int):
        self._events[index].assign(room, slot)
        self.invalidate_fitness()

    def invalidate_fitness(self):
        self._fitness = None
        self._conflicts = None

    def _ensure_fitness(self):
        if self._fitness is None:
            self._conflicts = count_conflicts(self._events, self.problem)
            self._fitness = fitness_from_conflicts(self._conflicts)

    @property
    def fitness(self) -> float:
        self._ensure_fitness()
        return self._fitness

    @property
    def conflicts(self) -> int:
        self._ensure_fitness()
        return self._conflicts

    def copy(self) -> "Schedule":
        clone = Schedule(self.problem, self._events)
        clone._fitness = self._fitness
        clone._conflicts = self._conflicts
        return clone

    def same_assignments(self, other: "Schedule") -> bool:
        return [(e.id, e.room, e.time_slot) for e in self._events] == [
            (e.id, e.room, e.time_slot) for e in other._events
        ]

    def describe_event(self, ev: Event) -> str:
        room = ev.room.name if ev.room is not None else "N/A"
        time = self.problem.axis.label(ev.time_slot) if ev.time_slot is not None else "N/A"
        return f"{ev.name}, Room: {room}, Time: {time}"

    def __str__(self):
        return ", ".join(self.describe_event(ev) for ev in self._events)
