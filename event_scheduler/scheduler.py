"""
Punto de entrada del motor: una petición, una búsqueda, un resultado.

Cada llamada construye su propia instancia del problema, su población y
su generador aleatorio; nada se comparte entre ejecuciones.
"""
import random
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional, Union

from .chromosome import Schedule
from .config import DEFAULT_END_TIME, DEFAULT_ROOM_COUNT, DEFAULT_START_TIME, GAConfig
from .errors import InvalidProblemConfig
from .ga import GeneticSolver, SearchResult
from .problem import ProblemInstance, build_problem

# Claves camelCase de la API HTTP -> campos de SearchRequest
_REQUEST_ALIASES = {
    "roomCount": "room_count",
    "numRooms": "room_count",
    "eventNames": "event_names",
    "startTime": "start_time",
    "endTime": "end_time",
}


def _as_room_count(value) -> int:
    # Sólo enteros: 2.7 o True no son un número de aulas.
    if isinstance(value, bool):
        raise InvalidProblemConfig(f"Número de aulas inválido: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise InvalidProblemConfig(f"Número de aulas inválido: {value!r}") from exc
    raise InvalidProblemConfig(f"Número de aulas inválido: {value!r}")


@dataclass
class SearchRequest:
    room_count: int = DEFAULT_ROOM_COUNT
    event_names: Optional[List[str]] = None
    start_time: str = DEFAULT_START_TIME
    end_time: str = DEFAULT_END_TIME

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchRequest":
        merged = asdict(cls())
        for k, v in data.items():
            key = _REQUEST_ALIASES.get(k, k)
            if key in merged:
                merged[key] = v
        merged["room_count"] = _as_room_count(merged["room_count"])
        names = merged["event_names"]
        if isinstance(names, str):
            merged["event_names"] = names.split(",")
        return cls(**merged)

    def to_problem(self, cfg: Optional[GAConfig] = None) -> ProblemInstance:
        return build_problem(self.room_count, self.event_names, self.start_time, self.end_time, cfg)


@dataclass(frozen=True)
class Assignment:
    event_id: int
    event_name: str
    room_id: int
    room_name: str
    time_slot: int
    time_slot_label: str


@dataclass
class BestResult:
    fitness: float
    conflict_count: int
    generations: int
    assignments: List[Assignment] = field(default_factory=list)

    @classmethod
    def from_schedule(cls, schedule: Schedule, generations: int) -> "BestResult":
        axis = schedule.problem.axis
        assignments = [
            Assignment(
                event_id=ev.id,
                event_name=ev.name,
                room_id=ev.room.id,
                room_name=ev.room.name,
                time_slot=ev.time_slot,
                time_slot_label=axis.label(ev.time_slot),
            )
            for ev in schedule.events
        ]
        return cls(
            fitness=schedule.fitness,
            conflict_count=schedule.conflicts,
            generations=generations,
            assignments=assignments,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fitness": self.fitness,
            "conflictCount": self.conflict_count,
            "generations": self.generations,
            "assignments": [
                {
                    "eventId": a.event_id,
                    "eventName": a.event_name,
                    "roomId": a.room_id,
                    "room": a.room_name,
                    "timeSlotLabel": a.time_slot_label,
                }
                for a in self.assignments
            ],
        }


def solve(problem: ProblemInstance, cfg: Optional[GAConfig] = None, rng: Optional[random.Random] = None) -> SearchResult:
    return GeneticSolver(problem, cfg, rng).run()


def run_search(
    request: Union[SearchRequest, Dict[str, Any]],
    cfg: Optional[GAConfig] = None,
    rng: Optional[random.Random] = None,
) -> BestResult:
    if isinstance(request, dict):
        request = SearchRequest.from_dict(request)
    cfg = cfg or GAConfig()
    result = solve(request.to_problem(cfg), cfg, rng)
    return BestResult.from_schedule(result.best, result.generations)
