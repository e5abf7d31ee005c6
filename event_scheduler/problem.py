# event_scheduler/problem.py
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .config import DEFAULT_EVENT_NAMES, GAConfig
from .errors import InvalidProblemConfig, NoRoomAvailable
from .model import Event, Room
from .timeslots import SlotAxis


@dataclass(frozen=True)
class ProblemInstance:
    rooms: Tuple[Room, ...]
    events: Tuple[Event, ...]
    axis: SlotAxis

    def __post_init__(self):
        if len(self.rooms) < 1:
            raise InvalidProblemConfig("Se necesita al menos un aula")
        if len(self.events) < 1:
            raise InvalidProblemConfig("Se necesita al menos un evento")
        for idx, room in enumerate(self.rooms):
            if room.id != idx:
                raise InvalidProblemConfig(f"El aula {room.name} tiene id {room.id}, se esperaba {idx}")
            if len(room.availability) != self.axis.n_slots:
                raise InvalidProblemConfig(
                    f"La disponibilidad de {room.name} tiene {len(room.availability)} franjas, "
                    f"se esperaban {self.axis.n_slots}"
                )

    @property
    def n_slots(self) -> int:
        return self.axis.n_slots

    def available_rooms(self, slot: int) -> List[Room]:
        return [room for room in self.rooms if room.is_available(slot)]

    def random_assignment(self, rng: random.Random) -> Tuple[Room, int]:
        """Franja uniforme del eje y luego aula uniforme entre las disponibles."""
        slot = rng.randrange(self.n_slots)
        candidates = self.available_rooms(slot)
        if not candidates:
            raise NoRoomAvailable(slot)
        return rng.choice(candidates), slot


def staggered_availability(room_count: int, n_slots: int) -> List[List[bool]]:
    """
    El aula i (desde 0) queda no disponible en sus primeras i franjas.
    Así la primera aula siempre está libre y cada franja tiene al menos una.
    """
    schedule = []
    for i in range(room_count):
        row = [True] * n_slots
        for j in range(min(i, n_slots)):
            row[j] = False
        schedule.append(row)
    return schedule


def build_rooms(availability: Sequence[Sequence[bool]], names: Optional[Sequence[str]] = None) -> Tuple[Room, ...]:
    rooms = []
    for idx, row in enumerate(availability):
        name = names[idx] if names else f"Room {idx + 1}"
        rooms.append(Room(id=idx, name=str(name), availability=tuple(bool(v) for v in row)))
    return tuple(rooms)


def build_events(event_names: Sequence[str]) -> Tuple[Event, ...]:
    events = []
    for idx, name in enumerate(event_names):
        clean = str(name).strip()
        if not clean:
            raise InvalidProblemConfig(f"El evento en la posición {idx} no tiene nombre")
        events.append(Event(idx, clean))
    return tuple(events)


def build_problem(
    room_count: int,
    event_names: Optional[Sequence[str]],
    start_time: str,
    end_time: str,
    cfg: Optional[GAConfig] = None,
) -> ProblemInstance:
    cfg = cfg or GAConfig()
    if isinstance(room_count, bool) or not isinstance(room_count, int):
        raise InvalidProblemConfig(f"El número de aulas debe ser entero: {room_count!r}")
    if room_count < 1:
        raise InvalidProblemConfig("El número de aulas debe ser >= 1")
    names = DEFAULT_EVENT_NAMES if event_names is None else list(event_names)
    if not names:
        raise InvalidProblemConfig("La lista de eventos está vacía")

    axis = SlotAxis.from_clock(start_time, end_time, cfg.slot_width_hours)
    rooms = build_rooms(staggered_availability(room_count, axis.n_slots))
    return ProblemInstance(rooms=rooms, events=build_events(names), axis=axis)
