# event_scheduler/model.py
from dataclasses import dataclass
from typing import Optional, Tuple

SlotIdx = int


@dataclass(frozen=True)
class Room:
    id: int
    name: str
    availability: Tuple[bool, ...]

    def is_available(self, slot: SlotIdx) -> bool:
        return self.availability[slot]


class Event:
    """
    Un evento con su asignación (aula, franja).

    Cada escritura de ``room`` o ``time_slot`` avisa al horario dueño
    para que invalide su aptitud en caché.
    """

    __slots__ = ("_id", "_name", "_room", "_time_slot", "_owner")

    def __init__(self, id: int, name: str, room: Optional[Room] = None, time_slot: Optional[SlotIdx] = None):
        self._id = id
        self._name = name
        self._room = room
        self._time_slot = time_slot
        self._owner = None

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def room(self) -> Optional[Room]:
        return self._room

    @room.setter
    def room(self, room: Optional[Room]):
        self._room = room
        self._touch()

    @property
    def time_slot(self) -> Optional[SlotIdx]:
        return self._time_slot

    @time_slot.setter
    def time_slot(self, slot: Optional[SlotIdx]):
        self._time_slot = slot
        self._touch()

    @property
    def is_assigned(self) -> bool:
        return self._room is not None and self._time_slot is not None

    def assign(self, room: Room, slot: SlotIdx):
        self._room = room
        self._time_slot = slot
        self._touch()

    def copy(self) -> "Event":
        return Event(self._id, self._name, self._room, self._time_slot)

    def bind(self, owner):
        self._owner = owner

    def _touch(self):
        if self._owner is not None:
            self._owner.invalidate_fitness()

    def __repr__(self):
        return f"Event(id={self._id}, name={self._name!r}, room={self._room and self._room.name!r}, time_slot={self._time_slot})"
