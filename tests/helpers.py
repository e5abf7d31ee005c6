import random

from event_scheduler.model import Event
from event_scheduler.problem import ProblemInstance, build_rooms
from event_scheduler.timeslots import SlotAxis


class ScriptedRandom(random.Random):
    """Random cuyo randrange devuelve índices prefijados."""

    _indices = ()

    def script(self, indices):
        self._indices = list(indices)
        return self

    def randrange(self, *args, **kwargs):
        return self._indices.pop(0)


def two_room_problem(n_events=2):
    # Room A libre en las 3 franjas; Room B ocupada en la franja 0
    axis = SlotAxis.from_clock("09:00 AM", "12:00 PM")
    rooms = build_rooms([[True, True, True], [False, True, True]], names=["Room A", "Room B"])
    events = tuple(Event(i, f"Event {i + 1}") for i in range(n_events))
    return ProblemInstance(rooms=rooms, events=events, axis=axis)


def single_slot_problem(n_events=3):
    axis = SlotAxis.from_clock("09:00 AM", "10:00 AM")
    rooms = build_rooms([[True]])
    events = tuple(Event(i, f"Event {i + 1}") for i in range(n_events))
    return ProblemInstance(rooms=rooms, events=events, axis=axis)
