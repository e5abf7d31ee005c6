"""
Eje de franjas horarias discretas.

Las horas se leen en formato de reloj de 12 horas ("09:00 AM") y se
anclan a una fecha de referencia; sólo importa la diferencia entre ellas.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Union

from .errors import InvalidProblemConfig

CLOCK_FORMAT = "%I:%M %p"


def parse_clock(value: Union[str, datetime]) -> datetime:
    if isinstance(value, datetime):
        return value
    try:
        return datetime.strptime(str(value).strip().upper(), CLOCK_FORMAT)
    except ValueError as exc:
        raise InvalidProblemConfig(f"Hora inválida {value!r}, se esperaba hh:mm AM/PM") from exc


@dataclass(frozen=True)
class SlotAxis:
    start: datetime
    end: datetime
    width: timedelta = timedelta(hours=1)

    @classmethod
    def from_clock(cls, start: str, end: str, width_hours: float = 1.0) -> "SlotAxis":
        return cls(parse_clock(start), parse_clock(end), timedelta(hours=width_hours))

    def __post_init__(self):
        if self.end <= self.start:
            raise InvalidProblemConfig("La hora de fin debe ser posterior a la de inicio")
        if self.width <= timedelta(0):
            raise InvalidProblemConfig("El ancho de franja debe ser positivo")
        if self.n_slots < 1:
            raise InvalidProblemConfig("El rango horario no alcanza para una franja completa")

    @property
    def n_slots(self) -> int:
        return (self.end - self.start) // self.width

    def slots(self) -> range:
        return range(self.n_slots)

    def start_of(self, slot: int) -> datetime:
        return self.start + slot * self.width

    def label(self, slot: int) -> str:
        return self.start_of(slot).strftime(CLOCK_FORMAT)

    def index_of(self, moment: datetime) -> int:
        return (moment - self.start) // self.width
