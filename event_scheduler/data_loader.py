# event_scheduler/data_loader.py
from typing import List, Tuple

import pandas as pd

from .errors import InvalidProblemConfig
from .model import Room
from .problem import build_rooms


def _parse_availability(raw) -> List[bool]:
    # "11110000" o "1,1,1,1,0,0,0,0"
    text = str(raw).replace(",", "").replace(" ", "")
    if not text or set(text) - {"0", "1"}:
        raise InvalidProblemConfig(f"Disponibilidad inválida: {raw!r}")
    return [ch == "1" for ch in text]


def load_rooms(path: str) -> Tuple[Room, ...]:
    """
    Lee aulas desde un CSV con columnas ``room`` y ``availability``.
    La disponibilidad es una cadena de 0/1, una posición por franja.
    """
    df = pd.read_csv(path, dtype={"room": str, "availability": str})
    missing = {"room", "availability"} - set(df.columns)
    if missing:
        raise InvalidProblemConfig(f"{path}: faltan columnas {sorted(missing)}")
    df = df.dropna(subset=["room"])
    availability = [_parse_availability(v) for v in df["availability"]]
    return build_rooms(availability, names=df["room"].str.strip().tolist())


def load_event_names(path: str) -> List[str]:
    df = pd.read_csv(path, dtype={"event": str})
    if "event" not in df.columns:
        raise InvalidProblemConfig(f"{path}: falta la columna 'event'")
    return df["event"].dropna().str.strip().tolist()
