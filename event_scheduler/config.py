"""
Configuración del algoritmo genético.

Incluye un cargador desde YAML para dejar los parámetros reproducibles
y configurables sin tocar el código.
"""
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


DEFAULT_EVENT_NAMES: List[str] = [
    "Speed Programming",
    "Speed Wiring",
    "Cyber Quiz",
    "SDP Evaluation",
    "Poster Designing",
    "Website Designing",
    "Database Designing",
    "Algorithm Design",
]

DEFAULT_START_TIME = "09:00 AM"
DEFAULT_END_TIME = "05:00 PM"
DEFAULT_ROOM_COUNT = 3


@dataclass
class GAConfig:
    # Algoritmo genético
    population_size: int = 20
    generations: int = 200
    elite_size: int = 2
    mutation_rate: float = 0.2
    crossover_rate: float = 0.5
    tournament_size: int = 5
    seed: Optional[int] = None

    # Tiempo
    slot_width_hours: float = 1.0

    # Progreso
    log_every: int = 5

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GAConfig":
        merged = asdict(cls())
        for k, v in data.items():
            if k in merged:
                merged[k] = v
        return cls(**merged)

    def __post_init__(self):
        if self.population_size < 1:
            raise ValueError("population_size debe ser >= 1")
        if self.generations < 0:
            raise ValueError("generations no puede ser negativo")
        if not 0 <= self.elite_size <= self.population_size:
            raise ValueError("elite_size debe estar entre 0 y population_size")
        if not 0.0 <= self.mutation_rate <= 1.0:
            raise ValueError("mutation_rate debe estar en [0, 1]")
        if not 0.0 <= self.crossover_rate <= 1.0:
            raise ValueError("crossover_rate debe estar en [0, 1]")
        if self.tournament_size < 1:
            raise ValueError("tournament_size debe ser >= 1")
        if self.slot_width_hours <= 0:
            raise ValueError("slot_width_hours debe ser positivo")
        if self.log_every < 1:
            raise ValueError("log_every debe ser >= 1")


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def load_config(path: str = "config.yaml") -> GAConfig:
    data = _load_yaml(Path(path))
    if not isinstance(data, dict):
        raise ValueError(f"{path} debe contener un objeto mapeo")
    return GAConfig.from_dict(data)
