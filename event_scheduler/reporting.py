"""
Tablas de salida (pandas) para consola, CSV y la app Streamlit.

Sólo se leen la aptitud, los conflictos y la asignación pública de cada
evento; nada del estado interno del motor.
"""
from pathlib import Path
from typing import Dict, List

import pandas as pd

from .chromosome import Schedule
from .population import Population
from .problem import ProblemInstance


def rooms_to_dataframe(problem: ProblemInstance) -> pd.DataFrame:
    labels = [problem.axis.label(s) for s in problem.axis.slots()]
    data = []
    for room in problem.rooms:
        row = {"Room": room.name}
        for label, free in zip(labels, room.availability):
            row[label] = "Available" if free else "Unavailable"
        data.append(row)
    return pd.DataFrame(data, columns=["Room"] + labels)


def events_to_dataframe(problem: ProblemInstance) -> pd.DataFrame:
    return pd.DataFrame(
        [{"Event #": ev.id, "Event Name": ev.name} for ev in problem.events],
        columns=["Event #", "Event Name"],
    )


def population_to_dataframe(population: Population) -> pd.DataFrame:
    data = []
    for i, schedule in enumerate(population, start=1):
        data.append(
            {
                "Schedule #": i,
                "Fitness": round(schedule.fitness, 3),
                "# of conflicts": schedule.conflicts,
                "Events": str(schedule),
            }
        )
    return pd.DataFrame(data, columns=["Schedule #", "Fitness", "# of conflicts", "Events"])


def schedule_to_dataframe(schedule: Schedule) -> pd.DataFrame:
    axis = schedule.problem.axis
    data = []
    for ev in schedule.events:
        data.append(
            {
                "Event #": ev.id,
                "Event Name": ev.name,
                "Room": ev.room.name if ev.room is not None else "N/A",
                "Time Slot": axis.label(ev.time_slot) if ev.time_slot is not None else "N/A",
            }
        )
    return pd.DataFrame(data, columns=["Event #", "Event Name", "Room", "Time Slot"])


def history_to_dataframe(history: List[Dict]) -> pd.DataFrame:
    return pd.DataFrame(history, columns=["generation", "best_fitness", "best_conflicts", "avg_fitness"])


def export_outputs(schedule: Schedule, history: List[Dict], out_dir: Path) -> Dict[str, Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    paths = {
        "schedule": out_dir / "schedule.csv",
        "history": out_dir / "history.csv",
        "metrics": out_dir / "metrics.csv",
    }
    schedule_to_dataframe(schedule).to_csv(paths["schedule"], index=False)
    history_to_dataframe(history).to_csv(paths["history"], index=False)
    metrics = {
        "fitness": schedule.fitness,
        "conflicts": schedule.conflicts,
        "generations_ran": max(len(history) - 1, 0),
    }
    pd.DataFrame([metrics]).to_csv(paths["metrics"], index=False)
    return paths
