import argparse
import json
import logging
import random
import sys
import time
from pathlib import Path

from event_scheduler.config import (
    DEFAULT_END_TIME,
    DEFAULT_EVENT_NAMES,
    DEFAULT_ROOM_COUNT,
    DEFAULT_START_TIME,
    load_config,
)
from event_scheduler.data_loader import load_event_names, load_rooms
from event_scheduler.errors import InvalidProblemConfig, NoRoomAvailable
from event_scheduler.problem import ProblemInstance, build_events
from event_scheduler.reporting import (
    events_to_dataframe,
    export_outputs,
    population_to_dataframe,
    rooms_to_dataframe,
    schedule_to_dataframe,
)
from event_scheduler.scheduler import BestResult, SearchRequest, solve
from event_scheduler.timeslots import SlotAxis


def build_problem_from_args(args, cfg) -> ProblemInstance:
    names = load_event_names(args.events_csv) if args.events_csv else None
    if args.events:
        names = args.events.split(",")
    request = SearchRequest(
        room_count=args.rooms,
        event_names=names,
        start_time=args.start,
        end_time=args.end,
    )
    if not args.rooms_csv:
        return request.to_problem(cfg)

    axis = SlotAxis.from_clock(args.start, args.end, cfg.slot_width_hours)
    events = build_events(names if names is not None else DEFAULT_EVENT_NAMES)
    return ProblemInstance(rooms=load_rooms(args.rooms_csv), events=events, axis=axis)


def print_available_data(problem: ProblemInstance):
    print("> Datos disponibles")
    print(rooms_to_dataframe(problem).to_string(index=False))
    print()
    print(events_to_dataframe(problem).to_string(index=False))
    print()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Asignación de eventos a aulas con un algoritmo genético")
    parser.add_argument("--config", default="config.yaml", help="Ruta al archivo de configuración")
    parser.add_argument("--rooms", type=int, default=DEFAULT_ROOM_COUNT, help="Número de aulas")
    parser.add_argument("--events", default=None, help="Nombres de eventos separados por comas")
    parser.add_argument("--start", default=DEFAULT_START_TIME, help="Hora de inicio (hh:mm AM/PM)")
    parser.add_argument("--end", default=DEFAULT_END_TIME, help="Hora de fin (hh:mm AM/PM)")
    parser.add_argument("--rooms_csv", default=None, help="CSV con columnas room, availability")
    parser.add_argument("--events_csv", default=None, help="CSV con columna event")
    parser.add_argument("--seed", type=int, default=None, help="Semilla (sobrescribe la del config)")
    parser.add_argument("--out_dir", default="outputs", help="Directorio de salida de los CSV")
    parser.add_argument("--json", action="store_true", help="Imprime el resultado como JSON")
    parser.add_argument("--verbose", action="store_true", help="Muestra el progreso por generación")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s - %(message)s",
    )

    cfg = load_config(args.config)
    seed = args.seed if args.seed is not None else cfg.seed
    rng = random.Random(seed)

    try:
        problem = build_problem_from_args(args, cfg)
        if not args.json:
            print_available_data(problem)
        start = time.perf_counter()
        result = solve(problem, cfg, rng)
    except (InvalidProblemConfig, NoRoomAvailable) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    elapsed = time.perf_counter() - start

    best = result.best
    if args.json:
        print(json.dumps({"bestSchedule": BestResult.from_schedule(best, result.generations).to_dict()}, indent=2))
    else:
        if args.verbose:
            print(f"> Generación {result.generations}")
            print(population_to_dataframe(result.population).to_string(index=False))
            print()
        print("--- MEJOR HORARIO ---")
        print(f"Aptitud: {best.fitness:.3f} | Conflictos: {best.conflicts} | "
              f"Generaciones: {result.generations} | Tiempo: {elapsed:.2f}s")
        print(schedule_to_dataframe(best).to_string(index=False))

    paths = export_outputs(best, result.history, Path(args.out_dir))
    logging.getLogger(__name__).info("Resultados guardados en %s", paths["schedule"].parent)
    return 0


if __name__ == "__main__":
    sys.exit(main())
