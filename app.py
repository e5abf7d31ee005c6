# app.py
import random

import streamlit as st

from event_scheduler.config import (
    DEFAULT_END_TIME,
    DEFAULT_EVENT_NAMES,
    DEFAULT_ROOM_COUNT,
    DEFAULT_START_TIME,
    GAConfig,
    load_config,
)
from event_scheduler.errors import InvalidProblemConfig, NoRoomAvailable
from event_scheduler.reporting import (
    events_to_dataframe,
    history_to_dataframe,
    population_to_dataframe,
    rooms_to_dataframe,
    schedule_to_dataframe,
)
from event_scheduler.scheduler import BestResult, SearchRequest, solve

# --- CONFIGURACIÓN DE PÁGINA ---
st.set_page_config(page_title="Asignación de Eventos", layout="wide", initial_sidebar_state="expanded")


def read_parameters(base_cfg: GAConfig):
    with st.sidebar:
        st.title("🧬 Parámetros")
        st.markdown("---")
        room_count = st.number_input("Número de aulas", min_value=1, value=DEFAULT_ROOM_COUNT, step=1)
        names_text = st.text_area("Eventos (uno por línea)", value="\n".join(DEFAULT_EVENT_NAMES), height=220)
        start_time = st.text_input("Hora de inicio", value=DEFAULT_START_TIME)
        end_time = st.text_input("Hora de fin", value=DEFAULT_END_TIME)
        st.markdown("---")
        seed = st.number_input("Semilla", min_value=0, value=base_cfg.seed or 0, step=1)
        generations = st.slider("Máximo de generaciones", 1, 1000, base_cfg.generations)
        mutation_rate = st.slider("Tasa de mutación", 0.0, 1.0, float(base_cfg.mutation_rate), 0.05)
        st.info("Sistema de Asignación de Eventos\nAlgoritmo Genético")

    request = SearchRequest(
        room_count=int(room_count),
        event_names=[line for line in names_text.splitlines() if line.strip()],
        start_time=start_time,
        end_time=end_time,
    )
    cfg = GAConfig.from_dict({
        **vars(base_cfg),
        "generations": generations,
        "mutation_rate": mutation_rate,
        "seed": int(seed),
    })
    return request, cfg


def main():
    if "base_cfg" not in st.session_state:
        st.session_state.base_cfg = load_config("config.yaml")
    request, cfg = read_parameters(st.session_state.base_cfg)

    st.header("📋 Asignación de Eventos a Aulas")

    if st.button("🚀 Generar horario"):
        try:
            problem = request.to_problem(cfg)
            result = solve(problem, cfg, random.Random(cfg.seed))
        except (InvalidProblemConfig, NoRoomAvailable) as e:
            st.error(f"No se pudo generar el horario: {e}")
            return
        st.session_state.problem = problem
        st.session_state.result = result

    if "result" not in st.session_state:
        st.caption("Configura los parámetros y presiona 'Generar horario'.")
        return

    problem = st.session_state.problem
    result = st.session_state.result
    best = result.best

    tabs = st.tabs(["Mejor Horario", "Datos", "Última Generación", "Evolución"])
    with tabs[0]:
        c1, c2, c3 = st.columns(3)
        c1.metric("Aptitud", f"{best.fitness:.3f}")
        c2.metric("Conflictos", best.conflicts)
        c3.metric("Generaciones", result.generations)
        st.dataframe(schedule_to_dataframe(best), use_container_width=True, hide_index=True)
        with st.expander("JSON"):
            st.json(BestResult.from_schedule(best, result.generations).to_dict())
    with tabs[1]:
        st.subheader("Aulas")
        st.dataframe(rooms_to_dataframe(problem), use_container_width=True, hide_index=True)
        st.subheader("Eventos")
        st.dataframe(events_to_dataframe(problem), use_container_width=True, hide_index=True)
    with tabs[2]:
        st.dataframe(population_to_dataframe(result.population), use_container_width=True, hide_index=True)
    with tabs[3]:
        history = history_to_dataframe(result.history).set_index("generation")
        st.line_chart(history[["best_fitness", "avg_fitness"]])


if __name__ == "__main__":
    main()
