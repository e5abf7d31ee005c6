import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .chromosome import Schedule
from .config import GAConfig
from .operators import mutate, tournament_select, uniform_crossover
from .population import Population
from .problem import ProblemInstance

logger = logging.getLogger(__name__)


class GeneticAlgorithm:
    """Un paso generacional: elitismo + cruce por torneo, luego mutación."""

    def __init__(self, cfg: GAConfig, rng: random.Random):
        self.cfg = cfg
        self.rng = rng

    def evolve(self, population: Population) -> Population:
        return self._mutate_population(self._crossover_population(population))

    def _crossover_population(self, population: Population) -> Population:
        # Se asume la población de entrada ya ordenada por el llamador.
        new_pop = Population(population.problem)
        for i in range(min(self.cfg.elite_size, len(population))):
            new_pop.schedules.append(population[i].copy())

        while len(new_pop) < self.cfg.population_size:
            p1 = tournament_select(population.schedules, self.cfg.tournament_size, self.rng)
            p2 = tournament_select(population.schedules, self.cfg.tournament_size, self.rng)
            new_pop.schedules.append(uniform_crossover(p1, p2, self.rng, self.cfg.crossover_rate))
        return new_pop

    def _mutate_population(self, population: Population) -> Population:
        for i in range(self.cfg.elite_size, len(population)):
            mutate(population[i], self.cfg.mutation_rate, self.rng)
        return population


@dataclass
class SearchResult:
    best: Schedule
    generations: int
    history: List[Dict] = field(default_factory=list)
    population: Optional[Population] = None

    @property
    def solved(self) -> bool:
        return self.best.fitness == 1.0


class GeneticSolver:
    """
    Bucle generacional. Termina con aptitud exactamente 1.0 o al agotar
    ``cfg.generations``; en ese caso devuelve el mejor de la última
    generación, que puede conservar conflictos.
    """

    def __init__(self, problem: ProblemInstance, cfg: Optional[GAConfig] = None, rng: Optional[random.Random] = None):
        self.problem = problem
        self.cfg = cfg or GAConfig()
        self.rng = rng if rng is not None else random.Random(self.cfg.seed)
        self.engine = GeneticAlgorithm(self.cfg, self.rng)
        self.history: List[Dict] = []

    def _record(self, generation: int, population: Population):
        best = population[0]
        row = {
            "generation": generation,
            "best_fitness": best.fitness,
            "best_conflicts": best.conflicts,
            "avg_fitness": population.average_fitness(),
        }
        self.history.append(row)
        if generation % self.cfg.log_every == 0:
            logger.debug(
                "Gen %d: mejor aptitud=%.3f conflictos=%d promedio=%.3f",
                generation, row["best_fitness"], row["best_conflicts"], row["avg_fitness"],
            )

    def run(self) -> SearchResult:
        self.history = []
        population = Population.seed(self.cfg.population_size, self.problem, self.rng).sort()
        generation = 0
        self._record(generation, population)

        while population[0].fitness != 1.0 and generation < self.cfg.generations:
            generation += 1
            population = self.engine.evolve(population).sort()
            self._record(generation, population)

        best = population[0]
        logger.info(
            "Búsqueda terminada en %d generaciones: aptitud=%.3f conflictos=%d",
            generation, best.fitness, best.conflicts,
        )
        return SearchResult(best=best, generations=generation, history=list(self.history), population=population)
