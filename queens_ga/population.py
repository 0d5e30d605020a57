"""
Population management for the N-Queens GA.

Owns the live population, its fitness table and the run state, and
advances them one generation at a time: selection -> variation ->
evaluation -> elitist merge -> stagnation tracking.
"""

from typing import List, Optional, Tuple
import numpy as np

from .data_models import (
    Chromosome,
    FitnessRecord,
    GAConfig,
    GenerationSnapshot,
    InvariantViolation,
    RunState,
)
from .fitness import evaluate_population
from .selection import select_parents
from .crossover import choose_crossover_point, single_point_crossover
from .mutation import mutate


def sort_by_fitness(records: List[FitnessRecord]) -> List[FitnessRecord]:
    """
    Sort fitness records in descending score order.

    The sort is stable, so equal scores keep their original order.

    For example
        [(90, 0), (78, 1), (87, 2), (88, 3)]
    produces
        [(90, 0), (88, 3), (87, 2), (78, 1)]
    """
    return sorted(records, key=lambda record: record.score, reverse=True)


def elitist_merge(
    population: List[Chromosome],
    fitness: List[FitnessRecord],
    offspring: List[Chromosome],
    offspring_fitness: List[FitnessRecord],
    size: int
) -> Tuple[List[Chromosome], List[FitnessRecord]]:
    """
    Merge old population and offspring into the next generation.

    Both fitness tables are sorted best-first and interleaved: the old head
    is taken unless an offspring remains with a strictly higher score. Once
    the offspring are exhausted the remaining slots come from the old pool.

    Args:
        population: Current generation
        fitness: Fitness records of the current generation
        offspring: Offspring buffer
        offspring_fitness: Fitness records of the offspring buffer
        size: Size of the next generation

    Returns:
        Tuple of (next_population, next_fitness), best individual first,
        with fitness indices renumbered to the new positions

    Raises:
        InvariantViolation: If the pools cannot fill the next generation
    """
    old_sorted = sort_by_fitness(fitness)
    new_sorted = sort_by_fitness(offspring_fitness)

    next_population = []
    next_fitness = []
    old_p = 0
    new_p = 0

    for i in range(size):
        offspring_left = new_p < len(new_sorted)
        old_left = old_p < len(old_sorted)

        if old_left and (not offspring_left or old_sorted[old_p].score >= new_sorted[new_p].score):
            record = old_sorted[old_p]
            chromosome = population[record.index]
            old_p += 1
        elif offspring_left:
            record = new_sorted[new_p]
            chromosome = offspring[record.index]
            new_p += 1
        else:
            raise InvariantViolation(
                f"Merge ran out of individuals at slot {i} of {size}"
            )

        next_population.append(chromosome)
        next_fitness.append(FitnessRecord(score=record.score, index=i))

    return next_population, next_fitness


class PopulationManager:
    """
    Owns one GA population and advances it generation by generation.

    All state (population, fitness table, run state) lives on the instance.
    A step builds the next generation in scratch buffers and only replaces
    the live state once every invariant has been checked.
    """

    def __init__(self, config: GAConfig, rng: np.random.Generator):
        """
        Args:
            config: Validated GA configuration
            rng: Random number generator shared by all operators
        """
        self.config = config
        self.rng = rng

        self._population: List[Chromosome] = []
        self._fitness: List[FitnessRecord] = []
        self._state: Optional[RunState] = None

        # Chromosomes held in memory during the last step (old + offspring)
        self.last_step_resident = 0
        # Genes changed by mutation while breeding the last generation
        self.last_step_mutations = 0
        self._breed_mutations = 0

    @property
    def initialized(self) -> bool:
        return self._state is not None

    @property
    def population(self) -> List[Chromosome]:
        """Copy of the current population."""
        return list(self._population)

    @property
    def fitness(self) -> List[FitnessRecord]:
        """Copy of the current fitness table."""
        return list(self._fitness)

    @property
    def run_state(self) -> RunState:
        """Copy of the current run state."""
        self._require_initialized()
        return self._state.copy()

    def initialize(self) -> GenerationSnapshot:
        """
        Create and evaluate a random initial population.

        The best individual is the first one with the maximum score.
        Generation counting starts at 1.

        Returns:
            Snapshot of generation 1
        """
        n = self.config.chromosome_length
        genes = self.rng.integers(0, n, size=(self.config.population_size, n))
        population = [tuple(int(gene) for gene in row) for row in genes]
        fitness = evaluate_population(population)

        best = max(fitness, key=lambda record: record.score)

        self._check_invariants(population, fitness)
        self._population = population
        self._fitness = fitness
        self._state = RunState(
            generation=1,
            best_fitness=best.score,
            best_chromosome=tuple(population[best.index]),
            stagnation=0,
            stagnation_limit=self.config.stagnation_limit,
        )
        self.last_step_resident = len(population)
        self.last_step_mutations = 0

        return self.snapshot()

    def breed(self) -> List[Chromosome]:
        """
        Produce exactly population_size / 2 offspring.

        Pairs of distinct parents are selected by roulette wheel, crossed
        over at a random point, and both children are mutated. When the
        target count is odd the final crossover keeps only its first child.
        The number of mutated genes is tallied for the next step to publish.

        Returns:
            Offspring buffer
        """
        target = self.config.offspring_count
        n = self.config.chromosome_length
        offspring = []
        mutations = 0

        while len(offspring) < target:
            first, second = select_parents(self._fitness, self.rng)
            point = choose_crossover_point(n, self.rng)
            child_a, child_b = single_point_crossover(
                self._population[first], self._population[second], point
            )

            child_a, op_log = mutate(child_a, self.config.mutation_rate, self.rng)
            mutations += len(op_log)
            offspring.append(child_a)
            if len(offspring) == target:
                break

            child_b, op_log = mutate(child_b, self.config.mutation_rate, self.rng)
            mutations += len(op_log)
            offspring.append(child_b)

        self._breed_mutations = mutations
        return offspring

    def step(self) -> GenerationSnapshot:
        """
        Advance the population by one generation.

        Returns:
            Snapshot after the step

        Raises:
            RuntimeError: If called before initialize()
            InvariantViolation: If the merged generation is inconsistent;
                the live state is left untouched in that case
        """
        self._require_initialized()

        offspring = self.breed()
        offspring_fitness = evaluate_population(offspring)
        if len(offspring_fitness) != len(offspring):
            raise InvariantViolation(
                f"Offspring fitness table has {len(offspring_fitness)} entries "
                f"for {len(offspring)} offspring"
            )
        self.last_step_resident = len(self._population) + len(offspring)

        next_population, next_fitness = elitist_merge(
            self._population,
            self._fitness,
            offspring,
            offspring_fitness,
            self.config.population_size,
        )
        self._check_invariants(next_population, next_fitness)

        previous = self._state
        best_score = next_fitness[0].score
        stagnation = previous.stagnation + 1 if best_score == previous.best_fitness else 0

        next_state = RunState(
            generation=previous.generation + 1,
            best_fitness=best_score,
            best_chromosome=tuple(next_population[0]),
            stagnation=stagnation,
            stagnation_limit=previous.stagnation_limit,
        )

        self._population = next_population
        self._fitness = next_fitness
        self._state = next_state
        self.last_step_mutations = self._breed_mutations

        return self.snapshot()

    def snapshot(self) -> GenerationSnapshot:
        """Read-only view of the best-so-far state."""
        self._require_initialized()
        return GenerationSnapshot(
            generation=self._state.generation,
            best_fitness=self._state.best_fitness,
            best_chromosome=tuple(self._state.best_chromosome),
            conflicts=self.config.optimum - self._state.best_fitness,
            stagnation=self._state.stagnation,
            mutations=self.last_step_mutations,
        )

    def _check_invariants(
        self,
        population: List[Chromosome],
        fitness: List[FitnessRecord]
    ) -> None:
        size = self.config.population_size
        n = self.config.chromosome_length

        if len(population) != size:
            raise InvariantViolation(f"Population size is {len(population)}, expected {size}")

        if len(fitness) != len(population):
            raise InvariantViolation(
                f"Fitness table has {len(fitness)} entries for {len(population)} chromosomes"
            )

        for i, chromosome in enumerate(population):
            if len(chromosome) != n:
                raise InvariantViolation(
                    f"Chromosome {i} has length {len(chromosome)}, expected {n}"
                )

    def _require_initialized(self) -> None:
        if self._state is None:
            raise RuntimeError("Population has not been initialized; call initialize() first")
