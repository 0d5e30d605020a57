"""
Data models for the N-Queens genetic algorithm.

Core data structures representing the run configuration, fitness records,
run state and the read-only per-generation snapshot.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


Chromosome = Tuple[int, ...]


class ConfigurationError(ValueError):
    """Raised when GA parameters are invalid."""
    pass


class InvariantViolation(RuntimeError):
    """Raised when a generation step breaks a population invariant."""
    pass


def _is_int(value) -> bool:
    # bool is an int subclass; YAML true/false must not pass as numbers
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class GAConfig:
    """
    Parameters of a single GA run.

    Attributes:
        chromosome_length: Board size N (number of queens, one per column)
        population_size: Number of chromosomes per generation (even, >= 2)
        mutation_rate: Per-gene mutation probability in [0, 1]
        stagnation_limit: Generations without improvement before termination
        random_seed: Seed for the random source (None draws a fresh seed)
    """
    chromosome_length: int = 8
    population_size: int = 50
    mutation_rate: float = 0.2
    stagnation_limit: int = 700
    random_seed: Optional[int] = None

    def __post_init__(self):
        """Validate parameters."""
        if not _is_int(self.chromosome_length) or self.chromosome_length < 4:
            raise ConfigurationError(
                f"chromosome_length must be an integer >= 4, got: {self.chromosome_length}"
            )

        if not _is_int(self.population_size) or self.population_size < 2:
            raise ConfigurationError(
                f"population_size must be an integer >= 2, got: {self.population_size}"
            )

        if self.population_size % 2 != 0:
            raise ConfigurationError(
                f"population_size must be even, got: {self.population_size}"
            )

        if (isinstance(self.mutation_rate, bool) or not isinstance(self.mutation_rate, (int, float))
                or not 0.0 <= self.mutation_rate <= 1.0):
            raise ConfigurationError(
                f"mutation_rate must be in [0, 1], got: {self.mutation_rate}"
            )

        if not _is_int(self.stagnation_limit) or self.stagnation_limit <= 0:
            raise ConfigurationError(
                f"stagnation_limit must be a positive integer, got: {self.stagnation_limit}"
            )

        if self.random_seed is not None and (not _is_int(self.random_seed) or self.random_seed < 0):
            raise ConfigurationError(
                f"random_seed must be a non-negative integer or None, got: {self.random_seed}"
            )

    @property
    def offspring_count(self) -> int:
        """Number of offspring produced per generation."""
        return self.population_size // 2

    @property
    def optimum(self) -> int:
        """Fitness of a conflict-free board."""
        n = self.chromosome_length
        return n * (n - 1) // 2


@dataclass(frozen=True)
class FitnessRecord:
    """
    Fitness of one chromosome.

    Attributes:
        score: Number of non-attacking pairs
        index: Position of the chromosome in its population or offspring buffer
    """
    score: int
    index: int


@dataclass
class RunState:
    """
    Mutable bookkeeping for a run, owned by the population manager.

    Attributes:
        generation: Generations completed (1 after the initial evaluation)
        best_fitness: Best score seen so far
        best_chromosome: Owned copy of the best chromosome
        stagnation: Generations since best_fitness last improved
        stagnation_limit: Stagnation count that ends the run
    """
    generation: int
    best_fitness: int
    best_chromosome: Chromosome
    stagnation: int
    stagnation_limit: int

    def copy(self) -> "RunState":
        return RunState(
            generation=self.generation,
            best_fitness=self.best_fitness,
            best_chromosome=tuple(self.best_chromosome),
            stagnation=self.stagnation,
            stagnation_limit=self.stagnation_limit,
        )


@dataclass(frozen=True)
class GenerationSnapshot:
    """
    Read-only view of the best-so-far state after a generation.

    This is everything an external renderer gets to see. mutations counts
    the genes changed while breeding this generation (0 for generation 1).
    """
    generation: int
    best_fitness: int
    best_chromosome: Chromosome
    conflicts: int
    stagnation: int
    mutations: int = 0

    def to_dict(self) -> dict:
        """
        Convert snapshot to dictionary for CSV export.

        Returns:
            Dictionary with string-serializable values
        """
        return {
            "generation": self.generation,
            "best_fitness": self.best_fitness,
            "conflicts": self.conflicts,
            "stagnation": self.stagnation,
            "mutations": self.mutations,
            "best_chromosome": " ".join(str(gene) for gene in self.best_chromosome),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GenerationSnapshot":
        """
        Create snapshot from dictionary (e.g., from CSV).

        Args:
            data: Dictionary with snapshot fields

        Returns:
            GenerationSnapshot instance
        """
        genes = data.get("best_chromosome") or ""
        return cls(
            generation=int(data["generation"]),
            best_fitness=int(data["best_fitness"]),
            best_chromosome=tuple(int(gene) for gene in genes.split()),
            conflicts=int(data["conflicts"]),
            stagnation=int(data["stagnation"]),
            mutations=int(data.get("mutations") or 0),
        )
