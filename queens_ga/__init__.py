"""
N-Queens Genetic Algorithm

Searches for a placement of N non-attacking queens on an N x N board using
a generational genetic algorithm.

Key Features:
- Fitness-proportionate (roulette-wheel) selection of distinct parents
- Single-point crossover and per-gene mutation
- Elitist merge of old population and offspring
- Stagnation-based termination

Modules:
- data_models: Core data structures (GAConfig, FitnessRecord, RunState, GenerationSnapshot)
- fitness: Non-attacking pair counting
- selection: Roulette-wheel parent selection
- crossover: Single-point crossover
- mutation: Per-gene random-reset mutation
- population: PopulationManager (one generation step)
- driver: GADriver (run loop and termination)
- config_loader: YAML configuration loading and validation
- io_utils: CSV export of run history and solutions
- visualization: Text board rendering and matplotlib reports
- cli: Command-line interface
"""

__version__ = "0.1.0"
__author__ = "N-Queens GA Team"

from .data_models import (
    GAConfig,
    FitnessRecord,
    RunState,
    GenerationSnapshot,
    ConfigurationError,
    InvariantViolation,
)
from .fitness import evaluate, count_conflicts, max_fitness
from .population import PopulationManager
from .driver import GADriver, RunResult, RunStatus

__all__ = [
    "GAConfig",
    "FitnessRecord",
    "RunState",
    "GenerationSnapshot",
    "ConfigurationError",
    "InvariantViolation",
    "evaluate",
    "count_conflicts",
    "max_fitness",
    "PopulationManager",
    "GADriver",
    "RunResult",
    "RunStatus",
]
