"""
Parent selection for the N-Queens GA.

Implements fitness-proportionate (roulette-wheel) selection of two
distinct parents.
"""

from typing import Optional, Sequence, Tuple
import numpy as np

from .data_models import FitnessRecord


def roulette_select(
    fitness: Sequence[FitnessRecord],
    rng: np.random.Generator,
    exclude_index: Optional[int] = None
) -> int:
    """
    Select one individual with probability proportional to its score.

    Draws r in [0, 1), sets cutoff = r * (sum of scores of all eligible
    individuals), then walks the population in order accumulating scores
    until the running sum reaches the cutoff.

    Args:
        fitness: Fitness records in population order
        rng: Random number generator
        exclude_index: Index that may not be selected (None for no exclusion)

    Returns:
        Index of the selected individual, never equal to exclude_index

    Raises:
        ValueError: If exclude_index is out of range or nothing is eligible

    Note:
        When every eligible score is zero the cutoff is zero and the first
        eligible index is returned.
    """
    size = len(fitness)

    if exclude_index is not None and not 0 <= exclude_index < size:
        raise ValueError(f"exclude_index {exclude_index} out of range for population of {size}")

    eligible = [i for i in range(size) if i != exclude_index]
    if not eligible:
        raise ValueError(f"No eligible individuals to select from (population of {size})")

    total = sum(fitness[i].score for i in eligible)
    cutoff = rng.random() * total

    accumulation = 0
    for i in eligible:
        accumulation += fitness[i].score
        if accumulation >= cutoff:
            return i

    # Only reachable through float rounding of the cutoff
    return eligible[-1]


def select_parents(
    fitness: Sequence[FitnessRecord],
    rng: np.random.Generator
) -> Tuple[int, int]:
    """
    Select two distinct parents for crossover.

    The second draw excludes the first parent.

    Args:
        fitness: Fitness records in population order
        rng: Random number generator

    Returns:
        Tuple of (first_index, second_index) with first_index != second_index

    Raises:
        ValueError: If fewer than 2 individuals are available
    """
    if len(fitness) < 2:
        raise ValueError(f"Need at least 2 individuals for crossover, got {len(fitness)}")

    first = roulette_select(fitness, rng)
    second = roulette_select(fitness, rng, exclude_index=first)
    return first, second
