"""
Crossover operators for the N-Queens GA.

Implements single-point crossover over fixed-length chromosomes.
"""

from typing import Sequence, Tuple
import numpy as np

from .data_models import Chromosome


def choose_crossover_point(length: int, rng: np.random.Generator) -> int:
    """
    Pick a crossover point uniformly from [1, length - 2].

    Both children then inherit at least one gene from each parent and
    the last gene is never the only one exchanged.

    Args:
        length: Chromosome length (at least 3)
        rng: Random number generator

    Returns:
        Crossover point

    Raises:
        ValueError: If the chromosome is too short to split
    """
    if length < 3:
        raise ValueError(f"Chromosome length must be at least 3 for crossover, got {length}")

    return int(rng.integers(1, length - 1))


def single_point_crossover(
    parent_a: Sequence[int],
    parent_b: Sequence[int],
    point: int
) -> Tuple[Chromosome, Chromosome]:
    """
    Combine two parents by exchanging their tails at a single point.

    child_a = parent_a[:point] + parent_b[point:]
    child_b = parent_b[:point] + parent_a[point:]

    Args:
        parent_a: First parent
        parent_b: Second parent
        point: Crossover point in [1, len - 1]

    Returns:
        Tuple of (child_a, child_b)

    Raises:
        ValueError: If parents differ in length or point is out of range
    """
    length = len(parent_a)

    if len(parent_b) != length:
        raise ValueError(f"Parents must have equal length, got {length} and {len(parent_b)}")

    if not 1 <= point <= length - 1:
        raise ValueError(f"Crossover point must be in [1, {length - 1}], got {point}")

    child_a = tuple(parent_a[:point]) + tuple(parent_b[point:])
    child_b = tuple(parent_b[:point]) + tuple(parent_a[point:])

    return child_a, child_b
