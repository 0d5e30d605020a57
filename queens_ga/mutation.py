"""
Mutation operators for the N-Queens GA.

Implements per-gene random-reset mutation that always changes a
triggered gene.
"""

from typing import List, Sequence, Tuple
import numpy as np

from .data_models import Chromosome


def mutate_gene(
    chromosome: Sequence[int],
    position: int,
    rng: np.random.Generator
) -> Chromosome:
    """
    Move the queen in one column to a different random row.

    The new row is resampled until it differs from the current one.

    Args:
        chromosome: Chromosome to mutate (not modified)
        position: Column to mutate
        rng: Random number generator

    Returns:
        New chromosome with the gene at position changed

    Raises:
        ValueError: If position is out of range or there is no alternative row
    """
    length = len(chromosome)

    if not 0 <= position < length:
        raise ValueError(f"Position {position} out of range for chromosome of length {length}")

    if length < 2:
        raise ValueError("Chromosome length must be at least 2 to mutate")

    genes = list(chromosome)
    current = genes[position]

    new_value = int(rng.integers(0, length))
    while new_value == current:
        new_value = int(rng.integers(0, length))

    genes[position] = new_value
    return tuple(genes)


def mutate(
    chromosome: Sequence[int],
    mutation_rate: float,
    rng: np.random.Generator
) -> Tuple[Chromosome, List[str]]:
    """
    Apply mutation independently to every gene.

    Each gene is mutated with probability mutation_rate.

    Args:
        chromosome: Chromosome to mutate (not modified)
        mutation_rate: Per-gene mutation probability in [0, 1]
        rng: Random number generator

    Returns:
        Tuple of (mutated_chromosome, operation_log)
    """
    if not 0.0 <= mutation_rate <= 1.0:
        raise ValueError(f"mutation_rate must be in [0, 1], got {mutation_rate}")

    mutated = tuple(chromosome)
    op_log = []

    for position in range(len(mutated)):
        if rng.random() < mutation_rate:
            old_value = mutated[position]
            mutated = mutate_gene(mutated, position, rng)
            op_log.append(f"mutate_gene(col={position}): row {old_value} -> {mutated[position]}")

    return mutated, op_log
