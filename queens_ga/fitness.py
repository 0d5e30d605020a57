"""
Fitness evaluation for N-Queens chromosomes.

Fitness is the number of queen pairs that do not attack each other.
"""

from typing import List, Sequence
import numpy as np

from .data_models import FitnessRecord


def max_fitness(n: int) -> int:
    """Number of queen pairs on an n x n board (the optimum score)."""
    return n * (n - 1) // 2


def count_conflicts(chromosome: Sequence[int]) -> int:
    """
    Count attacking pairs in a chromosome.

    Two queens attack each other when they share a row
    (chromosome[i] == chromosome[j]) or a diagonal
    (|i - j| == |chromosome[i] - chromosome[j]|). Columns are distinct
    by construction of the encoding.

    Args:
        chromosome: Row index of the queen in each column

    Returns:
        Number of pairs (i, j), i < j, that attack each other
    """
    rows = np.asarray(chromosome, dtype=int)
    cols = np.arange(len(rows))

    same_row = rows[:, None] == rows[None, :]
    same_diagonal = np.abs(cols[:, None] - cols[None, :]) == np.abs(rows[:, None] - rows[None, :])

    # Upper triangle only: each unordered pair once, no self-pairs
    attacks = np.triu(same_row | same_diagonal, k=1)
    return int(attacks.sum())


def evaluate(chromosome: Sequence[int]) -> int:
    """
    Score a chromosome as total pairs minus attacking pairs.

    Args:
        chromosome: Row index of the queen in each column

    Returns:
        Fitness in [0, N(N-1)/2]; the maximum means no conflicts
    """
    return max_fitness(len(chromosome)) - count_conflicts(chromosome)


def is_solution(chromosome: Sequence[int]) -> bool:
    """Check whether no two queens attack each other."""
    return count_conflicts(chromosome) == 0


def evaluate_population(chromosomes: Sequence[Sequence[int]]) -> List[FitnessRecord]:
    """
    Evaluate a set of chromosomes.

    Used both for the full population and for an offspring buffer.

    Args:
        chromosomes: Chromosomes to score

    Returns:
        One FitnessRecord per chromosome, indexed by position in the input
    """
    return [
        FitnessRecord(score=evaluate(chromosome), index=i)
        for i, chromosome in enumerate(chromosomes)
    ]
