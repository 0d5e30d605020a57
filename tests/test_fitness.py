"""
Tests for fitness evaluation.
"""

import unittest
import numpy as np

from queens_ga.fitness import (
    evaluate,
    count_conflicts,
    max_fitness,
    is_solution,
    evaluate_population,
)


def brute_force_conflicts(chromosome):
    """Reference pair count with plain loops."""
    n = len(chromosome)
    attacks = 0
    for i in range(n):
        for j in range(i + 1, n):
            if chromosome[i] == chromosome[j] or abs(i - j) == abs(chromosome[i] - chromosome[j]):
                attacks += 1
    return attacks


class TestEvaluate(unittest.TestCase):
    """Test scoring of single chromosomes."""

    def test_known_solution_scores_optimum(self):
        """Test a known 8-queens solution scores 28."""
        solution = [0, 4, 7, 5, 2, 6, 1, 3]
        self.assertEqual(evaluate(solution), 28)
        self.assertEqual(count_conflicts(solution), 0)
        self.assertTrue(is_solution(solution))

    def test_all_same_row_scores_zero(self):
        """Test every pair sharing a row gives zero fitness."""
        self.assertEqual(evaluate([0] * 8), 0)
        self.assertEqual(count_conflicts([0] * 8), 28)

    def test_main_diagonal_scores_zero(self):
        """Test every pair sharing a diagonal gives zero fitness."""
        self.assertEqual(evaluate(list(range(8))), 0)
        self.assertEqual(evaluate(list(reversed(range(8)))), 0)

    def test_small_board(self):
        """Test hand-counted 4x4 boards."""
        self.assertEqual(evaluate([1, 3, 0, 2]), 6)
        # (0,1) same row, (0,3) and (1,2) diagonal
        self.assertEqual(count_conflicts([0, 0, 1, 3]), 3)
        self.assertEqual(evaluate([0, 0, 1, 3]), 3)
        self.assertFalse(is_solution([0, 0, 1, 3]))

    def test_max_fitness(self):
        """Test number of pairs for several board sizes."""
        self.assertEqual(max_fitness(4), 6)
        self.assertEqual(max_fitness(8), 28)
        self.assertEqual(max_fitness(10), 45)

    def test_matches_brute_force_and_range(self):
        """Test against a loop-based reference on random boards."""
        rng = np.random.default_rng(7)
        for n in (4, 5, 8, 12):
            for _ in range(50):
                chromosome = [int(x) for x in rng.integers(0, n, size=n)]
                score = evaluate(chromosome)
                self.assertEqual(count_conflicts(chromosome), brute_force_conflicts(chromosome))
                self.assertGreaterEqual(score, 0)
                self.assertLessEqual(score, max_fitness(n))
                self.assertEqual(score == max_fitness(n), brute_force_conflicts(chromosome) == 0)

    def test_evaluate_is_idempotent(self):
        """Test repeated evaluation gives the same score."""
        chromosome = (3, 1, 6, 2, 5, 7, 4, 0)
        self.assertEqual(evaluate(chromosome), evaluate(chromosome))
        self.assertEqual(chromosome, (3, 1, 6, 2, 5, 7, 4, 0))


class TestEvaluatePopulation(unittest.TestCase):
    """Test evaluation of chromosome sets."""

    def test_records_follow_input_order(self):
        """Test one record per chromosome, indexed by position."""
        chromosomes = [(0,) * 8, (0, 4, 7, 5, 2, 6, 1, 3), tuple(range(8))]
        records = evaluate_population(chromosomes)

        self.assertEqual([r.index for r in records], [0, 1, 2])
        self.assertEqual([r.score for r in records], [0, 28, 0])

    def test_empty_input(self):
        """Test an empty buffer evaluates to an empty table."""
        self.assertEqual(evaluate_population([]), [])


if __name__ == '__main__':
    unittest.main()
