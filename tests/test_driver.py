"""
Tests for the GA driver: run loop, termination and history.
"""

import unittest
import numpy as np

from queens_ga.data_models import GAConfig
from queens_ga.driver import GADriver, RunStatus
from queens_ga.fitness import evaluate


class TestDriverLifecycle(unittest.TestCase):
    """Test the initialize / is_done / step protocol."""

    def setUp(self):
        """Set up a seeded driver."""
        self.config = GAConfig(random_seed=42)
        self.driver = GADriver(self.config)

    def test_not_initialized(self):
        """Test stepping before initialize() is an error."""
        self.assertEqual(self.driver.status, RunStatus.CREATED)
        self.assertFalse(self.driver.is_done())
        self.assertIsNone(self.driver.termination_reason())

        with self.assertRaises(RuntimeError):
            self.driver.step()

    def test_initialize(self):
        """Test initialization produces generation 1."""
        snapshot = self.driver.initialize()

        self.assertEqual(snapshot.generation, 1)
        self.assertEqual(len(snapshot.best_chromosome), 8)
        self.assertEqual(len(self.driver.history), 1)
        self.assertEqual(self.driver.seed, 42)
        self.assertIn(self.driver.status, (RunStatus.INITIALIZED, RunStatus.TERMINATED))

    def test_step_updates_history(self):
        """Test each step appends one snapshot."""
        self.driver.initialize()
        steps = 0
        while not self.driver.is_done() and steps < 5:
            snapshot = self.driver.step()
            steps += 1
            self.assertEqual(self.driver.snapshot(), snapshot)

        self.assertEqual(len(self.driver.history), steps + 1)
        self.assertEqual([s.generation for s in self.driver.history], list(range(1, steps + 2)))

    def test_step_after_termination(self):
        """Test stepping a finished run is an error."""
        result = self.driver.run()

        self.assertEqual(self.driver.status, RunStatus.TERMINATED)
        self.assertTrue(self.driver.is_done())
        self.assertEqual(self.driver.termination_reason(), result.reason)
        with self.assertRaises(RuntimeError):
            self.driver.step()

    def test_explicit_rng(self):
        """Test a caller-supplied generator is used as is."""
        rng = np.random.default_rng(9)
        driver = GADriver(GAConfig(), rng=rng)

        self.assertIs(driver.rng, rng)
        self.assertIs(driver.manager.rng, rng)
        self.assertIsNone(driver.seed)

    def test_random_seed_drawn_when_missing(self):
        """Test a seed is drawn and recorded when none is configured."""
        driver = GADriver(GAConfig())
        self.assertIsInstance(driver.seed, int)


class TestDriverRuns(unittest.TestCase):
    """Test complete runs."""

    def test_end_to_end_default_parameters(self):
        """Test the 8-queens run ends solved or stagnated with elitism intact."""
        config = GAConfig(chromosome_length=8, population_size=50, mutation_rate=0.2,
                          stagnation_limit=700, random_seed=2024)
        driver = GADriver(config)
        resident = []

        result = driver.run(on_generation=lambda s: resident.append(driver.manager.last_step_resident))

        self.assertIn(result.reason, ("solved", "stagnation"))
        if result.reason == "solved":
            self.assertEqual(result.final.best_fitness, 28)
            self.assertEqual(result.final.conflicts, 0)
            self.assertTrue(result.solved)
        else:
            self.assertEqual(result.final.stagnation, 700)

        self.assertEqual(evaluate(result.final.best_chromosome), result.final.best_fitness)
        self.assertLessEqual(max(resident), 2 * config.population_size)
        self.assertEqual(len(resident), len(result.history))

        best = [s.best_fitness for s in result.history]
        self.assertEqual(best, sorted(best))
        self.assertEqual([s.generation for s in result.history],
                         list(range(1, len(result.history) + 1)))

    def test_same_seed_same_run(self):
        """Test runs are reproducible from the seed."""
        config = GAConfig(chromosome_length=6, population_size=10, stagnation_limit=30,
                          random_seed=17)
        first = GADriver(config).run()
        second = GADriver(config).run()

        self.assertEqual(first.history, second.history)
        self.assertEqual(first.seed, 17)

    def test_stagnation_termination(self):
        """Test a run stops once the stagnation limit is reached."""
        config = GAConfig(chromosome_length=10, population_size=4, mutation_rate=0.0,
                          stagnation_limit=1, random_seed=3)
        result = GADriver(config).run()

        self.assertIn(result.reason, ("solved", "stagnation"))
        if result.reason == "stagnation":
            self.assertEqual(result.final.stagnation, 1)

    def test_max_generations(self):
        """Test the generation cap stops an unfinished run."""
        config = GAConfig(chromosome_length=20, population_size=10, stagnation_limit=1000,
                          random_seed=5)
        result = GADriver(config).run(max_generations=5)

        self.assertEqual(result.reason, "max_generations")
        self.assertEqual(result.final.generation, 5)
        self.assertEqual(len(result.history), 5)

    def test_max_generations_invalid(self):
        """Test a non-positive cap is rejected."""
        with self.assertRaises(ValueError):
            GADriver(GAConfig(random_seed=1)).run(max_generations=0)

    def test_callback_sees_every_generation(self):
        """Test on_generation is called for generation 1 onward."""
        seen = []
        config = GAConfig(chromosome_length=6, population_size=10, stagnation_limit=20,
                          random_seed=8)
        result = GADriver(config).run(on_generation=seen.append)

        self.assertEqual(seen, result.history)
        self.assertEqual(seen[0].generation, 1)


if __name__ == '__main__':
    unittest.main()
