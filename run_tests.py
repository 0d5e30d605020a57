#!/usr/bin/env python3
"""
Test runner for the N-Queens genetic algorithm
"""

import unittest
import sys
from pathlib import Path

# Add current directory to path for imports
sys.path.append(str(Path(__file__).parent))


def run_all_tests():
    """Run all test modules"""
    loader = unittest.TestLoader()
    suite = loader.discover(str(Path(__file__).parent / "tests"), pattern="test_*.py")

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    return result.wasSuccessful()


def run_integration_test():
    """Run a basic integration test"""
    print("\n" + "=" * 50)
    print("INTEGRATION TEST")
    print("=" * 50)

    try:
        from queens_ga import GAConfig, GADriver, evaluate

        config = GAConfig(random_seed=42)
        print("Running 8-queens search...")
        result = GADriver(config).run()

        print(f"Generations: {result.final.generation}")
        print(f"Best fitness: {result.final.best_fitness}/{config.optimum}")
        print(f"Stopped: {result.reason}")

        success = (
            result.reason in ("solved", "stagnation") and
            evaluate(result.final.best_chromosome) == result.final.best_fitness
        )

        if success:
            print("✓ Integration test PASSED")
        else:
            print("✗ Integration test FAILED")

        return success

    except Exception as e:
        print(f"✗ Integration test FAILED: {e}")
        import traceback
        traceback.print_exc()
        return False


if __name__ == "__main__":
    print("Running N-Queens GA Tests")
    print("=" * 60)

    print("Running unit tests...")
    unit_success = run_all_tests()

    integration_success = run_integration_test()

    print("\n" + "=" * 60)
    print("TEST SUMMARY")
    print("=" * 60)
    print(f"Unit tests: {'PASSED' if unit_success else 'FAILED'}")
    print(f"Integration test: {'PASSED' if integration_success else 'FAILED'}")

    overall_success = unit_success and integration_success
    print(f"Overall: {'PASSED' if overall_success else 'FAILED'}")

    sys.exit(0 if overall_success else 1)
