"""
GA driver for the N-Queens search.

Repeatedly steps a PopulationManager until the board is solved or the
search stagnates, and keeps the per-generation history that renderers
and reports consume.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional
import numpy as np

from .data_models import GAConfig, GenerationSnapshot
from .population import PopulationManager


class RunStatus(Enum):
    """Lifecycle of a run."""
    CREATED = "created"
    INITIALIZED = "initialized"
    STEPPING = "stepping"
    TERMINATED = "terminated"


@dataclass
class RunResult:
    """
    Outcome of a complete run.

    Attributes:
        final: Snapshot of the last generation
        reason: "solved", "stagnation" or "max_generations"
        history: One snapshot per generation, starting at generation 1
        seed: Seed of the random source used for the run
    """
    final: GenerationSnapshot
    reason: str
    history: List[GenerationSnapshot] = field(default_factory=list)
    seed: Optional[int] = None

    @property
    def solved(self) -> bool:
        return self.final.conflicts == 0


class GADriver:
    """
    Runs the generational loop and decides when to stop.

    External collaborators call initialize() once, then check is_done()
    before every step() and read snapshot() in between.
    """

    def __init__(self, config: GAConfig, rng: Optional[np.random.Generator] = None):
        """
        Args:
            config: Validated GA configuration
            rng: Random number generator; built from config.random_seed if omitted
        """
        self.config = config

        if rng is None:
            seed = config.random_seed
            if seed is None:
                seed = int(np.random.randint(0, 2**31))
            self.seed = seed
            rng = np.random.default_rng(seed)
        else:
            self.seed = config.random_seed

        self.rng = rng
        self.manager = PopulationManager(config, rng)
        self.status = RunStatus.CREATED
        self.history: List[GenerationSnapshot] = []

    def initialize(self) -> GenerationSnapshot:
        """
        Create the initial population.

        Returns:
            Snapshot of generation 1
        """
        snapshot = self.manager.initialize()
        self.history = [snapshot]
        self.status = RunStatus.INITIALIZED
        if self._termination_met(snapshot):
            self.status = RunStatus.TERMINATED
        return snapshot

    def is_done(self) -> bool:
        """Check the termination predicate for the current generation."""
        if self.status == RunStatus.CREATED:
            return False
        if self.status == RunStatus.TERMINATED:
            return True
        return self._termination_met(self.manager.snapshot())

    def step(self) -> GenerationSnapshot:
        """
        Run one generation.

        Returns:
            Snapshot after the generation

        Raises:
            RuntimeError: If the run is not initialized or already terminated
        """
        if self.status == RunStatus.CREATED:
            raise RuntimeError("Run has not been initialized; call initialize() first")
        if self.is_done():
            raise RuntimeError(
                f"Run already terminated ({self.termination_reason()}) at generation "
                f"{self.manager.snapshot().generation}"
            )

        self.status = RunStatus.STEPPING
        snapshot = self.manager.step()
        self.history.append(snapshot)

        if self._termination_met(snapshot):
            self.status = RunStatus.TERMINATED

        return snapshot

    def snapshot(self) -> GenerationSnapshot:
        """Read-only view of generation, best fitness and best chromosome."""
        return self.manager.snapshot()

    def termination_reason(self) -> Optional[str]:
        """
        Explain why the run stops.

        Returns:
            "solved", "stagnation", or None while the run can continue
        """
        if self.status == RunStatus.CREATED:
            return None

        snapshot = self.manager.snapshot()
        if snapshot.best_fitness >= self.config.optimum:
            return "solved"
        if snapshot.stagnation >= self.config.stagnation_limit:
            return "stagnation"
        return None

    def run(
        self,
        on_generation: Optional[Callable[[GenerationSnapshot], None]] = None,
        max_generations: Optional[int] = None
    ) -> RunResult:
        """
        Run until termination.

        Args:
            on_generation: Called with every snapshot, including generation 1
            max_generations: Optional cap on the generation counter

        Returns:
            RunResult with the final snapshot, stop reason and history
        """
        if max_generations is not None and max_generations < 1:
            raise ValueError(f"max_generations must be at least 1, got {max_generations}")

        if self.status == RunStatus.CREATED:
            snapshot = self.initialize()
            if on_generation is not None:
                on_generation(snapshot)

        reason = None
        while not self.is_done():
            if max_generations is not None and self.snapshot().generation >= max_generations:
                reason = "max_generations"
                break

            snapshot = self.step()
            if on_generation is not None:
                on_generation(snapshot)

        if reason is None:
            reason = self.termination_reason()

        return RunResult(
            final=self.snapshot(),
            reason=reason,
            history=list(self.history),
            seed=self.seed,
        )

    def _termination_met(self, snapshot: GenerationSnapshot) -> bool:
        return (
            snapshot.best_fitness >= self.config.optimum
            or snapshot.stagnation >= self.config.stagnation_limit
        )
