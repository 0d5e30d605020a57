"""
Visualization for the N-Queens GA

Renders the best board as text for the console and produces matplotlib
reports of a finished run (board plus fitness history).
"""

import matplotlib.pyplot as plt
import numpy as np
from typing import List, Optional, Sequence, Tuple

from .data_models import GenerationSnapshot
from .fitness import max_fitness


def format_board(chromosome: Sequence[int], queen: str = "Q", empty: str = ".") -> str:
    """
    Render a chromosome as a text board, row 0 at the top.

    For example [1, 3, 0, 2] renders as
        . . Q .
        Q . . .
        . . . Q
        . Q . .
    """
    n = len(chromosome)
    lines = []
    for row in range(n):
        cells = [queen if chromosome[col] == row else empty for col in range(n)]
        lines.append(" ".join(cells))
    return "\n".join(lines)


def format_status(snapshot: GenerationSnapshot) -> str:
    """Status lines shown above the board"""
    return "\n".join([
        f"Generation: {snapshot.generation}",
        f"Fitness: {snapshot.best_fitness}",
        f"Number of Conflicts: {snapshot.conflicts}",
    ])


def plot_board(chromosome: Sequence[int], ax: plt.Axes = None, title: Optional[str] = None):
    """Plot a chessboard with one queen per column"""
    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 6))

    n = len(chromosome)

    # Alternating tiles
    tiles = np.indices((n, n)).sum(axis=0) % 2
    ax.imshow(tiles, cmap='Blues', vmin=-1, vmax=2,
              extent=[-0.5, n - 0.5, n - 0.5, -0.5])

    cols = np.arange(n)
    rows = np.asarray(chromosome)
    ax.scatter(cols, rows, s=2400 / n, marker='*', c='black', zorder=3)

    ax.set_xticks(range(n))
    ax.set_yticks(range(n))
    ax.set_xlabel('Column')
    ax.set_ylabel('Row')
    ax.set_xlim(-0.5, n - 0.5)
    ax.set_ylim(n - 0.5, -0.5)
    ax.set_aspect('equal')
    ax.set_title(title or f"{n}-Queens Board")
    return ax


def plot_fitness_history(history: Sequence[GenerationSnapshot], ax: plt.Axes = None):
    """Plot best fitness and stagnation over generations"""
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 4))

    if not history:
        ax.text(0.5, 0.5, "No history data", ha='center', va='center', transform=ax.transAxes)
        return ax

    generations = [s.generation for s in history]
    fitness = [s.best_fitness for s in history]
    optimum = max_fitness(len(history[-1].best_chromosome))

    ax.plot(generations, fitness, color='tab:blue', linewidth=1.5, label='Best fitness')
    ax.axhline(optimum, color='green', linestyle='--', alpha=0.7, label=f'Optimum ({optimum})')

    ax.set_xlabel('Generation')
    ax.set_ylabel('Fitness')
    ax.set_title('Best Fitness by Generation')
    ax.set_ylim(0, optimum + 1)

    ax_stag = ax.twinx()
    ax_stag.plot(generations, [s.stagnation for s in history],
                 color='tab:orange', alpha=0.5, linewidth=1, label='Stagnation')
    ax_stag.set_ylabel('Stagnation (generations)')

    lines = ax.get_lines() + ax_stag.get_lines()
    ax.legend(lines, [line.get_label() for line in lines], loc='lower right')
    ax.grid(True, alpha=0.3)
    return ax


def plot_run_report(
    history: List[GenerationSnapshot],
    save_path: Optional[str] = None,
    figsize: Tuple[int, int] = (14, 6)
):
    """
    Create a two-panel report of a run

    Args:
        history: Snapshots in generation order (must not be empty)
        save_path: Optional path to save the figure
        figsize: Figure size (width, height)

    Returns:
        The matplotlib Figure
    """
    if not history:
        raise ValueError("Cannot plot an empty history")

    final = history[-1]

    fig, (ax_board, ax_history) = plt.subplots(
        1, 2, figsize=figsize, gridspec_kw={'width_ratios': [1, 2]}
    )
    plot_board(
        final.best_chromosome,
        ax_board,
        title=f"Generation {final.generation} - {final.conflicts} conflicts",
    )
    plot_fitness_history(history, ax_history)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')

    return fig
