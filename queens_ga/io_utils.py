"""
I/O utilities for the N-Queens GA.

Handles CSV serialization of run histories and solved boards.
"""

import csv
from pathlib import Path
from typing import List, Sequence, Union

from .data_models import GenerationSnapshot


REQUIRED_COLUMNS = ["generation", "best_fitness", "conflicts", "stagnation", "best_chromosome"]
HISTORY_COLUMNS = REQUIRED_COLUMNS + ["mutations"]


def save_history_to_csv(
    history: Sequence[GenerationSnapshot],
    output_path: Union[str, Path],
    overwrite: bool = False
) -> Path:
    """
    Save a run history (one snapshot per generation) to CSV.

    CSV format:
        generation,best_fitness,conflicts,stagnation,best_chromosome,mutations
        1,24,4,0,3 1 6 2 5 7 4 0,0
        ...

    Args:
        history: Snapshots in generation order
        output_path: Path for output CSV
        overwrite: If True, overwrite existing file

    Returns:
        Path to saved CSV file

    Raises:
        FileExistsError: If file exists and overwrite=False
    """
    output_path = Path(output_path)

    if output_path.exists() and not overwrite:
        raise FileExistsError(f"Output file already exists: {output_path}")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=HISTORY_COLUMNS)
        writer.writeheader()
        for snapshot in history:
            writer.writerow(snapshot.to_dict())

    return output_path


def load_history_from_csv(csv_path: Union[str, Path]) -> List[GenerationSnapshot]:
    """
    Load a run history written by save_history_to_csv.

    Args:
        csv_path: Path to CSV file

    Returns:
        List of GenerationSnapshot in file order

    Raises:
        FileNotFoundError: If CSV file doesn't exist
        ValueError: If CSV format is invalid
    """
    csv_path = Path(csv_path)

    if not csv_path.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_path}")

    with open(csv_path, 'r', newline='') as f:
        reader = csv.DictReader(f)

        if reader.fieldnames is None or not all(col in reader.fieldnames for col in REQUIRED_COLUMNS):
            raise ValueError(
                f"Invalid CSV format in {csv_path}. Expected columns: {','.join(REQUIRED_COLUMNS)}"
            )

        return [GenerationSnapshot.from_dict(row) for row in reader]


def save_solution_to_csv(
    snapshot: GenerationSnapshot,
    output_path: Union[str, Path],
    overwrite: bool = False
) -> Path:
    """
    Save the queen positions of a snapshot's best chromosome.

    CSV format:
        name,column,row
        queen_c0_r3,0,3
        ...

    Args:
        snapshot: Snapshot whose best chromosome is written
        output_path: Path for output CSV
        overwrite: If True, overwrite existing file

    Returns:
        Path to saved CSV file

    Raises:
        FileExistsError: If file exists and overwrite=False
    """
    output_path = Path(output_path)

    if output_path.exists() and not overwrite:
        raise FileExistsError(f"Output file already exists: {output_path}")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['name', 'column', 'row'])
        for column, row in enumerate(snapshot.best_chromosome):
            writer.writerow([f"queen_c{column}_r{row}", column, row])

    return output_path
