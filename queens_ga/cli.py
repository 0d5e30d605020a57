"""
CLI module for the N-Queens GA.

Handles argument parsing, configuration loading, progress reporting and
report export.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .data_models import GAConfig, GenerationSnapshot, ConfigurationError
from .config_loader import (
    load_config, config_from_dict, get_report_config, validate_config, print_config_summary
)
from .driver import GADriver, RunResult
from .io_utils import save_history_to_csv
from .visualization import format_board, format_status, plot_run_report


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Solve the N-Queens problem with a genetic algorithm",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                # 8 queens, defaults
  python main.py --config config.yaml          # settings from YAML
  python main.py --show-config                 # print configuration summary
  python main.py --size 12 --seed 7            # 12 queens, reproducible
  python main.py --history-csv output/run.csv --plot output/run.png
        """
    )

    parser.add_argument('--config', '-c', help='YAML configuration file')
    parser.add_argument('--size', '-n', type=int, help='Board size / number of queens')
    parser.add_argument('--population', '-p', type=int, help='Population size (even)')
    parser.add_argument('--mutation-rate', '-m', type=float, help='Per-gene mutation probability')
    parser.add_argument('--stagnation-limit', type=int,
                        help='Generations without improvement before stopping')
    parser.add_argument('--seed', type=int, help='Random seed')
    parser.add_argument('--max-generations', type=int, help='Hard cap on generations')
    parser.add_argument('--report-every', type=int,
                        help='Print progress every N generations (0 disables)')
    parser.add_argument('--history-csv', help='Write per-generation history to this CSV')
    parser.add_argument('--plot', help='Save a board and fitness plot to this image file')
    parser.add_argument('--overwrite', action='store_true', help='Overwrite existing output files')
    parser.add_argument('--quiet', '-q', action='store_true', help='Only print the final summary')
    parser.add_argument('--show-config', action='store_true',
                        help='Print configuration summary and exit')

    return parser


def resolve_settings(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Merge YAML configuration and command-line overrides.

    Returns:
        Dictionary with 'ga' (GAConfig) and 'report' (dict) entries

    Raises:
        ConfigurationError: If the merged configuration has any issue
    """
    config = load_config(args.config) if args.config else {}
    if not isinstance(config.get("ga") or {}, dict):
        raise ConfigurationError("'ga' section must be a mapping")
    ga_section = dict(config.get("ga") or {})

    overrides = {
        "chromosome_length": args.size,
        "population_size": args.population,
        "mutation_rate": args.mutation_rate,
        "stagnation_limit": args.stagnation_limit,
        "random_seed": args.seed,
    }
    ga_section.update({key: value for key, value in overrides.items() if value is not None})

    report_section = config.get("report") or {}
    if isinstance(report_section, dict) and args.report_every is not None:
        report_section = dict(report_section, report_every=args.report_every)

    merged = {"ga": ga_section, "report": report_section}
    issues = validate_config(merged)
    if issues:
        raise ConfigurationError("Invalid configuration: " + "; ".join(issues))

    ga_config = config_from_dict(merged)
    report = get_report_config(merged)
    if args.history_csv:
        report["history_csv"] = args.history_csv
    if args.plot:
        report["plot_path"] = args.plot
    report["max_generations"] = args.max_generations
    report["overwrite"] = args.overwrite

    return {"ga": ga_config, "report": report}


def make_progress_printer(report_every: int):
    """Progress callback printing every report_every generations."""
    def on_generation(snapshot: GenerationSnapshot) -> None:
        if report_every and snapshot.generation % report_every == 0:
            print(f"  Generation {snapshot.generation:6d}: fitness={snapshot.best_fitness} "
                  f"conflicts={snapshot.conflicts} stagnation={snapshot.stagnation} "
                  f"mutations={snapshot.mutations}")
    return on_generation


def check_output_paths(report: Dict[str, Any]) -> None:
    """
    Refuse to start a run whose report files would be clobbered.

    Raises:
        FileExistsError: If an output file exists and overwrite is off
    """
    if report.get("overwrite", False):
        return
    for key in ("history_csv", "plot_path"):
        if report.get(key) and Path(report[key]).exists():
            raise FileExistsError(f"Output file already exists: {report[key]}")


def run_search(ga_config: GAConfig, report: Dict[str, Any], quiet: bool = False) -> RunResult:
    """
    Run the GA and write the requested reports.

    Args:
        ga_config: Validated GA configuration
        report: Reporting options (report_every, history_csv, plot_path, ...)
        quiet: Suppress the banner and progress lines

    Returns:
        RunResult of the search
    """
    check_output_paths(report)
    driver = GADriver(ga_config)

    if not quiet:
        print("=" * 70)
        print(f"{ga_config.chromosome_length}-QUEENS GENETIC ALGORITHM")
        print("=" * 70)
        print(f"Population size: {ga_config.population_size}")
        print(f"Mutation rate: {ga_config.mutation_rate}")
        print(f"Stagnation limit: {ga_config.stagnation_limit}")
        print(f"Random seed: {driver.seed}")
        print()

    callback = None if quiet else make_progress_printer(report.get("report_every", 0))
    result = driver.run(on_generation=callback, max_generations=report.get("max_generations"))

    print()
    print("=" * 70)
    print("SUMMARY")
    print("=" * 70)
    print(format_status(result.final))
    print(f"Stopped: {result.reason}")
    print()
    print(format_board(result.final.best_chromosome))

    overwrite = report.get("overwrite", False)

    if report.get("history_csv"):
        path = save_history_to_csv(result.history, report["history_csv"], overwrite=overwrite)
        print(f"\nHistory: {path}")

    if report.get("plot_path"):
        import matplotlib
        matplotlib.use('Agg')
        import matplotlib.pyplot as plt

        plot_path = Path(report["plot_path"])
        plot_path.parent.mkdir(parents=True, exist_ok=True)
        fig = plot_run_report(result.history, save_path=str(plot_path))
        plt.close(fig)
        print(f"Plot: {plot_path}")

    return result


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.show_config:
        print_config_summary(args.config or "config.yaml")
        return 0

    try:
        settings = resolve_settings(args)
        run_search(settings["ga"], settings["report"], quiet=args.quiet)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 1
    except Exception as e:
        print(f"\nError: {e}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
