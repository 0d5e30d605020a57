"""
Configuration Loading System

Loads YAML configuration files and converts them to GAConfig and
reporting options for the N-Queens GA.
"""

import yaml
from typing import Dict, List, Any, Optional

from .data_models import GAConfig, ConfigurationError


GA_KEYS = ["chromosome_length", "population_size", "mutation_rate", "stagnation_limit", "random_seed"]

DEFAULT_REPORT = {
    "report_every": 50,
    "history_csv": None,
    "plot_path": None,
}


def load_config(config_path: str = "config.yaml") -> Dict[str, Any]:
    """Load configuration from YAML file"""
    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Configuration file not found: {config_path}")
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file: {e}")

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(f"Configuration root must be a mapping, got {type(config).__name__}")
    return config


def parse_random_seed(value: Any) -> Optional[int]:
    """
    Interpret the random_seed setting.

    Args:
        value: int, digit string, None or "random"

    Returns:
        Seed as int, or None to draw a fresh seed at run time
    """
    if value is None or value == "random":
        return None
    if isinstance(value, bool):
        raise ConfigurationError(f"random_seed must be an integer, null or 'random', got: {value}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isdigit():
        return int(value)
    raise ConfigurationError(f"random_seed must be an integer, null or 'random', got: {value}")


def config_from_dict(config: Dict[str, Any]) -> GAConfig:
    """
    Build a GAConfig from the 'ga' section of a configuration dictionary.

    Missing keys fall back to GAConfig defaults.

    Raises:
        ConfigurationError: If a key is unknown or a value is invalid
    """
    ga_config = config.get("ga") or {}
    if not isinstance(ga_config, dict):
        raise ConfigurationError("'ga' section must be a mapping")

    unknown = sorted(set(ga_config) - set(GA_KEYS))
    if unknown:
        raise ConfigurationError(f"Unknown keys in 'ga' section: {', '.join(unknown)}")

    kwargs = {key: ga_config[key] for key in GA_KEYS if key in ga_config}
    if "random_seed" in kwargs:
        kwargs["random_seed"] = parse_random_seed(kwargs["random_seed"])

    return GAConfig(**kwargs)


def get_report_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Get reporting configuration merged over defaults"""
    report_config = dict(DEFAULT_REPORT)
    report_config.update(config.get("report") or {})
    return report_config


def create_ga_config_from_file(config_path: str = "config.yaml") -> GAConfig:
    """
    Create a validated GAConfig from a YAML configuration file

    Args:
        config_path: Path to the configuration file

    Returns:
        GAConfig instance
    """
    return config_from_dict(load_config(config_path))


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration and return list of issues

    Returns:
        List of validation error messages (empty if valid)
    """
    issues = []

    try:
        config_from_dict(config)
    except ConfigurationError as e:
        issues.append(str(e))

    report_config = config.get("report") or {}
    if not isinstance(report_config, dict):
        issues.append("'report' section must be a mapping")
    else:
        report_every = report_config.get("report_every", DEFAULT_REPORT["report_every"])
        if isinstance(report_every, bool) or not isinstance(report_every, int) or report_every < 0:
            issues.append(f"report_every must be a non-negative integer, got: {report_every}")

    return issues


def print_config_summary(config_path: str = "config.yaml"):
    """Print a summary of the configuration"""
    try:
        config = load_config(config_path)

        print("=" * 50)
        print("CONFIGURATION SUMMARY")
        print("=" * 50)

        ga_config = config.get("ga") or {}
        defaults = GAConfig()
        for key in GA_KEYS:
            print(f"{key}: {ga_config.get(key, getattr(defaults, key))}")

        report_config = get_report_config(config)
        print(f"\nReport every: {report_config['report_every']} generations")
        print(f"History CSV: {report_config['history_csv'] or 'disabled'}")
        print(f"Plot: {report_config['plot_path'] or 'disabled'}")

        issues = validate_config(config)
        if issues:
            print(f"\nValidation Issues ({len(issues)}):")
            for issue in issues:
                print(f"  - {issue}")
        else:
            print("\nConfiguration is valid ✓")

        print("=" * 50)

    except ConfigurationError as e:
        print(f"Configuration Error: {e}")
