"""
Configuration for the console driver.
"""
import yaml
from dataclasses import dataclass
from typing import Optional


@dataclass
class PlayConfig:
    """
    Settings for a single console game. Defaults need no config file.

    Only the RNG seed and the trailing summary are configurable; the board
    lines and the dash separator are fixed.
    """
    seed: Optional[int] = None      # None = fresh OS entropy each run
    show_summary: bool = False      # one-line outcome after the last board


def load_config_from_yaml(filepath: str) -> PlayConfig:
    """Load play configuration from a YAML file."""
    with open(filepath, 'r') as f:
        config_dict = yaml.safe_load(f)

    # An empty file means "all defaults"
    if config_dict is None:
        return PlayConfig()
    if not isinstance(config_dict, dict):
        raise ValueError(f"{filepath}: expected a mapping, got {type(config_dict).__name__}")

    return PlayConfig(**config_dict)
