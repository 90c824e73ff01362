"""
Run configuration for the word generator.
"""

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional, Union

import yaml

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    # Model
    depth: int = 2

    # Generation
    word_count: int = 10
    seed: Optional[int] = None

    # Paths (None means stdin / stdout)
    corpus_file: Optional[str] = None
    output_file: Optional[str] = None

    # Monitoring
    show_progress: bool = False
    log_level: str = "INFO"

    def __post_init__(self):
        validate_config(asdict(self))


def _optional(type_):
    return (type(None), type_)


# key -> (accepted types, value check)
SCHEMA = {
    'depth': (int, lambda x: x >= 0),
    'word_count': (int, lambda x: x >= 0),
    'seed': (_optional(int), lambda x: True),
    'corpus_file': (_optional(str), lambda x: x is None or bool(x)),
    'output_file': (_optional(str), lambda x: x is None or bool(x)),
    'show_progress': (bool, lambda x: True),
    'log_level': (str, lambda x: x.upper() in LOG_LEVELS),
}


def validate_config(config: dict) -> dict:
    """Check every configuration value against SCHEMA."""
    for key in config:
        if key not in SCHEMA:
            raise ValueError(f"Unknown configuration key: {key}")
    for key, (type_, check) in SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing configuration key: {key}")
        value = config[key]
        # bool is an int subclass, don't let True pass as a depth
        if isinstance(value, bool) and type_ is not bool:
            raise ValueError(f"Wrong type for {key}: expected {type_}, got {type(value)}")
        if not isinstance(value, type_):
            raise ValueError(f"Wrong type for {key}: expected {type_}, got {type(value)}")
        if not check(value):
            raise ValueError(f"Invalid value for {key}: {value}")
    return config


def load_config(path: Union[str, Path, None] = None, **overrides) -> Config:
    """
    Load a YAML config file over the defaults, then apply overrides.

    Overrides whose value is None are ignored so unset CLI flags don't
    clobber file values.
    """
    values = {f.name: f.default for f in fields(Config)}

    if path is not None:
        with open(path, 'r', encoding='utf-8') as f:
            try:
                loaded = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        values.update(loaded)

    values.update({k: v for k, v in overrides.items() if v is not None})
    validate_config(values)
    return Config(**values)
