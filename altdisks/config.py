"""
Configuration handling for altdisks
"""

import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import yaml

from altdisks.algorithms import ALGORITHMS

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Configuration for a run of the sorting algorithms"""

    # Number of light disks; the row holds twice as many disks
    light_count: int = 4

    # Algorithms to run, in order
    algorithms: list[str] = field(default_factory=lambda: list(ALGORITHMS))

    # Reject non-alternating input instead of sorting it best-effort
    strict: bool = False

    # Print the rendered rows alongside the swap counts
    show_rows: bool = True

    log_level: str = "INFO"

    # Starting layout in rendered form, e.g. "D L D L"; overrides light_count
    row: str | None = None

    def __post_init__(self):
        if not isinstance(self.light_count, int) or isinstance(self.light_count, bool):
            raise ValueError(f"light_count must be an integer, got {self.light_count!r}")
        if self.light_count < 1:
            raise ValueError(f"light_count must be at least 1, got {self.light_count}")

        if isinstance(self.algorithms, str):
            self.algorithms = [self.algorithms]
        if not isinstance(self.algorithms, list) or not all(
            isinstance(name, str) for name in self.algorithms
        ):
            raise ValueError(f"algorithms must be a list of names, got {self.algorithms!r}")
        self.algorithms = [name.lower() for name in self.algorithms]
        unknown = [name for name in self.algorithms if name not in ALGORITHMS]
        if unknown:
            raise ValueError(
                f"Unknown algorithms in configuration: {', '.join(unknown)}. "
                f"Known algorithms: {', '.join(sorted(ALGORITHMS))}"
            )

        for name in ("strict", "show_rows"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be true or false, got {getattr(self, name)!r}")

        if self.row is not None and not isinstance(self.row, str):
            raise ValueError(f"row must be a string such as 'D L D L', got {self.row!r}")

        if not isinstance(self.log_level, str):
            raise ValueError(f"log_level must be a string, got {self.log_level!r}")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid log_level '{self.log_level}'")

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file"""
        with open(path) as f:
            config_dict = yaml.safe_load(f) or {}
        if not isinstance(config_dict, dict):
            raise ValueError(f"Configuration file {path} must contain a mapping")
        return cls.from_dict(config_dict)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "Config":
        """Create configuration from a dictionary, ignoring unknown keys"""
        known = cls.__dataclass_fields__
        return cls(**{key: value for key, value in config_dict.items() if key in known})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file"""
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file or use defaults"""
    if config_path and os.path.exists(config_path):
        return Config.from_yaml(config_path)

    # Use environment variables if available
    overrides: dict[str, Any] = {}
    light_count = os.environ.get("ALTDISKS_LIGHT_COUNT")
    if light_count:
        overrides["light_count"] = int(light_count)
    log_level = os.environ.get("ALTDISKS_LOG_LEVEL")
    if log_level:
        overrides["log_level"] = log_level

    return Config(**overrides)
