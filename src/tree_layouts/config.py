"""Layout options and YAML configuration loading."""

import math
from dataclasses import dataclass
from pathlib import Path

# Pixels between adjacent grid slots and between depth levels
SCALE = 30.0

# Minimum gap between sibling subtree contours, in scale units
NODE_SEP = 1.0


@dataclass(frozen=True)
class LayoutOptions:
    """Tunable parameters shared by all layout strategies."""

    scale: float = SCALE
    node_sep: float = NODE_SEP
    strict_binary: bool = False  # Raise instead of truncating in the knuth layout

    def __post_init__(self) -> None:
        if not math.isfinite(self.scale) or self.scale <= 0:
            raise ValueError(f"scale must be a positive finite number, got {self.scale}")
        if not math.isfinite(self.node_sep) or self.node_sep < 0:
            raise ValueError(f"node_sep must be a finite non-negative number, got {self.node_sep}")
        if not isinstance(self.strict_binary, bool):
            raise ValueError(f"strict_binary must be true or false, got {self.strict_binary!r}")

    @classmethod
    def from_config(cls, config: dict | None, **overrides) -> "LayoutOptions":
        """Build options from a config mapping, letting non-None overrides win.

        Recognized keys are ``scale``, ``node-sep`` and ``strict-binary``;
        anything else in the mapping is ignored. ``strict-binary`` must be a
        YAML boolean, not a string.
        """
        config = config or {}
        values = {}
        if "scale" in config:
            values["scale"] = float(config["scale"])
        if "node-sep" in config:
            values["node_sep"] = float(config["node-sep"])
        if "strict-binary" in config:
            values["strict_binary"] = config["strict-binary"]
        for key, value in overrides.items():
            if value is not None:
                values[key] = value
        return cls(**values)


def load_config(config_path: Path) -> dict:
    """Load configuration from YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Dictionary of configuration values (empty for an empty file).

    Raises:
        ValueError: If the file is not valid YAML or does not hold a mapping.
    """
    try:
        import yaml
    except ImportError as err:
        raise ImportError("PyYAML required for config files: pip install pyyaml") from err

    with open(config_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as err:
            raise ValueError(f"{config_path}: invalid YAML: {err}") from err

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{config_path}: expected a mapping, got {type(data).__name__}")
    return data
