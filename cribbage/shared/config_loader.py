"""
Configuration loading: YAML overrides applied to Pydantic model defaults.

A YAML file may declare ``extends: <filename>`` to inherit from another YAML in
the same directory; the current file's values always win.
"""

from pathlib import Path
from typing import Any

import yaml

from cribbage.shared.config import Config, deep_merge_dicts


def load_config(path: str | Path | None = None, **overrides: Any) -> Config:
    """
    Build a Config from defaults, an optional YAML file and keyword overrides.

    Keyword overrides use ``__`` to reach nested sections and win over the
    YAML file, which wins over the Python defaults.

    Examples:
        >>> load_config().solver.top_n
        3
        >>> load_config(solver__top_n=5, practice__seed=7).solver.top_n
        5
    """
    config = Config.default()
    if path is not None:
        config = config.merge(_read_with_extends(Path(path)))
    if overrides:
        config = config.merge(_nest_overrides(overrides))
    return config


def available_configs(config_dir: Path) -> list[str]:
    """Names (file stems) of the YAML configs in a directory, sorted."""
    return sorted(path.stem for path in config_dir.glob("*.yaml"))


def _read_with_extends(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data: dict[str, Any] = yaml.safe_load(f) or {}

    base_name = data.pop("extends", None)
    if base_name is None:
        return data
    return deep_merge_dicts(_read_with_extends(path.parent / base_name), data)


def _nest_overrides(flat: dict[str, Any]) -> dict[str, Any]:
    # {"solver__num_workers": 4} -> {"solver": {"num_workers": 4}}
    nested: dict[str, Any] = {}
    for key, value in flat.items():
        *sections, name = key.split("__")
        target = nested
        for section in sections:
            target = target.setdefault(section, {})
        target[name] = value
    return nested
