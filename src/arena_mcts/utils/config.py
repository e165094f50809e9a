"""YAML configuration loading."""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..mcts.search import SearchConfig


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    with open(path, 'r') as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must contain a mapping, got {type(data).__name__}")
    return data


def load_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None
) -> SearchConfig:
    """Build a SearchConfig from the `search` section of a YAML file.

    Args:
        path: YAML file (defaults only when None)
        overrides: Values taking precedence over the file; None entries are ignored

    Returns:
        Validated search configuration
    """
    values: Dict[str, Any] = {}
    if path is not None:
        values.update(load_yaml(path).get('search', {}) or {})
    if overrides:
        values.update({k: v for k, v in overrides.items() if v is not None})
    return SearchConfig.from_dict(values)


def save_config(config: SearchConfig, path: Union[str, Path]) -> None:
    with open(path, 'w') as f:
        yaml.safe_dump({'search': config.to_dict()}, f, sort_keys=False)
