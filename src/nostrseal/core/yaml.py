"""Safe YAML reading for [NostrSealConfig][nostrseal.core.config.NostrSealConfig].

Only ``yaml.safe_load`` is used: tags such as ``!!python/object`` are
refused, so a configuration file can never instantiate objects.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml(config_path: str | Path) -> dict[str, Any]:
    """Read a YAML mapping from ``config_path``.

    An empty document reads as ``{}``. The result is not schema-checked;
    callers hand it to a Pydantic model.

    Raises:
        FileNotFoundError: If ``config_path`` does not exist.
        yaml.YAMLError: On syntax errors or unsafe tags.
        TypeError: If the document is a list or scalar instead of a mapping.
    """
    path = Path(config_path)
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise TypeError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data
