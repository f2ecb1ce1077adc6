"""Static data tables shipped with OpenIBAN.

Tables are read from YAML on first use and cached for the life of the
process. Loading is guarded by a lock so concurrent first access builds
each table exactly once; after that the cached objects are only read.
"""

import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import yaml

from openiban.exceptions import ConfigurationError
from openiban.utils.logging import LogPerformance, get_logger

logger = get_logger(__name__)

T = TypeVar("T")

_lock = threading.Lock()
_tables: dict[str, Any] = {}


def load_yaml(path: Path, setting: str) -> Any:
    """Read a YAML data file.

    Args:
        path: File to read
        setting: Name of the setting pointing at the file, for error context

    Raises:
        ConfigurationError: If the file is missing or is not valid YAML
    """
    try:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(
            "Data file not found", setting=setting, path=str(path), original_error=e
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(
            "Data file is not valid YAML", setting=setting, path=str(path), original_error=e
        ) from e


def load_table(name: str, loader: Callable[[], T]) -> T:
    """Return the cached table called ``name``, building it with ``loader`` once."""
    table = _tables.get(name)
    if table is not None:
        return table

    with _lock:
        if name not in _tables:
            with LogPerformance(f"{name}_load", logger):
                _tables[name] = loader()
        return _tables[name]


def clear_caches() -> None:
    """Drop every cached table; the next access reloads from disk."""
    with _lock:
        _tables.clear()
