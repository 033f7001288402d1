# src/plasma_color_finder/utils/load_config.py

"""Read the JSON object files under <data/> (palettes, settings).

Every file holds a single top-level object. Parsed objects are cached per path
and invalidated when the file's mtime changes; callers always get their own
copy, passed through their validator.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

__all__ = [
    "find_data_dir",
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV_VARS = ("DATA_DIR", "COLOR_FINDER_DATA_DIR")

Validator = Callable[[dict[str, Any]], dict[str, Any]]


class DataDirNotFound(FileNotFoundError):
    """No data/ directory next to the package or above it."""


class ConfigFileNotFound(FileNotFoundError):
    """The named data file is missing, unreadable or outside the data dir."""


class ConfigParseError(ValueError):
    """The file is not valid JSON, or its validator rejected the content."""


class ConfigTypeError(TypeError):
    """The JSON parsed but has the wrong shape (e.g. a list instead of an object)."""


log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# path -> (mtime, parsed object)
_CONFIG_CACHE: dict[Path, tuple[float, dict[str, Any]]] = {}


def clear_config_cache() -> None:
    """Forget every parsed file (tests and hot reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
    log.debug("Data file cache cleared.")


def find_data_dir(base_dir: Path | None = None) -> Path:
    """
    Does: Pick the data directory: explicit `base_dir`, then the first set
          env var in DATA_DIR_ENV_VARS, then the nearest data/ walking up
          from this module.
    Raises: DataDirNotFound when discovery finds nothing.
    """
    if base_dir is not None:
        return Path(base_dir).resolve()
    for var in DATA_DIR_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return Path(value).expanduser().resolve()

    here = Path(__file__).resolve()
    tried = [parent / "data" for parent in here.parents]
    for candidate in tried:
        if candidate.is_dir():
            return candidate
    raise DataDirNotFound("No 'data' directory found; tried " + ", ".join(map(str, tried)))


def _data_file(name: str, root: Path) -> Path:
    if not name.endswith(".json"):
        name = f"{name}.json"
    path = (root / name).resolve()
    if not path.is_relative_to(root):
        raise ConfigFileNotFound(f"{name!r} resolves outside the data dir {root}")
    if not path.is_file():
        raise ConfigFileNotFound(f"Data file not found: {path}")
    return path


def _parse_object(path: Path) -> dict[str, Any]:
    try:
        with path.open(encoding="utf-8") as fh:
            data = json.load(fh)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path.name}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")
    return data


def _cached_object(path: Path) -> dict[str, Any]:
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    with _CACHE_LOCK:
        hit = _CONFIG_CACHE.get(path)
        if hit is not None and hit[0] == mtime:
            log.debug("Data file cache hit: %s", path.name)
            return hit[1]
        data = _parse_object(path)
        _CONFIG_CACHE[path] = (mtime, data)
        log.debug("Data file parsed: %s (%d keys)", path.name, len(data))
        return data


def load_config(
    name: str,
    validator: Validator | None = None,
    *,
    base_dir: Path | None = None,
) -> dict[str, Any]:
    """
    Does: Load data/<name>.json as a dict and run `validator` over a fresh copy.
    Returns: The validator's result (or the plain copy when no validator is given).
    Raises: ConfigFileNotFound, ConfigParseError, ConfigTypeError, DataDirNotFound.
            A validator's ConfigTypeError passes through; anything else it
            raises becomes ConfigParseError.
    """
    path = _data_file(name, find_data_dir(base_dir))
    data = copy.deepcopy(_cached_object(path))
    if validator is None:
        return data
    try:
        return validator(data)
    except ConfigTypeError:
        raise
    except Exception as e:
        raise ConfigParseError(f"{path.name}: {e}") from e
