# src/css_variable_importer/extraction/general/utils/load_config.py

"""Read JSON keyword tables from the package <data/> directory.

The data directory comes from CSSVARS_DATA_DIR / DATA_DIR when set, otherwise
from the nearest `data/` folder above this module. Parsed tables are cached
per (path, mtime) so an edited file is picked up on the next call.

Used by scope inference; tests point it at a scratch directory.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from types import TracebackType
from typing import Any

__all__ = [
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

_ENV_VARS = ("CSSVARS_DATA_DIR", "DATA_DIR")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """No `data/` directory above the package and no env override."""


class ConfigFileNotFound(FileNotFoundError):
    """Requested table is missing, unreadable or outside the data directory."""


class ConfigParseError(ValueError):
    """Table is not valid JSON."""


class ConfigTypeError(TypeError):
    """Table parsed, but is not a JSON object."""


# ── Cache ────────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
_CONFIG_CACHE: dict[tuple[Path, float], dict[str, Any]] = {}


def clear_config_cache() -> None:
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
    log.debug("Config cache cleared.")


def _data_dir() -> Path:
    for var in _ENV_VARS:
        value = os.environ.get(var)
        if value:
            return Path(os.path.expanduser(value)).resolve()
    here = Path(__file__).resolve()
    tried = [(p / "data") for p in here.parents]
    for cand in tried:
        if cand.is_dir():
            return cand
    raise DataDirNotFound("No 'data' directory found. Tried:\n  " + "\n  ".join(map(str, tried)))


def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
) -> dict[str, Any]:
    """Return the JSON object stored in <data>/<file>.json (cached by mtime)."""
    data_dir = (base_dir or _data_dir()).resolve()
    name = os.fspath(file)
    if not name.endswith(".json"):
        name += ".json"
    path = (data_dir / name).resolve()
    if data_dir not in path.parents:
        raise ConfigFileNotFound(f"Refusing to read outside {data_dir}: {path}")
    try:
        key = (path, path.stat().st_mtime)
    except OSError as e:
        raise ConfigFileNotFound(f"Config file not found: {path}") from e

    with _CACHE_LOCK:
        hit = _CONFIG_CACHE.get(key)
    if hit is not None:
        log.debug("Config cache HIT: %s", path.name)
        return hit

    try:
        data = json.loads(path.read_text(encoding=encoding))
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")

    with _CACHE_LOCK:
        _CONFIG_CACHE[key] = data
    log.debug("Config cache MISS → STORED: %s", path.name)
    return data


# ── Context manager to point the loader at another directory ─────────────────
class temp_data_dir:
    """Set CSSVARS_DATA_DIR for the block and reset the cache on both ends."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get(_ENV_VARS[0])
        os.environ[_ENV_VARS[0]] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(_ENV_VARS[0], None)
        else:
            os.environ[_ENV_VARS[0]] = self._old
        clear_config_cache()
