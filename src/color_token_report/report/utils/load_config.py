# src/color_token_report/report/utils/load_config.py

"""Load host exports and render settings (JSON) from a <data/> directory.

Modes:
- "raw"             -> return parsed JSON as-is
- "validated_dict"  -> require a JSON object, then run an optional validator

Parsed files are cached per (path, mtime, mode); validated loads are not cached.
Used by the render settings loader and the demo CLI.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any, Literal

Mode = Literal["raw", "validated_dict"]
Validator = Callable[[dict[str, Any]], dict[str, Any]]

__all__ = [
    "Mode",
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

# Env overrides, checked in order
_DATA_DIR_ENV_VARS = ("DATA_DIR", "COLOR_TOKEN_DATA_DIR")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested export/settings file can't be read or sits outside the data dir."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing or validation fails."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON is not the shape the mode asks for."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
_CACHE: dict[tuple[Path, float, str], Any] = {}


def clear_config_cache() -> None:
    with _CACHE_LOCK:
        _CACHE.clear()
    log.debug("Config cache cleared.")


def _resolve_data_dir(base_dir: Path | None) -> Path:
    """Explicit base_dir > env override > first 'data/' walking up from this file."""
    if base_dir is not None:
        return Path(base_dir).resolve()
    for var in _DATA_DIR_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return Path(os.path.expanduser(value)).resolve()
    here = Path(__file__).resolve()
    tried = [(p / "data") for p in here.parents]
    for cand in tried:
        if cand.is_dir():
            return cand
    raise DataDirNotFound("No 'data' directory found. Tried:\n  " + "\n  ".join(map(str, tried)))


def _locate(data_dir: Path, file: str | os.PathLike[str]) -> Path:
    name = os.fspath(file)
    if not name.endswith(".json"):
        name += ".json"
    path = (data_dir / name).resolve()
    if not path.is_relative_to(data_dir):
        raise ConfigFileNotFound(f"Refusing to access file outside data dir: {path} (base={data_dir})")
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


def _read_json(path: Path, encoding: str) -> tuple[float, Any]:
    try:
        mtime = path.stat().st_mtime
        with path.open("r", encoding=encoding) as f:
            return mtime, json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Validator | None = None,
) -> Any:
    """Load <data>/<file>.json and coerce it by `mode`."""
    if mode not in ("raw", "validated_dict"):
        raise ValueError(f"Unknown mode '{mode}'")

    path = _locate(_resolve_data_dir(base_dir), file)
    key = (path, path.stat().st_mtime, mode)

    if validator is None:
        with _CACHE_LOCK:
            if key in _CACHE:
                log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
                return _CACHE[key]

    mtime, data = _read_json(path, encoding)

    if mode == "validated_dict":
        if not isinstance(data, dict):
            raise ConfigTypeError(
                f"{path.name}: expected an object for 'validated_dict', got {type(data).__name__}"
            )
        if validator is not None:
            try:
                data = validator(data)
            except Exception as e:
                raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
            log.debug("Config loaded (validated, not cached): %s", path.name)
            return data

    with _CACHE_LOCK:
        _CACHE[(path, mtime, mode)] = data
    log.debug("Config cache MISS → STORED: %s (mode=%s)", path.name, mode)
    return data
