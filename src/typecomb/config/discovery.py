"""Config file discovery and loading.

Walk-up finder locates typecomb.toml, similar to how git finds .git/.
Supports the TYPECOMB_CONFIG env var and an explicit path override.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "typecomb.toml"
CONFIG_ENV_VAR = "TYPECOMB_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest typecomb.toml at or above *start* (default: cwd).

    A set TYPECOMB_CONFIG wins outright, even when it names a missing file.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        ValueError: If the file is not valid TOML.
    """
    raw = path.read_text(encoding="utf-8")
    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ValueError(msg) from exc
