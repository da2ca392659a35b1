"""Local file locations."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

APP_DIR_NAME: Final[str] = "assetsync"
DATA_DIR_ENV: Final[str] = "ASSETSYNC_DATA_DIR"
HTTP_CACHE_FILENAME: Final[str] = "http-cache.sqlite"


def get_data_dir() -> Path:
    """Return the directory for local assetsync files.

    ``ASSETSYNC_DATA_DIR`` wins; otherwise the platform cache directory is used,
    since everything stored there can be rebuilt from the remote service.
    """

    override = os.getenv(DATA_DIR_ENV)
    if override:
        return Path(override).expanduser().resolve()
    if os.name == "nt":
        root = os.getenv("LOCALAPPDATA") or str(Path.home() / "AppData" / "Local")
    else:
        root = os.getenv("XDG_CACHE_HOME") or str(Path.home() / ".cache")
    return (Path(root) / APP_DIR_NAME).expanduser().resolve()


def get_http_cache_path() -> Path:
    """Return the sqlite file backing the HTTP response cache, creating its directory."""

    data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / HTTP_CACHE_FILENAME
