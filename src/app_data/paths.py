"""Application-data directory resolution."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Mapping, Optional

DATA_DIRNAME = "data"
KEY_SUFFIX = ".json"


def _home(environ: Mapping[str, str]) -> str:
    return environ.get("HOME") or str(Path.home())


def user_app_data_dir(
    *,
    environ: Optional[Mapping[str, str]] = None,
    platform: Optional[str] = None,
    legacy_darwin_path: bool = False,
) -> Path:
    """Return the per-user application-data root for the host platform.

    ``APPDATA`` wins when set (Windows). On macOS the root is
    ``~/Library/Preferences``; everywhere else ``~/.local/share``.

    With ``legacy_darwin_path`` the macOS root is built by plain string
    concatenation (``$HOME`` + ``Library/Preferences``), matching the
    location used by earlier releases.
    """
    env = os.environ if environ is None else environ
    plat = sys.platform if platform is None else platform

    appdata = env.get("APPDATA")
    if appdata:
        return Path(appdata)

    home = _home(env)
    if plat == "darwin":
        if legacy_darwin_path:
            return Path(home + "Library/Preferences")
        return Path(home) / "Library" / "Preferences"
    return Path(home) / ".local" / "share"


def storage_root(app_data_dir: Path, app_name: str) -> Path:
    """``<app-data-dir>/<app-name>/data``."""
    return app_data_dir / app_name / DATA_DIRNAME


def key_path(root: Path, key: str) -> Path:
    # Keys are used verbatim as the filename stem.
    return root / f"{key}{KEY_SUFFIX}"
