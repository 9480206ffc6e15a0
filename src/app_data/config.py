"""Environment-driven store configuration via pydantic-settings."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class StoreSettings(BaseSettings):
    """Settings for a :class:`~app_data.store.KeyedJSONStore`.

    Env vars use ``APP_DATA_`` prefix::

        export APP_DATA_APP_NAME=demoapp
        export APP_DATA_IN_MEMORY_CACHE=true
        export APP_DATA_ROOT_DIR=/tmp/app-data

    ``root_dir`` overrides platform detection entirely. ``legacy_darwin_path``
    reproduces the historical macOS location ``$HOMELibrary/Preferences``
    (no separator) so data written by older installs is still found.
    """

    model_config = {"env_prefix": "APP_DATA_"}

    app_name: Optional[str] = None
    root_dir: Optional[Path] = None
    in_memory_cache: bool = False
    legacy_darwin_path: bool = False
