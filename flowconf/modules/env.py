"""
`env` module: get, get_int, get_bool.

Read from settings or os.environ with a key whitelist to avoid leaking secrets.
"""

import os
from typing import Any

from flowconf.core.config import settings
from flowconf.engines.script import NativeModule, operation


class EnvModule(NativeModule):
    """
    Only keys in SCRIPT_ENV_WHITELIST are readable; others behave as unset.
    Settings attributes win over os.environ.
    """

    name = "env"

    def __init__(self) -> None:
        self._settings = settings
        self._whitelist = settings.env_whitelist

    def _get_raw(self, key: str) -> Any:
        if key not in self._whitelist:
            return None
        v = getattr(self._settings, key, None)
        if v is not None:
            return v
        return os.environ.get(key)

    @operation
    def get(self, key: str, default: Any = None) -> Any:
        v = self._get_raw(key)
        return default if v is None else v

    @operation
    def get_int(self, key: str, default: int = 0) -> int:
        v = self._get_raw(key)
        if v is None:
            return default
        try:
            return int(v)
        except (TypeError, ValueError):
            return default

    @operation
    def get_bool(self, key: str, default: bool = False) -> bool:
        v = self._get_raw(key)
        if v is None:
            return default
        if isinstance(v, bool):
            return v
        s = str(v).lower().strip()
        return s in ("true", "1", "yes", "on")
