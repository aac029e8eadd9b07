from __future__ import annotations

import importlib
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from types import ModuleType
from typing import Optional, Union

from .core.constants import DEFAULT_TOKEN_TTL_HOURS


@dataclass(frozen=True)
class DirectoryConfig:
    """Everything the components need, handed to build_container explicitly."""

    secret_key: str
    data_path: Path
    token_ttl: timedelta = timedelta(hours=DEFAULT_TOKEN_TTL_HOURS)
    password_hash_method: str = "scrypt"
    auto_init_store: bool = True
    auto_seed_admin: bool = False
    admin_username: str = ""
    admin_password: str = ""
    debug: bool = False
    log_level: str = "INFO"


def load_config(settings: Optional[Union[str, ModuleType]] = None) -> DirectoryConfig:
    """Build DirectoryConfig from a settings module (name or module object)."""
    if settings is None:
        from config import get_settings_module

        settings = get_settings_module()
    if isinstance(settings, str):
        settings = importlib.import_module(settings)

    return DirectoryConfig(
        secret_key=str(getattr(settings, "SECRET_KEY")),
        data_path=Path(getattr(settings, "DATA_PATH")),
        token_ttl=timedelta(hours=float(getattr(settings, "TOKEN_TTL_HOURS", DEFAULT_TOKEN_TTL_HOURS))),
        password_hash_method=str(getattr(settings, "PASSWORD_HASH_METHOD", "scrypt")),
        auto_init_store=bool(getattr(settings, "AUTO_INIT_STORE", True)),
        auto_seed_admin=bool(getattr(settings, "AUTO_SEED_ADMIN", False)),
        admin_username=str(getattr(settings, "ADMIN_USERNAME", "") or ""),
        admin_password=str(getattr(settings, "ADMIN_PASSWORD", "") or ""),
        debug=bool(getattr(settings, "DEBUG", False)),
        log_level=str(getattr(settings, "LOG_LEVEL", "INFO")),
    )
