"""Server settings read from keyword overrides, the environment and config.toml."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from callr_rt.protocol.version import SERVER_BANNER

ENV_PREFIX = "CALLR_RT_"


class ServerSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    banner: str = SERVER_BANNER
    log_level: str = "INFO"


def _load_config_server_table(config_path: Optional[Path] = None) -> Dict[str, Any]:
    config_path = config_path or Path("config.toml")
    if not config_path.exists():
        return {}

    try:
        config = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError):
        return {}

    server = config.get("server", {})
    return server if isinstance(server, dict) else {}


def load_settings(config_path: Optional[Path] = None, **overrides: Any) -> ServerSettings:
    values = _load_config_server_table(config_path)
    for name in ServerSettings.model_fields:
        env_value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if env_value:
            values[name] = env_value
    values.update({key: value for key, value in overrides.items() if value is not None})
    return ServerSettings.model_validate(values)
