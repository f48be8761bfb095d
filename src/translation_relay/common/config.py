"""Runtime settings: defaults, optional YAML overlay, then environment variables."""
from __future__ import annotations
import os
from dataclasses import dataclass, fields
from typing import Any

import yaml

DEFAULT_UPSTREAM_URL = "https://translate.googleapis.com/translate_a/single"
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64)"

@dataclass(frozen=True)
class Settings:
    """Relay settings. Field names double as lower-case env var names."""
    host: str = "0.0.0.0"
    port: int = 5000
    upstream_url: str = DEFAULT_UPSTREAM_URL
    upstream_client: str = "gtx"
    upstream_timeout: float = 10.0
    upstream_user_agent: str = DEFAULT_USER_AGENT
    static_dir: str = ""
    log_level: str = "INFO"


def load_cfg(path: str) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return data


def load_settings(env: dict[str, str] | None = None) -> Settings:
    """
    Build settings from defaults, the YAML file named by RELAY_CONFIG, and env vars.

    Args:
        env: Environment mapping; defaults to os.environ.

    Returns:
        Frozen Settings. Environment variables win over the YAML file.
    """
    env = dict(os.environ) if env is None else env
    values: dict[str, Any] = {}

    cfg_path = env.get("RELAY_CONFIG")
    if cfg_path:
        values.update({str(k).lower(): v for k, v in load_cfg(cfg_path).items()})

    known = {f.name: f for f in fields(Settings)}
    for name in known:
        raw = env.get(name.upper())
        if raw is not None and raw != "":
            values[name] = raw

    kwargs: dict[str, Any] = {}
    for name, value in values.items():
        if name not in known:
            continue
        default = known[name].default
        if isinstance(default, (int, float)):
            kwargs[name] = type(default)(value)
        else:
            kwargs[name] = str(value)

    if not kwargs.get("static_dir"):
        kwargs["static_dir"] = os.getcwd()
    return Settings(**kwargs)
