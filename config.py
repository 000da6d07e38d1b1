from __future__ import annotations

import os
import yaml
from pathlib import Path
from typing import Any, Dict

USER_CONFIG_PATH = Path.home() / ".tasktree_config.yaml"

DEFAULT_DATABASE = "tasks.db"
DEFAULT_LOG_FILE = Path.home() / ".local" / "state" / "tasktree" / "tasktree.log"


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        data = yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def get_database_path() -> Path:
    env_value = os.getenv("TASKTREE_DB", "").strip()
    if env_value:
        return Path(env_value).expanduser()
    value = str(_load_config().get("database", "") or "").strip()
    return Path(value).expanduser() if value else Path(DEFAULT_DATABASE)


def get_log_path() -> Path:
    env_value = os.getenv("TASKTREE_LOG", "").strip()
    if env_value:
        return Path(env_value).expanduser()
    value = str(_load_config().get("log_file", "") or "").strip()
    return Path(value).expanduser() if value else DEFAULT_LOG_FILE


def get_user_theme() -> str:
    return str(_load_config().get("theme", "") or "").strip()
