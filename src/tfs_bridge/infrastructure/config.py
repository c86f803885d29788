"""Configuration constants and .env parsing."""

from __future__ import annotations

import os
from pathlib import Path


def read_env_file(keys: list[str], env_file: Path | None = None) -> dict[str, str]:
    """Return the requested keys from a .env file without exporting them to os.environ."""
    path = env_file if env_file is not None else Path.cwd() / ".env"
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError:
        return {}

    wanted = set(keys)
    result: dict[str, str] = {}
    for line in lines:
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or key.startswith("#") or key not in wanted:
            continue
        value = _unquote(value.strip())
        if value:
            result[key] = value

    return result


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def get_setting(name: str, default: str, env_config: dict[str, str] | None = None) -> str:
    """Resolve a setting from os.environ, then the .env values, then the default."""
    if env_config is None:
        env_config = read_env_file([name])
    return os.environ.get(name) or env_config.get(name, default)


_env_config = read_env_file(["TFS_BRIDGE_FILE_ENCODING", "TFS_BRIDGE_METADATA_DIR"])

PROJECT_ROOT: Path = Path.cwd()

# utf-8-sig also reads BOM-less UTF-8, and drops the BOM Windows editors write.
FILE_ENCODING: str = get_setting("TFS_BRIDGE_FILE_ENCODING", "utf-8-sig", _env_config)
METADATA_DIR: Path = Path(
    get_setting("TFS_BRIDGE_METADATA_DIR", str(PROJECT_ROOT / ".git"), _env_config)
).resolve()
