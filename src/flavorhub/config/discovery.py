"""Config file discovery.

Walk-up finder locates flavorhub.toml, similar to how git finds .git/.
Supports the FLAVORHUB_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "flavorhub.toml"
CONFIG_ENV_VAR = "FLAVORHUB_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for flavorhub.toml.

    Returns the path to the config file, or None if not found.
    Checks FLAVORHUB_CONFIG first; a set but missing path means no config.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def toml_string(value: str) -> str:
    """Quote *value* as a TOML basic string.

    Raises:
        ValueError: *value* contains a control character.
    """
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in value):
        msg = f"Control characters are not allowed in config values: {value!r}"
        raise ValueError(msg)
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def render_config(*, timezone: str = "UTC", db_path: str | None = None) -> str:
    """Sparse flavorhub.toml text for ``flavorhub init``.

    Raises:
        ValueError: a value cannot be written as a TOML string.
    """
    lines = ["[daily]", f"timezone = {toml_string(timezone)}"]
    if db_path:
        lines += ["", "[database]", f"path = {toml_string(db_path)}"]
    return "\n".join(lines) + "\n"
