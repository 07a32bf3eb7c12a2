"""Global configuration data structures and loading.

Provides immutable config loaded from ~/.ghmerge/config.toml. The file is
optional; every setting has a default matching ghmerge's built-in behavior.
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_ENV_VAR = "GHMERGE_CONFIG"


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in GhMergeContext.
    """

    default_base: str = "develop"
    remote: str = "origin"
    fallback_title: str = "Pull Request"
    prompt_description: bool = False


def global_config_path() -> Path:
    """Get the path to the global config file.

    GHMERGE_CONFIG overrides the default ~/.ghmerge/config.toml.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".ghmerge" / "config.toml"


def load_global_config(path: Path | None = None) -> GlobalConfig:
    """Load global config, falling back to defaults when the file is absent.

    Example config:
      default_base = "main"
      remote = "upstream"
      prompt_description = true

    Args:
        path: Config file path (defaults to global_config_path())

    Returns:
        GlobalConfig instance with loaded values

    Raises:
        ValueError: If the file is not valid TOML or a value has the wrong type
    """
    config_path = path if path is not None else global_config_path()

    if not config_path.exists():
        return GlobalConfig()

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

    defaults = GlobalConfig()
    return GlobalConfig(
        default_base=_read_str(data, "default_base", defaults.default_base, config_path),
        remote=_read_str(data, "remote", defaults.remote, config_path),
        fallback_title=_read_str(data, "fallback_title", defaults.fallback_title, config_path),
        prompt_description=_read_bool(
            data, "prompt_description", defaults.prompt_description, config_path
        ),
    )


def _read_str(data: dict, key: str, default: str, config_path: Path) -> str:
    value = data.get(key, default)
    if not isinstance(value, str) or not value:
        raise ValueError(f"'{key}' in {config_path} must be a non-empty string")
    return value


def _read_bool(data: dict, key: str, default: bool, config_path: Path) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"'{key}' in {config_path} must be true or false")
    return value
