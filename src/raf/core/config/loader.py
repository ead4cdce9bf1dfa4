"""Config loading from ``~/.config/raf/config.toml``."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from raf.core.contracts.config import PathConfig, RafConfig
from raf.core.contracts.exceptions import ConfigError

CONFIG_RELATIVE_PATH = Path(".config") / "raf" / "config.toml"


def default_config_path() -> Path:
    home = os.environ.get("HOME")
    if not home:
        raise ConfigError("HOME is not set; cannot locate the raf config file")
    return Path(home) / CONFIG_RELATIVE_PATH


def _resolve_path(value: Path, *, base_dir: Path) -> Path:
    value = value.expanduser()
    if value.is_absolute():
        return value
    return (base_dir / value).resolve()


def load_config(path: str | Path | None = None) -> RafConfig:
    """Read and validate the config file.

    ``path`` defaults to :func:`default_config_path`. Relative paths inside the
    file are resolved against the directory holding it.
    """
    config_path = Path(path).expanduser().resolve() if path is not None else default_config_path()
    config_dir = config_path.parent

    try:
        raw_payload: Any = tomllib.loads(config_path.read_text(encoding="utf-8"))
        parsed = RafConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"config file is not valid UTF-8: {config_path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML in config file: {config_path}: {exc}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config in {config_path}: {exc}") from exc

    template = parsed.path.template
    return RafConfig(
        path=PathConfig(
            root=_resolve_path(parsed.path.root, base_dir=config_dir),
            template=_resolve_path(template, base_dir=config_dir) if template is not None else None,
        )
    )
