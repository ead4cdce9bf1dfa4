"""Core configuration loading exports."""

from raf.core.config.loader import default_config_path, load_config

__all__ = ["default_config_path", "load_config"]
