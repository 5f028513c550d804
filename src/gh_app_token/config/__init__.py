from .loader import load_config_file, resolve_config
from .models import AppTokenConfig, ConfigFile

__all__ = ["AppTokenConfig", "ConfigFile", "load_config_file", "resolve_config"]
