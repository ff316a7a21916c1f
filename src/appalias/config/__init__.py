"""appalias 配置模块."""

from .loader import ConfigLoader, load_config
from .schema import AppAliasConfig

__all__ = ["AppAliasConfig", "ConfigLoader", "load_config"]
