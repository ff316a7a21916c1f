"""配置加载器."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .schema import AppAliasConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """配置加载器，支持 YAML + 环境变量（环境变量覆盖 YAML）."""

    DEFAULT_CONFIG_DIR = Path.home() / ".appalias"
    DEFAULT_CONFIG_FILE = "config.yaml"
    CWD_CONFIG_FILE = "appalias.yaml"

    # 环境变量 → 配置字段
    ENV_OVERRIDES = {
        "APPALIAS_PROFILE_FILE": "profile_file",
        "APPALIAS_ALIAS_FILE": "alias_file",
        "APPALIAS_LAUNCHER": "launcher",
        "APPALIAS_LOG_LEVEL": "log_level",
    }

    def __init__(self, config_path: Path | str | None = None) -> None:
        """初始化配置加载器.

        Args:
           config_path: 自定义配置文件路径
        """
        if config_path:
            self.config_path = Path(config_path).expanduser()
        else:
            # 优先检查当前目录
            cwd_config = Path.cwd() / self.CWD_CONFIG_FILE
            if cwd_config.exists():
                self.config_path = cwd_config
            else:
                self.config_path = self.DEFAULT_CONFIG_DIR / self.DEFAULT_CONFIG_FILE

        self._load_env()

    def _load_env(self) -> None:
        """加载 .env 文件."""
        # 1. 尝试从 ~/.appalias/.env 加载
        env_file = self.DEFAULT_CONFIG_DIR / ".env"
        if env_file.exists():
            load_dotenv(env_file)

        # 2. 尝试从当前工作目录加载（覆盖优先级更高）
        cwd_env = Path.cwd() / ".env"
        if cwd_env.exists():
            load_dotenv(cwd_env, override=True)

    def load(self) -> AppAliasConfig:
        """加载并合并配置 (YAML + 环境变量)."""
        data = self._load_yaml()

        for env_var, field in self.ENV_OVERRIDES.items():
            value = os.getenv(env_var)
            if value:
                data[field] = value

        return AppAliasConfig(**data)

    def _load_yaml(self) -> dict[str, Any]:
        """加载 YAML 配置文件."""
        if not self.config_path.exists():
            return {}

        try:
            content = self.config_path.read_text(encoding="utf-8")
            data = yaml.safe_load(content)
        except (OSError, yaml.YAMLError) as e:
            # YAML 加载失败时使用默认配置，但应警告
            logger.warning(f"⚠️  YAML 配置文件加载失败: {e}")
            return {}

        if not data:
            return {}
        if not isinstance(data, dict):
            logger.warning(f"⚠️  YAML 配置文件格式错误: {self.config_path}")
            return {}
        return data

    def validate(self) -> tuple[bool, str]:
        """校验配置."""
        try:
            self.load()
            return True, "✅ 配置加载正常"
        except ValueError as e:
            return False, f"❌ 配置加载失败: {e}"


def load_config(config_path: Path | str | None = None) -> AppAliasConfig:
    """快捷函数：加载配置."""
    loader = ConfigLoader(config_path)
    return loader.load()
