"""配置 Schema 定义（使用 Pydantic）."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from appalias.core.injector import source_directive
from appalias.core.store import DEFAULT_INCLUDE_COMMENT

DEFAULT_LAUNCHER = "/usr/lib/electron37/electron"
DEFAULT_COMMAND_TEMPLATE = "{launcher} {target} > /dev/null 2>&1 &"


class AppAliasConfig(BaseModel):
    """appalias 主配置."""

    profile_file: Path = Field(
        default_factory=lambda: Path.home() / ".bashrc",
        description="shell 启动脚本路径",
    )
    alias_file: Path = Field(
        default_factory=lambda: Path.home() / ".electron-apps",
        description="别名文件路径",
    )
    include_line: str | None = Field(None, description="引入指令（默认由 alias_file 生成）")
    include_comment: str | None = Field(
        default=DEFAULT_INCLUDE_COMMENT, description="新增引入指令时的注释行"
    )
    launcher: str = Field(default=DEFAULT_LAUNCHER, description="Electron 启动器路径")
    command_template: str = Field(
        default=DEFAULT_COMMAND_TEMPLATE, description="别名命令模板"
    )
    log_level: str = Field(default="WARNING", description="日志级别")

    @field_validator("profile_file", "alias_file")
    @classmethod
    def _expand_path(cls, value: Path) -> Path:
        return Path(value).expanduser()

    @field_validator("command_template")
    @classmethod
    def _check_template(cls, value: str) -> str:
        if "{target}" not in value:
            raise ValueError("command_template 必须包含 {target}")
        return value

    @property
    def directive(self) -> str:
        """实际使用的引入指令."""
        return self.include_line or source_directive(self.alias_file)

    def build_command(self, target: str) -> str:
        """根据模板生成启动命令.

        Args:
            target: 应用 URL 或路径

        Returns:
            完整的 shell 命令
        """
        return self.command_template.format(launcher=self.launcher, target=target)
