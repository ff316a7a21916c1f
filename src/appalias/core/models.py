"""别名数据模型."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

# 别名名称允许的字符
NAME_PATTERN = r"^[A-Za-z0-9_.:-]+$"


class AliasRecord(BaseModel):
    """别名记录: (name, command)."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., pattern=NAME_PATTERN, description="别名名称")
    command: str = Field(..., description="别名展开后的 shell 命令")


@dataclass(frozen=True)
class AliasLine:
    """文件中匹配 alias 语法的一行."""

    name: str
    text: str


@dataclass(frozen=True)
class OpaqueLine:
    """不匹配 alias 语法的行，原样保留."""

    text: str


RawLine = AliasLine | OpaqueLine
