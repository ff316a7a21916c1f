"""alias 行语法: 解码 / 编码.

语法（EBNF）::

    line  = [ws] "alias" ws NAME "=" VALUE
    NAME  = { A-Z | a-z | 0-9 | "_" | "." | ":" | "-" }+
    VALUE = 行内剩余部分

VALUE 去掉首尾空白后，如果被一对相同的 ``"`` 或 ``'`` 包裹，则去掉这一对引号（只去一次）。
写入时命令总是用双引号包裹，内部引号不做转义。
"""

import re

from .exceptions import ValidationError
from .models import NAME_PATTERN, AliasLine, AliasRecord, OpaqueLine, RawLine

NAME_RE = re.compile(NAME_PATTERN)

# 完整的 alias 行（用于列表）
ALIAS_LINE_RE = re.compile(r"^\s*alias\s+([A-Za-z0-9_.:-]+)=(.+)$")

# 只匹配到 "="（用于按名称替换 / 删除，VALUE 可为空）
ALIAS_KEY_RE = re.compile(r"^\s*alias\s+([A-Za-z0-9_.:-]+)=")

QUOTE_CHARS = ("\"", "'")


def is_valid_name(name: str) -> bool:
    """检查别名名称是否合法."""
    return bool(name) and NAME_RE.fullmatch(name) is not None


def validate_name(name: str) -> str:
    """校验别名名称.

    Args:
        name: 别名名称

    Returns:
        原样返回合法的名称

    Raises:
        ValidationError: 名称为空或包含非法字符
    """
    if not name:
        raise ValidationError("Alias name cannot be empty")
    if NAME_RE.fullmatch(name) is None:
        raise ValidationError(
            f"Invalid alias name '{name}': only letters, numbers, dots, "
            "underscores, colons and hyphens are allowed"
        )
    return name


def strip_quotes(value: str) -> str:
    """去掉一对对称的首尾引号."""
    if len(value) >= 2 and value[0] in QUOTE_CHARS and value[0] == value[-1]:
        return value[1:-1]
    return value


def decode_line(line: str) -> AliasRecord | None:
    """把一行解码为别名记录，不匹配时返回 None."""
    match = ALIAS_LINE_RE.match(line)
    if not match:
        return None
    command = strip_quotes(match.group(2).strip())
    return AliasRecord(name=match.group(1), command=command)


def encode_record(name: str, command: str) -> str:
    """编码为 ``alias NAME="COMMAND"``."""
    return f'alias {name}="{command}"'


def parse_line(line: str) -> RawLine:
    """把一行分类为 AliasLine 或 OpaqueLine."""
    match = ALIAS_KEY_RE.match(line)
    if match:
        return AliasLine(name=match.group(1), text=line)
    return OpaqueLine(text=line)


def split_lines(content: str) -> list[str]:
    """按 \\n 拆分文件内容，忽略结尾的一个换行.

    其它字符（包括 \\r）原样保留在行内。
    """
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def join_lines(lines: list[str]) -> str:
    """用 \\n 拼接，并保证只有一个结尾换行."""
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
