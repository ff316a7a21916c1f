"""别名存储: 基于文本文件的按键增删改查."""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from appalias.utils.logging import log_file_operation

from .exceptions import FileAccessError, ValidationError
from .grammar import (
    decode_line,
    encode_record,
    join_lines,
    parse_line,
    split_lines,
    validate_name,
)
from .injector import ENCODING, ENCODING_ERRORS, DirectiveInjector, source_directive
from .models import AliasLine, AliasRecord

if TYPE_CHECKING:
    from appalias.config.schema import AppAliasConfig

logger = logging.getLogger(__name__)

DEFAULT_INCLUDE_COMMENT = "# Load custom Electron app aliases"


class AliasStore:
    """别名文件存储.

    每次操作都重新读取文件、修改后整体写回，文件本身是唯一的数据来源。
    不匹配 alias 语法的行（注释、空行等）原样保留，顺序不变。
    """

    def __init__(
        self,
        alias_file: str | Path,
        profile_file: str | Path,
        include_line: str | None = None,
        include_comment: str | None = DEFAULT_INCLUDE_COMMENT,
        injector: DirectiveInjector | None = None,
    ) -> None:
        """初始化别名存储.

        Args:
            alias_file: 别名文件路径
            profile_file: shell 启动脚本路径
            include_line: 引入别名文件的指令（默认由 alias_file 生成）
            include_comment: 新增引入指令时的注释
            injector: 指令注入器
        """
        self.alias_file = Path(alias_file)
        self.profile_file = Path(profile_file)
        self.include_line = include_line or source_directive(self.alias_file)
        self.include_comment = include_comment
        self.injector = injector or DirectiveInjector()

    @classmethod
    def from_config(cls, config: "AppAliasConfig") -> "AliasStore":
        """根据配置创建存储."""
        return cls(
            alias_file=config.alias_file,
            profile_file=config.profile_file,
            include_line=config.directive,
            include_comment=config.include_comment,
        )

    def _read_lines(self) -> list[str]:
        """读取别名文件的所有行，文件不存在时返回空列表."""
        try:
            with open(self.alias_file, encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as f:
                content = f.read()
        except FileNotFoundError:
            return []
        except OSError as e:
            log_file_operation(logger, "read alias file", self.alias_file, error=e)
            raise FileAccessError("read alias file", self.alias_file, e) from e
        return split_lines(content)

    def _write_lines(self, lines: list[str]) -> None:
        """整体写回别名文件."""
        try:
            self.alias_file.parent.mkdir(parents=True, exist_ok=True)
            with open(
                self.alias_file, "w", encoding=ENCODING, errors=ENCODING_ERRORS, newline=""
            ) as f:
                f.write(join_lines(lines))
        except OSError as e:
            log_file_operation(logger, "write alias file", self.alias_file, error=e)
            raise FileAccessError("write alias file", self.alias_file, e) from e
        log_file_operation(logger, "write alias file", self.alias_file)

    def list(self) -> list[AliasRecord]:
        """列出所有别名（按文件顺序）."""
        records = []
        for line in self._read_lines():
            record = decode_line(line)
            if record is not None:
                records.append(record)
        return records

    def get(self, name: str) -> AliasRecord | None:
        """按名称获取别名，有重复时返回最后一条."""
        found = None
        for record in self.list():
            if record.name == name:
                found = record
        return found

    def wire(self) -> None:
        """确保 profile 中引入了别名文件."""
        self.injector.ensure(self.profile_file, self.include_line, self.include_comment)

    def upsert(self, name: str, command: str) -> None:
        """新增或替换别名.

        同名的所有旧行都会被移除，新行追加到文件末尾。

        Args:
            name: 别名名称
            command: 别名命令

        Raises:
            ValidationError: 名称不合法
            FileAccessError: 读写失败
        """
        validate_name(name)
        self.wire()

        lines = [
            line
            for line in self._read_lines()
            if not self._matches(line, {name})
        ]
        lines.append(encode_record(name, command))
        self._write_lines(lines)

    def delete(self, names: Iterable[str]) -> int:
        """删除指定名称的别名.

        Args:
            names: 要删除的别名名称（不能为空），单个字符串视为一个名称

        Returns:
            删除的 alias 行数

        Raises:
            ValidationError: 选择为空或名称不合法
            FileAccessError: 读写失败
        """
        selected = {names} if isinstance(names, str) else set(names)
        if not selected:
            raise ValidationError("Please select at least one alias")
        for name in selected:
            validate_name(name)

        lines = self._read_lines()
        if not lines:
            return 0

        kept = [line for line in lines if not self._matches(line, selected)]
        removed = len(lines) - len(kept)
        if removed:
            self._write_lines(kept)
        return removed

    @staticmethod
    def _matches(line: str, names: set[str]) -> bool:
        raw = parse_line(line)
        return isinstance(raw, AliasLine) and raw.name in names
