"""Profile 引入指令注入."""

import logging
from pathlib import Path

from appalias.utils.logging import log_file_operation

from .exceptions import FileAccessError

logger = logging.getLogger(__name__)

# 文本读写参数: 不转换换行符，无法解码的字节用代理字符原样往返
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


class DirectiveInjector:
    """保证目标文件中恰好包含一次指定的指令行."""

    def read(self, target_path: Path) -> str:
        """读取目标文件全文，不存在时创建空文件并返回空字符串."""
        try:
            with open(target_path, encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as f:
                return f.read()
        except FileNotFoundError:
            pass
        except OSError as e:
            log_file_operation(logger, "read profile", target_path, error=e)
            raise FileAccessError("read profile", target_path, e) from e

        try:
            target_path.parent.mkdir(parents=True, exist_ok=True)
            target_path.touch()
        except OSError as e:
            log_file_operation(logger, "create profile", target_path, error=e)
            raise FileAccessError("create profile", target_path, e) from e
        log_file_operation(logger, "create profile", target_path)
        return ""

    def ensure(
        self,
        target_path: str | Path,
        directive_line: str,
        leading_comment: str | None = None,
    ) -> None:
        """确保指令行存在于目标文件中.

        已包含该指令（子串匹配）时不做任何修改；否则在文件末尾追加
        一个空行、可选的注释行和指令行。

        Args:
            target_path: profile 文件路径
            directive_line: 需要存在的指令行
            leading_comment: 新增指令时写在前面的注释（可选）

        Raises:
            FileAccessError: 读写失败
        """
        target_path = Path(target_path)
        content = self.read(target_path)

        if directive_line in content:
            log_file_operation(logger, "ensure directive", target_path, changed=False)
            return

        addition = "\n"
        if leading_comment:
            addition += f"{leading_comment}\n"
        addition += f"{directive_line}\n"

        try:
            with open(
                target_path, "a", encoding=ENCODING, errors=ENCODING_ERRORS, newline=""
            ) as f:
                f.write(addition)
        except OSError as e:
            log_file_operation(logger, "append directive", target_path, error=e)
            raise FileAccessError("append directive", target_path, e) from e

        log_file_operation(logger, "append directive", target_path)


def source_directive(alias_file: str | Path, home: Path | None = None) -> str:
    """生成引入别名文件的 shell 指令.

    位于 home 目录下的文件使用 ``$HOME/...`` 形式，其它使用绝对路径。

    Examples:
        >>> source_directive(Path.home() / ".electron-apps")
        '[ -f "$HOME/.electron-apps" ] && source "$HOME/.electron-apps"'
    """
    alias_file = Path(alias_file).expanduser()
    home = home or Path.home()
    try:
        shell_path = f"$HOME/{alias_file.relative_to(home).as_posix()}"
    except ValueError:
        shell_path = str(alias_file)
    return f'[ -f "{shell_path}" ] && source "{shell_path}"'
