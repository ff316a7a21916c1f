"""appalias 异常定义."""

from pathlib import Path


class AppAliasError(Exception):
    """appalias 错误基类."""

    pass


class ValidationError(AppAliasError, ValueError):
    """调用方传入的数据不合法（别名为空、包含非法字符、删除选择为空）.

    触发时不会进行任何文件读写。
    """

    pass


class FileAccessError(AppAliasError):
    """文件读写失败（文件不存在的读取除外）."""

    def __init__(
        self,
        operation: str,
        path: str | Path,
        original_error: Exception | None = None,
    ) -> None:
        """初始化文件访问错误.

        Args:
            operation: 失败的操作名称（如 "write alias file"）
            path: 相关文件路径
            original_error: 原始异常
        """
        self.operation = operation
        self.path = Path(path)
        self.original_error = original_error

        reason = ""
        if original_error is not None:
            reason = getattr(original_error, "strerror", None) or str(original_error)
        message = f"{operation} failed: {self.path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
