"""appalias 工具模块."""

from .logging import get_logger, log_file_operation, main_logger

__all__ = [
    "get_logger",
    "main_logger",
    "log_file_operation",
]
