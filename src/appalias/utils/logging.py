"""appalias 统一日志模块."""

import logging
import os
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

# 日志级别映射
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# 默认日志格式
DEFAULT_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
SIMPLE_FORMAT = "%(message)s"

# 全局 logger 实例
_loggers: dict[str, logging.Logger] = {}


def _parse_level(level: str | None) -> int:
    """日志级别名称 → logging 常量，未指定时读取 APPALIAS_LOG_LEVEL."""
    if level is None:
        level = os.getenv("APPALIAS_LOG_LEVEL", "WARNING")
    return LOG_LEVELS.get(level.upper(), logging.WARNING)


def _console_handler(use_rich: bool) -> logging.Handler:
    """stderr 控制台 handler."""
    if not use_rich:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        return handler

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(SIMPLE_FORMAT))
    return handler


def _apply_level(logger: logging.Logger, log_level: int) -> None:
    logger.setLevel(log_level)
    for handler in logger.handlers:
        handler.setLevel(log_level)


def get_logger(
    name: str = "appalias",
    level: str | None = None,
    log_file: str | Path | None = None,
    use_rich: bool = True,
) -> logging.Logger:
    """获取 logger 实例.

    同名 logger 只配置一次 handler；再次调用时如果显式传入 level，
    会调整已有 logger 及其 handler 的级别（CLI 读取配置后据此生效）。

    Args:
        name: logger 名称
        level: 日志级别（默认从环境变量 APPALIAS_LOG_LEVEL 或 WARNING）
        log_file: 日志文件路径（可选，仅首次创建时生效）
        use_rich: 是否使用 Rich 格式化输出

    Returns:
        配置好的 logger 实例
    """
    cached = _loggers.get(name)
    if cached is not None:
        if level is not None:
            _apply_level(cached, _parse_level(level))
        return cached

    logger = logging.getLogger(name)
    logger.handlers = [_console_handler(use_rich)]

    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(file_handler)

    _apply_level(logger, _parse_level(level))
    _loggers[name] = logger
    return logger


def log_file_operation(
    logger: logging.Logger,
    operation: str,
    path: str | Path,
    changed: bool = True,
    error: Exception | None = None,
) -> None:
    """记录文件操作日志.

    Args:
        logger: logger 实例
        operation: 操作名称
        path: 文件路径
        changed: 文件是否被修改
        error: 异常（可选）
    """
    msg = f"File: {operation} | Path: {path}"

    if error:
        logger.error(f"{msg} | Error: {error}")
    elif changed:
        logger.info(msg)
    else:
        logger.debug(f"{msg} | unchanged")


# 预创建主 logger
main_logger = get_logger("appalias")
