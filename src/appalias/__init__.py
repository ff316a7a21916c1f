"""appalias - Electron 应用启动别名管理."""

__version__ = "0.1.0"
