"""appalias 核心: 别名存储与指令注入."""

from .exceptions import AppAliasError, FileAccessError, ValidationError
from .injector import DirectiveInjector, source_directive
from .models import AliasLine, AliasRecord, OpaqueLine
from .store import AliasStore

__all__ = [
    "AliasStore",
    "DirectiveInjector",
    "source_directive",
    "AliasRecord",
    "AliasLine",
    "OpaqueLine",
    "AppAliasError",
    "ValidationError",
    "FileAccessError",
]
