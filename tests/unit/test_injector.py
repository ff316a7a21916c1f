"""引入指令注入测试."""

from pathlib import Path

import pytest

from appalias.core.exceptions import FileAccessError
from appalias.core.injector import DirectiveInjector, source_directive

DIRECTIVE = '[ -f "$HOME/.electron-apps" ] && source "$HOME/.electron-apps"'
COMMENT = "# Load custom Electron app aliases"


def test_ensure_creates_missing_file(profile_file):
    """测试文件不存在时创建并追加."""
    DirectiveInjector().ensure(profile_file, DIRECTIVE, COMMENT)

    assert profile_file.read_text(encoding="utf-8") == f"\n{COMMENT}\n{DIRECTIVE}\n"


def test_ensure_appends_after_existing_content(profile_file):
    """测试保留已有内容."""
    profile_file.write_text("export EDITOR=vim\n", encoding="utf-8")

    DirectiveInjector().ensure(profile_file, DIRECTIVE, COMMENT)

    content = profile_file.read_text(encoding="utf-8")
    assert content.startswith("export EDITOR=vim\n")
    assert content.endswith(f"\n{COMMENT}\n{DIRECTIVE}\n")


def test_ensure_is_idempotent(profile_file):
    """测试重复调用结果一致."""
    injector = DirectiveInjector()
    injector.ensure(profile_file, DIRECTIVE, COMMENT)
    once = profile_file.read_text(encoding="utf-8")

    injector.ensure(profile_file, DIRECTIVE, COMMENT)
    assert profile_file.read_text(encoding="utf-8") == once
    assert once.count(DIRECTIVE) == 1


def test_ensure_substring_match_is_noop(profile_file):
    """测试已存在（带缩进/注释变体）时不追加."""
    original = f"if true; then\n    {DIRECTIVE}  # mine\nfi\n"
    profile_file.write_text(original, encoding="utf-8")

    DirectiveInjector().ensure(profile_file, DIRECTIVE, COMMENT)

    assert profile_file.read_text(encoding="utf-8") == original


def test_ensure_without_comment(profile_file):
    """测试不带注释."""
    DirectiveInjector().ensure(profile_file, DIRECTIVE)

    assert profile_file.read_text(encoding="utf-8") == f"\n{DIRECTIVE}\n"


def test_ensure_directory_raises(tmp_path):
    """测试目标为目录时报错."""
    target = tmp_path / "profile.d"
    target.mkdir()

    with pytest.raises(FileAccessError) as exc_info:
        DirectiveInjector().ensure(target, DIRECTIVE, COMMENT)

    assert exc_info.value.path == target
    assert "profile" in exc_info.value.operation
    assert isinstance(exc_info.value.original_error, OSError)


def test_source_directive_home_relative(tmp_path):
    """测试 home 下的路径使用 $HOME 形式."""
    assert source_directive(tmp_path / ".electron-apps", home=tmp_path) == DIRECTIVE


def test_source_directive_absolute(tmp_path):
    """测试 home 外的路径使用绝对路径."""
    path = tmp_path / "aliases"
    directive = source_directive(path, home=Path("/nonexistent-home"))

    assert directive == f'[ -f "{path}" ] && source "{path}"'


def test_ensure_undecodable_profile(profile_file):
    """测试 profile 含非 UTF-8 字节时保留原内容并追加."""
    profile_file.write_bytes(b"# caf\xe9\nexport X=1\n")

    DirectiveInjector().ensure(profile_file, DIRECTIVE, COMMENT)

    assert profile_file.read_bytes() == (
        b"# caf\xe9\nexport X=1\n" + f"\n{COMMENT}\n{DIRECTIVE}\n".encode()
    )


def test_ensure_undecodable_profile_with_directive(profile_file):
    """测试非 UTF-8 profile 中已有指令时不修改."""
    original = b"# caf\xe9\r\n" + DIRECTIVE.encode() + b"\r\n"
    profile_file.write_bytes(original)

    DirectiveInjector().ensure(profile_file, DIRECTIVE, COMMENT)

    assert profile_file.read_bytes() == original
