import pytest

from appalias.config.loader import ConfigLoader
from appalias.core.store import AliasStore


@pytest.fixture
def alias_file(tmp_path):
    """临时别名文件路径（不创建）."""
    return tmp_path / ".electron-apps"


@pytest.fixture
def profile_file(tmp_path):
    """临时 profile 路径（不创建）."""
    return tmp_path / ".bashrc"


@pytest.fixture
def store(alias_file, profile_file):
    """使用临时文件的别名存储."""
    return AliasStore(alias_file=alias_file, profile_file=profile_file)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """隔离 APPALIAS_* 环境变量和工作目录."""
    for env_var in ConfigLoader.ENV_OVERRIDES:
        monkeypatch.setenv(env_var, "")
        monkeypatch.delenv(env_var)
    monkeypatch.chdir(tmp_path)
