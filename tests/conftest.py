"""测试公共夹具：用假的运行时替换 subprocess.run"""

from __future__ import annotations

from pathlib import Path

import pytest

from dockalias.cli_utils import RuntimeContext

from .fakes import FakeRuntime


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """隔离配置文件、.env 和环境变量"""
    for name in ("DOCKALIAS_CONFIG", "DOCKALIAS_RUNTIME", "DOCKALIAS_FORCE", "DOCKALIAS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    config_path = tmp_path / "config.json"
    monkeypatch.setenv("DOCKALIAS_CONFIG", str(config_path))
    RuntimeContext.reset()
    yield config_path
    RuntimeContext.reset()


@pytest.fixture
def runtime(monkeypatch: pytest.MonkeyPatch) -> FakeRuntime:
    fake = FakeRuntime()
    monkeypatch.setattr("dockalias.utils.subprocess.run", fake)
    monkeypatch.setattr("dockalias.utils.shutil.which", lambda name: f"/usr/bin/{name}")
    return fake
