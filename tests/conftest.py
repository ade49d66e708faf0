import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"
PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory with sample .tfen documents."""
    return FIXTURES


@pytest.fixture(autouse=True)
def _clean_tfen_env(monkeypatch):
    # Tests must not depend on the developer's shell configuration
    for name in ("TFEN_LOG_LEVEL", "TFEN_DEBUG", "TFEN_OUTPUT_FORMAT"):
        monkeypatch.delenv(name, raising=False)


def run_cli(cwd: Path, *args: str, env_extra: dict | None = None) -> subprocess.CompletedProcess:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_ROOT), env.get("PYTHONPATH", "")]))
    if env_extra:
        env.update(env_extra)
    return subprocess.run(
        [sys.executable, "-m", "tfen.cli", *args],
        cwd=cwd, env=env, capture_output=True, text=True, encoding="utf-8"
    )


def jload(s: str):
    return json.loads(s)
