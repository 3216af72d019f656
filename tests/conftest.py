from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def _clean_bf_env(monkeypatch, tmp_path):
    for name in ("BF_TAPE_SIZE", "BF_STEP_LIMIT", "BF_TAPE_POLICY", "BF_EOF_POLICY"):
        monkeypatch.delenv(name, raising=False)
    # Keep find_dotenv from picking up a developer's .env
    monkeypatch.chdir(tmp_path)
