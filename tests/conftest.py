from __future__ import annotations

import logging
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app import create_app
from config import DataConfig


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    root = tmp_path / "files"
    root.mkdir()
    return root


@pytest.fixture
def config(data_root: Path) -> DataConfig:
    return DataConfig(data_dir=str(data_root), data_path="/data", logger=logging.getLogger("data.test"))


@pytest.fixture
def client(config: DataConfig, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    monkeypatch.delenv("DATA_API_KEY", raising=False)
    return TestClient(create_app(config))
