# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Iterator

import pytest
from loguru import logger

from heatgrid import configuration
from heatgrid.model.record import RawRecord
from heatgrid.repository.configuration import CONFIGURATION_REPO


def make_record(source: str, **properties: Any) -> RawRecord:
    return {"source": source, "properties": properties}


@pytest.fixture
def config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the configuration at a temporary directory and reset the cache."""
    path = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", path / "config.yaml")
    CONFIGURATION_REPO.reset()
    yield path / "config.yaml"
    CONFIGURATION_REPO.reset()


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Capture loguru messages at WARNING and above."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(str(message)), level="WARNING")
    yield messages
    logger.remove(handler_id)
