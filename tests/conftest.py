import logging
from pathlib import Path
from typing import Iterator

import pytest

from ctail import config as config_module


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config lookup at an empty temp location and drop cached config."""
    for key in (
        "CTAIL_DEFAULT_LINES",
        "CTAIL_LINE_LENGTH_LIMIT",
        "CTAIL_CHUNK_SIZE",
        "CTAIL_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    config_path = tmp_path / "ctail.toml"
    monkeypatch.setenv("CTAIL_CONFIG", str(config_path))
    monkeypatch.setattr(config_module, "_config", None)
    return config_path


@pytest.fixture(autouse=True)
def reset_ctail_logger() -> Iterator[None]:
    """Undo handlers the CLI installs so later tests log nowhere stale."""
    yield
    logger = logging.getLogger("ctail")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
