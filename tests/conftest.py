from pathlib import Path

import pytest

from gclone.config import UserConfig, resolve_config_path, save_config


class FakeRunner:
    """Records commands instead of spawning them."""

    def __init__(
        self,
        statuses: dict[str, int] | None = None,
        raises: dict[str, Exception] | None = None,
    ):
        self.calls: list[tuple[list[str], Path | None]] = []
        self.statuses = statuses or {}
        self.raises = raises or {}

    def run(self, cmd, cwd=None) -> int:
        self.calls.append((list(cmd), cwd))
        if cmd[0] in self.raises:
            raise self.raises[cmd[0]]
        return self.statuses.get(cmd[0], 0)


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def make_runner():
    return FakeRunner


@pytest.fixture
def home(tmp_path: Path) -> Path:
    d = tmp_path / "home"
    d.mkdir()
    return d


@pytest.fixture
def cfg_path(home: Path) -> Path:
    return resolve_config_path(home)


@pytest.fixture
def configured(cfg_path: Path, tmp_path: Path) -> UserConfig:
    config = UserConfig(
        default_username="alice", tmp_directory=str(tmp_path / "gclone-tmp")
    )
    save_config(config, cfg_path)
    return config
