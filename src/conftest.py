import logging
from pathlib import Path
from tempfile import TemporaryDirectory
from typing import AsyncGenerator, Generator

import pytest
from aioresponses import aioresponses
from click.testing import CliRunner

from src.checker.typings import CheckerConfig
from src.common.clients import BeaconClient
from src.config.settings import settings


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def results_dir(temp_dir: Path) -> Path:
    return temp_dir / 'results'


@pytest.fixture
def keys_file(temp_dir: Path) -> Path:
    return temp_dir / 'keys.json'


@pytest.fixture
def node_endpoints() -> list[str]:
    return ['node-1:5052', 'node-2:5052']


@pytest.fixture
def chunk_size() -> int:
    return 5


@pytest.fixture
def fake_settings(
    temp_dir: Path,
    keys_file: Path,
    results_dir: Path,
    node_endpoints: list[str],
    chunk_size: int,
) -> None:
    settings.set(
        node_endpoints=','.join(node_endpoints),
        chunk_size=chunk_size,
        keys_file=str(keys_file),
        results_dir=str(results_dir),
        log_dir=str(temp_dir),
    )


@pytest.fixture
def checker_config(
    keys_file: Path, results_dir: Path, node_endpoints: list[str], chunk_size: int
) -> CheckerConfig:
    return CheckerConfig(
        node_endpoints=tuple(node_endpoints),
        chunk_size=chunk_size,
        keys_file=keys_file,
        results_dir=results_dir,
    )


@pytest.fixture
async def beacon_client() -> AsyncGenerator[BeaconClient, None]:
    async with BeaconClient(timeout=10) as client:
        yield client


@pytest.fixture
def mocked_http() -> Generator[aioresponses, None, None]:
    with aioresponses() as m:
        yield m


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def _restore_root_logger() -> Generator:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
