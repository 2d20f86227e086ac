"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from dms.api.config.DmsConfig import DmsConfig
from dms.api.docstore._memory._Impl import _Impl as MemoryBackend
from dms.api.link.ExternalLinkRecord import ExternalLinkRecord
from dms.api.service.CollectingListener import CollectingListener
from dms.api.service.SyncService import SyncService
from dms.api.store.LinkStore import LinkStore


def pytest_configure(config):
    for marker in ("unit", "path", "document", "store", "docstore", "proxy", "watch", "service", "config", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Clocks
# =============================================================================


class FakeClock:
    """Manually advanced clock; callable like ``time.monotonic``."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, secs: float) -> None:
        self.now += secs


class FakeRecordClock:
    """Epoch-millisecond clock that moves forward on every read."""

    def __init__(self, start: int = 1_700_000_000_000, step: int = 1000):
        self.now = start
        self.step = step

    def __call__(self) -> int:
        self.now += self.step
        return self.now


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(base: Path) -> dict:
    """Minimal valid DMS configuration rooted at ``base``."""
    return {
        "store": {"path": str(base / "links.json")},
        "docstore": {"type": "filesystem", "base_dir": str(base / "vault")},
    }


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture(tmp_path: Path) -> dict:
    return minimal_config_dict(tmp_path)


@pytest.fixture
def dms_home(tmp_path: Path, monkeypatch, minimal_config_dict: dict) -> Path:
    """Set up DMS_HOME with a minimal config file and an empty vault directory.

    Returns:
        Path to the DMS home directory (tmp_path)
    """
    monkeypatch.setenv("DMS_HOME", str(tmp_path))
    (tmp_path / "vault").mkdir()
    (tmp_path / "config.json").write_text(json.dumps(minimal_config_dict))
    return tmp_path


@pytest.fixture
def dms_config(dms_home: Path) -> DmsConfig:
    return DmsConfig.load()


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def record_clock() -> FakeRecordClock:
    return FakeRecordClock()


@pytest.fixture
def memory_store() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def listener() -> CollectingListener:
    return CollectingListener()


@pytest.fixture
def service(tmp_path, memory_store, listener, clock, record_clock) -> SyncService:
    """SyncService over an in-memory document store with fake clocks, already watching."""
    svc = SyncService(
        LinkStore(tmp_path / "links.json", clock=record_clock),
        memory_store,
        listener=listener,
        clock=clock,
        record_clock=record_clock,
    )
    svc.load()
    svc.start_watching()
    yield svc
    svc.stop_watching()


@pytest.fixture
def spec_record() -> ExternalLinkRecord:
    return ExternalLinkRecord(
        title="Spec",
        path="/tmp/spec.pdf",
        categories=["Work"],
        tags=["draft"],
        summary="Design notes for the sync engine",
        notes="Read before the review.",
        file_type="pdf",
        size=2048,
    )


# =============================================================================
# Test Helpers
# =============================================================================


def _run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def run_cmd():
    return _run_cmd
