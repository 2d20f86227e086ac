"""Unit tests for DMS configuration."""

import json
from pathlib import Path

import pytest

from dms.api.config.DmsConfig import DmsConfig
from dms.api.config.get_home_dir import get_home_dir
from dms.api.config.MirrorConfig import MirrorConfig
from dms.api.config.WatchConfig import WatchConfig

pytestmark = pytest.mark.config


def test_get_home_dir_prefers_env(tmp_path, monkeypatch):
    monkeypatch.setenv("DMS_HOME", str(tmp_path))
    assert get_home_dir() == tmp_path.resolve()
    assert get_home_dir("links.json") == tmp_path.resolve() / "links.json"


def test_get_home_dir_default(tmp_path, monkeypatch):
    monkeypatch.delenv("DMS_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_home_dir() == tmp_path / ".dms"


def test_load(dms_home, minimal_config_dict):
    config = DmsConfig.load()
    assert config.store.path == minimal_config_dict["store"]["path"]
    assert config.docstore.type == "filesystem"
    assert config.mirror.root == "DMS"
    assert config.watch.debounce_secs == 1.0
    assert config.log.level == "INFO"
    assert config.path == dms_home.resolve() / "config.json"


def test_load_missing(tmp_path, monkeypatch):
    monkeypatch.setenv("DMS_HOME", str(tmp_path))
    with pytest.raises(ValueError, match="not found"):
        DmsConfig.load()


def test_load_invalid_json(tmp_path, monkeypatch):
    monkeypatch.setenv("DMS_HOME", str(tmp_path))
    (tmp_path / "config.json").write_text("{invalid json")
    with pytest.raises(ValueError, match="Invalid JSON"):
        DmsConfig.load()


def test_load_rejects_unknown_section(tmp_path, monkeypatch, minimal_config_dict):
    monkeypatch.setenv("DMS_HOME", str(tmp_path))
    (tmp_path / "config.json").write_text(json.dumps({**minimal_config_dict, "database": {}}))
    with pytest.raises(ValueError, match="Configuration validation error"):
        DmsConfig.load()


def test_load_rejects_bad_log_level(tmp_path, monkeypatch, minimal_config_dict):
    monkeypatch.setenv("DMS_HOME", str(tmp_path))
    (tmp_path / "config.json").write_text(json.dumps({**minimal_config_dict, "log": {"level": "LOUD"}}))
    with pytest.raises(ValueError, match="log.level"):
        DmsConfig.load()


def test_save_and_reload(tmp_path, monkeypatch, minimal_config_dict):
    monkeypatch.setenv("DMS_HOME", str(tmp_path))
    config = DmsConfig(**minimal_config_dict, mirror={"root": "/Links/", "extension": ".markdown"})
    config.save()
    assert not (tmp_path / "config.json.tmp").exists()
    reloaded = DmsConfig.load()
    assert reloaded.mirror.root == "Links"
    assert reloaded.mirror.extension == "markdown"
    assert reloaded.to_dict() == config.to_dict()


def test_default(tmp_path, monkeypatch):
    monkeypatch.setenv("DMS_HOME", str(tmp_path))
    config = DmsConfig.default(str(tmp_path / "vault"))
    assert Path(config.store.path) == tmp_path.resolve() / "links.json"
    assert config.docstore.base_dir == str(tmp_path / "vault")


def test_mirror_extension_required():
    with pytest.raises(ValueError):
        MirrorConfig(extension=" . ")


def test_watch_intervals_positive():
    with pytest.raises(ValueError):
        WatchConfig(debounce_secs=0)
