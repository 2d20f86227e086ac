"""Unit tests for config commands."""

import json

import pytest

from dms.api.config.cmd_init import cmd_init
from dms.api.config.cmd_show import cmd_show

pytestmark = pytest.mark.config


class TestCmdShow:
    def test_lists_sections(self, dms_home, run_cmd):
        result = run_cmd(cmd_show, "")
        assert result.success
        assert result.output["content"]["sections"] == ["store", "docstore", "mirror", "watch", "log"]

    def test_section(self, dms_home, run_cmd):
        result = run_cmd(cmd_show, "mirror")
        assert result.success
        assert result.output["content"]["root"] == "DMS"

    def test_unknown_section(self, dms_home, run_cmd):
        result = run_cmd(cmd_show, "monitor")
        assert not result.success
        assert "Unknown section" in result.output["errors"][0]

    def test_invalid_config_file(self, tmp_path, monkeypatch, run_cmd):
        monkeypatch.setenv("DMS_HOME", str(tmp_path))
        (tmp_path / "config.json").write_text("{invalid json")
        result = run_cmd(cmd_show, "mirror")
        assert result.success is False
        assert result.output["section"] == "mirror"
        assert result.output["errors"]


class TestCmdInit:
    def test_creates_config(self, tmp_path, monkeypatch, run_cmd):
        monkeypatch.setenv("DMS_HOME", str(tmp_path))
        result = run_cmd(cmd_init, str(tmp_path / "vault"))
        assert result.success
        assert result.output["created"] is True
        data = json.loads((tmp_path / "config.json").read_text())
        assert data["docstore"]["type"] == "filesystem"

    def test_keeps_existing_config(self, dms_home, run_cmd):
        before = (dms_home / "config.json").read_text()
        result = run_cmd(cmd_init, "/elsewhere")
        assert result.success
        assert result.output["created"] is False
        assert result.output["warnings"]
        assert (dms_home / "config.json").read_text() == before

    def test_force_overwrites(self, dms_home, run_cmd):
        result = run_cmd(cmd_init, str(dms_home / "other"), force=True)
        assert result.output["created"] is True
        assert "other" in json.loads((dms_home / "config.json").read_text())["docstore"]["base_dir"]
