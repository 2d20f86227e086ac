"""Unit tests for link commands against a filesystem document store."""

import json

import pytest

from dms.api.link.cmd_add import cmd_add
from dms.api.link.cmd_categories import cmd_categories
from dms.api.link.cmd_delete import cmd_delete
from dms.api.link.cmd_edit import cmd_edit
from dms.api.link.cmd_list import cmd_list
from dms.api.link.cmd_open import cmd_open
from dms.api.link.cmd_search import cmd_search
from dms.api.link.cmd_show import cmd_show
from dms.api.link.cmd_tag_add import cmd_tag_add
from dms.api.link.cmd_tags import cmd_tags
from dms.api.sync.cmd_sync import cmd_sync
from dms.api.validate_output import validate_output
from dms.api.watch.cmd_run import cmd_run


@pytest.fixture
def with_spec(dms_home, run_cmd):
    result = run_cmd(cmd_add, "/tmp/spec.pdf", "Spec", categories="Work", tags="draft, final")
    assert result.success, result.output
    return dms_home


class TestCmdAdd:
    def test_add_writes_store_and_document(self, with_spec):
        snapshot = json.loads((with_spec / "links.json").read_text())
        assert snapshot["version"] == 1
        assert snapshot["links"][0]["tags"] == ["draft", "final"]
        document = (with_spec / "vault" / "DMS" / "Spec.md").read_text()
        assert "external_path: /tmp/spec.pdf" in document

    def test_add_output(self, dms_home, run_cmd):
        result = run_cmd(cmd_add, "https://example.com", "Example")
        assert result.output["proxy_path"] == "DMS/Example.md"
        assert result.output["record"]["path"] == "https://example.com"
        assert validate_output(cmd_add, result.output) == result.output

    def test_add_duplicate_fails(self, with_spec, run_cmd):
        result = run_cmd(cmd_add, "/tmp/spec.pdf", "Again")
        assert not result.success
        assert "already exists" in result.output["errors"][0]
        assert result.output["record"] == {}

    def test_add_without_config(self, tmp_path, monkeypatch, run_cmd):
        monkeypatch.setenv("DMS_HOME", str(tmp_path))
        result = run_cmd(cmd_add, "/x", "X")
        assert not result.success
        assert "not found" in result.output["errors"][0]


class TestCmdEdit:
    def test_edit_title_moves_document(self, with_spec, run_cmd):
        result = run_cmd(cmd_edit, "/tmp/spec.pdf", title="Final Spec")
        assert result.success, result.output
        assert result.output["proxy_path"] == "DMS/Final_Spec.md"
        assert result.output["record"]["tags"] == ["draft", "final"]
        assert not (with_spec / "vault" / "DMS" / "Spec.md").exists()
        assert (with_spec / "vault" / "DMS" / "Final_Spec.md").exists()

    def test_edit_clears_list_with_empty_string(self, with_spec, run_cmd):
        result = run_cmd(cmd_edit, "/tmp/spec.pdf", tags="")
        assert result.output["record"]["tags"] == []
        assert result.output["record"]["categories"] == ["Work"]

    def test_edit_new_path(self, with_spec, run_cmd):
        result = run_cmd(cmd_edit, "/tmp/spec.pdf", new_path="/tmp/spec-v2.pdf")
        assert result.success
        assert result.output["record"]["path"] == "/tmp/spec-v2.pdf"

    def test_edit_missing(self, dms_home, run_cmd):
        result = run_cmd(cmd_edit, "/nope", title="X")
        assert not result.success
        assert "No link" in result.output["errors"][0]


class TestCmdDelete:
    def test_delete(self, with_spec, run_cmd):
        result = run_cmd(cmd_delete, "/tmp/spec.pdf")
        assert result.success
        assert result.output["deleted"] is True
        assert not (with_spec / "vault" / "DMS" / "Spec.md").exists()
        assert run_cmd(cmd_list).output["count"] == 0

    def test_delete_missing(self, dms_home, run_cmd):
        result = run_cmd(cmd_delete, "/nope")
        assert not result.success
        assert result.output["deleted"] is False


class TestQueries:
    def test_list(self, with_spec, run_cmd):
        result = run_cmd(cmd_list)
        assert result.success
        assert result.output["count"] == 1
        assert result.output["links"][0]["title"] == "Spec"

    def test_show(self, with_spec, run_cmd):
        result = run_cmd(cmd_show, "/tmp/spec.pdf")
        assert result.output["found"] is True
        assert result.output["proxy_path"] == "DMS/Spec.md"

    def test_show_missing(self, dms_home, run_cmd):
        result = run_cmd(cmd_show, "/nope")
        assert not result.success
        assert result.output["found"] is False

    def test_search(self, with_spec, run_cmd):
        assert run_cmd(cmd_search, "FINAL").output["count"] == 1
        assert run_cmd(cmd_search, "zzz").output["count"] == 0

    def test_categories(self, with_spec, run_cmd):
        result = run_cmd(cmd_categories)
        assert "Work" in result.output["categories"]
        assert "Team" in result.output["audiences"]

    def test_tags(self, with_spec, run_cmd):
        assert run_cmd(cmd_tag_add, "archived").success
        result = run_cmd(cmd_tags)
        assert result.output["tags"] == ["archived", "draft", "final"]
        assert (with_spec / "vault" / "dms-tags.md").exists()

    def test_tag_add_duplicate_warns(self, dms_home, run_cmd):
        run_cmd(cmd_tag_add, "x")
        result = run_cmd(cmd_tag_add, "x")
        assert result.success
        assert result.output["warnings"]

    def test_tag_add_all_tags_every_link(self, with_spec, run_cmd):
        result = run_cmd(cmd_tag_add, "archived", apply_to_all=True)
        assert result.success, result.output
        snapshot = json.loads((with_spec / "links.json").read_text())
        assert snapshot["links"][0]["tags"] == ["draft", "final", "archived"]
        assert "tags: draft, final, archived" in (with_spec / "vault" / "DMS" / "Spec.md").read_text()

    def test_tag_add_invalid(self, dms_home, run_cmd):
        result = run_cmd(cmd_tag_add, " ")
        assert not result.success


class TestCmdOpen:
    def test_open_uses_launcher(self, with_spec, run_cmd):
        launched: list[str] = []

        def launcher(target: str) -> int:
            launched.append(target)
            return 0

        result = run_cmd(cmd_open, "/tmp/spec.pdf", launcher=launcher)
        assert result.success
        assert launched == ["file:///tmp/spec.pdf"]
        assert result.output["target"] == "file:///tmp/spec.pdf"

    def test_open_launcher_failure(self, with_spec, run_cmd):
        result = run_cmd(cmd_open, "/tmp/spec.pdf", launcher=lambda target: 1)
        assert not result.success
        assert result.output["launched"] is False

    def test_open_unknown(self, dms_home, run_cmd):
        result = run_cmd(cmd_open, "/nope", launcher=lambda target: 0)
        assert not result.success
        assert result.output["target"] == ""


class TestCmdSync:
    def test_sync_restores_documents(self, with_spec, run_cmd):
        document = with_spec / "vault" / "DMS" / "Spec.md"
        document.unlink()
        result = run_cmd(cmd_sync)
        assert result.success
        assert result.output["documents_written"] == 1
        assert result.output["records"] == 1
        assert document.exists()


class TestCmdRun:
    def test_run_for_zero_seconds(self, with_spec, run_cmd):
        result = run_cmd(cmd_run, duration_secs=0, sleep=lambda secs: None)
        assert result.success
        assert result.output["mirror_root"] == "DMS"
        assert result.output["events_handled"] == 0

    def test_run_stops_on_interrupt(self, with_spec, run_cmd):
        def interrupt(secs: float) -> None:
            raise KeyboardInterrupt

        result = run_cmd(cmd_run, sleep=interrupt)
        assert result.success
