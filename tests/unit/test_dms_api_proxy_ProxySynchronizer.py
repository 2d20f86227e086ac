"""Unit tests for the push direction."""

import pytest

from dms.api.docstore._memory._Impl import _Impl as MemoryBackend
from dms.api.docstore.ChangeEvent import ChangeEvent
from dms.api.document.DocumentRenderer import DocumentRenderer
from dms.api.proxy.ProxySynchronizer import ProxySynchronizer
from dms.api.watch.SelfWriteRegistry import SelfWriteRegistry

pytestmark = pytest.mark.proxy


class NoRenameBackend(MemoryBackend):
    supports_rename = False


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def self_writes() -> SelfWriteRegistry:
    return SelfWriteRegistry()


@pytest.fixture
def synchronizer(backend, self_writes) -> ProxySynchronizer:
    return ProxySynchronizer(backend, DocumentRenderer(), self_writes)


def test_proxy_path(synchronizer, spec_record):
    assert synchronizer.proxy_path(spec_record) == "DMS/Spec.md"
    assert synchronizer.proxy_path_for_title("My Report (v2)") == "DMS/My_Report_v2.md"


def test_proxy_path_at_store_root(backend, self_writes):
    synchronizer = ProxySynchronizer(backend, DocumentRenderer(), self_writes, mirror_root="/", extension=".txt")
    assert synchronizer.proxy_path_for_title("a") == "a.txt"
    assert synchronizer.is_proxy_path("a.txt")
    assert not synchronizer.is_proxy_path("sub/a.txt")


@pytest.mark.parametrize(
    ("path", "expected"),
    [("DMS/a.md", True), ("DMS/sub/a.md", False), ("DMS/a.txt", False), ("Other/a.md", False), ("a.md", False)],
)
def test_is_proxy_path(synchronizer, path, expected):
    assert synchronizer.is_proxy_path(path) is expected


def test_create_makes_root_and_marks_write(synchronizer, backend, self_writes, spec_record):
    path = synchronizer.create(spec_record)
    assert path == "DMS/Spec.md"
    assert "DMS" in backend.directories
    text = backend.read(path)
    assert text == synchronizer.renderer.render(spec_record)
    assert self_writes.consume(ChangeEvent(kind="modify", path=path), text)


def test_create_nested_mirror_root(backend, self_writes, spec_record):
    synchronizer = ProxySynchronizer(backend, DocumentRenderer(), self_writes, mirror_root="Notes/Links")
    synchronizer.create(spec_record)
    assert {"Notes", "Notes/Links"} <= backend.directories
    assert backend.exists("Notes/Links/Spec.md")


def test_create_overwrites_existing(synchronizer, backend, spec_record):
    synchronizer.ensure_mirror_root()
    backend.write("DMS/Spec.md", "stale")
    synchronizer.create(spec_record)
    assert backend.read("DMS/Spec.md") != "stale"


def test_update_renames_on_title_change(synchronizer, backend, spec_record):
    events: list[ChangeEvent] = []
    synchronizer.create(spec_record)
    backend.watch(events.append)

    renamed = spec_record.model_copy(update={"title": "Final Spec"})
    assert synchronizer.update(renamed, previous_title="Spec") == "DMS/Final_Spec.md"

    assert not backend.exists("DMS/Spec.md")
    assert events[0] == ChangeEvent(kind="rename", path="DMS/Final_Spec.md", old_path="DMS/Spec.md")
    assert synchronizer.self_writes.consume(events[0])


def test_update_without_rename_support_deletes_then_writes(self_writes, spec_record):
    backend = NoRenameBackend()
    synchronizer = ProxySynchronizer(backend, DocumentRenderer(), self_writes)
    synchronizer.create(spec_record)
    events: list[ChangeEvent] = []
    backend.watch(events.append)

    synchronizer.update(spec_record.model_copy(update={"title": "Other"}), previous_title="Spec")
    assert [e.kind for e in events] == ["delete", "modify"]
    assert not backend.exists("DMS/Spec.md")
    assert backend.exists("DMS/Other.md")


def test_update_same_title_rewrites_in_place(synchronizer, backend, spec_record):
    synchronizer.create(spec_record)
    edited = spec_record.model_copy(update={"notes": "changed"})
    synchronizer.update(edited, previous_title="Spec")
    assert "changed" in backend.read("DMS/Spec.md")


def test_delete(synchronizer, backend, spec_record):
    synchronizer.create(spec_record)
    assert synchronizer.delete(spec_record) is True
    assert not backend.exists("DMS/Spec.md")
    assert synchronizer.delete(spec_record) is False
