"""Push direction: one proxy document per record."""

from posixpath import join as posix_join

from ...utils.get_logger import get_logger
from ..docstore._AbstractBackend import _AbstractBackend
from ..document.DocumentRenderer import DocumentRenderer
from ..link.ExternalLinkRecord import ExternalLinkRecord
from ..path.slug import slug
from ..watch.SelfWriteRegistry import SelfWriteRegistry

logger = get_logger("proxy")


class ProxySynchronizer:
    """Creates, updates, renames and deletes proxy documents.

    Documents live at ``<mirror_root>/<slug(title)>.<extension>``. Every change
    made here is registered with the shared ``SelfWriteRegistry`` before it hits
    the store, so the watcher can recognise the echo.
    """

    def __init__(
        self,
        document_store: _AbstractBackend,
        renderer: DocumentRenderer,
        self_writes: SelfWriteRegistry,
        mirror_root: str = "DMS",
        extension: str = "md",
    ):
        self.document_store = document_store
        self.renderer = renderer
        self.self_writes = self_writes
        self.mirror_root = mirror_root.strip().strip("/")
        self.extension = extension.lstrip(".")

    def proxy_path_for_title(self, title: str) -> str:
        name = f"{slug(title)}.{self.extension}"
        return posix_join(self.mirror_root, name) if self.mirror_root else name

    def proxy_path(self, record: ExternalLinkRecord) -> str:
        return self.proxy_path_for_title(record.title)

    def is_proxy_path(self, path: str) -> bool:
        """True for documents directly inside the mirror root with the proxy extension."""
        if not path.endswith(f".{self.extension}"):
            return False
        if not self.mirror_root:
            return "/" not in path
        prefix = self.mirror_root + "/"
        return path.startswith(prefix) and "/" not in path[len(prefix) :]

    def ensure_mirror_root(self) -> None:
        """Create each missing segment of the mirror root; existing ones are fine."""
        if not self.mirror_root:
            return
        current = ""
        for segment in self.mirror_root.split("/"):
            current = posix_join(current, segment) if current else segment
            if not self.document_store.exists(current):
                self.document_store.create_directory(current)

    def _write(self, path: str, record: ExternalLinkRecord) -> None:
        text = self.renderer.render(record)
        self.self_writes.expect_write(path, text)
        self.document_store.write(path, text)

    def create(self, record: ExternalLinkRecord) -> str:
        """Render and write the proxy document, overwriting one that already exists."""
        self.ensure_mirror_root()
        path = self.proxy_path(record)
        if self.document_store.exists(path):
            logger.debug("Proxy document %s exists, overwriting", path)
        self._write(path, record)
        logger.info("Wrote proxy document %s", path)
        return path

    def update(self, record: ExternalLinkRecord, previous_title: str | None = None) -> str:
        """Re-render at the current slug, moving the old document first if the title changed.

        Without a native rename this is delete + create; a crash between the two
        steps leaves an orphan document that the next resync overwrites or a
        manual cleanup removes.
        """
        path = self.proxy_path(record)
        if previous_title is not None:
            old_path = self.proxy_path_for_title(previous_title)
            if old_path != path and self.document_store.exists(old_path):
                if self.document_store.supports_rename and not self.document_store.exists(path):
                    self.self_writes.expect_rename(old_path, path)
                    self.document_store.rename(old_path, path)
                    logger.info("Renamed proxy document %s -> %s", old_path, path)
                else:
                    self.self_writes.expect_delete(old_path)
                    self.document_store.delete(old_path)
                    logger.info("Removed proxy document %s before recreate", old_path)
        self.ensure_mirror_root()
        self._write(path, record)
        return path

    def relocate(self, current_path: str, record: ExternalLinkRecord) -> str:
        """Move the document at ``current_path`` to the record's proxy path, content untouched.

        Used after a user renamed a proxy document to a name that is not a slug.
        """
        path = self.proxy_path(record)
        if current_path == path or not self.document_store.exists(current_path):
            return path
        if self.document_store.supports_rename and not self.document_store.exists(path):
            self.self_writes.expect_rename(current_path, path)
            self.document_store.rename(current_path, path)
        else:
            text = self.document_store.read(current_path)
            self.self_writes.expect_write(path, text)
            self.document_store.write(path, text)
            self.self_writes.expect_delete(current_path)
            self.document_store.delete(current_path)
        logger.info("Moved proxy document %s -> %s", current_path, path)
        return path

    def delete(self, record: ExternalLinkRecord) -> bool:
        """Remove the proxy document if present. Returns False when nothing was there."""
        path = self.proxy_path(record)
        if not self.document_store.exists(path):
            return False
        self.self_writes.expect_delete(path)
        self.document_store.delete(path)
        logger.info("Deleted proxy document %s", path)
        return True
