"""Document store I/O error."""


class DocumentStoreError(OSError):
    """A read, write, create, delete or rename against the document store failed."""
