"""Build a record from command arguments."""

from .ExternalLinkRecord import ExternalLinkRecord


def _build_record(
    path: str,
    title: str,
    categories: str = "",
    audience: str = "",
    tags: str = "",
    notes: str = "",
    summary: str = "",
    file_type: str = "",
    size: int = 0,
) -> ExternalLinkRecord:
    """Comma-separated list arguments are split later by ``validate_record``."""
    return ExternalLinkRecord(
        title=title,
        path=path,
        categories=[categories] if categories else [],
        audience=[audience] if audience else [],
        tags=[tags] if tags else [],
        notes=notes,
        summary=summary,
        file_type=file_type,
        size=size,
    )
