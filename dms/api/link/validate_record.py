"""Validate and normalize a record before it enters the store."""

from .ExternalLinkRecord import ExternalLinkRecord
from .RecordValidationError import RecordValidationError


def _clean_list(values: list[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    # Commas separate items in the proxy header, so they cannot live inside one
    for value in values:
        for part in value.split(","):
            item = part.strip()
            if item and item not in seen:
                seen.add(item)
                out.append(item)
    return out


def validate_record(record: ExternalLinkRecord) -> ExternalLinkRecord:
    """Return a normalized copy of ``record``.

    Text fields are trimmed, list fields lose blanks and duplicates, and the
    summary is kept to one paragraph so it survives a render/parse cycle.

    Raises:
        RecordValidationError: If ``title`` or ``path`` is empty.
    """
    title = record.title.strip()
    path = record.path.strip()
    if not title:
        raise RecordValidationError("title is required")
    if not path:
        raise RecordValidationError("path is required")
    if "\n" in title or "\n" in path:
        raise RecordValidationError("title and path must be single-line")

    summary = "\n".join(line for line in record.summary.strip().splitlines() if line.strip())
    return record.model_copy(
        update={
            "title": title,
            "path": path,
            "categories": _clean_list(record.categories),
            "audience": _clean_list(record.audience),
            "tags": _clean_list(record.tags),
            "notes": record.notes.strip(),
            "summary": summary,
            "file_type": record.file_type.strip(),
        }
    )
