"""Record-granular last-writer-wins merge."""

from collections.abc import Iterable

from ..link.ExternalLinkRecord import ExternalLinkRecord


def merge_records(
    existing: dict[str, ExternalLinkRecord], incoming: Iterable[ExternalLinkRecord]
) -> tuple[int, int, int]:
    """Merge ``incoming`` into ``existing`` (keyed by path) in place.

    A known record is replaced only when the incoming ``last_modified`` is
    strictly greater (absent counts as 0). Unknown records are inserted. A
    concurrent edit to different fields of the same record therefore keeps one
    side whole and drops the other.

    Returns:
        Counts of (inserted, replaced, discarded) records.
    """
    inserted = replaced = discarded = 0
    for record in incoming:
        current = existing.get(record.path)
        if current is None:
            existing[record.path] = record
            inserted += 1
        elif record.modified_ms > current.modified_ms:
            existing[record.path] = record
            replaced += 1
        else:
            discarded += 1
    return inserted, replaced, discarded
