"""Partial record parsed from a proxy document (UNO: single model)."""

from dataclasses import dataclass, fields


@dataclass
class PartialRecord:
    """Fields recovered from a proxy document.

    ``None`` means the document did not carry the field.
    """

    external_path: str | None = None
    categories: list[str] | None = None
    audience: list[str] | None = None
    tags: list[str] | None = None
    created_date: int | None = None
    file_type: str | None = None
    file_size: int | None = None
    summary: str | None = None
    notes: str | None = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))
