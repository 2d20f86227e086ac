"""Proxy document rendering and parsing."""

from datetime import datetime, timezone

from ..link.ExternalLinkRecord import ExternalLinkRecord
from ..path.is_url import is_url
from ..path.RootQualifier import RootQualifier
from ..path.sanitize_external_path import sanitize_external_path
from . import _constants as c
from .PartialRecord import PartialRecord


class DocumentRenderer:
    """Serializes records to proxy-document text and back.

    Output depends only on the record and the root qualifier, so rendering an
    unchanged record twice gives byte-identical text. The watcher relies on
    that to recognise documents the engine wrote itself.
    """

    def __init__(self, root_qualifier: RootQualifier | None = None):
        self.root_qualifier = root_qualifier

    def link_target(self, path: str) -> str:
        """Target used in the open-link affordance line."""
        if is_url(path):
            return path.strip()
        return sanitize_external_path(path, self.root_qualifier)

    def render(self, record: ExternalLinkRecord) -> str:
        header = {
            c.KEY_EXTERNAL_PATH: record.path,
            c.KEY_CATEGORIES: ", ".join(record.categories),
            c.KEY_AUDIENCE: ", ".join(record.audience),
            c.KEY_TAGS: ", ".join(record.tags),
            c.KEY_CREATED_DATE: _format_date(record.created_date),
            c.KEY_FILE_TYPE: record.file_type,
            c.KEY_FILE_SIZE: str(record.size),
        }
        lines = [c.HEADER_FENCE]
        lines.extend(f"{key}: {header[key]}".rstrip() for key in c.HEADER_KEYS)
        lines.append(c.HEADER_FENCE)
        head = "\n".join(lines)
        link_line = f"[{c.OPEN_LINK_LABEL}]({self.link_target(record.path)})"
        return f"{head}\n{record.summary}\n\n{record.notes}\n\n{link_line}\n"

    def parse(self, text: str) -> PartialRecord:
        """Parse proxy-document text.

        Never raises: a missing or unterminated header yields an empty
        ``PartialRecord`` and the caller decides what to do with it.
        """
        split = _split_header(text)
        if split is None:
            return PartialRecord()
        header_lines, body = split

        partial = PartialRecord()
        for line in header_lines:
            key, sep, value = line.partition(":")
            if not sep:
                continue
            key = key.strip()
            value = value.strip()
            if key == c.KEY_EXTERNAL_PATH:
                partial.external_path = value or None
            elif key == c.KEY_CATEGORIES:
                partial.categories = _split_list(value)
            elif key == c.KEY_AUDIENCE:
                partial.audience = _split_list(value)
            elif key == c.KEY_TAGS:
                partial.tags = _split_list(value)
            elif key == c.KEY_CREATED_DATE:
                partial.created_date = _parse_date(value)
            elif key == c.KEY_FILE_TYPE:
                partial.file_type = value
            elif key == c.KEY_FILE_SIZE:
                try:
                    partial.file_size = int(value)
                except ValueError:
                    partial.file_size = None

        body = c.OPEN_LINK_PATTERN.sub("", body)
        match = c.BLANK_LINE.search(body)
        if match is None:
            partial.summary = body.strip("\n")
            partial.notes = ""
        else:
            partial.summary = body[: match.start()]
            partial.notes = body[match.end() :].rstrip()
        return partial


def _split_header(text: str) -> tuple[list[str], str] | None:
    text = text.lstrip("﻿").replace("\r\n", "\n")
    lines = text.split("\n")
    if not lines or lines[0].strip() != c.HEADER_FENCE:
        return None
    for index in range(1, len(lines)):
        if lines[index].strip() == c.HEADER_FENCE:
            return lines[1:index], "\n".join(lines[index + 1 :])
    return None


def _split_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _format_date(epoch_ms: int) -> str:
    if not epoch_ms:
        return ""
    return datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc).isoformat(timespec="milliseconds")


def _parse_date(value: str) -> int | None:
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return int(round(parsed.timestamp() * 1000))
