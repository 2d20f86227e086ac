"""Registered tag list kept in a document's YAML front matter."""

from typing import Any

import yaml

from ...utils.get_logger import get_logger
from ..docstore._AbstractBackend import _AbstractBackend

logger = get_logger("tags")

_EMPTY_REGISTRY = "---\ntags: []\n---\n"


class TagRegistry:
    """Reads and appends to the ``tags`` list of one registry document."""

    def __init__(self, document_store: _AbstractBackend, path: str):
        self.document_store = document_store
        self.path = path

    def _split(self, content: str) -> tuple[dict[str, Any], str]:
        if not content.startswith("---\n"):
            return {}, content
        end = content.find("\n---", 4)
        if end == -1:
            return {}, content
        front = content[4:end]
        body = content[end + 4 :].lstrip("\n")
        try:
            data = yaml.safe_load(front) or {}
        except yaml.YAMLError as e:
            logger.warning("Unreadable front matter in %s: %s", self.path, e)
            return {}, body
        return (data if isinstance(data, dict) else {}), body

    def tags(self) -> list[str]:
        if not self.document_store.exists(self.path):
            return []
        data, _body = self._split(self.document_store.read(self.path))
        raw = data.get("tags") or []
        return [str(tag) for tag in raw] if isinstance(raw, list) else []

    def add(self, tag: str) -> bool:
        """Register ``tag``; returns False if it was already present."""
        if not self.document_store.exists(self.path):
            self.document_store.write(self.path, _EMPTY_REGISTRY)
        data, body = self._split(self.document_store.read(self.path))
        tags = data.get("tags")
        if not isinstance(tags, list):
            tags = []
        if tag in tags:
            return False
        tags.append(tag)
        data["tags"] = tags
        front = yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
        self.document_store.write(self.path, f"---\n{front}---\n{body}")
        return True
