"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkWriteOutput(BaseOutputSchema):
    """Output schema for link add and link edit.

    Output structure:
    - errors: list[str] - list of error messages, empty list if no errors
    - warnings: list[str] - list of warning messages, empty list if no warnings
    - record: dict[str, Any] - the stored record (snapshot JSON form), empty dict on failure
    - proxy_path: str - document-store path of the proxy document, empty string on failure
    """

    record: dict[str, Any] = Field(..., description="Stored record in snapshot JSON form, empty dict on failure")
    proxy_path: str = Field(..., description="Proxy document path, empty string on failure")


class LinkDeleteOutput(BaseOutputSchema):
    """Output schema for link delete."""

    path: str = Field(..., description="External path of the record that was targeted")
    deleted: bool = Field(..., description="Whether a record was removed")


class LinkListOutput(BaseOutputSchema):
    """Output schema for link list and link search."""

    query: str = Field(..., description="Search query, empty string when listing everything")
    links: list[dict[str, Any]] = Field(..., description="Matching records in snapshot JSON form")
    count: int = Field(..., description="Number of matching records")


class LinkShowOutput(BaseOutputSchema):
    """Output schema for link show."""

    path: str = Field(..., description="External path that was looked up")
    found: bool = Field(..., description="Whether a record exists for the path")
    record: dict[str, Any] = Field(..., description="The record, empty dict when not found")
    proxy_path: str = Field(..., description="Proxy document path, empty string when not found")


class LinkOpenOutput(BaseOutputSchema):
    """Output schema for link open."""

    path: str = Field(..., description="External path that was requested")
    target: str = Field(..., description="Resolved target handed to the system launcher")
    launched: bool = Field(..., description="Whether the launcher reported success")


class LinkCategoriesOutput(BaseOutputSchema):
    """Output schema for link categories."""

    categories: list[str] = Field(..., description="Configured and in-use categories")
    audiences: list[str] = Field(..., description="Configured and in-use audiences")


class LinkTagsOutput(BaseOutputSchema):
    """Output schema for link tags and link tag-add."""

    tag: str = Field(..., description="Tag that was added, empty string when only listing")
    tags: list[str] = Field(..., description="Registry and in-use tags")


register_output_schema("link", "add", LinkWriteOutput)
register_output_schema("link", "edit", LinkWriteOutput)
register_output_schema("link", "delete", LinkDeleteOutput)
register_output_schema("link", "list", LinkListOutput)
register_output_schema("link", "search", LinkListOutput)
register_output_schema("link", "show", LinkShowOutput)
register_output_schema("link", "open", LinkOpenOutput)
register_output_schema("link", "categories", LinkCategoriesOutput)
register_output_schema("link", "tags", LinkTagsOutput)
register_output_schema("link", "tag_add", LinkTagsOutput)
