"""Unit tests for output schema validation."""

import pytest

from dms.api._output_schemas import get_output_schema, register_output_schema
from dms.api._output_schemas.link import LinkDeleteOutput
from dms.api.link.cmd_delete import cmd_delete
from dms.api.sync.cmd_sync import cmd_sync
from dms.api.validate_output import validate_output


def test_every_command_has_a_schema():
    for domain, name in [
        ("link", "add"),
        ("link", "edit"),
        ("link", "delete"),
        ("link", "list"),
        ("link", "search"),
        ("link", "show"),
        ("link", "open"),
        ("link", "categories"),
        ("link", "tags"),
        ("link", "tag_add"),
        ("sync", "sync"),
        ("watch", "run"),
        ("config", "show"),
        ("config", "init"),
    ]:
        assert get_output_schema(domain, name) is not None, f"{domain}.{name}"


def test_duplicate_registration_rejected():
    with pytest.raises(ValueError, match="already registered"):
        register_output_schema("link", "delete", LinkDeleteOutput)


def test_validate_output_accepts_complete_and_rejects_missing_fields():
    output = {"errors": [], "warnings": [], "path": "/x", "deleted": True}
    assert validate_output(cmd_delete, output) == output
    with pytest.raises(ValueError, match="Output validation failed for link.delete"):
        validate_output(cmd_delete, {"errors": [], "warnings": []})


def test_validate_output_domain_from_module():
    with pytest.raises(ValueError, match="sync.sync"):
        validate_output(cmd_sync, {"errors": [], "warnings": [], "records": 1})


def test_non_command_functions_pass_through():
    def helper():
        pass

    assert validate_output(helper, {"anything": 1}) == {"anything": 1}
