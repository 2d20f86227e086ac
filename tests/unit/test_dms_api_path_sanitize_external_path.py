"""Unit tests for external path sanitizing and launcher targets."""

import pytest

from dms.api.path.is_url import is_url
from dms.api.path.RootQualifier import DriveRootQualifier, PosixRootQualifier, default_root_qualifier
from dms.api.path.sanitize_external_path import sanitize_external_path
from dms.api.path.to_open_uri import to_open_uri

pytestmark = pytest.mark.path


def test_backslashes_become_forward_slashes():
    assert sanitize_external_path("C:\\Docs\\report.pdf") == "C:/Docs/report.pdf"


def test_duplicate_separators_collapse():
    assert sanitize_external_path("/tmp//a///b.txt") == "/tmp/a/b.txt"


def test_scheme_separator_is_kept():
    assert sanitize_external_path("file:///tmp/a.txt") == "file:///tmp/a.txt"


def test_unc_prefix_is_kept():
    assert sanitize_external_path("\\\\server\\share\\\\f.txt") == "//server/share/f.txt"


def test_only_link_breaking_characters_are_escaped():
    assert sanitize_external_path("/tmp/100% done (v2).txt") == "/tmp/100%25%20done%20%28v2%29.txt"
    assert sanitize_external_path("/tmp/a&b#c.txt") == "/tmp/a&b#c.txt"


def test_drive_qualifier_applies_to_rootless_paths_only():
    qualifier = DriveRootQualifier("D:")
    assert sanitize_external_path("/Users/x.pdf", qualifier) == "D:/Users/x.pdf"
    assert sanitize_external_path("E:\\x.pdf", qualifier) == "E:/x.pdf"
    assert sanitize_external_path("\\\\host\\share\\x.pdf", qualifier) == "//host/share/x.pdf"


def test_drive_qualifier_normalizes_drive_spelling():
    assert DriveRootQualifier("c").drive == "c:"
    assert DriveRootQualifier("C:\\").drive == "C:"


def test_posix_qualifier_is_identity():
    assert PosixRootQualifier().qualify("/tmp/x") == "/tmp/x"


def test_default_root_qualifier_honours_explicit_drive():
    assert isinstance(default_root_qualifier("Z:"), DriveRootQualifier)


def test_default_root_qualifier_by_platform(monkeypatch):
    monkeypatch.setattr("platform.system", lambda: "Windows")
    assert isinstance(default_root_qualifier(), DriveRootQualifier)
    monkeypatch.setattr("platform.system", lambda: "Linux")
    assert isinstance(default_root_qualifier(), PosixRootQualifier)


def test_is_url():
    assert is_url("https://example.com")
    assert is_url("  HTTP://example.com")
    assert not is_url("/tmp/x")
    assert not is_url("file:///tmp/x")


def test_to_open_uri():
    assert to_open_uri(" https://example.com/a b ") == "https://example.com/a b"
    assert to_open_uri("/tmp/my file.pdf") == "file:///tmp/my%20file.pdf"
    assert to_open_uri("C:\\x\\y.pdf") == "file:///C:/x/y.pdf"
    assert to_open_uri("file:///tmp/x") == "file:///tmp/x"
