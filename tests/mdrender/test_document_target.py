"""
Tests for resolving link and image targets
"""
import pytest

from mdrender import InvalidTargetError, resolve_target


@pytest.mark.parametrize("url", [
    "https://example.com",
    "https://example.com/a/b?c=d#e",
    "http://localhost:8080/",
    "mailto:someone@example.com",
    "file:///tmp/readme.md",
])
def test_absolute_targets(url):
    """Test that absolute URLs resolve to themselves."""
    assert resolve_target(url) == url


def test_surrounding_whitespace_is_dropped():
    """Test that whitespace around a URL is ignored."""
    assert resolve_target("  https://example.com/x  ") == "https://example.com/x"


@pytest.mark.parametrize("url", [
    "http://example.com/a?",
    "http://example.com/a#",
    "https://example.com/a?#",
])
def test_empty_query_and_fragment_are_kept(url):
    """Test that an empty query or fragment is not dropped."""
    assert resolve_target(url) == url


@pytest.mark.parametrize("url,reason", [
    ("readme.md", "no scheme"),
    ("/abs/path", "no scheme"),
    ("#top", "no scheme"),
    ("", "no scheme"),
    ("https:", "no location"),
])
def test_invalid_targets(url, reason):
    """Test that URLs that are not absolute references are rejected."""
    with pytest.raises(InvalidTargetError) as exc_info:
        resolve_target(url)

    assert exc_info.value.url == url
    assert reason in str(exc_info.value)


def test_malformed_target():
    """Test that a URL the parser cannot split is rejected."""
    with pytest.raises(InvalidTargetError):
        resolve_target("http://[::1/")
