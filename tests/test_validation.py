"""
Tests for URL normalization and validation.
"""

import pytest

from errors import InvalidURL
from validation import normalize_and_validate


class TestNormalizeAndValidate:
    """Input validator behaviour."""

    def test_bare_domain_gets_https_prefix(self):
        assert normalize_and_validate("example.com") == "https://example.com"

    @pytest.mark.parametrize("raw", ["example.com/path?q=1", "www.example.org", "localhost:8080"])
    def test_inputs_without_http_prefix_are_prefixed(self, raw):
        assert normalize_and_validate(raw) == f"https://{raw}"

    @pytest.mark.parametrize("raw", ["http://example.com", "https://example.com/a"])
    def test_http_urls_are_kept(self, raw):
        assert normalize_and_validate(raw) == raw

    @pytest.mark.parametrize("raw", ["Https://example.com", "HTTP://example.com", "hTtP://example.com/a"])
    def test_scheme_case_is_ignored(self, raw):
        assert normalize_and_validate(raw) == raw

    def test_surrounding_whitespace_is_trimmed(self):
        assert normalize_and_validate("  example.com  ") == "https://example.com"

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_empty_input(self, raw):
        with pytest.raises(InvalidURL) as exc_info:
            normalize_and_validate(raw)
        assert exc_info.value.reason == InvalidURL.EMPTY_INPUT
        assert exc_info.value.notice == "Please enter a URL"

    @pytest.mark.parametrize("raw", ["ftp://example.com", "file:///etc/passwd", "http://", "httpexample.com"])
    def test_bad_scheme(self, raw):
        with pytest.raises(InvalidURL) as exc_info:
            normalize_and_validate(raw)
        assert exc_info.value.reason == InvalidURL.BAD_SCHEME
        assert exc_info.value.notice == "Please enter a valid URL"

    def test_inner_whitespace_is_rejected(self):
        with pytest.raises(InvalidURL):
            normalize_and_validate("exa mple.com")
