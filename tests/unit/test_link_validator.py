"""
Unit tests for link_validator module.
"""

import pytest

from profile_card.models.config import DisplayStrings
from profile_card.utils.link_validator import (
    LinkResolution,
    build_mail_url,
    build_social_url,
    invalid_link_alert,
    resolve_link,
)


class TestBuildUrls:
    """Test address construction."""

    def test_social_url_template(self):
        assert build_social_url("github", "octocat") == "https://github.com/octocat"

    def test_social_url_empty_values(self):
        assert build_social_url("", "") == "https://.com/"

    def test_mail_url(self):
        assert build_mail_url("jane@example.com") == "mailto:jane@example.com"


class TestResolveValid:
    """Test addresses that resolve to usable links."""

    @pytest.mark.parametrize(
        "platform,username",
        [
            ("github", "octocat"),
            ("instagram", "jane.doe"),
            ("x", "user_name-1~"),
            ("GitLab", "Team42"),
        ],
    )
    def test_url_safe_social_links(self, platform, username):
        """Test URL-safe platform/username resolve with host platform.com."""
        result = resolve_link(build_social_url(platform, username))

        assert result.is_valid
        assert result.url == f"https://{platform}.com/{username}"
        assert result.host == f"{platform}.com"
        assert result.reason is None

    def test_mail_link(self):
        """Test mail addresses resolve without a host."""
        result = resolve_link(build_mail_url("jane@example.com"))

        assert result.is_valid
        assert result.url == "mailto:jane@example.com"
        assert result.host is None

    def test_percent_escapes_allowed(self):
        """Test well-formed percent escapes are accepted."""
        result = resolve_link("https://github.com/a%20b")

        assert result.is_valid


class TestResolveInvalid:
    """Test addresses that cannot be opened."""

    @pytest.mark.parametrize(
        "platform,username",
        [
            ("git hub", "octocat"),
            ("github", "octo cat"),
            ("github", "tab\tname"),
            ("github", "nul\x00"),
            ("github", "new\nline"),
            ("github", "<script>"),
            ("github", 'quote"'),
            ("github", "pipe|"),
            ("github", "brace{}"),
            ("github", "back\\slash"),
            ("臉書", "user"),
            ("github", "用戶"),
        ],
    )
    def test_illegal_characters(self, platform, username):
        """Test illegal URL characters fail deterministically."""
        raw = build_social_url(platform, username)

        first = resolve_link(raw)
        second = resolve_link(raw)

        assert not first.is_valid
        assert first.url is None
        assert first.reason
        assert first == second

    def test_bad_percent_escape(self):
        result = resolve_link("https://github.com/100%")

        assert not result.is_valid
        assert result.reason == "malformed percent escape"

    def test_missing_scheme(self):
        result = resolve_link("github.com/octocat")

        assert not result.is_valid
        assert result.reason == "missing scheme"

    def test_missing_host(self):
        result = resolve_link("https:///octocat")

        assert not result.is_valid

    def test_empty_string(self):
        result = resolve_link("")

        assert not result.is_valid

    def test_unbalanced_ipv6_host_does_not_raise(self):
        """Test urlsplit errors are reported as invalid, not raised."""
        result = resolve_link("https://[github.com/octocat")

        assert not result.is_valid

    def test_non_string_input(self):
        """Test non-string input is reported as invalid."""
        result = resolve_link(None)

        assert isinstance(result, LinkResolution)
        assert not result.is_valid


class TestInvalidLinkAlert:
    """Test the invalid-URL dialog."""

    def test_default_strings(self):
        alert = invalid_link_alert()

        assert alert.title == "無效的 URL"
        assert alert.message == "平台與用戶名不可包含無效的 URL 字符"
        assert alert.dismiss_label == "確定"

    def test_custom_strings(self):
        strings = DisplayStrings(
            invalid_url_title="Invalid URL",
            invalid_url_message="Platform and username may not contain invalid URL characters",
            invalid_url_dismiss="OK",
        )

        alert = invalid_link_alert(strings)

        assert alert.title == "Invalid URL"
        assert alert.dismiss_label == "OK"
