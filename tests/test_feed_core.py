"""Tests for URL resolution, pattern matching and title/MIME derivation.

These are pure functions: no network, no parsing.
"""

from __future__ import annotations

import httpx
import pytest

from pagecast.feed.matching import matches
from pagecast.feed.naming import DEFAULT_MEDIA_TYPES, MimeTable, derive_title
from pagecast.feed.urls import resolve_url


_BASE = httpx.URL("http://host/lib/index.html")


@pytest.fixture(scope="module")
def mime_table() -> MimeTable:
    return MimeTable()


# ---------------------------------------------------------------------------
# resolve_url
# ---------------------------------------------------------------------------

class TestResolveUrl:
    def test_path_relative(self) -> None:
        assert str(resolve_url(_BASE, "track1.mp4")) == "http://host/lib/track1.mp4"

    def test_parent_directory(self) -> None:
        assert str(resolve_url(_BASE, "../up.mp3")) == "http://host/up.mp3"

    def test_root_relative(self) -> None:
        assert str(resolve_url(_BASE, "/root.mp3")) == "http://host/root.mp3"

    def test_scheme_relative(self) -> None:
        url = resolve_url(_BASE, "//cdn.example.com/a.mp3")
        assert str(url) == "http://cdn.example.com/a.mp3"

    def test_fragment_only(self) -> None:
        url = resolve_url(_BASE, "#chapter-2")
        assert str(url) == "http://host/lib/index.html#chapter-2"

    def test_absolute_kept(self) -> None:
        url = resolve_url(_BASE, "https://other.org/show/ep1.mp3")
        assert str(url) == "https://other.org/show/ep1.mp3"

    def test_empty_href_is_none(self) -> None:
        assert resolve_url(_BASE, "") is None

    def test_invalid_port_is_none(self) -> None:
        assert resolve_url(_BASE, "http://host:abc/file.mp3") is None

    def test_control_character_is_none(self) -> None:
        assert resolve_url(_BASE, "bad\x00name.mp3") is None

    def test_parent_steps_stop_at_root(self) -> None:
        assert str(resolve_url(_BASE, "../../../x.mp3")) == "http://host/x.mp3"

    def test_query_only(self) -> None:
        assert str(resolve_url(_BASE, "?p=2")) == "http://host/lib/index.html?p=2"

    def test_other_schemes_kept_as_is(self) -> None:
        assert str(resolve_url(_BASE, "mailto:someone@example.com")) == "mailto:someone@example.com"
        assert str(resolve_url(_BASE, "magnet:?xt=urn:btih:abc")) == "magnet:?xt=urn:btih:abc"


# ---------------------------------------------------------------------------
# matches
# ---------------------------------------------------------------------------

class TestMatches:
    def test_empty_pattern_matches_everything(self) -> None:
        assert matches("", httpx.URL("http://host/anything")) is True

    def test_substring_of_host(self) -> None:
        assert matches("example.com", httpx.URL("https://example.com/a.txt")) is True

    def test_substring_of_query(self) -> None:
        assert matches("id=5", httpx.URL("https://example.com/get?id=5")) is True

    def test_glob_over_whole_path(self) -> None:
        assert matches("/books/*.mp3", httpx.URL("http://host/books/a.mp3")) is True

    def test_glob_must_match_entire_path(self) -> None:
        assert matches("/books/*.mp3", httpx.URL("http://host/books/a.mp3x")) is False

    def test_glob_ignores_query(self) -> None:
        assert matches("/lib/*.mp3", httpx.URL("http://host/lib/a.mp3?x=1")) is True

    def test_star_does_not_cross_directories(self) -> None:
        assert matches("/books/*.mp3", httpx.URL("http://host/books/sub/a.mp3")) is False
        assert matches("*.mp3", httpx.URL("http://host/books/a.mp3")) is False

    def test_question_mark_does_not_match_slash(self) -> None:
        assert matches("/a?b", httpx.URL("http://host/a/b")) is False

    def test_negated_character_class(self) -> None:
        assert matches("/[^a]*", httpx.URL("http://host/b")) is True
        assert matches("/[^a]*", httpx.URL("http://host/a")) is False
        assert matches("/[!a]*", httpx.URL("http://host/b")) is True

    def test_backslash_escapes_wildcard(self) -> None:
        assert matches("/a\\*.mp3", httpx.URL("http://host/a*.mp3")) is True
        assert matches("/a\\*.mp3", httpx.URL("http://host/ab.mp3")) is False

    def test_star_matches_leading_dot(self) -> None:
        assert matches("/lib/*", httpx.URL("http://host/lib/.hidden")) is True

    def test_glob_character_class_and_single_char(self) -> None:
        url = httpx.URL("http://host/track1.mp4")
        assert matches("/track[12].mp4", url) is True
        assert matches("/track?.mp4", url) is True
        assert matches("/track[3-9].mp4", url) is False

    def test_glob_uses_decoded_path(self) -> None:
        url = httpx.URL("http://host/my%20book.mp3")
        assert matches("/my book.mp3", url) is True

    def test_case_sensitive(self) -> None:
        assert matches("/*.MP3", httpx.URL("http://host/a.mp3")) is False

    def test_no_strategy_matches(self) -> None:
        assert matches("video", httpx.URL("http://host/audio/a.mp3")) is False


# ---------------------------------------------------------------------------
# MimeTable / derive_title
# ---------------------------------------------------------------------------

class TestMimeTable:
    @pytest.mark.parametrize("extension,mime_type", sorted(DEFAULT_MEDIA_TYPES.items()))
    def test_media_types_registered(self, mime_table, extension, mime_type) -> None:
        assert mime_table.lookup(extension) == mime_type

    def test_standard_types_available(self, mime_table) -> None:
        assert mime_table.lookup(".html") == "text/html"

    def test_lookup_falls_back_to_lower_case(self, mime_table) -> None:
        assert mime_table.lookup(".MP3") == "audio/mpeg"

    def test_unknown_extension_is_empty(self, mime_table) -> None:
        assert mime_table.lookup(".zzqx") == ""

    def test_custom_extra_types(self) -> None:
        table = MimeTable({".opus": "audio/opus"})
        assert table.lookup(".opus") == "audio/opus"

    def test_extension_without_dot_rejected(self) -> None:
        with pytest.raises(ValueError):
            MimeTable({"mp3": "audio/mpeg"})


class TestDeriveTitle:
    def test_title_from_path(self, mime_table) -> None:
        assert derive_title("/books/mybook.mp3", "", mime_table) == ("mybook", "audio/mpeg")

    def test_anchor_text_overrides_title(self, mime_table) -> None:
        assert derive_title("/books/mybook.mp3", "My Book", mime_table) == (
            "My Book",
            "audio/mpeg",
        )

    def test_extension_trimmed_from_anchor_text(self, mime_table) -> None:
        assert derive_title("/books/mybook.mp3", "My Book.mp3", mime_table) == (
            "My Book",
            "audio/mpeg",
        )

    def test_anchor_extension_not_used_for_type(self, mime_table) -> None:
        # The type comes from the path even when the text names another file.
        assert derive_title("/books/clip.mov", "clip.mp3", mime_table) == (
            "clip.mp3",
            "video/quicktime",
        )

    def test_other_media_types(self, mime_table) -> None:
        assert derive_title("/a/ep.m4a", "", mime_table) == ("ep", "audio/x-m4a")
        assert derive_title("/a/ep.mp4", "", mime_table) == ("ep", "video/mp4")

    def test_no_extension(self, mime_table) -> None:
        assert derive_title("/books/readme", "", mime_table) == ("readme", "")

    def test_trailing_slash_uses_last_segment(self, mime_table) -> None:
        assert derive_title("/books/season1/", "", mime_table) == ("season1", "")

    def test_unknown_extension_still_trimmed(self, mime_table) -> None:
        assert derive_title("/books/file.zzqx", "", mime_table) == ("file", "")

    def test_only_last_extension_trimmed(self, mime_table) -> None:
        title, _ = derive_title("/dl/archive.tar.gz", "", mime_table)
        assert title == "archive.tar"

    def test_upper_case_extension(self, mime_table) -> None:
        assert derive_title("/a/SONG.MP3", "", mime_table) == ("SONG", "audio/mpeg")

    def test_dotfile_is_all_extension(self, mime_table) -> None:
        assert derive_title("/a/.hidden", "", mime_table) == ("", "")

    def test_empty_path_with_anchor_text(self, mime_table) -> None:
        assert derive_title("", "Home", mime_table) == ("Home", "")
