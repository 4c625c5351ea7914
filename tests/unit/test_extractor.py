"""Unit tests for media reference extraction."""

from unittest.mock import patch

import pytest
from bs4 import ParserRejectedMarkup

from mediacheck.errors import HTMLParseError
from mediacheck.models import ErrorKind
from mediacheck.services.extractor import extract_media_urls


class TestExtractMediaUrls:
    """Tests for extract_media_urls."""

    def test_extracts_every_media_element_in_document_order(self) -> None:
        """Should return one reference per qualifying element, in order."""
        html = b"""
        <!DOCTYPE html>
        <html>
        <head>
          <link rel="stylesheet" href="/style.css">
          <script src="/app.js"></script>
        </head>
        <body>
          <img src="a.png">
          <video src="movie.mp4">
            <track src="subs.vtt">
          </video>
          <audio><source src="song.ogg"></audio>
          <iframe src="https://embed.example.com/frame"></iframe>
        </body>
        </html>
        """
        assert list(extract_media_urls(html)) == [
            "/style.css",
            "/app.js",
            "a.png",
            "movie.mp4",
            "subs.vtt",
            "song.ogg",
            "https://embed.example.com/frame",
        ]

    def test_ignores_other_elements(self) -> None:
        """Elements outside the media set contribute nothing."""
        html = b"""
        <div src="div.png"></div>
        <a href="/page">link</a>
        <audio src="direct.ogg"></audio>
        <embed src="plugin.swf">
        <img src="only.png">
        """
        assert list(extract_media_urls(html)) == ["only.png"]

    def test_uses_only_the_mapped_attribute(self) -> None:
        """An img href or a link src is not a reference."""
        html = b'<img href="wrong.png"><link src="wrong.css"><img src="right.png">'
        assert list(extract_media_urls(html)) == ["right.png"]

    def test_skips_missing_and_empty_attributes(self) -> None:
        """Elements without a usable value are skipped silently."""
        html = b'<script>inline()</script><img src=""><img src="   "><img src="ok.png">'
        assert list(extract_media_urls(html)) == ["ok.png"]

    def test_skips_unparsable_references(self) -> None:
        """References that are not valid URLs are skipped, not fatal."""
        html = b'<img src="http://example.com:port/broken.png"><img src="fine.png">'
        assert list(extract_media_urls(html)) == ["fine.png"]

    def test_strips_whitespace_around_references(self) -> None:
        """Leading and trailing whitespace is not part of the URL."""
        html = b'<img src="  /padded.png\n">'
        assert list(extract_media_urls(html)) == ["/padded.png"]

    def test_tolerates_malformed_markup(self) -> None:
        """Unclosed and misnested tags still yield their references."""
        html = b'<html><body><p><img src="1.png"><div><b><script src="2.js"></script></p></i><img src=3.png>'
        assert list(extract_media_urls(html)) == ["1.png", "2.js", "3.png"]

    def test_nested_elements_are_depth_first_pre_order(self) -> None:
        """A parent precedes its children, which precede its later siblings."""
        html = b"""
        <video src="parent.mp4"><source src="child.webm"><track src="child.vtt"></video>
        <img src="sibling.png">
        """
        assert list(extract_media_urls(html)) == [
            "parent.mp4",
            "child.webm",
            "child.vtt",
            "sibling.png",
        ]

    def test_empty_document(self) -> None:
        """An empty body has no references."""
        assert list(extract_media_urls(b"")) == []

    def test_restartable_from_same_bytes(self) -> None:
        """Extracting twice from the same bytes gives the same sequence."""
        html = b'<img src="a.png"><script src="b.js"></script>'
        assert list(extract_media_urls(html)) == list(extract_media_urls(html))

    def test_non_utf8_page(self) -> None:
        """Pages in legacy encodings are decoded before extraction."""
        html = '<meta charset="iso-8859-1"><img src="caf\xe9.png">'.encode("iso-8859-1")
        assert list(extract_media_urls(html)) == ["caf\xe9.png"]

    def test_keeps_non_ascii_whitespace(self) -> None:
        """Only ASCII whitespace is trimmed from references."""
        html = '<meta charset="utf-8"><img src="\xa0nbsp.png\t">'.encode("utf-8")
        assert list(extract_media_urls(html)) == ["\xa0nbsp.png"]

    def test_rejected_markup_raises_parse_error(self) -> None:
        """A parser rejection becomes a fatal ParseError."""
        with patch(
            "mediacheck.services.extractor.BeautifulSoup",
            side_effect=ParserRejectedMarkup("cannot tokenize"),
        ):
            with pytest.raises(HTMLParseError, match="cannot tokenize") as exc_info:
                extract_media_urls(b"\x00\x01\x02")

        assert exc_info.value.kind == ErrorKind.PARSE_ERROR
