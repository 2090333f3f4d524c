"""Unit tests for linkstrip.api.policy."""

import pytest

from linkstrip.api.policy import (
    HyperlinkPolicy,
    LinkType,
    WikilinkPolicy,
    classify_url,
    contains_any,
    equals_any,
)


class TestClassifyUrl:
    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com",
            "http://example.com/a_(b)",
            "HTTPS://EXAMPLE.COM",
            "ftp://files.example.com",
            "mailto:someone@example.com",
            "obsidian://open?vault=v",
            "git+ssh://host/repo",
            "C:\\notes\\a.md",
        ],
    )
    def test_external(self, url):
        assert classify_url(url) is LinkType.EXTERNAL

    @pytest.mark.parametrize(
        "url",
        [
            "notes/doc.md",
            "#heading",
            "image.png",
            "../up.md",
            "/abs/path",
            "",
            "1http://x",
            " https://example.com",
            "<https://example.com>",
        ],
    )
    def test_internal(self, url):
        assert classify_url(url) is LinkType.INTERNAL


def test_contains_any():
    assert contains_any("https://Docs.Example.com", ["example.COM"])
    assert not contains_any("https://docs.example.com", ["other"])
    assert not contains_any("anything", [])
    assert not contains_any("anything", ["", "  "])
    assert not contains_any("https://example.com/stra\u00dfe", ["STRASSE"])


def test_equals_any():
    assert equals_any("Draft", ["draft"])
    assert not equals_any("draft-note", ["draft"])
    assert not equals_any("", [""])
    assert not equals_any("\u00df", ["ss"])
    assert equals_any("\u00c9t\u00e9", ["\u00e9T\u00c9"])


def test_link_type_from_string():
    assert LinkType("internal") is LinkType.INTERNAL
    assert LinkType.BOTH == "both"


class TestHyperlinkPolicy:
    def test_build_freezes_lists(self):
        policy = HyperlinkPolicy.build(True, ["a"], "external", False, ["b"])
        assert policy.whitelist == ("a",)
        assert policy.blacklist == ("b",)
        assert policy.link_type is LinkType.EXTERNAL

    def test_build_rejects_unknown_link_type(self):
        with pytest.raises(ValueError):
            HyperlinkPolicy.build(link_type="nope")

    def test_is_immutable(self):
        policy = HyperlinkPolicy()
        with pytest.raises(AttributeError):
            policy.keep_text = False  # type: ignore[misc]

    def test_should_remove_normal_mode(self):
        policy = HyperlinkPolicy.build(whitelist=["keep.me"], link_type="internal")
        assert policy.should_remove("notes/a.md")
        assert not policy.should_remove("https://example.com")
        assert not policy.should_remove("keep.me/a.md")

    def test_should_remove_blacklist_mode(self):
        policy = HyperlinkPolicy.build(link_type="internal", blacklist_mode=True, blacklist=["example"])
        assert policy.should_remove("https://example.com")
        assert not policy.should_remove("notes/a.md")


class TestWikilinkPolicy:
    def test_should_remove_normal_mode(self):
        policy = WikilinkPolicy.build(whitelist=["Home"])
        assert not policy.should_remove("home")
        assert policy.should_remove("home page")

    def test_should_remove_blacklist_mode(self):
        policy = WikilinkPolicy.build(blacklist_mode=True, blacklist=["draft"])
        assert policy.should_remove("DRAFT")
        assert not policy.should_remove("draft-note")

    def test_empty_blacklist_removes_nothing(self):
        assert not WikilinkPolicy.build(blacklist_mode=True).should_remove("anything")
