"""Each pass leaves the other pass's syntax alone."""

from linkstrip.api.hyperlink.remove_hyperlinks import remove_hyperlinks
from linkstrip.api.wikilink.remove_wikilinks import remove_wikilinks

MIXED = (
    "# Notes\n"
    "Intro [[Home]] with [a site](https://example.com/a_(b)) and ![[diagram.png|300]].\n"
    "- [[dir/page.md|Page]] next to ![shot](img/shot.png)\n"
    "- [rel](../other.md)[[tail]] and [[x]]([y](z))\n"
)

WIKILINK_SPANS = ["[[Home]]", "![[diagram.png|300]]", "[[dir/page.md|Page]]", "[[tail]]", "[[x]]"]
HYPERLINK_SPANS = ["[a site](https://example.com/a_(b))", "![shot](img/shot.png)", "[rel](../other.md)", "[y](z)"]


def test_remove_hyperlinks_keeps_every_wikilink():
    result = remove_hyperlinks(MIXED, True)
    for span in WIKILINK_SPANS:
        assert span in result
    for span in HYPERLINK_SPANS:
        assert span not in result


def test_remove_wikilinks_keeps_every_hyperlink():
    result = remove_wikilinks(MIXED, True)
    for span in HYPERLINK_SPANS:
        assert span in result
    assert "[[" not in result


def test_passes_compose_in_either_order():
    expected = (
        "# Notes\n"
        "Intro Home with a site and .\n"
        "- Page next to \n"
        "- reltail and x(y)\n"
    )
    assert remove_wikilinks(remove_hyperlinks(MIXED, True), True) == expected
    assert remove_hyperlinks(remove_wikilinks(MIXED, True), True) == expected


def test_no_link_syntax_is_identity():
    text = "Plain (text) with ! marks, a ] stray bracket and [brackets] only."
    assert remove_hyperlinks(text) == text
    assert remove_wikilinks(text) == text
