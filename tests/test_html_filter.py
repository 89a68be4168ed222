from __future__ import annotations

from bioneer.html_filter import HtmlBoundaryFilter, build_html_filter
from bioneer.utils.textspan import Span
from bioneer.words import iter_words


def _classify(text: str) -> list[tuple[str, bool]]:
    html = build_html_filter(text)
    return [(span.text, html.is_inside(span)) for span in iter_words(text)]


def test_ranges_record_last_index() -> None:
    html = HtmlBoundaryFilter.from_text("<a>abcd</a>efg")
    assert html.ranges == ((0, 2), (7, 10))
    assert len(html) == 2


def test_words_in_tags_are_inside() -> None:
    assert _classify("<a>abcd</a>efg") == [
        ("a", True),
        ("abcd", False),
        ("a", True),
        ("efg", False),
    ]


def test_attributes_are_inside() -> None:
    text = '<div class="x">'
    assert _classify(text) == [("div", True), ("class", True), ("x", True)]


def test_comment_wins_over_nested_tags() -> None:
    text = "<!-- a <b>x</b> -->text"
    html = build_html_filter(text)
    assert html.ranges == ((0, 18),)
    assert _classify(text) == [("a", True), ("b", True), ("x", True), ("b", True), ("text", False)]


def test_comment_spans_newlines() -> None:
    text = "<!--\n<p>hidden</p>\n-->shown"
    assert _classify(text) == [("p", True), ("hidden", True), ("p", True), ("shown", False)]


def test_unclosed_comment_is_text() -> None:
    assert build_html_filter("<!-- note").ranges == ()
    assert _classify("<!-- note") == [("note", False)]


def test_unclosed_comment_falls_back_to_tag() -> None:
    assert build_html_filter("<!-- note >x").ranges == ((0, 10),)


def test_stray_angle_brackets_are_text() -> None:
    assert build_html_filter("less < more").ranges == ()
    assert build_html_filter("more > less").ranges == ()


def test_word_right_after_tag_is_outside() -> None:
    html = build_html_filter("<p>word")
    assert html.is_inside(Span(3, 7, "word")) is False
    assert html.is_inside(1) is True


def test_offsets_before_first_construct_are_outside() -> None:
    html = build_html_filter("abc <i>")
    assert html.is_inside(0) is False
    assert html.is_inside(4) is False


def test_no_markup() -> None:
    html = build_html_filter("plain words only")
    assert html.ranges == ()
    assert not any(html.is_inside(span) for span in iter_words("plain words only"))


def test_nearest_preceding_construct_decides() -> None:
    text = "<a href='x'>one</a> two <br/> three"
    assert _classify(text) == [
        ("a", True),
        ("href", True),
        ("x", True),
        ("one", False),
        ("a", True),
        ("two", False),
        ("br", True),
        ("three", False),
    ]
