from __future__ import annotations

import pytest

from bioneer import Bionifier, bionify, bionify_spans
from bioneer.fixation import DEFAULT_CACHE, FixationCache
from bioneer.highlight import highlight, strip_emphasis


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hello, World!", "<b>Hel</b>lo, <b>Wor</b>ld!"),
        ("", ""),
        ("test", "<b>tes</b>t"),
        ("<a>abcd</a>efg", "<a><b>abc</b>d</a><b>ef</b>g"),
        ('<div class="x">', '<div class="x">'),
        ("a b", "a b"),
        ("Hello\nWorld", "<b>Hel</b>lo\n<b>Wor</b>ld"),
        ("<!-- hidden words -->visible", "<!-- hidden words --><b>visib</b>le"),
        ("less < more", "<b>les</b>s < <b>mor</b>e"),
        ("<!-- note", "<!-- <b>not</b>e"),
    ],
)
def test_bionify_examples(text: str, expected: str) -> None:
    assert bionify(text, cache=FixationCache()) == expected


def test_very_long_word() -> None:
    text = "a" * 150
    assert bionify(text, cache=FixationCache()) == highlight("a" * 9) + "a" * 141


def test_multibyte_prefix_cut_at_character_boundary() -> None:
    assert bionify("Réading", cache=FixationCache()) == "<b>Réadi</b>ng"
    assert bionify("日本語", cache=FixationCache()) == "<b>日本</b>語"
    assert bionify("héllo😀wörld", cache=FixationCache()) == "<b>hél</b>lo😀<b>wör</b>ld"


def test_other_fixation_point() -> None:
    assert bionify("test", 1, cache=FixationCache()) == "<b>te</b>st"
    assert bionify("test", 4, cache=FixationCache()) == "<b>t</b>est"


def test_unknown_fixation_point_uses_default_profile() -> None:
    assert bionify("Hello, World!", 42, cache=FixationCache()) == "<b>Hel</b>lo, <b>Wor</b>ld!"


def test_repeated_calls_are_identical() -> None:
    text = "<p>Repeat <em>this</em> sentence, repeat it.</p>"
    cache = FixationCache()
    first = bionify(text, cache=cache)
    assert bionify(text, cache=cache) == first
    assert bionify(text, cache=FixationCache()) == first


@pytest.mark.parametrize(
    "text",
    [
        "Plain words, nothing else.",
        "<ul><li>one</li><li>two</li></ul>",
        "<!-- c --> naïve café 42 x²y foo_bar",
        "1 < 2 and 3 > 2",
        "",
    ],
)
def test_stripping_markers_restores_input(text: str) -> None:
    assert strip_emphasis(bionify(text, cache=FixationCache())) == text


def test_default_cache_is_used_without_argument() -> None:
    assert bionify("Defaultcachedhello") == "<b>Defaultcachedh</b>ello"
    assert "Defaultcachedhello" in DEFAULT_CACHE


def test_bionify_spans_reports_decisions() -> None:
    words = list(bionify_spans("<p>hi there</p>", cache=FixationCache()))
    assert [(w.span.text, w.fixation, w.skipped) for w in words] == [
        ("p", 0, True),
        ("hi", 1, False),
        ("there", 3, False),
        ("p", 0, True),
    ]
    assert words[2].prefix == "the"


def test_bionifier_owns_cache() -> None:
    convert = Bionifier(fixation_point=1)
    assert convert("test test") == "<b>te</b>st <b>te</b>st"
    assert len(convert.cache) == 1
    assert convert.cache.hits == 1
    assert [w.fixation for w in convert.words("test")] == [2]
