"""
Tests for link absolutization and query-word escaping.
"""

import pytest

from collins_parser.links import absolutize_links, escape_word, unescape_word, word_url


# --- absolutize_links ---

def test_site_relative_link_becomes_absolute():
    fragment = 'not <a href="/w/eng/shut/#keyfrom=dict.collins">shut</a>.'
    assert absolutize_links(fragment) == (
        'not <a href="http://dict.youdao.com/w/eng/shut/#keyfrom=dict.collins">shut</a>.'
    )


def test_path_relative_link_is_joined_to_the_origin():
    assert absolutize_links('<a href="w/eng/open/">open</a>') == (
        '<a href="http://dict.youdao.com/w/eng/open/">open</a>'
    )


def test_every_link_is_rewritten():
    fragment = '<a href="/w/a/">a</a> and <a href=\'/w/b/\'>b</a>'
    assert absolutize_links(fragment) == (
        '<a href="http://dict.youdao.com/w/a/">a</a> and '
        "<a href='http://dict.youdao.com/w/b/'>b</a>"
    )


@pytest.mark.parametrize("fragment", [
    '<a href="https://example.com/w/x">x</a>',
    '<a href="//cdn.example.com/x">x</a>',
    '<a href="#top">top</a>',
    '<a href="javascript:void(0)">x</a>',
    '<a data-href="/w/x/">x</a>',
    '<a href="">x</a>',
    "plain text with /w/eng/ in it",
])
def test_other_markup_is_untouched(fragment):
    assert absolutize_links(fragment) == fragment


def test_custom_origin():
    assert absolutize_links('<a href="/w/x/">x</a>', "https://dict.example.org/") == (
        '<a href="https://dict.example.org/w/x/">x</a>'
    )


@pytest.mark.parametrize("value", [None, 42, b'<a href="/x">'])
def test_non_string_fragment_gives_empty_string(value):
    assert absolutize_links(value) == ""


# --- escape_word / unescape_word ---

def test_escape_replaces_slash_and_percent():
    assert escape_word("and/or") == "and<&>or"
    assert escape_word("100%") == "100<$>"
    assert escape_word("plain") == "plain"


def test_unescape_reverses_both_sentinels():
    assert unescape_word("和<&>或 100<$>") == "和/或 100%"


@pytest.mark.parametrize("word", [
    "",
    "word",
    "and/or",
    "100%",
    "a/b%c//%%",
    "%/%/",
    "中文/测试 50%",
    "<tag> & more",
])
def test_escape_round_trip(word):
    assert unescape_word(escape_word(word)) == word


def test_escaped_word_has_no_raw_characters():
    escaped = escape_word("a/b%c")
    assert "/" not in escaped
    assert "%" not in escaped


def test_word_url():
    assert word_url("water") == "http://dict.youdao.com/w/eng/water"
    assert word_url("and/or") == "http://dict.youdao.com/w/eng/and<&>or"
    assert word_url("x", prefix="https://dict.example.org/w/") == "https://dict.example.org/w/x"
