"""
Tests for the field extractors and their parsing rules.

Page-level behaviour is covered in test_parser.py; here each rule is
pinned down on minimal markup: star ratings, gloss line splitting,
synonym parity, label handling in homograph groups, and how every
extractor reacts to a page that lacks its container.
"""

import pytest

from collins_parser.exceptions import ExtractionError
from collins_parser.extractors import (
    extract_choices,
    extract_explain,
    extract_machine_translation,
    extract_non_collins_explain,
    get_choice,
    get_collins_info,
    get_explain,
    get_synonyms,
    parse_frequency,
    split_explain_line,
)
from collins_parser.query import SoupQuery


# --- Star ratings ---

@pytest.mark.parametrize("class_attr, expected", [
    ("star star3", 3),
    ("star1 star", 1),
    ("star star5", 5),
    ("star", None),
    ("", None),
    (None, None),
    ("star star0", None),
    ("star star9", None),
    ("superstar3", None),
    ("star star12", None),
])
def test_parse_frequency(class_attr, expected):
    assert parse_frequency(class_attr) == expected


def test_missing_star_element_is_none():
    doc = SoupQuery.load('<div class="collinsToggle"><h4><span class="title">w</span></h4></div>')
    assert get_collins_info(doc).frequence is None


def test_star_element_is_read_from_heading():
    doc = SoupQuery.load(
        '<div class="collinsToggle"><h4><span class="title">w</span>'
        '<span class="star star4"></span></h4></div>'
    )
    assert get_collins_info(doc).frequence == 4


def test_collins_info_without_heading_is_empty():
    info = get_collins_info(SoupQuery.load('<div class="collinsToggle"></div>'))

    assert info.word == ""
    assert info.pronunciation == ""
    assert info.frequence is None
    assert info.rank == ""
    assert info.additional_pattern == ""


def test_only_the_first_heading_is_read():
    doc = SoupQuery.load(
        '<div class="collinsToggle">'
        '<h4><span class="title">first</span></h4>'
        '<h4><span class="title">second</span><span class="star star2"></span></h4>'
        '</div>'
    )
    info = get_collins_info(doc)

    assert info.word == "first"
    assert info.frequence is None


def test_pronunciation_is_the_second_phonetic():
    doc = SoupQuery.load(
        '<div class="wordbook-js"><span class="pronounce"><span class="phonetic">[uk]</span></span>'
        '<span class="pronounce"><span class="phonetic">[us]</span></span></div>'
        '<div class="collinsToggle"></div>'
    )
    assert get_collins_info(doc).pronunciation == "[us]"


def test_single_phonetic_gives_empty_pronunciation():
    doc = SoupQuery.load(
        '<div class="wordbook-js"><span class="pronounce"><span class="phonetic">[uk]</span></span></div>'
        '<div class="collinsToggle"></div>'
    )
    assert get_collins_info(doc).pronunciation == ""


# --- Collins meanings ---

def test_explain_type_and_description():
    major = SoupQuery.load(
        '<div class="collinsMajorTrans"><p><span class="additional" title="可数名词">N-COUNT</span>'
        ' A <b>page</b> is one side. 页</p></div>'
    ).first(".collinsMajorTrans")
    explain = get_explain(major)

    assert explain.type == "N-COUNT"
    assert explain.type_desc == "可数名词"
    assert explain.eng_explain == "A <b>page</b> is one side. 页"


def test_explain_removes_every_span_but_keeps_the_tree_intact():
    doc = SoupQuery.load(
        '<div class="collinsMajorTrans"><p><span class="additional" title="t">ADJ</span>'
        ' red <span class="additional">颜色</span>text</p></div>'
    )
    explain = get_explain(doc.first(".collinsMajorTrans"))

    assert explain.eng_explain == "red text"
    # Reading the gloss must not remove the spans from the page itself
    assert doc.count(".collinsMajorTrans span") == 2


def test_explain_without_paragraph():
    major = SoupQuery.load('<div class="collinsMajorTrans"></div>').first(".collinsMajorTrans")
    explain = get_explain(major)

    assert explain.type == ""
    assert explain.type_desc == ""
    assert explain.eng_explain == ""


def test_explain_links_use_given_origin():
    major = SoupQuery.load(
        '<div class="collinsMajorTrans"><p>see <a href="/w/x/">x</a></p></div>'
    ).first(".collinsMajorTrans")

    assert get_explain(major, "https://mirror.example.org/").eng_explain == (
        'see <a href="https://mirror.example.org/w/x/">x</a>'
    )


def test_cross_reference_rows_are_skipped():
    doc = SoupQuery.load(
        '<div class="collinsToggle"><ul>'
        '<li><a href="/w/eng/x/">see x</a></li>'
        '<li><div class="collinsMajorTrans"><p>real sense</p></div></li>'
        '</ul></div>'
    )
    meanings = extract_explain(doc).meanings

    assert len(meanings) == 1
    assert meanings[0].explain.eng_explain == "real sense"


# --- Synonyms ---

@pytest.mark.parametrize("block", [
    "",
    '<div class="wt-container"><span class="additional">[英国英语]</span></div>',
    '<div class="wt-container"><a href="/w/a/">a</a></div>',
    '<div class="wt-container"><a href="/w/a/">a</a><a>no href</a><a href="/w/c/">c</a></div>',
])
def test_synonym_words_and_hrefs_stay_parallel(block):
    synonyms = get_synonyms(SoupQuery.load(f'<div class="collinsToggle">{block}</div>'))
    assert len(synonyms.words) == len(synonyms.hrefs)


def test_anchor_without_href_keeps_its_slot():
    synonyms = get_synonyms(SoupQuery.load(
        '<div class="collinsToggle"><div class="wt-container">'
        '<a href="/w/a/">a</a><a>b</a></div></div>'
    ))

    assert synonyms.words == ("a", "b")
    assert synonyms.hrefs == ("/w/a/", "")


def test_nested_anchors_are_not_synonyms():
    synonyms = get_synonyms(SoupQuery.load(
        '<div class="collinsToggle"><div class="wt-container">'
        '<p><a href="/w/inside/">inside</a></p></div></div>'
    ))
    assert synonyms.words == ()


# --- Homograph choices ---

def test_choice_with_label():
    group = SoupQuery.load(
        '<p class="wordGroup"><span>n.</span>'
        '<span class="contentTitle"><a class="search-js"> water </a>;</span></p>'
    ).first(".wordGroup")
    choice = get_choice(group)

    assert choice.word_type == "n."
    assert choice.words == ("water",)


def test_choice_without_label():
    group = SoupQuery.load(
        '<p class="wordGroup"><span class="contentTitle"><a class="search-js">water</a></span></p>'
    ).first(".wordGroup")
    assert get_choice(group).word_type == ""


def test_choice_without_headwords():
    group = SoupQuery.load('<p class="wordGroup"><span>adj.</span></p>').first(".wordGroup")
    choice = get_choice(group)

    assert choice.word_type == "adj."
    assert choice.words == ()


def test_empty_choice_group():
    doc = SoupQuery.load('<div id="phrsListTab"><p class="wordGroup"></p></div>')
    choices = extract_choices(doc).choices

    assert len(choices) == 1
    assert choices[0].word_type == ""
    assert choices[0].words == ()


# --- Bare gloss lines ---

@pytest.mark.parametrize("line, expected_type, expected_explain", [
    ("n. [财政] 赤字，亏损（deficit的复数形式）", "n", "[财政] 赤字，亏损（deficit的复数形式）"),
    ("最新", "", "最新"),
    ("adj. a. b. c", "adj", "a. b. c"),
    ("etc.", "", "etc."),
    ("", "", ""),
    ("  vt. 打开  ", "vt", "打开"),
])
def test_split_explain_line(line, expected_type, expected_explain):
    explain = split_explain_line(line)

    assert explain.type == expected_type
    assert explain.explain == expected_explain


def test_empty_gloss_lines_are_kept():
    doc = SoupQuery.load(
        '<div id="phrsListTab"><div class="trans-container"><ul><li></li><li>n. x</li></ul></div></div>'
    )
    explains = extract_non_collins_explain(doc).explains

    assert len(explains) == 2
    assert explains[0].explain == ""


def test_gloss_page_without_title_block():
    doc = SoupQuery.load('<div id="phrsListTab"><div class="trans-container"></div></div>')
    response = extract_non_collins_explain(doc)

    assert response.word_info.word == ""
    assert response.word_info.pronunciation == ""
    assert response.explains == ()


# --- Missing containers ---

@pytest.mark.parametrize("extractor", [
    extract_explain,
    extract_choices,
    extract_non_collins_explain,
    extract_machine_translation,
])
def test_extractor_on_foreign_page_raises_extraction_error(extractor):
    with pytest.raises(ExtractionError) as info:
        extractor(SoupQuery.load("<p>unrelated</p>"))
    assert info.value.response_type
