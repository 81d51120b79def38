"""
Field extractors, one per page shape.

Each extractor reads a page the classifier has already recognized and
builds the matching payload model. Missing sub-fields degrade to "",
() or None; an extractor only gives up (ExtractionError) when the
container that defines its page shape is not there at all.

Page layout the selectors follow:

  .wordbook-js                  title block: .keyword, .pronounce .phonetic
  .collinsToggle                Collins entry
    h4                          .title, .star.starN, .rank, .pattern
    li                          one row; senses carry .collinsMajorTrans
      .collinsMajorTrans p      gloss, with a leading span.additional tag
      .exampleLists .examples p English / Chinese example pair
    .wt-container > .additional / a   synonym cross-references
  #phrsListTab .wordGroup       homograph groups (label span + .contentTitle)
  #phrsListTab .trans-container li    bare gloss lines, "n. ..."
  #ydTrans .trans-container p   machine translation (echo, translation)
"""

import re
from typing import Optional

from .config import DICT_BASE_URL
from .exceptions import ExtractionError
from .links import absolutize_links, unescape_word
from .logger import get_module_logger
from .query import MarkupQuery
from .schemas import (
    Choice,
    ChoiceResponse,
    ExplainResponse,
    MachineTranslationResponse,
    Meaning,
    MeaningExample,
    MeaningExplain,
    NonCollinsExplain,
    NonCollinsExplainsResponse,
    ResponseType,
    Synonyms,
    WordInfo,
)

logger = get_module_logger("extractors")

# Frequency rating class token, e.g. class="star star3"
STAR_PATTERN = re.compile(r"star(\d)")

# Separates the part-of-speech tag from the gloss in a bare gloss line
TYPE_SEPARATOR = ". "

# The first phonetic is the British transcription; the second one is used
PHONETIC_INDEX = 1

# The first paragraph echoes the query; the second holds the translation
TRANSLATION_INDEX = 1


# --- Shared helpers ---

def _require(doc: MarkupQuery, selector: str, response_type: ResponseType) -> None:
    if not doc.exists(selector):
        raise ExtractionError(
            f"'{selector}' not found on a {response_type.value} page",
            response_type=response_type.value,
            details={"selector": selector}
        )


def parse_frequency(class_attr: Optional[str]) -> Optional[int]:
    """
    Read the star rating from a class attribute.

    "star star3" → 3. No starN token, or a rating outside 1..5, gives None.
    """
    if not class_attr:
        return None
    for token in class_attr.split():
        match = STAR_PATTERN.fullmatch(token)
        if match:
            rating = int(match.group(1))
            return rating if 1 <= rating <= 5 else None
    return None


def get_pronunciation(doc: MarkupQuery) -> str:
    phonetic = doc.eq(".wordbook-js .pronounce .phonetic", PHONETIC_INDEX)
    return phonetic.text() if phonetic is not None else ""


def get_title_info(doc: MarkupQuery) -> WordInfo:
    """Headword and pronunciation from the title block; no rating or rank."""
    return WordInfo(
        word=doc.text(".wordbook-js .keyword"),
        pronunciation=get_pronunciation(doc),
    )


# --- Collins entry ---

def get_collins_info(doc: MarkupQuery) -> WordInfo:
    heading = doc.first(".collinsToggle h4")
    pronunciation = get_pronunciation(doc)
    if heading is None:
        return WordInfo(pronunciation=pronunciation)

    star = heading.first(".star")
    return WordInfo(
        word=heading.text(".title"),
        pronunciation=pronunciation,
        frequence=parse_frequency(star.attr("class")) if star is not None else None,
        rank=heading.text(".rank"),
        additional_pattern=heading.text(".pattern"),
    )


def get_explain(major: MarkupQuery, base_url: str = DICT_BASE_URL) -> MeaningExplain:
    """
    Read one .collinsMajorTrans block.

    The gloss paragraph starts with span indicators (the part-of-speech
    tag among them); they are dropped before the markup is stored.
    """
    tag = major.first(".additional")
    paragraph = major.first("p")

    eng_explain = ""
    if paragraph is not None:
        eng_explain = absolutize_links(paragraph.without("span").inner_html().strip(), base_url)

    return MeaningExplain(
        type=major.text(".additional"),
        type_desc=tag.attr("title") if tag is not None else "",
        eng_explain=eng_explain,
    )


def get_example(item: MarkupQuery) -> MeaningExample:
    paragraphs = item.select(".exampleLists .examples p")
    return MeaningExample(
        eng=paragraphs[0].text() if len(paragraphs) > 0 else "",
        ch=paragraphs[1].text() if len(paragraphs) > 1 else "",
    )


def get_meanings(doc: MarkupQuery, base_url: str = DICT_BASE_URL) -> list[Meaning]:
    meanings = []
    for item in doc.select(".collinsToggle li"):
        major = item.first(".collinsMajorTrans")
        # Rows without a major translation are cross-references, not senses
        if major is None:
            continue
        meanings.append(Meaning(explain=get_explain(major, base_url), example=get_example(item)))
    return meanings


def get_synonyms(doc: MarkupQuery) -> Synonyms:
    anchors = doc.select(".collinsToggle .wt-container > a")
    return Synonyms(
        type=doc.text(".collinsToggle .wt-container > .additional"),
        words=[anchor.text() for anchor in anchors],
        hrefs=[anchor.attr("href") for anchor in anchors],
    )


def extract_explain(doc: MarkupQuery, base_url: str = DICT_BASE_URL) -> ExplainResponse:
    _require(doc, ".collinsToggle", ResponseType.EXPLAIN)

    meanings = get_meanings(doc, base_url)
    logger.debug(f"Collins entry with {len(meanings)} meanings")
    return ExplainResponse(
        word_info=get_collins_info(doc),
        synonyms=get_synonyms(doc),
        meanings=meanings,
    )


# --- Homograph choices ---

def get_choice(group: MarkupQuery) -> Choice:
    # The leading span is the part-of-speech label unless the group starts
    # directly with a headword
    label = group.first("span")
    word_type = ""
    if label is not None and not label.has_class("contentTitle"):
        word_type = label.text()

    return Choice(
        word_type=word_type,
        words=[title.text(".search-js") for title in group.select(".contentTitle")],
    )


def extract_choices(doc: MarkupQuery) -> ChoiceResponse:
    _require(doc, "#phrsListTab .wordGroup", ResponseType.CHOICES)

    choices = [get_choice(group) for group in doc.select("#phrsListTab .wordGroup")]
    logger.debug(f"{len(choices)} homograph groups")
    return ChoiceResponse(choices=choices)


# --- Bare bilingual gloss ---

def split_explain_line(line: str) -> NonCollinsExplain:
    """
    Split "n. [财政] 赤字" at the first ". " into type and explain.

    A line without the separator is kept whole as the explain text.
    """
    head, separator, tail = line.partition(TYPE_SEPARATOR)
    if not separator:
        return NonCollinsExplain(type="", explain=line.strip())
    return NonCollinsExplain(type=head.strip(), explain=tail.strip())


def extract_non_collins_explain(doc: MarkupQuery) -> NonCollinsExplainsResponse:
    _require(doc, "#phrsListTab .trans-container", ResponseType.NON_COLLINS_EXPLAIN)

    explains = [
        split_explain_line(line.text(strip=False))
        for line in doc.select("#phrsListTab .trans-container li")
    ]
    logger.debug(f"{len(explains)} gloss lines")
    return NonCollinsExplainsResponse(word_info=get_title_info(doc), explains=explains)


# --- Machine translation ---

def extract_machine_translation(doc: MarkupQuery) -> MachineTranslationResponse:
    _require(doc, "#ydTrans .trans-container", ResponseType.MACHINE_TRANSLATION)

    paragraph = doc.eq("#ydTrans .trans-container p", TRANSLATION_INDEX)
    translation = paragraph.text() if paragraph is not None else ""
    return MachineTranslationResponse(translation=unescape_word(translation))
