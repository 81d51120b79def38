"""
Page classifier.

Decides which of the five page shapes a dictionary result page is, by
checking marker selectors in a fixed priority order. The first marker
present wins and later markers are never consulted.

Priority is editorial: the page always prefers the annotated Collins
entry, then homograph disambiguation, then a bare bilingual gloss, then
a raw machine translation. Pages with none of the markers are errors.
"""

from .logger import get_module_logger
from .query import MarkupQuery
from .schemas import ResponseType

logger = get_module_logger("classifier")


# (marker selector, page shape), highest priority first.
# A page carrying both the Collins toggle and homograph groups is
# classified as EXPLAIN.
PAGE_MARKERS: tuple[tuple[str, ResponseType], ...] = (
    (".collinsToggle", ResponseType.EXPLAIN),
    ("#phrsListTab .wordGroup", ResponseType.CHOICES),
    ("#phrsListTab .trans-container", ResponseType.NON_COLLINS_EXPLAIN),
    ("#ydTrans .trans-container", ResponseType.MACHINE_TRANSLATION),
)


def classify(doc: MarkupQuery) -> ResponseType:
    """Return the shape of the page; ResponseType.ERROR when nothing matches."""
    for selector, response_type in PAGE_MARKERS:
        if doc.exists(selector):
            logger.debug(f"Marker '{selector}' found: {response_type.value}")
            return response_type

    logger.debug("No page marker found")
    return ResponseType.ERROR
