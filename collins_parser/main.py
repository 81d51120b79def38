"""
Main entry point of the Collins page parser.

Ties the stages together: load the page through the query adapter,
classify it, run the one matching extractor, and wrap the payload in its
tagged WordResponse variant.

parse() is total. Empty input, garbage, pages the tree builder rejects
and unrecognized pages all come back as ErrorResult; nothing raises.
"""

from functools import partial
from pathlib import Path
from typing import Callable, Optional, Union

from .classifier import classify
from .config import ParserSettings
from .exceptions import DocumentLoadError, ExtractionError
from .extractors import (
    extract_choices,
    extract_explain,
    extract_machine_translation,
    extract_non_collins_explain,
)
from .logger import get_module_logger, setup_logger
from .links import word_url
from .query import MarkupQuery, SoupQuery
from .schemas import (
    ChoicesResult,
    ErrorResult,
    ExplainResult,
    MachineTranslationResult,
    NonCollinsExplainResult,
    ResponseType,
    WordResponse,
)

logger = get_module_logger("main")

# Result variant wrapping each extractor's payload
RESULT_TYPES = {
    ResponseType.EXPLAIN: ExplainResult,
    ResponseType.CHOICES: ChoicesResult,
    ResponseType.NON_COLLINS_EXPLAIN: NonCollinsExplainResult,
    ResponseType.MACHINE_TRANSLATION: MachineTranslationResult,
}


class CollinsParser:
    """
    Parser for dictionary result pages.

    Holds settings only (tree builder, link origin). Each parse() builds a
    fresh tree and fresh result objects, so one instance can be shared
    between threads.
    """

    def __init__(
        self,
        settings: Optional[ParserSettings] = None,
        log_level: Optional[Union[int, str]] = None
    ):
        self.settings = settings or ParserSettings.from_env()

        if log_level is None:
            log_level = self.settings.log_level
        if log_level is not None:
            setup_logger(level=log_level)

        self._extractors: dict[ResponseType, Callable[[MarkupQuery], object]] = {
            ResponseType.EXPLAIN: partial(extract_explain, base_url=self.settings.base_url),
            ResponseType.CHOICES: extract_choices,
            ResponseType.NON_COLLINS_EXPLAIN: extract_non_collins_explain,
            ResponseType.MACHINE_TRANSLATION: extract_machine_translation,
        }

    def load(self, html: Union[str, bytes, None]) -> MarkupQuery:
        """Load a page into the query adapter (may raise DocumentLoadError)."""
        return SoupQuery.load(html, features=self.settings.features)

    def parse(self, html: Union[str, bytes, None]) -> WordResponse:
        """
        Parse a dictionary result page.

        Args:
            html: Page markup (UTF-8 string; bytes are decoded, None is empty)

        Returns:
            The WordResponse variant for the page shape
        """
        try:
            doc = self.load(html)
        except DocumentLoadError as e:
            logger.warning(f"Page could not be loaded: {e.message}")
            return ErrorResult()

        response_type = classify(doc)
        if response_type == ResponseType.ERROR:
            logger.info("Unrecognized page")
            return ErrorResult()

        try:
            payload = self._extractors[response_type](doc)
        except ExtractionError as e:
            logger.warning(f"Extraction failed ({e.response_type}): {e.message}")
            return ErrorResult()

        logger.info(f"Parsed page as {response_type.value}")
        return RESULT_TYPES[response_type](response=payload)

    def parse_file(self, file_path: Union[str, Path]) -> WordResponse:
        """Parse a saved page. Undecodable bytes are replaced, never fatal."""
        raw_bytes = Path(file_path).read_bytes()
        return self.parse(raw_bytes.decode("utf-8", errors="replace"))

    def word_url(self, word: str) -> str:
        """Lookup URL for a query word; callers fetch it, then hand the page to parse()."""
        return word_url(word, prefix=self.settings.search_prefix)


def parse(html: Union[str, bytes, None], settings: Optional[ParserSettings] = None) -> WordResponse:
    """Convenience function to parse a page."""
    return CollinsParser(settings=settings).parse(html)


def parse_file(file_path: Union[str, Path], settings: Optional[ParserSettings] = None) -> WordResponse:
    """Convenience function to parse a saved page."""
    return CollinsParser(settings=settings).parse_file(file_path)
