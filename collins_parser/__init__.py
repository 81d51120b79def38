"""
Collins Page Parser

Reads a Youdao dictionary result page and returns one typed record:
- Classifier: decides which of the five page shapes the page is
- Extractors: build the payload for that shape
- Links: absolute gloss links, query-word escaping for lookup URLs

Public API surface:
  Entry points : parse, parse_file, CollinsParser
  Data models  : WordResponse and its variants, payload models, ResponseType
  Query adapter: MarkupQuery, SoupQuery
  Utilities    : escape_word, unescape_word, word_url, absolutize_links
  Settings     : ParserSettings
"""

# --- Entry points ---
from .main import CollinsParser, parse, parse_file
from .classifier import classify, PAGE_MARKERS

# --- Data models ---
from .schemas import (
    ResponseType,
    WordResponse,
    ExplainResult,
    ChoicesResult,
    ErrorResult,
    NonCollinsExplainResult,
    MachineTranslationResult,
    WordInfo,
    Meaning,
    MeaningExplain,
    MeaningExample,
    Synonyms,
    ExplainResponse,
    Choice,
    ChoiceResponse,
    NonCollinsExplain,
    NonCollinsExplainsResponse,
    MachineTranslationResponse,
    to_message,
    from_message,
)

# --- Query adapter ---
from .query import MarkupQuery, SoupQuery

# --- Link / escape utilities (escape_word is for whoever fetches pages) ---
from .links import absolutize_links, escape_word, unescape_word, word_url

# --- Settings and errors ---
from .config import ParserSettings
from .exceptions import CollinsParserError, DocumentLoadError, SelectorError, ExtractionError

__version__ = "0.1.0"
__all__ = [
    "CollinsParser",
    "parse",
    "parse_file",
    "classify",
    "PAGE_MARKERS",
    "ResponseType",
    "WordResponse",
    "ExplainResult",
    "ChoicesResult",
    "ErrorResult",
    "NonCollinsExplainResult",
    "MachineTranslationResult",
    "WordInfo",
    "Meaning",
    "MeaningExplain",
    "MeaningExample",
    "Synonyms",
    "ExplainResponse",
    "Choice",
    "ChoiceResponse",
    "NonCollinsExplain",
    "NonCollinsExplainsResponse",
    "MachineTranslationResponse",
    "to_message",
    "from_message",
    "MarkupQuery",
    "SoupQuery",
    "absolutize_links",
    "escape_word",
    "unescape_word",
    "word_url",
    "ParserSettings",
    "CollinsParserError",
    "DocumentLoadError",
    "SelectorError",
    "ExtractionError",
]
