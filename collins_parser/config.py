"""
Runtime settings for the parser.

Values come from constructor arguments or from COLLINS_PARSER_* environment
variables (run_parser.py loads a .env file first). Settings only choose how
pages are read; they never hold per-page state.
"""

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .logger import get_module_logger

logger = get_module_logger("config")

# Origin the page's relative links point into
DICT_BASE_URL = "http://dict.youdao.com/"

# Lookup URL prefix; the escaped query word is appended to it
SEARCH_PREFIX = "http://dict.youdao.com/w/eng/"

# BeautifulSoup tree builders we accept. html5lib parses the way a browser
# does, which matters for the dictionary's sloppy nesting; lxml is faster.
SUPPORTED_FEATURES = ("html5lib", "lxml", "html.parser")
DEFAULT_FEATURES = "html5lib"


class ParserSettings(BaseModel):
    """Settings shared by every parse call of one CollinsParser."""
    model_config = ConfigDict(frozen=True)

    features: str = DEFAULT_FEATURES
    base_url: str = DICT_BASE_URL
    search_prefix: str = SEARCH_PREFIX
    log_level: Optional[str] = None   # None leaves the package logger as the caller configured it

    @field_validator("features")
    @classmethod
    def _known_builder(cls, value: str) -> str:
        if value not in SUPPORTED_FEATURES:
            logger.warning(
                f"Unknown tree builder '{value}', defaulting to {DEFAULT_FEATURES}"
            )
            return DEFAULT_FEATURES
        return value

    @field_validator("base_url", "search_prefix")
    @classmethod
    def _trailing_slash(cls, value: str) -> str:
        # urljoin and plain concatenation both expect a trailing slash
        return value if value.endswith("/") else value + "/"

    @classmethod
    def from_env(cls, **overrides) -> "ParserSettings":
        """Build settings from COLLINS_PARSER_* variables; explicit overrides win."""
        values = {
            "features": os.getenv("COLLINS_PARSER_FEATURES", DEFAULT_FEATURES).strip().lower(),
            "base_url": os.getenv("COLLINS_PARSER_BASE_URL", DICT_BASE_URL),
            "search_prefix": os.getenv("COLLINS_PARSER_SEARCH_PREFIX", SEARCH_PREFIX),
        }
        if os.getenv("COLLINS_PARSER_LOG_LEVEL"):
            values["log_level"] = os.getenv("COLLINS_PARSER_LOG_LEVEL").upper()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
