"""Shared pytest fixtures: saved dictionary pages and a parser with fixed settings."""

from pathlib import Path

import pytest

from collins_parser.config import ParserSettings
from collins_parser.main import CollinsParser
from collins_parser.query import SoupQuery

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def read_page(name: str) -> str:
    return (FIXTURES_DIR / f"{name}.html").read_text(encoding="utf-8")


@pytest.fixture
def page():
    """Return a loader for fixtures/<name>.html."""
    return read_page


@pytest.fixture
def load_doc():
    """Return a loader that parses a fixture (or raw markup) into a SoupQuery."""
    def load(name: str = None, html: str = None) -> SoupQuery:
        return SoupQuery.load(read_page(name) if name else html)
    return load


@pytest.fixture
def collins():
    """Parser with default settings, independent of COLLINS_PARSER_* variables."""
    return CollinsParser(settings=ParserSettings())
