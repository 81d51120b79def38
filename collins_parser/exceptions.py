"""
Exceptions used inside the Collins page parser.

Error philosophy:
  - DocumentLoadError → NON-FATAL: the page becomes an "error" response.
  - SelectorError     → NON-FATAL: the selector is treated as matching nothing.
  - ExtractionError   → NON-FATAL: logged, the page becomes an "error" response.

None of these ever escape parse(). An unrecognized page is not an
exception at all; the classifier simply returns ResponseType.ERROR.
"""

from typing import Optional


class CollinsParserError(Exception):
    """Base exception for all Collins parser errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DocumentLoadError(CollinsParserError):
    """
    Raised by the query adapter when the tree builder rejects the input.

    The assembler converts this into an "error" response.
    """
    pass


class SelectorError(CollinsParserError):
    """Raised when a CSS selector cannot be compiled."""

    def __init__(
        self,
        message: str,
        selector: str,
        details: Optional[dict] = None
    ):
        super().__init__(message, details)
        self.selector = selector


class ExtractionError(CollinsParserError):
    """
    Raised when an extractor meets a page shape it cannot read.

    Carries the response type the classifier chose, so the log line says
    which extractor gave up.
    """

    def __init__(
        self,
        message: str,
        response_type: Optional[str] = None,
        details: Optional[dict] = None
    ):
        super().__init__(message, details)
        self.response_type = response_type
