"""
Markup query adapter.

The classifier and the extractors never touch a parser library directly.
They read pages through MarkupQuery, a small capability surface:
existence tests, indexed selection, attribute and text reads, inner
markup, and ancestor/child navigation. SoupQuery implements it on top of
BeautifulSoup; any other backend only has to provide the same methods.

Every selection returns a new adapter scoped to the matched element, so
extractors can narrow down step by step:

    doc = SoupQuery.load(html)
    heading = doc.eq(".collinsToggle h4", 0)
    word = heading.text(".title") if heading else ""
"""

import copy
from abc import ABC, abstractmethod
from typing import Optional, Union

import soupsieve
from bs4 import BeautifulSoup, FeatureNotFound, Tag
from soupsieve import SelectorSyntaxError

from .config import DEFAULT_FEATURES
from .exceptions import DocumentLoadError, SelectorError
from .logger import get_module_logger

logger = get_module_logger("query")


class MarkupQuery(ABC):
    """Read-only view of one element (or the whole document) of a page."""

    @abstractmethod
    def select(self, selector: str) -> list["MarkupQuery"]:
        """Every descendant matching selector, in document order."""
        pass

    @abstractmethod
    def attr(self, name: str, default: str = "") -> str:
        """Attribute value of the scoped element; list values are space-joined."""
        pass

    @abstractmethod
    def text(self, selector: Optional[str] = None, strip: bool = True) -> str:
        """
        Text content.

        Without a selector, the text of the scoped element. With one, the
        concatenated text of every match (empty when nothing matches).
        """
        pass

    @abstractmethod
    def inner_html(self) -> str:
        """Markup of the scoped element's children."""
        pass

    @abstractmethod
    def without(self, selector: str) -> "MarkupQuery":
        """A detached copy of this scope with every match removed."""
        pass

    @abstractmethod
    def closest(self, selector: str) -> Optional["MarkupQuery"]:
        """Nearest ancestor-or-self matching selector."""
        pass

    @abstractmethod
    def children(self) -> list["MarkupQuery"]:
        """Direct child elements (text nodes are skipped)."""
        pass

    # --- Conveniences built on the primitives above ---

    def exists(self, selector: str) -> bool:
        return bool(self.select(selector))

    def count(self, selector: str) -> int:
        return len(self.select(selector))

    def eq(self, selector: str, index: int) -> Optional["MarkupQuery"]:
        """The index-th match, or None when there are not that many."""
        matches = self.select(selector)
        if 0 <= index < len(matches):
            return matches[index]
        return None

    def first(self, selector: str) -> Optional["MarkupQuery"]:
        return self.eq(selector, 0)

    def has_class(self, name: str) -> bool:
        return name in self.attr("class").split()


class SoupQuery(MarkupQuery):
    """MarkupQuery backed by a BeautifulSoup tree."""

    def __init__(self, node: Tag, strict: bool = False):
        """
        Args:
            node: Element (or BeautifulSoup document) this adapter is scoped to
            strict: Raise SelectorError on invalid selectors instead of
                    treating them as matching nothing
        """
        self._node = node
        self._strict = strict

    @classmethod
    def load(
        cls,
        html: Union[str, bytes, None],
        features: str = DEFAULT_FEATURES,
        strict: bool = False
    ) -> "SoupQuery":
        """
        Parse an HTML document into a queryable tree.

        None is read as an empty document and bytes are decoded as UTF-8
        with undecodable sequences replaced.

        Raises:
            DocumentLoadError: the tree builder is missing or rejected the input
        """
        if html is None:
            html = ""
        elif isinstance(html, bytes):
            html = html.decode("utf-8", errors="replace")
        elif not isinstance(html, str):
            raise DocumentLoadError(
                f"Expected an HTML string, got {type(html).__name__}",
                details={"type": type(html).__name__}
            )

        try:
            soup = BeautifulSoup(html, features)
        except FeatureNotFound as e:
            raise DocumentLoadError(
                f"Tree builder '{features}' is not installed",
                details={"features": features, "error": str(e)}
            ) from e
        except Exception as e:
            # html5lib and lxml raise assorted errors on pathological input
            raise DocumentLoadError(
                f"HTML parsing failed: {e}",
                details={"features": features, "error": str(e)}
            ) from e

        return cls(soup, strict=strict)

    def _wrap(self, node: Tag) -> "SoupQuery":
        return SoupQuery(node, strict=self._strict)

    def _compile(self, selector: str):
        """Compiled selector, or None (logged) when it does not parse."""
        try:
            return soupsieve.compile(selector)
        except SelectorSyntaxError as e:
            error = SelectorError(f"Invalid CSS '{selector}': {e}", selector=selector)
            if self._strict:
                raise error from e
            logger.warning(error.message)
            return None

    def _select(self, selector: str, node: Optional[Tag] = None) -> list[Tag]:
        compiled = self._compile(selector)
        if compiled is None:
            return []
        return list(compiled.select(self._node if node is None else node))

    def select(self, selector: str) -> list[MarkupQuery]:
        return [self._wrap(node) for node in self._select(selector)]

    def attr(self, name: str, default: str = "") -> str:
        value = self._node.get(name)
        if value is None:
            return default
        # bs4 returns multi-valued attributes such as class as a list
        if isinstance(value, list):
            return " ".join(value)
        return value

    def text(self, selector: Optional[str] = None, strip: bool = True) -> str:
        if selector is None:
            result = self._node.get_text()
        else:
            result = "".join(node.get_text() for node in self._select(selector))
        return result.strip() if strip else result

    def inner_html(self) -> str:
        return self._node.decode_contents()

    def without(self, selector: str) -> MarkupQuery:
        # copy.copy on a bs4 Tag copies the whole subtree, detached from
        # the document, so removals never touch the tree other reads use
        detached = copy.copy(self._node)
        for node in self._select(selector, detached):
            node.extract()
        return self._wrap(detached)

    def closest(self, selector: str) -> Optional[MarkupQuery]:
        compiled = self._compile(selector)
        if compiled is None:
            return None
        node = compiled.closest(self._node)
        return self._wrap(node) if node is not None else None

    def children(self) -> list[MarkupQuery]:
        return [self._wrap(child) for child in self._node.children if isinstance(child, Tag)]

    @property
    def name(self) -> str:
        """Tag name of the scoped element ("[document]" for the root)."""
        return self._node.name

    def __repr__(self) -> str:
        return f"SoupQuery(<{self._node.name}>)"
