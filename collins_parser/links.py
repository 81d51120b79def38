"""
Link and query-word utilities.

absolutize_links: the Collins glosses link to other entries with
site-relative hrefs ("/w/eng/water/..."). Once the markup leaves the page
those only work as absolute URLs, so every stored gloss fragment goes
through here.

escape_word / unescape_word: the dictionary's routing rejects a literal
"/" or "%" in the lookup path, so the query word is rewritten with
sentinel tokens before the URL is built. Whoever fetches pages must call
escape_word (or word_url); the parser only ever undoes it, on machine
translations that echo the query back.
"""

import re
from urllib.parse import urljoin, urlsplit

from .config import DICT_BASE_URL, SEARCH_PREFIX

# href="..." or href='...'; the lookbehind keeps data-href and friends out
HREF_PATTERN = re.compile(r'(?<![\w-])href=(["\'])(.*?)\1', re.IGNORECASE | re.DOTALL)

# (literal, sentinel) pairs, applied in this order when escaping
ESCAPES = (
    ("/", "<&>"),
    ("%", "<$>"),
)


def _is_relative(href: str) -> bool:
    if not href or href.startswith("#") or href.startswith("//"):
        return False
    return not urlsplit(href).scheme


def absolutize_links(fragment, base_url: str = DICT_BASE_URL) -> str:
    """
    Rewrite every relative href in a markup fragment against base_url.

    Absolute, protocol-relative and in-page (#...) links are left as they
    are, and so is everything outside the href values. A non-string
    fragment yields "".
    """
    if not isinstance(fragment, str):
        return ""

    def replace(match: re.Match) -> str:
        quote, href = match.group(1), match.group(2)
        if not _is_relative(href.strip()):
            return match.group(0)
        return f"href={quote}{urljoin(base_url, href.strip())}{quote}"

    return HREF_PATTERN.sub(replace, fragment)


def escape_word(word: str) -> str:
    """Replace "/" and "%" with the sentinels the lookup path accepts."""
    for literal, sentinel in ESCAPES:
        word = word.replace(literal, sentinel)
    return word


def unescape_word(text: str) -> str:
    """
    Undo escape_word.

    Exact inverse for any word that does not itself contain one of the
    sentinel tokens.
    """
    for literal, sentinel in ESCAPES:
        text = text.replace(sentinel, literal)
    return text


def word_url(word: str, prefix: str = SEARCH_PREFIX) -> str:
    """Lookup URL for a query word, escaped for the dictionary's router."""
    return f"{prefix}{escape_word(word)}"
