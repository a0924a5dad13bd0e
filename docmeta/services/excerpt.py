"""Excerpt extraction from rendered documentation pages.

The page templates produced by the docs build changed over time, so the CSS
selectors used to find the lead text are kept together as versioned
:class:`SelectorSet` entries instead of being scattered through the code.

``"v1"``
    Older templates: the lead paragraph is a direct child of
    ``<article id="_content">`` and API pages carry the member name in that
    article's ``<h1>`` next to a ``level0 summary`` block.

``"v2"``
    Current templates: the first paragraph anywhere inside the ``<article>``,
    and for API pages the first paragraph of any element whose class list
    contains ``summary`` (``markdown summary`` in practice).
"""

from typing import Dict, NamedTuple, Optional

from bs4 import BeautifulSoup, Tag

from docmeta.models.manifest import DocumentType


class SelectorSet(NamedTuple):
    conceptual: str
    reference_summary: str
    member_name: Optional[str]
    title: str = "head > title"


SELECTOR_SETS: Dict[str, SelectorSet] = {
    "v1": SelectorSet(
        conceptual="article#_content > p",
        reference_summary="div.level0.summary > p",
        member_name="article#_content > h1",
    ),
    "v2": SelectorSet(
        conceptual="article p",
        reference_summary=".summary > p",
        member_name=None,
    ),
}

DEFAULT_SELECTORS = SELECTOR_SETS["v2"]


def get_selector_set(version: str) -> SelectorSet:
    try:
        return SELECTOR_SETS[version]
    except KeyError:
        raise ValueError(f"Unknown selector version '{version}'.") from None


def _node_text(node: Optional[Tag]) -> Optional[str]:
    """Return the whitespace-collapsed text of *node*, or None when blank."""
    if node is None:
        return None
    text = " ".join(node.get_text().split())
    return text or None


def _lower_first(text: str) -> str:
    return text[0].lower() + text[1:]


def extract_excerpt(
    soup: BeautifulSoup,
    document_type: DocumentType,
    selectors: SelectorSet = DEFAULT_SELECTORS,
) -> Optional[str]:
    """Return the lead text of the page, or *None* when there is nothing usable.

    Conceptual pages use their first article paragraph.  Reference pages use
    the member summary; when *selectors* also names a member heading, the
    heading text is prefixed to the summary.
    """
    if document_type == DocumentType.CONCEPTUAL:
        return _node_text(soup.select_one(selectors.conceptual))

    if document_type == DocumentType.REFERENCE:
        summary = _node_text(soup.select_one(selectors.reference_summary))
        if summary is None:
            return None
        if selectors.member_name:
            member_name = _node_text(soup.select_one(selectors.member_name))
            if member_name:
                return f"{member_name} {_lower_first(summary)}"
        return summary

    return None


def extract_title(soup: BeautifulSoup, selectors: SelectorSet = DEFAULT_SELECTORS) -> Optional[str]:
    """Return the page title, falling back to the first ``<h1>``."""
    title = _node_text(soup.select_one(selectors.title))
    if title:
        return title
    return _node_text(soup.find("h1"))
