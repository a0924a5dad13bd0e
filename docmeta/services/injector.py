"""Appending ``<meta>`` elements to a parsed page's ``<head>``."""

from typing import Iterable, List, NamedTuple, Optional

from bs4 import BeautifulSoup

from docmeta.config import Settings


# html.parser keeps the tree exactly as written; lxml would repair invalid
# nesting. The html5 formatter re-encodes named entities and leaves void
# elements unclosed.
PAGE_PARSER = "html.parser"
PAGE_FORMATTER = "html5"


class MetaTagEntry(NamedTuple):
    attribute: str  # "name" or "property"
    value: str
    content: str


def inject(soup: BeautifulSoup, entries: Iterable[MetaTagEntry]) -> BeautifulSoup:
    """Append one ``<meta>`` element per entry to the end of ``<head>``.

    Entries are not de-duplicated against each other or against tags already
    in the page.  The tree is mutated in place and returned.

    Raises:
        ValueError: if the document has no ``<head>`` element.
    """
    head = soup.find("head")
    if head is None:
        raise ValueError("Document has no <head> element.")

    for entry in entries:
        meta = soup.new_tag("meta")
        meta[entry.attribute] = entry.value
        meta["content"] = entry.content
        head.append(meta)
    return soup


def parse_page(html: str) -> BeautifulSoup:
    """Parse a page that will be written back after injection."""
    return BeautifulSoup(html, PAGE_PARSER)


def render_page(soup: BeautifulSoup) -> str:
    return soup.decode(formatter=PAGE_FORMATTER)


def build_entries(
    description: Optional[str],
    title: Optional[str],
    settings: Settings,
) -> List[MetaTagEntry]:
    """Assemble the meta tags for one page from whatever is available."""
    entries: List[MetaTagEntry] = []
    if description:
        entries.append(MetaTagEntry("name", "description", description))
        if settings.og_description:
            entries.append(MetaTagEntry("property", "og:description", description))
    if title and settings.og_title:
        entries.append(MetaTagEntry("property", "og:title", title))
    if settings.site_name:
        entries.append(MetaTagEntry("property", "og:site_name", settings.site_name))
    if settings.image_url:
        entries.append(MetaTagEntry("property", "og:image", settings.image_url))
    if settings.theme_color:
        entries.append(MetaTagEntry("name", "theme-color", settings.theme_color))
    return entries
