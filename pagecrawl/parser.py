from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractedPageData:
    url: str
    h1: str = ""
    first_paragraph: str = ""
    outgoing_links: tuple[str, ...] = ()
    image_urls: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "h1": self.h1,
            "first_paragraph": self.first_paragraph,
            "outgoing_links": list(self.outgoing_links),
            "image_urls": list(self.image_urls),
        }


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", "html.parser")


def _text(node: Optional[Tag]) -> str:
    return node.get_text().strip() if node is not None else ""


def resolve_url(base_url: str, ref: str) -> Optional[str]:
    """Resolve ``ref`` against ``base_url``; None if it cannot be resolved.

    Absolute references come back as written: no trailing slash is added
    and the host case is left alone.
    """
    ref = ref.strip()
    if not ref:
        return None
    try:
        return urljoin(base_url, ref)
    except ValueError as exc:
        logger.warning("Skipping unresolvable reference %r on %s: %s", ref, base_url, exc)
        return None


def _collect(soup: BeautifulSoup, tag: str, attr: str, base_url: str) -> list[str]:
    out: list[str] = []
    for el in soup.find_all(tag):
        value = el.get(attr)
        if value is None:
            continue
        resolved = resolve_url(base_url, value)
        if resolved:
            out.append(resolved)
    return out


def _h1(soup: BeautifulSoup) -> str:
    return _text(soup.find("h1"))


def _first_paragraph(soup: BeautifulSoup) -> str:
    main = soup.find("main")
    p = main.find("p") if main is not None else None
    if p is None:
        p = soup.find("p")
    return _text(p)


def get_h1_from_html(html: str) -> str:
    return _h1(_soup(html))


def get_first_paragraph_from_html(html: str) -> str:
    """First paragraph under <main>, else the first one in the document."""
    return _first_paragraph(_soup(html))


def get_urls_from_html(html: str, base_url: str) -> list[str]:
    return _collect(_soup(html), "a", "href", base_url)


def get_images_from_html(html: str, base_url: str) -> list[str]:
    return _collect(_soup(html), "img", "src", base_url)


def extract_page_data(html: str, source_url: str) -> ExtractedPageData:
    """Parse ``html`` once and pull out heading, lead paragraph, links and images.

    Links and images are absolute URLs resolved against ``source_url`` in
    document order, duplicates kept. ``source_url`` is stored as given.
    """
    soup = _soup(html)
    return ExtractedPageData(
        url=source_url,
        h1=_h1(soup),
        first_paragraph=_first_paragraph(soup),
        outgoing_links=tuple(_collect(soup, "a", "href", source_url)),
        image_urls=tuple(_collect(soup, "img", "src", source_url)),
    )
