from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional

import aiohttp

from .config import LOG_LEVELS, Config, load_config
from .errors import InvalidURL
from .fetcher import fetch_html
from .normalize import normalize_url
from .parser import ExtractedPageData, extract_page_data

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


async def crawl_page(cfg: Config, url: str) -> Optional[ExtractedPageData]:
    async with aiohttp.ClientSession() as session:
        html = await fetch_html(session, url, cfg)
    if html is None:
        return None
    return extract_page_data(html, url)


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Extract structured data from a web page")
    parser.add_argument("urls", nargs="*", help="Base URL to crawl")
    parser.add_argument("--canonical", action="store_true", help="Also print the canonical form of the URL")
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=None, help="Override LOG_LEVEL"
    )
    args = parser.parse_args(argv)

    if not args.urls:
        print("No arguments", file=sys.stderr)
        sys.exit(1)
    if len(args.urls) > 1:
        print("Too many arguments", file=sys.stderr)
        sys.exit(1)
    base_url = args.urls[0]

    try:
        cfg = load_config()
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        sys.exit(1)
    logging.basicConfig(level=args.log_level or cfg.log_level, format=LOG_FORMAT)

    if args.canonical:
        try:
            print(f"Canonical: {normalize_url(base_url)}")
        except InvalidURL as exc:
            print(f"{exc}: {base_url!r}", file=sys.stderr)
            sys.exit(1)

    print(f"Crawling at {base_url}")
    try:
        page = asyncio.run(crawl_page(cfg, base_url))
    except KeyboardInterrupt:
        print("\nShutting down...")
        sys.exit(130)

    if page is None:
        print(f"No HTML content at {base_url}", file=sys.stderr)
        sys.exit(1)
    logger.debug("Extracted %d links and %d images", len(page.outgoing_links), len(page.image_urls))
    print(json.dumps(page.to_dict(), indent=2))


if __name__ == "__main__":
    main()
