from __future__ import annotations

import asyncio
import logging
from typing import Optional

import aiohttp

from .config import Config

logger = logging.getLogger(__name__)


async def fetch_html(
    session: aiohttp.ClientSession, url: str, cfg: Config
) -> Optional[str]:
    """GET ``url`` and return its body when it is an HTML page, else None.

    Non-200 responses, non ``text/html`` content types, bodies larger than
    ``cfg.max_content_size_bytes`` and network errors all yield None.
    """
    timeout = aiohttp.ClientTimeout(total=cfg.request_timeout_seconds)
    try:
        async with session.get(
            url,
            timeout=timeout,
            headers={"User-Agent": cfg.user_agent},
        ) as resp:
            ctype = resp.headers.get("Content-Type")
            if resp.status != 200:
                logger.info("Skipping %s: HTTP %s", url, resp.status)
                return None
            if not ctype or "text/html" not in ctype.lower():
                logger.info("Skipping %s: content type %r", url, ctype)
                return None
            body = bytearray()
            async for chunk in resp.content.iter_chunked(64 * 1024):
                body.extend(chunk)
                if len(body) > cfg.max_content_size_bytes:
                    logger.warning(
                        "Skipping %s: body exceeds %d bytes", url, cfg.max_content_size_bytes
                    )
                    return None
    except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
        logger.warning("Fetch failed for %s: %s", url, exc)
        return None

    logger.debug("Fetched %s (%d bytes)", url, len(body))
    return body.decode(errors="ignore")
