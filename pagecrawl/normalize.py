from __future__ import annotations

from urllib.parse import urlsplit

from .errors import InvalidURL


DEFAULT_SCHEME = "https"
DEFAULT_PORTS = {"http": 80, "https": 443}
# Code points a hostname may never contain
FORBIDDEN_HOST_CHARS = frozenset("\x00\t\n\r #%/:<>?@[\\]^|")


def _host_of(netloc: str, hostname: str | None) -> str | None:
    if not hostname:
        return None
    if "[" in netloc:
        # IPv6 literal; urlsplit already checked the brackets
        return f"[{hostname}]"
    if any(ch in FORBIDDEN_HOST_CHARS or ch.isspace() for ch in hostname):
        return None
    return hostname


def normalize_url(raw: str) -> str:
    """Return the canonical comparison key for ``raw``.

    The key is ``host[:port]path`` with the host lowercased, default ports
    dropped and trailing slashes removed. Scheme, query and fragment are
    discarded, so ``http://`` and ``https://`` forms of a page share a key.
    Bare ``host/path`` strings are treated as https.

    Raises InvalidURL for empty input or anything that does not parse.
    """
    if not raw or not raw.strip():
        raise InvalidURL(raw)
    text = raw.strip()
    if not text.startswith("http"):
        text = f"{DEFAULT_SCHEME}://{text}"

    try:
        p = urlsplit(text)
        port = p.port
    except ValueError as exc:
        raise InvalidURL(raw) from exc

    host = _host_of(p.netloc, p.hostname)
    if host is None:
        raise InvalidURL(raw)
    host = host.lower()

    netloc = host
    if port is not None and DEFAULT_PORTS.get(p.scheme.lower()) != port:
        netloc = f"{host}:{port}"

    path = p.path.rstrip("/")
    return f"{netloc}{path}"
