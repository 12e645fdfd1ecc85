from __future__ import annotations


class InvalidURL(ValueError):
    """Raised when a string cannot be turned into a canonical URL."""

    def __init__(self, raw: str = "") -> None:
        super().__init__("Invalid URL")
        self.raw = raw
