from typing import List, Optional


class ScraperError(Exception):
    pass


class InvalidInput(ScraperError):
    """Raised before any I/O when the query or limit is unusable."""


class FetchError(ScraperError):
    """A search results page could not be fetched. Aborts the run."""

    def __init__(self, message: str, offset: Optional[int] = None, acquired: Optional[List] = None):
        super().__init__(message)
        self.offset = offset
        self.acquired = list(acquired) if acquired else []
