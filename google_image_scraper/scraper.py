import time
from typing import List, Optional

import requests
from bs4 import BeautifulSoup

from google_image_scraper.errors import FetchError

SEARCH_URL = "https://www.google.com/search"
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/58.0.3029.110 Safari/537.36"
)
PAGE_SIZE = 100
MAX_RESULTS = 1000


def extract_image_refs(html: str) -> List[str]:
    """Returns the non-empty src of every <img> in document order."""
    if not html:
        return []
    soup = BeautifulSoup(html, "html.parser")
    refs = []
    for img in soup.find_all("img"):
        src = img.get("src")
        if isinstance(src, str) and src.strip():
            refs.append(src)
    return refs


class GoogleImageScraper:
    def __init__(self, session: Optional[requests.Session] = None, debug=False):
        self.debug = debug
        self.session = session if session is not None else requests.Session()

    def search_params(self, query: str, offset: int) -> dict:
        return {
            "q": query,
            "tbm": "isch",
            "tbs": "isz:lt",
            "start": offset,
        }

    def fetch_page(self, query: str, offset: int) -> str:
        params = self.search_params(query, offset)
        if self.debug:
            print(f"[DEBUG] Fetching results page at offset {offset} for '{query}'")
        start_time = time.perf_counter()
        try:
            response = self.session.get(SEARCH_URL, params=params, headers={"User-Agent": USER_AGENT})
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise FetchError(f"Failed to fetch results page at offset {offset}: {e}", offset=offset) from e
        if self.debug:
            end_time = time.perf_counter()
            print(f"[DEBUG] Page at offset {offset} took: {end_time - start_time:.2f} seconds")
        return response.text

    def get_image_refs(self, query: str, offset: int) -> List[str]:
        refs = extract_image_refs(self.fetch_page(query, offset))
        if self.debug:
            print(f"[DEBUG] Found {len(refs)} image references at offset {offset}")
        return refs
