import time
import traceback
from typing import Any, List, Optional

import requests
from tqdm import tqdm

from google_image_scraper.data_model import AcquiredItem, RunOutcome, ScrapeConfig
from google_image_scraper.downloader import Downloader
from google_image_scraper.errors import FetchError, InvalidInput
from google_image_scraper.scraper import MAX_RESULTS, PAGE_SIZE, GoogleImageScraper

EMOJI_CHECK = "✅"
EMOJI_ERROR = "❌"
EMOJI_INFO = "ℹ️"


def delay(seconds: float):
    if seconds and seconds > 0:
        time.sleep(seconds)


def validate_query(query: Any) -> str:
    if not isinstance(query, str) or not query.strip():
        raise InvalidInput("Search query must be a non-empty string.")
    return query


def validate_limit(limit: Any) -> int:
    """Accepts a positive int, or a string holding one (as typed at a prompt)."""
    if isinstance(limit, bool):
        raise InvalidInput(f"Invalid limit: {limit!r}")
    if isinstance(limit, str):
        try:
            limit = int(limit.strip(), 10)
        except ValueError:
            raise InvalidInput(f"Limit must be a number, got {limit!r}") from None
    if not isinstance(limit, int):
        raise InvalidInput(f"Limit must be an integer, got {limit!r}")
    if limit <= 0:
        raise InvalidInput(f"Limit must be positive, got {limit}")
    return limit


def collect(query: str, limit: Any, destination_dir: str, inter_item_delay: float,
            session: Optional[requests.Session] = None, show_progress=True, debug=False) -> List[AcquiredItem]:
    """Pages through search results downloading images until `limit` succeed.

    Offsets run 0, 100, 200, ... below MAX_RESULTS. A failed page fetch raises
    FetchError carrying whatever was acquired so far; a failed image is skipped.
    """
    query = validate_query(query)
    limit = validate_limit(limit)

    owns_session = session is None
    if owns_session:
        session = requests.Session()
    scraper = GoogleImageScraper(session=session, debug=debug)
    downloader = Downloader(destination_dir, session=session, debug=debug)

    acquired: List[AcquiredItem] = []
    offset = 0
    progress_bar = tqdm(total=limit, unit="img", disable=not show_progress)
    try:
        while offset < MAX_RESULTS and len(acquired) < limit:
            try:
                refs = scraper.get_image_refs(query, offset)
            except FetchError as e:
                e.acquired = list(acquired)
                raise

            for position, reference in enumerate(refs):
                if len(acquired) >= limit:
                    break

                index = offset + position + 1
                file_path = downloader.path_for(query, index)
                result = downloader.download(reference, file_path)
                if result.ok:
                    acquired.append(AcquiredItem(path=result.path, reference=reference, index=index))
                    progress_bar.update(1)

                delay(inter_item_delay)

            offset += PAGE_SIZE
    finally:
        progress_bar.close()
        if owns_session:
            session.close()

    return acquired


def scrape_images(config: ScrapeConfig, session: Optional[requests.Session] = None) -> RunOutcome:
    """Runs `collect` for a config and reports the result on the console.

    Errors never escape: the outcome is empty on failure, or holds the
    partial items when a page fetch aborted the run and keep_partial is set.
    """
    try:
        items = collect(
            config.query,
            config.limit,
            config.output_dir,
            config.delay,
            session=session,
            show_progress=config.show_progress,
            debug=config.debug,
        )
    except FetchError as e:
        print(f"{EMOJI_ERROR} An error occurred: {e}")
        traceback.print_exc()
        if config.keep_partial and e.acquired:
            print(f"{EMOJI_INFO} Keeping {len(e.acquired)} images downloaded before the failure in {config.output_dir}")
            return RunOutcome(items=e.acquired, error=str(e))
        return RunOutcome(error=str(e))
    except (InvalidInput, OSError) as e:
        print(f"{EMOJI_ERROR} An error occurred: {e}")
        traceback.print_exc()
        return RunOutcome(error=str(e))

    print(f"{EMOJI_INFO} Scraped {len(items)} images and saved them to {config.output_dir}")
    return RunOutcome(items=items)
