from google_image_scraper.collector import collect, scrape_images
from google_image_scraper.data_model import AcquiredItem, DownloadResult, RunOutcome, ScrapeConfig
from google_image_scraper.errors import FetchError, InvalidInput, ScraperError

__all__ = [
    "collect",
    "scrape_images",
    "AcquiredItem",
    "DownloadResult",
    "RunOutcome",
    "ScrapeConfig",
    "FetchError",
    "InvalidInput",
    "ScraperError",
]
