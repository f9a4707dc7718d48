import os
from typing import Optional

import requests

from google_image_scraper.data_model import DownloadResult

CHUNK_SIZE = 8192


def image_file_name(query: str, index: int) -> str:
    name = query.replace(" ", "-").replace("/", "-")
    if os.sep != "/":
        name = name.replace(os.sep, "-")
    return f"{name}-{index}.jpg"


class Downloader:
    def __init__(self, download_directory: str, session: Optional[requests.Session] = None, debug=False):
        self.download_directory = download_directory
        self.session = session if session is not None else requests.Session()
        self.debug = debug
        os.makedirs(self.download_directory, exist_ok=True)

    def path_for(self, query: str, index: int) -> str:
        return os.path.join(self.download_directory, image_file_name(query, index))

    def download(self, reference: str, file_path: str) -> DownloadResult:
        """Streams `reference` into `file_path`, overwriting it.

        Never raises; failures come back as a DownloadResult with a reason.
        Whatever bytes arrive are written as-is.
        """
        if self.debug:
            print(f"[DEBUG] Attempting to download: {reference}")
        try:
            response = self.session.get(reference, stream=True)
        except requests.exceptions.RequestException as e:
            return self._failed(reference, f"Failed to download {reference}: {e}")

        try:
            try:
                response.raise_for_status()
            except requests.exceptions.RequestException as e:
                return self._failed(reference, f"Failed to download {reference}: {e}")

            try:
                with open(file_path, "wb") as f:
                    for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                        if chunk:
                            f.write(chunk)
            except (requests.exceptions.RequestException, OSError) as e:
                self._discard(file_path)
                return self._failed(reference, f"Failed to write {file_path}: {e}")
        finally:
            response.close()

        if self.debug:
            print(f"[DEBUG] Successfully downloaded {file_path}")
        return DownloadResult.success(file_path)

    def _failed(self, reference: str, reason: str) -> DownloadResult:
        if self.debug:
            print(f"[DEBUG] {reason}")
        return DownloadResult.failure(reason)

    def _discard(self, file_path: str):
        try:
            os.remove(file_path)
        except OSError:
            pass
