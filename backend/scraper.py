"""Scrape client: hand a URL to the external scraping service.

The service (Firecrawl v1 compatible) does the fetching, rendering and content
extraction. This module only sends the request and normalizes the reply into
the ScrapeResult shape: markdown, extract.text and metadata.
"""

import logging
import os
from pathlib import Path

import requests
from dotenv import load_dotenv

from errors import ScrapeError
from models import ScrapeResult

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")

logger = logging.getLogger(__name__)

SCRAPE_API_URL = os.getenv("SCRAPE_API_URL", "https://api.firecrawl.dev/v1").rstrip("/")
SCRAPE_API_KEY = os.getenv("SCRAPE_API_KEY", "").strip()
SCRAPE_TIMEOUT_SECONDS = float(os.getenv("SCRAPE_TIMEOUT_SECONDS", "60"))

_REQUEST_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class ScrapeClient:
    """
    Thin client for the scraping API.

    Usage:
        client = ScrapeClient(api_key="...")
        result = client.scrape("https://example.com")
        # {"markdown": "...", "metadata": {"title": "...", "description": "..."}}
    """

    def __init__(
        self,
        api_key: str = SCRAPE_API_KEY,
        base_url: str = SCRAPE_API_URL,
        timeout: float = SCRAPE_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def scrape(self, url: str) -> ScrapeResult:
        """Scrape `url`. Raises ScrapeError on any transport or service failure."""
        if not self.api_key:
            raise ScrapeError("SCRAPE_API_KEY is not configured.")

        payload = {
            "url": url,
            "formats": ["markdown"],
            "onlyMainContent": True,
        }
        headers = dict(_REQUEST_HEADERS)
        headers["Authorization"] = f"Bearer {self.api_key}"

        try:
            response = self._session.post(
                f"{self.base_url}/scrape",
                json=payload,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise ScrapeError(f"Scrape request failed: {exc}") from exc

        if response.status_code >= 400:
            raise ScrapeError(
                f"Scrape service returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise ScrapeError("Scrape service returned invalid JSON", status_code=response.status_code) from exc

        if not isinstance(body, dict) or body.get("success") is False:
            message = body.get("error") if isinstance(body, dict) else None
            raise ScrapeError(f"Scrape failed: {message or 'unknown error'}", status_code=response.status_code)

        result = normalize_scrape_payload(body.get("data", body))
        logger.info(
            "Scraped %s (markdown=%d chars, metadata keys=%d)",
            url,
            len(result.get("markdown", "")),
            len(result.get("metadata", {})),
        )
        return result


def normalize_scrape_payload(data: object) -> ScrapeResult:
    """
    Sanitize the markdown/extract/metadata fields of a raw service payload.

    Every other field (html, links, screenshot, ...) is passed through untouched.
    """
    if not isinstance(data, dict):
        raise ScrapeError("Scrape service returned no data")

    result: ScrapeResult = {
        key: value for key, value in data.items() if key not in ("markdown", "extract", "metadata")
    }

    markdown = data.get("markdown")
    if isinstance(markdown, str):
        result["markdown"] = markdown

    extract = data.get("extract")
    if isinstance(extract, dict) and isinstance(extract.get("text"), str):
        result["extract"] = {"text": extract["text"]}

    metadata = data.get("metadata")
    if isinstance(metadata, dict):
        result["metadata"] = metadata

    return result
