"""Data models and types used across the backend.

Payloads exchanged with external collaborators live here as TypedDicts.
API and report models are pydantic and live in schemas.py.
"""

from typing import Any, NotRequired, TypedDict


class Identity(TypedDict):
    """Current user as returned by the identity provider."""

    id: str
    email: str
    displayName: NotRequired[str | None]


class ScrapeExtract(TypedDict, total=False):
    text: str


class ScrapeResult(TypedDict, total=False):
    """Output of the scraping service.

    Only the keys below are read; any other raw service fields ride along
    unchanged and end up in AnalysisData.scrapeData.
    """

    markdown: str
    extract: ScrapeExtract
    metadata: dict[str, Any]


class AnalysisData(TypedDict):
    """The single result record published after a successful analysis."""

    url: str
    timestamp: str
    metadata: dict[str, Any]
    scrapeData: dict[str, Any]
    seoAnalysis: dict[str, Any]
