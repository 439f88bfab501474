"""
Pytest Configuration and Shared Fixtures

Provides sample payloads and fake collaborators for all test modules.
"""

import copy
from typing import Any, Dict
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from errors import AuthUnresolved
from main import create_app


# ============================================================================
# Sample Data Fixtures
# ============================================================================

SAMPLE_SEO_ANALYSIS: Dict[str, Any] = {
    "overallScore": 72,
    "titleAnalysis": {
        "score": 80,
        "length": 42,
        "issues": ["Title does not include primary keyword"],
        "suggestions": ["Add the brand name at the end of the title"],
    },
    "metaDescription": {
        "score": 55,
        "length": 0,
        "exists": False,
        "suggestions": ["Write a 150-160 character meta description"],
    },
    "contentAnalysis": {
        "score": 79,
        "wordCount": 640,
        "readabilityScore": 63.5,
        "headingStructure": {"h1": 1, "h2": 4},
        "suggestions": ["Add an FAQ section"],
    },
    "keywordAnalysis": {
        "score": 60,
        "extractedKeywords": ["seo", "analysis"],
        "suggestedKeywords": ["seo audit tool"],
        "keywordDensity": {"seo": 2.1},
    },
    "technicalSEO": {
        "score": 59,
        "issues": ["Missing canonical tag"],
        "improvements": ["Add a canonical link element"],
    },
    "actionableInsights": ["Improve internal linking", "Compress hero image"],
    "priorityActions": ["Add meta description", "Fix canonical tag", "Expand content"],
}

SAMPLE_IDENTITY = {"id": "user_1", "email": "ana@example.com", "displayName": "Ana"}


@pytest.fixture
def seo_analysis() -> Dict[str, Any]:
    return copy.deepcopy(SAMPLE_SEO_ANALYSIS)


@pytest.fixture
def scrape_result() -> Dict[str, Any]:
    return {
        "markdown": "Hello world",
        "metadata": {"title": "T", "description": "A test page"},
    }


@pytest.fixture
def analysis_data(seo_analysis) -> Dict[str, Any]:
    return {
        "url": "https://example.com",
        "timestamp": "2026-01-01T00:00:00+00:00",
        "metadata": {"title": "Example Domain"},
        "scrapeData": {"markdown": "Example"},
        "seoAnalysis": seo_analysis,
    }


# ============================================================================
# Fake Collaborators
# ============================================================================

@pytest.fixture
def scraper(scrape_result) -> MagicMock:
    fake = MagicMock()
    fake.scrape.return_value = scrape_result
    return fake


@pytest.fixture
def generator(seo_analysis) -> MagicMock:
    fake = MagicMock()
    fake.generate_structured.return_value = seo_analysis
    return fake


@pytest.fixture
def identity_client() -> MagicMock:
    fake = MagicMock()
    fake.resolve_identity.return_value = dict(SAMPLE_IDENTITY)
    return fake


@pytest.fixture
def failing_identity_client() -> MagicMock:
    fake = MagicMock()
    fake.resolve_identity.side_effect = AuthUnresolved("not signed in")
    return fake


# ============================================================================
# API Client
# ============================================================================

@pytest.fixture
def app(identity_client, scraper, generator):
    return create_app(identity_client=identity_client, scraper=scraper, generator=generator)


@pytest.fixture
def client(app):
    # Entering the context runs the startup handler (identity resolution).
    with TestClient(app) as test_client:
        yield test_client
