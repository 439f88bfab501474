"""Analysis pipeline: scrape -> build prompt -> structured generation -> AnalysisData.

Scrape and generation run sequentially because the prompt depends on the
scraped content. Any failure aborts the whole analysis; nothing partial is
returned.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Protocol

import output_schema
from errors import AnalysisFailed, SchemaMismatch
from models import AnalysisData, ScrapeResult

logger = logging.getLogger(__name__)

CONTENT_PREVIEW_CHARS = 2000
NO_TITLE = "No title found"
NO_DESCRIPTION = "No description found"

PROMPT_TEMPLATE = """Analyze this website for SEO optimization. Provide a comprehensive analysis including:

Website: {url}
Title: {title}
Description: {description}
Content preview: {content_preview}...

Please provide the analysis with the following structure:
{{
  "overallScore": number (0-100),
  "titleAnalysis": {{
    "score": number (0-100),
    "length": number,
    "issues": string[],
    "suggestions": string[]
  }},
  "metaDescription": {{
    "score": number (0-100),
    "length": number,
    "exists": boolean,
    "suggestions": string[]
  }},
  "contentAnalysis": {{
    "score": number (0-100),
    "wordCount": number,
    "readabilityScore": number,
    "headingStructure": object,
    "suggestions": string[]
  }},
  "keywordAnalysis": {{
    "score": number (0-100),
    "extractedKeywords": string[],
    "suggestedKeywords": string[],
    "keywordDensity": object
  }},
  "technicalSEO": {{
    "score": number (0-100),
    "issues": string[],
    "improvements": string[]
  }},
  "actionableInsights": string[],
  "priorityActions": string[]
}}

List priorityActions from most to least important."""


class Scraper(Protocol):
    def scrape(self, url: str) -> ScrapeResult: ...


class StructuredGenerator(Protocol):
    def generate_structured(self, prompt: str, schema: dict) -> dict: ...


def extract_content(scraped: ScrapeResult) -> str:
    """Markdown when present and non-empty, else extract.text, else ''."""
    markdown = scraped.get("markdown")
    if markdown:
        return markdown
    extract = scraped.get("extract") or {}
    return extract.get("text") or ""


def extract_metadata(scraped: ScrapeResult) -> dict:
    metadata = scraped.get("metadata")
    return metadata if isinstance(metadata, dict) else {}


def build_prompt(url: str, metadata: dict, content: str) -> str:
    return PROMPT_TEMPLATE.format(
        url=url,
        title=metadata.get("title") or NO_TITLE,
        description=metadata.get("description") or NO_DESCRIPTION,
        content_preview=content[:CONTENT_PREVIEW_CHARS],
    )


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def analyze(
    url: str,
    scraper: Scraper,
    generator: StructuredGenerator,
    clock: Callable[[], datetime] = _utc_now,
) -> AnalysisData:
    """
    Run the full pipeline for an already validated URL.
    Raises AnalysisFailed (chained to the original error) on any failure.
    """
    logger.info("Analysis started for %s", url)
    try:
        scraped = scraper.scrape(url)
        metadata = extract_metadata(scraped)
        prompt = build_prompt(url, metadata, extract_content(scraped))

        seo_analysis = generator.generate_structured(prompt, output_schema.SEO_ANALYSIS_SCHEMA.to_json_schema())
        errors = output_schema.validate(seo_analysis)
        if errors:
            raise SchemaMismatch(errors)
    except Exception as exc:
        logger.exception("Analysis failed for %s", url)
        raise AnalysisFailed() from exc

    data: AnalysisData = {
        "url": url,
        "timestamp": clock().isoformat(),
        "metadata": metadata,
        "scrapeData": dict(scraped),
        "seoAnalysis": seo_analysis,
    }
    logger.info("Analysis complete for %s (overallScore=%s)", url, seo_analysis.get("overallScore"))
    return data
