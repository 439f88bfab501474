"""Report rendering: project an AnalysisData record into dashboard views.

Pure functions only. Every 0-100 score is banded the same way:
>= 80 good, 60-79 warning, < 60 poor.
"""

from models import AnalysisData
from schemas import (
    ContentTab,
    KeywordsTab,
    MetaDescriptionView,
    NumberedItem,
    OverviewTab,
    ReportHeader,
    ReportTabs,
    ReportView,
    ScoreCard,
    ScoreView,
    SEOAnalysis,
    TechnicalTab,
    TitleMetaTab,
    TitleTagView,
)

BAND_GOOD = "good"
BAND_WARNING = "warning"
BAND_POOR = "poor"

GOOD_THRESHOLD = 80
WARNING_THRESHOLD = 60

TEXT_COLORS = {
    BAND_GOOD: "text-green-600",
    BAND_WARNING: "text-yellow-600",
    BAND_POOR: "text-red-600",
}
BG_COLORS = {
    BAND_GOOD: "bg-green-100",
    BAND_WARNING: "bg-yellow-100",
    BAND_POOR: "bg-red-100",
}

TAB_NAMES = ("overview", "title", "content", "keywords", "technical")
DEFAULT_PAGE_TITLE = "Website Analysis"


def score_band(score: float) -> str:
    if score >= GOOD_THRESHOLD:
        return BAND_GOOD
    if score >= WARNING_THRESHOLD:
        return BAND_WARNING
    return BAND_POOR


def score_text_color(score: float) -> str:
    return TEXT_COLORS[score_band(score)]


def score_bg_color(score: float) -> str:
    return BG_COLORS[score_band(score)]


def _fmt(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def score_view(score: float) -> ScoreView:
    band = score_band(score)
    return ScoreView(
        value=score,
        label=f"{_fmt(score)}/100",
        band=band,
        text_color=TEXT_COLORS[band],
        bg_color=BG_COLORS[band],
    )


def numbered(items: list[str]) -> list[NumberedItem]:
    """Keep array order; positions are 1-indexed."""
    return [NumberedItem(position=index, text=text) for index, text in enumerate(items, start=1)]


def _score_card(title: str, icon: str, score: float) -> ScoreCard:
    return ScoreCard(
        title=title,
        icon=icon,
        score=score_view(score),
        progress=max(0.0, min(100.0, float(score))),
    )


def render_overview(analysis: SEOAnalysis) -> OverviewTab:
    return OverviewTab(
        cards=[
            _score_card("Title SEO", "file-text", analysis.titleAnalysis.score),
            _score_card("Meta Description", "tag", analysis.metaDescription.score),
            _score_card("Content Quality", "trending-up", analysis.contentAnalysis.score),
            _score_card("Technical SEO", "settings", analysis.technicalSEO.score),
        ],
        insights=numbered(analysis.actionableInsights),
    )


def render_title_meta(analysis: SEOAnalysis) -> TitleMetaTab:
    title = analysis.titleAnalysis
    meta = analysis.metaDescription
    return TitleMetaTab(
        title_tag=TitleTagView(
            score=score_view(title.score),
            length=f"{_fmt(title.length)} characters",
            issues=list(title.issues),
            suggestions=list(title.suggestions),
        ),
        meta_description=MetaDescriptionView(
            score=score_view(meta.score),
            length=f"{_fmt(meta.length)} characters",
            exists=meta.exists,
            exists_label="Yes" if meta.exists else "No",
            suggestions=list(meta.suggestions),
        ),
    )


def render_content(analysis: SEOAnalysis) -> ContentTab:
    content = analysis.contentAnalysis
    return ContentTab(
        score=score_view(content.score),
        word_count=f"{_fmt(content.wordCount)} words",
        readability_score=content.readabilityScore,
        heading_structure=dict(content.headingStructure),
        improvements=list(content.suggestions),
    )


def render_keywords(analysis: SEOAnalysis) -> KeywordsTab:
    keywords = analysis.keywordAnalysis
    return KeywordsTab(
        score=score_view(keywords.score),
        extracted=list(keywords.extractedKeywords),
        suggested=list(keywords.suggestedKeywords),
        density=dict(keywords.keywordDensity),
    )


def render_technical(analysis: SEOAnalysis) -> TechnicalTab:
    technical = analysis.technicalSEO
    return TechnicalTab(
        score=score_view(technical.score),
        issues=list(technical.issues),
        improvements=list(technical.improvements),
    )


def render_report(data: AnalysisData) -> ReportView:
    analysis = SEOAnalysis.model_validate(data["seoAnalysis"])
    metadata = data.get("metadata") or {}
    page_title = metadata.get("title")

    return ReportView(
        header=ReportHeader(
            url=data["url"],
            title=page_title if isinstance(page_title, str) and page_title else DEFAULT_PAGE_TITLE,
            timestamp=data["timestamp"],
            overall=score_view(analysis.overallScore),
        ),
        priority_actions=numbered(analysis.priorityActions),
        tabs=ReportTabs(
            overview=render_overview(analysis),
            title=render_title_meta(analysis),
            content=render_content(analysis),
            keywords=render_keywords(analysis),
            technical=render_technical(analysis),
        ),
    )
