"""Pydantic schemas for API request/response and report views."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AnalyzeRequest(BaseModel):
    """Request body for POST /analyze."""

    url: str = ""

    @field_validator("url", mode="before")
    @classmethod
    def normalize_text_fields(cls, value: object) -> str:
        return str(value or "")


class Notice(BaseModel):
    """Transient user-facing message (toast)."""

    level: str
    message: str


class UserResponse(BaseModel):
    id: str
    email: str
    display_name: str | None = None


class SessionResponse(BaseModel):
    """Response for GET /session."""

    status: str
    user: UserResponse | None = None
    greeting: str | None = None
    initial: str | None = None


class LoadingResponse(BaseModel):
    screen: str = "loading"
    title: str = "Loading SEO AI Pro..."
    message: str = "Preparing your intelligent SEO analysis tools"


class ScreenResponse(BaseModel):
    """Response for GET /screen and POST /analysis/reset."""

    screen: str
    analyzing: bool
    greeting: str
    initial: str


# --- SEO analysis as returned by the AI service ---
# Field names mirror output_schema.SEO_ANALYSIS_SCHEMA. That tree requires every
# field and is checked before publishing; the defaults here only matter for
# records that never went through that check.


class _Section(BaseModel):
    model_config = ConfigDict(extra="allow")


class TitleAnalysis(_Section):
    score: float = 0
    length: float = 0
    issues: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)


class MetaDescriptionAnalysis(_Section):
    score: float = 0
    length: float = 0
    exists: bool = False
    suggestions: list[str] = Field(default_factory=list)


class ContentAnalysis(_Section):
    score: float = 0
    wordCount: float = 0
    readabilityScore: float = 0
    headingStructure: dict[str, Any] = Field(default_factory=dict)
    suggestions: list[str] = Field(default_factory=list)


class KeywordAnalysis(_Section):
    score: float = 0
    extractedKeywords: list[str] = Field(default_factory=list)
    suggestedKeywords: list[str] = Field(default_factory=list)
    keywordDensity: dict[str, Any] = Field(default_factory=dict)


class TechnicalSEO(_Section):
    score: float = 0
    issues: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)


class SEOAnalysis(_Section):
    overallScore: float = 0
    titleAnalysis: TitleAnalysis = Field(default_factory=TitleAnalysis)
    metaDescription: MetaDescriptionAnalysis = Field(default_factory=MetaDescriptionAnalysis)
    contentAnalysis: ContentAnalysis = Field(default_factory=ContentAnalysis)
    keywordAnalysis: KeywordAnalysis = Field(default_factory=KeywordAnalysis)
    technicalSEO: TechnicalSEO = Field(default_factory=TechnicalSEO)
    actionableInsights: list[str] = Field(default_factory=list)
    priorityActions: list[str] = Field(default_factory=list)


# --- Report views ---


class ScoreView(BaseModel):
    """A 0-100 score with its band and the two colour tiers."""

    value: float
    label: str
    band: str
    text_color: str
    bg_color: str


class NumberedItem(BaseModel):
    position: int
    text: str


class ScoreCard(BaseModel):
    title: str
    icon: str
    score: ScoreView
    progress: float


class OverviewTab(BaseModel):
    cards: list[ScoreCard]
    insights: list[NumberedItem]


class TitleTagView(BaseModel):
    score: ScoreView
    length: str
    issues: list[str]
    suggestions: list[str]


class MetaDescriptionView(BaseModel):
    score: ScoreView
    length: str
    exists: bool
    exists_label: str
    suggestions: list[str]


class TitleMetaTab(BaseModel):
    title_tag: TitleTagView
    meta_description: MetaDescriptionView


class ContentTab(BaseModel):
    score: ScoreView
    word_count: str
    readability_score: float
    heading_structure: dict[str, Any]
    improvements: list[str]


class KeywordsTab(BaseModel):
    score: ScoreView
    extracted: list[str]
    suggested: list[str]
    density: dict[str, Any]


class TechnicalTab(BaseModel):
    score: ScoreView
    issues: list[str]
    improvements: list[str]


class ReportHeader(BaseModel):
    url: str
    title: str
    timestamp: str
    overall: ScoreView


class ReportTabs(BaseModel):
    overview: OverviewTab
    title: TitleMetaTab
    content: ContentTab
    keywords: KeywordsTab
    technical: TechnicalTab


class ReportView(BaseModel):
    """Everything the dashboard screen displays for one analysis."""

    header: ReportHeader
    priority_actions: list[NumberedItem]
    tabs: ReportTabs


class AnalyzeResponse(BaseModel):
    """Response for a successful POST /analyze."""

    notice: Notice
    report: ReportView
