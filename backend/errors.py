"""Exception taxonomy shared by the orchestration and API layers."""


class SEOAppError(Exception):
    """Base class for errors raised by the application."""


class AuthUnresolved(SEOAppError):
    """The identity provider did not return a usable identity."""


class InvalidURL(SEOAppError):
    """User-supplied URL was rejected before any external call."""

    EMPTY_INPUT = "EMPTY_INPUT"
    BAD_SCHEME = "BAD_SCHEME"

    NOTICES = {
        EMPTY_INPUT: "Please enter a URL",
        BAD_SCHEME: "Please enter a valid URL",
    }

    def __init__(self, reason: str):
        super().__init__(self.NOTICES[reason])
        self.reason = reason

    @property
    def notice(self) -> str:
        return self.NOTICES[self.reason]


class ScrapeError(SEOAppError):
    """The scraping service rejected the request or returned an unusable payload."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class GenerationError(SEOAppError):
    """The structured-generation call failed or returned no object."""


class SchemaMismatch(SEOAppError):
    """A generated object does not match the expected output schema."""

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors) or "Schema mismatch")
        self.errors = errors


class AnalysisFailed(SEOAppError):
    """Any failure inside the scrape -> generate pipeline."""

    NOTICE = "Analysis failed. Please try again."

    def __init__(self, message: str = NOTICE):
        super().__init__(message)


class AnalysisInFlight(SEOAppError):
    """A second analysis was submitted while one is still running."""


class ResultPending(SEOAppError):
    """A new analysis was submitted while a report is still shown."""
