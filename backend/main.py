"""SEO AI Pro API – FastAPI app serving the analysis dashboard."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from ai_service import ClaudeStructuredGenerator
from analysis import Scraper, StructuredGenerator, analyze
from dashboard import TAB_NAMES, render_report
from errors import AnalysisFailed, AnalysisInFlight, AuthUnresolved, InvalidURL, ResultPending
from identity import IdentityClient, avatar_initial, greeting_name
from schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    LoadingResponse,
    Notice,
    ReportView,
    ScreenResponse,
    SessionResponse,
    UserResponse,
)
from scraper import ScrapeClient
from state import AppState
from validation import normalize_and_validate

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

ANALYSIS_COMPLETE = "Analysis complete!"


def _state(request: Request) -> AppState:
    return request.app.state.seo


def _require_ready(request: Request) -> AppState:
    """Every screen but the loading one needs a resolved identity."""
    state = _state(request)
    if not state.ready:
        raise HTTPException(status_code=503, detail=LoadingResponse().model_dump())
    return state


def _screen_response(state: AppState) -> ScreenResponse:
    identity = state.identity
    return ScreenResponse(
        screen=state.screen,
        analyzing=state.analyzing,
        greeting=f"Welcome, {greeting_name(identity)}",
        initial=avatar_initial(identity),
    )


def _error_detail(message: str, **extra: str) -> dict:
    detail = Notice(level="error", message=message).model_dump()
    detail.update(extra)
    return detail


def create_app(
    identity_client: IdentityClient | None = None,
    scraper: Scraper | None = None,
    generator: StructuredGenerator | None = None,
) -> FastAPI:
    app = FastAPI(
        title="SEO AI Pro API",
        description="AI-Powered SEO Analysis",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.seo = AppState()
    app.state.identity_client = identity_client or IdentityClient()
    app.state.scraper = scraper or ScrapeClient()
    app.state.generator = generator or ClaudeStructuredGenerator()

    @app.on_event("startup")
    def startup() -> None:
        """Resolve the current user once. On failure the app stays on the loading screen."""
        try:
            identity = app.state.identity_client.resolve_identity()
        except AuthUnresolved as exc:
            logger.error("Auth error: %s", exc)
            return
        app.state.seo.mark_ready(identity)
        logger.info("Identity resolved for %s", identity["email"])

    @app.get("/health")
    def health() -> dict:
        """Health check for deployment."""
        return {"status": "ok"}

    @app.get("/session", response_model=SessionResponse)
    def session(request: Request) -> SessionResponse:
        state = _state(request)
        identity = state.identity
        if identity is None:
            return SessionResponse(status="loading")
        return SessionResponse(
            status="ready",
            user=UserResponse(
                id=identity["id"],
                email=identity["email"],
                display_name=identity.get("displayName"),
            ),
            greeting=f"Welcome, {greeting_name(identity)}",
            initial=avatar_initial(identity),
        )

    @app.get("/screen", response_model=ScreenResponse)
    def screen(request: Request) -> ScreenResponse:
        return _screen_response(_require_ready(request))

    @app.post("/analyze", response_model=AnalyzeResponse)
    def analyze_website(body: AnalyzeRequest, request: Request) -> AnalyzeResponse:
        """
        Pipeline: validate URL -> scrape -> structured AI analysis -> publish.
        """
        state = _require_ready(request)

        try:
            url = normalize_and_validate(body.url)
        except InvalidURL as exc:
            raise HTTPException(status_code=400, detail=_error_detail(exc.notice, reason=exc.reason))

        try:
            token = state.begin_analysis()
        except (AnalysisInFlight, ResultPending) as exc:
            raise HTTPException(status_code=409, detail=_error_detail(str(exc)))

        try:
            data = analyze(url, request.app.state.scraper, request.app.state.generator)
        except AnalysisFailed as exc:
            state.finish(token)
            raise HTTPException(status_code=502, detail=_error_detail(str(exc)))

        if not state.publish(token, data):
            raise HTTPException(status_code=409, detail=_error_detail("Analysis was discarded."))

        return AnalyzeResponse(
            notice=Notice(level="success", message=ANALYSIS_COMPLETE),
            report=render_report(data),
        )

    @app.get("/report", response_model=ReportView)
    def get_report(request: Request) -> ReportView:
        """Return the full dashboard view for the current analysis."""
        state = _require_ready(request)
        data = state.current
        if data is None:
            raise HTTPException(status_code=404, detail="No analysis available")
        return render_report(data)

    @app.get("/report/{tab}")
    def get_report_tab(tab: str, request: Request) -> dict:
        """Return a single dashboard tab."""
        state = _require_ready(request)
        if tab not in TAB_NAMES:
            raise HTTPException(status_code=404, detail="Unknown tab")
        data = state.current
        if data is None:
            raise HTTPException(status_code=404, detail="No analysis available")
        return getattr(render_report(data).tabs, tab).model_dump()

    @app.post("/analysis/reset", response_model=ScreenResponse)
    def reset_analysis(request: Request) -> ScreenResponse:
        """Discard the current result and go back to the input screen."""
        state = _require_ready(request)
        state.reset()
        return _screen_response(state)

    return app


app = create_app()
