from contextlib import asynccontextmanager
from typing import Any

import structlog
from fastapi import Body, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.auth.client_secret import (
    InvalidClientSecret,
    invalid_client_secret_handler,
    verify_client_secret,
)
from app.config import Settings, get_settings
from app.gateway.factory import get_gateway
from app.log_config import configure_logging
from app.models.summary_models import (
    DashboardSummaryRequest,
    HealthResponse,
    QuerySuggestionsRequest,
    QuerySummaryRequest,
    SuggestionsResponse,
    SummaryResponse,
)
from app.summaries.service import SummaryService, get_summary_service
from app.validation.validators import validate_request_body

settings = get_settings()
configure_logging(settings.log_level)

log = structlog.get_logger()

INTERNAL_ERROR = "Internal Server Error"


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("startup", port=settings.port, backend=settings.genai_backend, model=settings.model_id)
    yield
    if get_gateway.cache_info().currsize:
        await get_gateway().aclose()


# ── App ───────────────────────────────────────────────────────────────────────
app = FastAPI(
    title="Looker Dashboard Summarization Backend",
    description="Prompt-building proxy between the Looker extension and Gemini on Vertex AI",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_exception_handler(InvalidClientSecret, invalid_client_secret_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins_list,
    allow_credentials=True,
    allow_methods=["POST", "GET"],
    allow_headers=["*"],
)


# ── Summarization endpoints ───────────────────────────────────────────────────

@app.post("/generateQuerySummary", response_model=SummaryResponse)
async def generate_query_summary(
    payload: Any = Body(default=None),
    config: Settings = Depends(get_settings),
    service: SummaryService = Depends(get_summary_service),
):
    """Summarize one dashboard query as a Markdown section."""
    verify_client_secret(payload, config)
    validate_request_body("generateQuerySummary", payload)
    body = QuerySummaryRequest.model_validate(payload)

    try:
        summary = await service.summarize_query(body)
    except Exception as e:
        log.exception("generate_query_summary_failed", title=body.query.title, error=str(e))
        return PlainTextResponse(INTERNAL_ERROR, status_code=500)

    return SummaryResponse(summary=summary)


@app.post("/generateSummary", response_model=SummaryResponse)
async def generate_summary(
    payload: Any = Body(default=None),
    config: Settings = Depends(get_settings),
    service: SummaryService = Depends(get_summary_service),
):
    """Combine per-query summaries into one dashboard report."""
    verify_client_secret(payload, config)
    validate_request_body("generateSummary", payload)
    body = DashboardSummaryRequest.model_validate(payload)

    try:
        summary = await service.summarize_dashboard(body)
    except Exception as e:
        log.exception("generate_summary_failed", query_count=len(body.query_summaries), error=str(e))
        return PlainTextResponse(INTERNAL_ERROR, status_code=500)

    return SummaryResponse(summary=summary)


@app.post("/generateQuerySuggestions", response_model=SuggestionsResponse)
async def generate_query_suggestions(
    payload: Any = Body(default=None),
    config: Settings = Depends(get_settings),
    service: SummaryService = Depends(get_summary_service),
):
    """Ask for three follow-up Looker queries, returned as JSON text."""
    verify_client_secret(payload, config)
    validate_request_body("generateQuerySuggestions", payload)
    body = QuerySuggestionsRequest.model_validate(payload)

    try:
        suggestions = await service.suggest_queries(body)
    except Exception as e:
        log.exception("generate_query_suggestions_failed", error=str(e))
        return PlainTextResponse(INTERNAL_ERROR, status_code=500)

    return SuggestionsResponse(suggestions=suggestions)


# ── Health ────────────────────────────────────────────────────────────────────

@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(
        status="healthy",
        service="dashboard-summarization-backend",
    )


@app.get("/")
async def root():
    return {
        "service": "dashboard-summarization backend",
        "docs": "/docs",
        "health": "/health",
        "routes": ["/generateQuerySummary", "/generateSummary", "/generateQuerySuggestions"],
    }
