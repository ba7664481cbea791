from functools import lru_cache

import structlog

from app.gateway.base import ModelGateway
from app.gateway.factory import get_gateway
from app.models.summary_models import (
    DashboardSummaryRequest,
    QuerySuggestionsRequest,
    QuerySummaryRequest,
)
from .prompts import (
    render_dashboard_summary_prompt,
    render_query_suggestions_prompt,
    render_query_summary_prompt,
)

log = structlog.get_logger()


class SummaryService:
    """Renders a prompt per request type and relays the model's text unchanged."""

    def __init__(self, gateway: ModelGateway):
        self.gateway = gateway

    async def summarize_query(self, request: QuerySummaryRequest) -> str:
        prompt = render_query_summary_prompt(
            request.query,
            request.description,
            request.next_steps_instructions,
        )
        log.info("query_summary_prompt", title=request.query.title, prompt_chars=len(prompt))
        return await self.gateway.generate(prompt)

    async def summarize_dashboard(self, request: DashboardSummaryRequest) -> str:
        prompt = render_dashboard_summary_prompt(
            request.query_summaries,
            request.next_steps_instructions,
        )
        log.info(
            "dashboard_summary_prompt",
            query_count=len(request.query_summaries),
            prompt_chars=len(prompt),
        )
        return await self.gateway.generate(prompt)

    async def suggest_queries(self, request: QuerySuggestionsRequest) -> str:
        prompt = render_query_suggestions_prompt(
            request.query_results,
            request.query_summaries,
            request.next_steps_instructions,
        )
        log.info("query_suggestions_prompt", prompt_chars=len(prompt))
        return await self.gateway.generate(prompt)


@lru_cache(maxsize=1)
def get_summary_service() -> SummaryService:
    return SummaryService(get_gateway())
