from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from typing import Annotated, Any

# Looker sends null for unset optional text; it renders as empty text.
OptionalText = Annotated[str, BeforeValidator(lambda v: "" if v is None else v)]


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class QueryBody(_CamelModel):
    query_fields: str | list[str] = Field(alias="fields")


class QueryDescriptor(_CamelModel):
    title: str
    note_text: str | None = None
    query_body: QueryBody = Field(alias="queryBody")
    query_data: Any = Field(alias="queryData")


class QuerySummaryRequest(_CamelModel):
    query: QueryDescriptor
    description: OptionalText = ""
    next_steps_instructions: OptionalText = Field(default="", alias="nextStepsInstructions")


class DashboardSummaryRequest(_CamelModel):
    query_summaries: list[str] = Field(alias="querySummaries")
    next_steps_instructions: OptionalText = Field(default="", alias="nextStepsInstructions")


class QuerySuggestionsRequest(_CamelModel):
    query_results: Any = Field(alias="queryResults")
    query_summaries: Any = Field(alias="querySummaries")
    next_steps_instructions: OptionalText = Field(default="", alias="nextStepsInstructions")


class SummaryResponse(BaseModel):
    summary: str


class SuggestionsResponse(BaseModel):
    suggestions: str  # JSON array as text, passed through unparsed


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str = "1.0.0"
