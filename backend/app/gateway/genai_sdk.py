import structlog
from google import genai
from google.genai import errors, types

from app.config import Settings
from .base import ModelGateway, UpstreamTransportError, extract_text

log = structlog.get_logger()


def _make_client(settings: Settings) -> genai.Client:
    http_options = None
    if settings.model_timeout_seconds is not None:
        http_options = types.HttpOptions(timeout=int(settings.model_timeout_seconds * 1000))
    return genai.Client(
        vertexai=True,
        project=settings.project,
        location=settings.region,
        http_options=http_options,
    )


class GenAISdkGateway(ModelGateway):
    """google-genai client in Vertex mode; the SDK refreshes credentials itself."""

    def __init__(self, settings: Settings, client: genai.Client | None = None):
        self.settings = settings
        self.model_id = settings.model_id
        self._client = client

    @property
    def client(self) -> genai.Client:
        # Built on first use so a missing ADC setup fails the call, not startup.
        if self._client is None:
            self._client = _make_client(self.settings)
        return self._client

    async def generate(self, prompt: str) -> str:
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model_id,
                contents=[types.Content(role="user", parts=[types.Part(text=prompt)])],
            )
        except errors.APIError as e:
            log.error("genai_request_failed", status=e.code, message=e.message)
            raise UpstreamTransportError(e.code, e.message or str(e)) from e

        return extract_text(response.model_dump(exclude_none=True))
