import httpx
import structlog

from app.config import Settings
from .base import (
    ModelGateway,
    UpstreamResponseError,
    UpstreamTransportError,
    build_request_body,
    extract_text,
)
from .credentials import GoogleCredentialProvider

log = structlog.get_logger()


class VertexRestGateway(ModelGateway):
    """Calls the Vertex AI generateContent REST endpoint with a bearer token."""

    def __init__(
        self,
        settings: Settings,
        credentials: GoogleCredentialProvider | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.endpoint = settings.generate_content_url
        self.credentials = credentials or GoogleCredentialProvider()
        # timeout=None waits for the provider indefinitely
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.model_timeout_seconds),
            transport=transport,
        )

    async def generate(self, prompt: str) -> str:
        access_token = await self.credentials.get_access_token()
        response = await self.client.post(
            self.endpoint,
            headers={
                "Authorization": f"Bearer {access_token}",
                "Content-Type": "application/json",
            },
            json=build_request_body(prompt),
        )

        if not response.is_success:
            log.error("vertex_request_failed", status=response.status_code)
            raise UpstreamTransportError(response.status_code, response.text)

        data = response.json()
        if isinstance(data, dict) and data.get("error"):
            error = data["error"]
            message = error.get("message", str(error)) if isinstance(error, dict) else str(error)
            log.error("vertex_api_error", message=message)
            raise UpstreamResponseError(message)

        return extract_text(data)

    async def aclose(self) -> None:
        await self.client.aclose()
