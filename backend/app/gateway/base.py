from abc import ABC, abstractmethod
from typing import Any


class UpstreamError(Exception):
    """The model provider did not return a usable response."""


class UpstreamTransportError(UpstreamError):
    def __init__(self, status_code: int | None, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API request failed with status {status_code}: {body}")


class UpstreamResponseError(UpstreamError):
    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Vertex AI API error: {message}")


class ModelGateway(ABC):
    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Send `prompt` as a single user turn and return the first candidate's text."""
        raise NotImplementedError

    async def aclose(self) -> None:
        return None


def build_request_body(prompt: str) -> dict[str, Any]:
    return {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}


def extract_text(envelope: Any) -> str:
    """
    Return candidates[0].content.parts[0].text from a generateContent response.

    Any missing segment yields "" instead of an error.
    """
    try:
        text = envelope["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return ""
    return text if isinstance(text, str) else ""
