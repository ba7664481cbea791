import hmac
from typing import Any

import structlog
from fastapi import Request
from fastapi.responses import PlainTextResponse

from app.config import Settings

log = structlog.get_logger()


class InvalidClientSecret(Exception):
    pass


def verify_client_secret(body: Any, settings: Settings) -> None:
    """Raise InvalidClientSecret unless body["client_secret"] equals the configured secret."""
    expected = settings.genai_client_secret
    if not expected:
        log.warning("client_secret_not_configured")
        raise InvalidClientSecret()

    provided = body.get("client_secret") if isinstance(body, dict) else None
    if not isinstance(provided, str) or not hmac.compare_digest(
        provided.encode(), expected.encode()
    ):
        raise InvalidClientSecret()


async def invalid_client_secret_handler(request: Request, exc: InvalidClientSecret) -> PlainTextResponse:
    log.info("client_secret_rejected", path=request.url.path)
    return PlainTextResponse("Forbidden: Invalid client secret", status_code=403)
