import asyncio

import google.auth
import google.auth.transport.requests
import structlog

from app.config import CLOUD_PLATFORM_SCOPE

log = structlog.get_logger()


class GoogleCredentialProvider:
    """Fetches a fresh Application Default Credentials access token on every call."""

    def __init__(self, scopes: list[str] | None = None):
        self.scopes = scopes or [CLOUD_PLATFORM_SCOPE]

    def _fetch_token(self) -> str:
        creds, _ = google.auth.default(scopes=self.scopes)
        creds.refresh(google.auth.transport.requests.Request())
        return creds.token

    async def get_access_token(self) -> str:
        try:
            return await asyncio.to_thread(self._fetch_token)
        except Exception:
            log.error("access_token_fetch_failed", scopes=self.scopes)
            raise
