from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

CLOUD_PLATFORM_SCOPE = "https://www.googleapis.com/auth/cloud-platform"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        frozen=True,
        protected_namespaces=(),
    )

    # Shared secret the Looker extension sends as client_secret
    genai_client_secret: str = ""

    # Vertex AI
    project: str = ""
    region: str = "us-central1"
    model_id: str = "gemini-2.0-flash"
    genai_backend: Literal["rest", "sdk"] = "rest"
    model_timeout_seconds: float | None = None

    # App
    port: int = 5000
    allowed_origins: str = "*"
    log_level: str = "INFO"

    @property
    def generate_content_url(self) -> str:
        return (
            f"https://{self.region}-aiplatform.googleapis.com/v1/projects/{self.project}"
            f"/locations/{self.region}/publishers/google/models/{self.model_id}:generateContent"
        )

    @property
    def origins_list(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",")]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
