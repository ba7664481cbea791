from functools import lru_cache

from app.config import Settings, get_settings
from .base import ModelGateway


def build_gateway(settings: Settings) -> ModelGateway:
    """Pick the gateway implementation named by GENAI_BACKEND."""
    if settings.genai_backend == "sdk":
        from .genai_sdk import GenAISdkGateway

        return GenAISdkGateway(settings)

    from .vertex_rest import VertexRestGateway

    return VertexRestGateway(settings)


@lru_cache(maxsize=1)
def get_gateway() -> ModelGateway:
    return build_gateway(get_settings())
