import uvicorn

from app.config import get_settings


def run() -> None:
    """Serve the API on 0.0.0.0:$PORT (default 5000)."""
    settings = get_settings()
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
