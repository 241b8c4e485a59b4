import uvicorn

from .core.config import Settings
from .main import create_app


def main() -> None:
    settings = Settings()
    app = create_app(settings)
    # uvicorn exits non-zero when the port cannot be bound or startup fails
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
