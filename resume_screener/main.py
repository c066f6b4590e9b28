import uvicorn

from resume_screener.api.app import create_app
from resume_screener.batch.coordinator import build_coordinator
from resume_screener.config.settings import Settings
from resume_screener.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> build dependencies -> serve HTTP."""
    settings = Settings()
    Log.configure(settings.log_level)

    coordinator = build_coordinator(settings)
    app = create_app(settings, coordinator=coordinator)
    Log.info(f"Uploads directory: {coordinator.store.root.resolve()}")
    Log.info(f"Server running at http://{settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
