# tennis_league/runner.py
import uvicorn
from dotenv import load_dotenv

from .config import load_settings
from .config.loader import PROJECT_ROOT
from .main import build_app
from .utils.logger import setup_logger


def main():
    """The main entry point for running the Uvicorn server."""
    # 1. Load environment variables before any settings are read
    load_dotenv(dotenv_path=PROJECT_ROOT / ".env")

    # 2. Read configuration and set up logging
    settings = load_settings()
    setup_logger(log_level=settings.log_level, log_dir=settings.log_dir)

    # 3. Run the Uvicorn server. The reloader needs an import string, and its
    #    worker process builds the app (and its logging) through the factory.
    if settings.is_development:
        uvicorn.run(
            "tennis_league.main:build_app",
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            reload=True,
            log_config=None,
        )
    else:
        uvicorn.run(build_app(settings), host="0.0.0.0", port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
