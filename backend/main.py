"""Entry point for running the FastAPI application."""

import uvicorn
from dotenv import load_dotenv

load_dotenv()

from backend.src.services.config import get_config


def main() -> None:
    # Bind to loopback by default; the desktop front-end is the only client.
    # Can be overridden: ANDROMEDA_PORT=8010 andromeda-backend
    config = get_config()
    uvicorn.run(
        "backend.src.api.main:app",
        host=config.host,
        port=config.port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
