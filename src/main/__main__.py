"""
Main module entry point.

Runs the API server: python -m src.main
"""

import uvicorn

from src.main.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "src.main.app:app",
        host=settings.app.host,
        port=settings.app.port,
        reload=settings.app.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
