"""
Users API Backend — Process Entrypoint
========================================

Usage:
    python -m app                 # binds HOST:PORT (default 0.0.0.0:3000)
    PORT=8080 python -m app
"""

import uvicorn

from app.config import settings


def main() -> None:
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
