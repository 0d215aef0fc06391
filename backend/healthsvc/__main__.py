"""
Health Check Service — Command-line Entry Point
================================================

Runs the service in the foreground:

    python -m healthsvc
    healthsvc                # console script installed by pip

Bind address and port come from HOST / PORT (see config.py).
"""

import uvicorn

from healthsvc.config import settings
from healthsvc.main import setup_logging


def main() -> None:
    setup_logging()
    uvicorn.run(
        "healthsvc.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
        server_header=False,
    )


if __name__ == "__main__":
    main()
