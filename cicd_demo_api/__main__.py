"""Serve the CI/CD Demo API with uvicorn.

Configuration such as PORT, APP_VERSION, BUILD_TIME, GIT_COMMIT and
NODE_ENV may be placed in a ``.env`` file in the working directory.
It is loaded before the application module is imported, because the
application reads its settings at import time.

Usage:
    python -m cicd_demo_api
"""

import asyncio
from typing import Optional

from dotenv import find_dotenv, load_dotenv


def load_environment(path: Optional[str] = None) -> bool:
    """Load ``path`` or the nearest ``.env`` above the working directory.

    Variables already set in the environment win over the file.
    """
    return load_dotenv(path or find_dotenv(usecwd=True))


load_environment()

from uvicorn import Config, Server  # noqa: E402

from cicd_demo_api.app.main import app  # noqa: E402


async def serve() -> None:
    """Start the API using Uvicorn on the configured host and port."""
    settings = app.state.settings
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(serve())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
