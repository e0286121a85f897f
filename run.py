"""Unified entry point for the CI/CD Demo API.

This script launches the API server.  It is intended to be executed
from the project root, for example in a Docker image or a pipeline
job, where you only specify a single Python file to run.

Configuration (PORT, APP_VERSION, BUILD_TIME, GIT_COMMIT, NODE_ENV,
LOG_LEVEL) can be placed in a `.env` file in the same directory.

Usage:
    python run.py
"""

from cicd_demo_api.__main__ import main


if __name__ == "__main__":
    main()
