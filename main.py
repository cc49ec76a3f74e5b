"""Main entry point for the IntraCom agent bus."""

import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from intracom.api import create_fastapi_app
from intracom.app import Application
from intracom.config import DEFAULT_API_HOST, DEFAULT_API_PORT
from intracom.logging_config import setup_logging


def main():
    """Run the application."""
    load_dotenv(Path.cwd() / ".env")
    setup_logging()

    # Get configuration from environment
    api_host = os.getenv("API_HOST", DEFAULT_API_HOST)
    api_port = int(os.getenv("API_PORT", str(DEFAULT_API_PORT)))

    app = create_fastapi_app(Application())

    # Run with uvicorn
    uvicorn.run(
        app,
        host=api_host,
        port=api_port,
        log_level="info",
        log_config=None,
    )


if __name__ == "__main__":
    main()
