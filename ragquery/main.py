"""Main application entry point.

Runs FastAPI with the NiceGUI page mounted at "/".
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def run_integrated() -> None:
    """Run the NiceGUI page mounted on the FastAPI host app.

    Both the page and /health are served from the same port.
    """
    import uvicorn
    from nicegui import ui

    from ragquery.app import create_app
    from ragquery.ui.qa_page import PAGE_TITLE, qa_page  # noqa: F401 - Registers the page

    app = create_app()

    ui.run_with(app, title=PAGE_TITLE, favicon="📄")

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    logger.info(f"Q&A page available at http://localhost:{port}/")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_standalone() -> None:
    """Run the page on NiceGUI's own server (port 8080)."""
    from ragquery.ui.qa_page import main as run_page

    run_page()


def main() -> None:
    """Application entry point.

    Set RUN_MODE=standalone to serve the page without the FastAPI host.
    Default is integrated mode.
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting RagQuery in {mode} mode")

    if mode == "standalone":
        run_standalone()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
