"""Main application entry point.

Runs FastAPI with the NiceGUI chat page mounted on the same server.
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


def main() -> None:
    """Run FastAPI with NiceGUI mounted on the same server.

    Fails fast if GEMINI_API_KEY is missing rather than on the first send.
    """
    import uvicorn
    from nicegui import ui

    from novicegpt.api.app import create_app
    from novicegpt.llm.gemini_client import get_gemini_client
    from novicegpt.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    client = get_gemini_client()
    logger.info(f"Using Gemini model {client.config.model_name}")

    app = create_app()

    # Mount NiceGUI onto FastAPI
    ui.run_with(
        app,
        title="NoviceGPT",
        favicon="💬",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "novicegpt-secret"),
    )

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Chat UI available at http://{host}:{port}/")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
