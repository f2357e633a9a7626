"""
Run script to start the FastAPI server (no reload).
"""
import logging
import os
import sys

import uvicorn

# Add the project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from app.config import settings

logger = logging.getLogger(__name__)


def main():
    """Start the Uvicorn server."""
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    port = int(os.environ.get("PORT", 5000))
    logger.info(f"Starting {settings.PROJECT_NAME} on port {port}")
    logger.info(f"API Documentation: http://localhost:{port}/docs")

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=port,
        reload=False,  # No reload for stability
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
