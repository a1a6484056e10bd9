#!/usr/bin/env python3
"""
App Host Entry Point

Run the FastAPI web application serving the PWA service worker and manifest.

Usage:
    python run_webapp.py

Or with uvicorn directly:
    uvicorn apphost.main:app --reload --port 8000
"""

import logging
import sys

import uvicorn
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


def main():
    """Run the web application"""
    from apphost.config import web_config

    # Validate configuration
    errors = web_config.validate()
    if errors:
        for error in errors:
            logger.warning(f"Config warning: {error}")

    logger.info(f"Starting App Host on {web_config.host}:{web_config.port}")
    logger.info(f"Debug mode: {web_config.debug}")
    logger.info(f"Service worker: {web_config.routes.worker_url}")
    logger.info(f"Manifest: {web_config.routes.manifest_url}")

    if web_config.pwa_config_path:
        logger.info(f"PWA config: {web_config.pwa_config_path}")
    else:
        logger.warning("PWA config: Not configured")

    # Run the app
    uvicorn.run(
        "apphost.main:app",
        host=web_config.host,
        port=web_config.port,
        reload=web_config.debug,
        log_level="info" if not web_config.debug else "debug",
    )


if __name__ == "__main__":
    main()
