"""FastAPI application entry point"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from .config import WebConfig, web_config
from .pwa.config import PWAConfigError, PWAConfigStore, load_pwa_config_file
from .pwa.scripts import ScriptTemplates, load_script_templates
from .routes.pwa import create_pwa_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

NOT_FOUND_HTML = "<!doctype html><title>Not Found</title>"


def reload_pwa_config(app: FastAPI) -> dict:
    """Re-apply the PWA config file, replacing the whole configuration.

    On a missing or invalid file the previous configuration stays active and
    PWAConfigError is raised.
    """
    config: WebConfig = app.state.web_config
    path = config.pwa_config_path
    if path is None:
        raise PWAConfigError("PWA_CONFIG_FILE is not set")

    try:
        options = load_pwa_config_file(path)
    except PWAConfigError as e:
        logger.error(f"PWA config reload failed, keeping current settings: {e}")
        raise

    logger.info(f"Applying PWA config from {path}")
    return app.state.pwa_store.configure(options)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("Starting web app...")

    if app.state.web_config.pwa_config_path is not None:
        reload_pwa_config(app)
    else:
        logger.info("PWA_CONFIG_FILE not set - PWA disabled until configured")

    yield

    logger.info("Shutting down web app...")


def create_app(
    config: Optional[WebConfig] = None,
    store: Optional[PWAConfigStore] = None,
    templates: Optional[ScriptTemplates] = None,
) -> FastAPI:
    """Assemble the application.

    Script templates are loaded here rather than per request, so a missing
    asset stops the app from being built at all.
    """
    config = config or web_config
    store = store or PWAConfigStore(config.routes)
    templates = templates or load_script_templates(config.pwa_scripts_path)

    app = FastAPI(
        title="App Host",
        description="Serves the service worker and web app manifest",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.web_config = config
    app.state.pwa_store = store
    app.state.script_templates = templates

    app.include_router(
        create_pwa_router(store, templates, config.routes),
        prefix=config.routes.prefix,
    )

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "pwa": store.client_config(),
        }

    # Everything else belongs to the document renderer, which is not part of this host
    @app.get("/{full_path:path}", include_in_schema=False)
    async def catch_all(full_path: str):
        return HTMLResponse(NOT_FOUND_HTML, status_code=404)

    return app


app = create_app()
