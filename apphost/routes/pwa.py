"""PWA support routes - service worker script and web app manifest"""

import json
import logging
from typing import Optional

from fastapi import APIRouter
from fastapi.responses import Response

from ..config import RoutesConfig, web_config
from ..pwa.config import PWAConfigStore
from ..pwa.scripts import ScriptTemplates
from ..pwa.selector import WorkerVariant, select_worker_variant

logger = logging.getLogger(__name__)

JAVASCRIPT_CONTENT_TYPE = "application/javascript; charset=utf-8"
MANIFEST_CONTENT_TYPE = "application/manifest+json; charset=utf-8"


def _serialize_manifest(manifest) -> str:
    # Compact, unescaped output, byte-for-byte what JSON.stringify produces
    return json.dumps(manifest, separators=(",", ":"), ensure_ascii=False)


def create_pwa_router(
    store: PWAConfigStore,
    templates: ScriptTemplates,
    routes: Optional[RoutesConfig] = None,
) -> APIRouter:
    """Build the PWA router. Mount it under routes.prefix."""
    routes = routes or web_config.routes
    router = APIRouter(tags=["pwa"])

    @router.get(routes.worker, include_in_schema=False)
    async def service_worker():
        try:
            config = store.current()
            variant = select_worker_variant(config)
            if variant is WorkerVariant.NOT_FOUND:
                logger.debug("Service worker requested while PWA is disabled")
                return Response(status_code=404)

            headers = {}
            if config.scope:
                headers["Service-Worker-Allowed"] = config.scope

            return Response(
                content=templates.script_for(variant),
                media_type=JAVASCRIPT_CONTENT_TYPE,
                headers=headers,
            )
        except Exception:
            logger.exception("Error serving service worker")
            return Response(status_code=500)

    @router.get(routes.manifest, include_in_schema=False)
    async def web_manifest():
        try:
            config = store.current()
            if not config.enabled:
                logger.debug("Manifest requested while PWA is disabled")
                return Response(status_code=404)

            return Response(
                content=_serialize_manifest(config.manifest),
                media_type=MANIFEST_CONTENT_TYPE,
            )
        except Exception:
            logger.exception("Error serving web app manifest")
            return Response(status_code=500)

    return router
