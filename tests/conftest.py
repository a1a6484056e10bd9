"""Shared fixtures for the PWA host tests."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from apphost.config import RoutesConfig, WebConfig
from apphost.main import create_app
from apphost.pwa.config import PWAConfigStore
from apphost.pwa.scripts import ScriptTemplates, load_script_templates

FULL_SCRIPT = "[service-worker-script]"
NOOP_SCRIPT = "[service-worker-noop-script]"
ESCAPE_HATCH_SCRIPT = "[service-worker-escape-hatch-script]"

MANIFEST = {
    "name": "One App",
    "short_name": "one-app",
}


@pytest.fixture
def scripts_dir(tmp_path: Path) -> Path:
    """Create a directory holding placeholder service worker scripts."""
    directory = tmp_path / "scripts"
    directory.mkdir()
    (directory / "service-worker.js").write_text(FULL_SCRIPT, encoding="utf-8")
    (directory / "noop.js").write_text(NOOP_SCRIPT, encoding="utf-8")
    (directory / "escape-hatch.js").write_text(ESCAPE_HATCH_SCRIPT, encoding="utf-8")
    return directory


@pytest.fixture
def templates(scripts_dir: Path) -> ScriptTemplates:
    return load_script_templates(scripts_dir)


@pytest.fixture
def routes() -> RoutesConfig:
    return RoutesConfig(prefix="/_/pwa", worker="/service-worker.js", manifest="/manifest.webmanifest")


@pytest.fixture
def web_config(routes: RoutesConfig, scripts_dir: Path) -> WebConfig:
    return WebConfig(routes=routes, pwa_config_file="", pwa_scripts_dir=str(scripts_dir))


@pytest.fixture
def store(routes: RoutesConfig) -> PWAConfigStore:
    return PWAConfigStore(routes)


@pytest.fixture
def app(web_config: WebConfig, store: PWAConfigStore, templates: ScriptTemplates):
    return create_app(config=web_config, store=store, templates=templates)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def worker_path(routes: RoutesConfig) -> str:
    return routes.worker_url


@pytest.fixture
def manifest_path(routes: RoutesConfig) -> str:
    return routes.manifest_url
