"""Web application configuration"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass
class RoutesConfig:
    """Where the PWA endpoints live"""

    prefix: str = os.getenv("PWA_PREFIX", "/_/pwa")
    worker: str = os.getenv("PWA_WORKER_PATH", "/service-worker.js")
    manifest: str = os.getenv("PWA_MANIFEST_PATH", "/manifest.webmanifest")

    @property
    def worker_url(self) -> str:
        return f"{self.prefix}{self.worker}"

    @property
    def manifest_url(self) -> str:
        return f"{self.prefix}{self.manifest}"


@dataclass
class WebConfig:
    """Web-specific configuration"""

    # Web App
    host: str = os.getenv("WEB_HOST", "0.0.0.0")
    port: int = int(os.getenv("WEB_PORT", "8000"))
    debug: bool = os.getenv("WEB_DEBUG", "false").lower() == "true"

    # PWA
    routes: RoutesConfig = field(default_factory=RoutesConfig)
    pwa_config_file: str = os.getenv("PWA_CONFIG_FILE", "")
    pwa_scripts_dir: str = os.getenv("PWA_SCRIPTS_DIR", "")

    @property
    def pwa_config_path(self) -> Optional[Path]:
        return Path(self.pwa_config_file) if self.pwa_config_file else None

    @property
    def pwa_scripts_path(self) -> Optional[Path]:
        return Path(self.pwa_scripts_dir) if self.pwa_scripts_dir else None

    def validate(self) -> list[str]:
        """Validate configuration, returning warnings"""
        errors = []
        if not self.routes.prefix.startswith("/"):
            errors.append("PWA_PREFIX should start with '/'")
        for name, path in (("PWA_WORKER_PATH", self.routes.worker), ("PWA_MANIFEST_PATH", self.routes.manifest)):
            if not path.startswith("/"):
                errors.append(f"{name} should start with '/'")
        if self.pwa_config_path and not self.pwa_config_path.exists():
            errors.append(f"PWA_CONFIG_FILE {self.pwa_config_file} does not exist")
        return errors


web_config = WebConfig()
