"""Process-wide PWA settings.

The store holds a single immutable PWAConfig snapshot. Every call to
configure() builds a brand new snapshot from the defaults plus the options
given in that call, then swaps it in with one assignment. Nothing from the
previous snapshot carries over, so a request that already read its snapshot
never sees a half-applied change.
"""

import copy
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

# JSON-style option names accepted alongside the Python ones.
# When both spellings are given, the Python name wins.
OPTION_ALIASES = {
    "escapeHatch": "escape_hatch",
}

BOOLEAN_OPTIONS = ("enabled", "noop", "escape_hatch")
RECOGNIZED_OPTIONS = BOOLEAN_OPTIONS + ("scope", "manifest")


class PWAConfigError(Exception):
    """Raised when a PWA configuration file cannot be read or parsed"""


@dataclass(frozen=True)
class PWAConfig:
    """A snapshot of the PWA settings. Never mutated after creation."""

    enabled: bool = False
    noop: bool = False
    escape_hatch: bool = False
    scope: Optional[str] = None
    manifest: Optional[Mapping[str, Any]] = None


def _normalize_options(options: Mapping[str, Any]) -> dict:
    aliased = {}
    normalized = {}
    for key, value in options.items():
        if key in OPTION_ALIASES:
            aliased[OPTION_ALIASES[key]] = value
        elif key in RECOGNIZED_OPTIONS:
            normalized[key] = value
        else:
            logger.debug(f"Ignoring unrecognized PWA option: {key}")

    for name, value in aliased.items():
        normalized.setdefault(name, value)

    for name in BOOLEAN_OPTIONS:
        if name in normalized:
            normalized[name] = bool(normalized[name])

    scope = normalized.get("scope")
    if scope is not None and not isinstance(scope, str):
        logger.warning(f"PWA scope {scope!r} is not a string, converting")
        normalized["scope"] = str(scope)

    # The snapshot must not share the caller's manifest object
    if normalized.get("manifest") is not None:
        normalized["manifest"] = copy.deepcopy(normalized["manifest"])

    return normalized


class PWAConfigStore:
    """Holder for the active PWA configuration snapshot"""

    def __init__(self, routes=None):
        if routes is None:
            from ..config import web_config
            routes = web_config.routes
        self.routes = routes
        self._config = PWAConfig()

    def current(self) -> PWAConfig:
        """Return the active snapshot. Callers must treat it as read-only."""
        return self._config

    def configure(self, options: Optional[Mapping[str, Any]] = None, **kwargs) -> dict:
        """Replace the whole configuration.

        Options omitted from this call fall back to their defaults rather
        than keeping their previous values. Returns the client view of the
        new configuration.
        """
        merged = dict(options or {})
        merged.update(kwargs)

        config = PWAConfig(**_normalize_options(merged))
        self._config = config

        logger.info(
            f"PWA configured: enabled={config.enabled} noop={config.noop} "
            f"escape_hatch={config.escape_hatch} scope={config.scope!r} "
            f"manifest={'set' if config.manifest is not None else 'unset'}"
        )
        if config.enabled and config.manifest is None:
            logger.warning("PWA enabled without a manifest")

        return client_config_for(config, self.routes)

    def client_config(self) -> dict:
        return client_config_for(self._config, self.routes)


def client_config_for(config: PWAConfig, routes) -> dict:
    """Derive the settings handed to the browser bootstrap"""
    from .selector import WorkerVariant, select_worker_variant

    serves_worker = select_worker_variant(config) is not WorkerVariant.NOT_FOUND
    serves_manifest = config.enabled and config.manifest is not None

    return {
        "enabled": config.enabled,
        "escapeHatch": config.escape_hatch,
        "noop": config.noop,
        "scope": config.scope,
        "scriptUrl": routes.worker_url if serves_worker else None,
        "webManifestUrl": routes.manifest_url if serves_manifest else None,
    }


def load_pwa_config_file(path) -> dict:
    """Read PWA options from a JSON file"""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise PWAConfigError(f"Unable to read PWA config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise PWAConfigError(f"Invalid JSON in PWA config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise PWAConfigError(f"PWA config file {path} must contain a JSON object")
    return data
