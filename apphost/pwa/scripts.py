"""Service worker script templates, loaded once at startup"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .selector import WorkerVariant

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"

FULL_SCRIPT_FILE = "service-worker.js"
NOOP_SCRIPT_FILE = "noop.js"
ESCAPE_HATCH_SCRIPT_FILE = "escape-hatch.js"


class ScriptTemplateError(Exception):
    """Raised when a service worker script asset cannot be loaded"""


@dataclass(frozen=True)
class ScriptTemplates:
    """The three service worker script bodies, held in memory"""

    full: str
    noop: str
    escape_hatch: str

    def full_script(self) -> str:
        return self.full

    def noop_script(self) -> str:
        return self.noop

    def escape_hatch_script(self) -> str:
        return self.escape_hatch

    def script_for(self, variant: WorkerVariant) -> str:
        """Return the script text for a selected worker variant"""
        if variant is WorkerVariant.ESCAPE_HATCH:
            return self.escape_hatch
        if variant is WorkerVariant.NOOP:
            return self.noop
        if variant is WorkerVariant.FULL:
            return self.full
        raise ValueError(f"No script for worker variant {variant.name}")


def _read_asset(directory: Path, filename: str) -> str:
    path = directory / filename
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ScriptTemplateError(f"Unable to load service worker script {path}: {e}") from e


def load_script_templates(directory: Optional[Path] = None) -> ScriptTemplates:
    """Read all service worker scripts from disk.

    Any missing or unreadable asset raises ScriptTemplateError; callers are
    expected to let it abort startup.
    """
    directory = Path(directory) if directory else STATIC_DIR

    templates = ScriptTemplates(
        full=_read_asset(directory, FULL_SCRIPT_FILE),
        noop=_read_asset(directory, NOOP_SCRIPT_FILE),
        escape_hatch=_read_asset(directory, ESCAPE_HATCH_SCRIPT_FILE),
    )
    logger.info(f"Loaded service worker scripts from {directory}")
    return templates
