"""Choose which service worker script a configuration calls for"""

from enum import Enum

from .config import PWAConfig


class WorkerVariant(Enum):
    ESCAPE_HATCH = "escape_hatch"
    NOOP = "noop"
    FULL = "full"
    NOT_FOUND = "not_found"


def select_worker_variant(config: PWAConfig) -> WorkerVariant:
    """Map a configuration snapshot to a worker variant.

    First match wins: escape hatch, then noop, then the full worker when
    enabled. The escape hatch stays reachable with the app disabled so an
    already registered worker can still be removed from clients.
    """
    if config.escape_hatch:
        return WorkerVariant.ESCAPE_HATCH
    if config.noop:
        return WorkerVariant.NOOP
    if config.enabled:
        return WorkerVariant.FULL
    return WorkerVariant.NOT_FOUND
