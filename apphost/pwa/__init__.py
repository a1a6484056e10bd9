"""PWA delivery: configuration store, worker selection and script templates"""

from .config import PWAConfig, PWAConfigError, PWAConfigStore, load_pwa_config_file
from .scripts import ScriptTemplateError, ScriptTemplates, load_script_templates
from .selector import WorkerVariant, select_worker_variant

__all__ = [
    "PWAConfig",
    "PWAConfigError",
    "PWAConfigStore",
    "load_pwa_config_file",
    "ScriptTemplateError",
    "ScriptTemplates",
    "load_script_templates",
    "WorkerVariant",
    "select_worker_variant",
]
