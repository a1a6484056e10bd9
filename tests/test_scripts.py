"""Tests for the service worker script templates."""

from pathlib import Path

import pytest

from apphost.pwa.scripts import (
    STATIC_DIR,
    ScriptTemplateError,
    ScriptTemplates,
    load_script_templates,
)
from apphost.pwa.selector import WorkerVariant

from .conftest import ESCAPE_HATCH_SCRIPT, FULL_SCRIPT, NOOP_SCRIPT


class TestLoadScriptTemplates:
    """Tests for load_script_templates()."""

    def test_loads_all_three_scripts(self, scripts_dir: Path) -> None:
        templates = load_script_templates(scripts_dir)
        assert templates.full_script() == FULL_SCRIPT
        assert templates.noop_script() == NOOP_SCRIPT
        assert templates.escape_hatch_script() == ESCAPE_HATCH_SCRIPT

    def test_loads_bundled_scripts_by_default(self) -> None:
        """The packaged assets are used when no directory is given."""
        templates = load_script_templates()
        assert templates.full_script() == (STATIC_DIR / "service-worker.js").read_text(encoding="utf-8")
        assert "unregister" in templates.escape_hatch_script()
        assert "fetch" not in templates.noop_script()

    @pytest.mark.parametrize("filename", ["service-worker.js", "noop.js", "escape-hatch.js"])
    def test_missing_asset_is_fatal(self, scripts_dir: Path, filename: str) -> None:
        """Any missing script raises instead of loading partially."""
        (scripts_dir / filename).unlink()
        with pytest.raises(ScriptTemplateError, match=filename):
            load_script_templates(scripts_dir)

    def test_missing_directory_is_fatal(self, tmp_path: Path) -> None:
        with pytest.raises(ScriptTemplateError):
            load_script_templates(tmp_path / "does-not-exist")


class TestScriptFor:
    """Tests for ScriptTemplates.script_for()."""

    @pytest.fixture
    def templates(self) -> ScriptTemplates:
        return ScriptTemplates(full="full", noop="noop", escape_hatch="escape")

    @pytest.mark.parametrize(
        "variant,expected",
        [
            (WorkerVariant.FULL, "full"),
            (WorkerVariant.NOOP, "noop"),
            (WorkerVariant.ESCAPE_HATCH, "escape"),
        ],
    )
    def test_returns_script_for_variant(self, templates: ScriptTemplates, variant, expected: str) -> None:
        assert templates.script_for(variant) == expected

    def test_not_found_has_no_script(self, templates: ScriptTemplates) -> None:
        with pytest.raises(ValueError, match="NOT_FOUND"):
            templates.script_for(WorkerVariant.NOT_FOUND)

    def test_templates_are_immutable(self, templates: ScriptTemplates) -> None:
        with pytest.raises(AttributeError):
            templates.full = "changed"
