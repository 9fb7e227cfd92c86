"""
Pytest configuration and shared fixtures.

Puts ``app/`` on the import path (the way ``main.py`` is run) and provides
in-memory collaborators for the icon component plus helpers to build
throwaway module packages on disk.
"""

import sys
import textwrap
from pathlib import Path

import pytest

BASE_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(BASE_DIR / "app"))

from ambientimpact_core.bus import GlobalEventBus  # noqa: E402
from ambientimpact_core.kernel import boot  # noqa: E402
from ambientimpact_icon.bundles import IconBundle, IconBundleDefinition  # noqa: E402


class FakeBundleRegistry:
    """Registry with fixed definitions and instances, in insertion order."""

    def __init__(self, definitions=None, instances=None):
        self.definitions = {}
        for bundle_id, provider in (definitions or {}).items():
            self.definitions[bundle_id] = IconBundleDefinition(
                id=bundle_id, provider=provider, path=f"icons/{bundle_id}.svg"
            )
        self.instances = {}
        for bundle_id, (url, used) in (instances or {}).items():
            definition = self.definitions.get(bundle_id) or IconBundleDefinition(
                id=bundle_id, provider="other_module", path=f"icons/{bundle_id}.svg"
            )
            bundle = IconBundle(definition, url)
            bundle.set_used(used)
            self.instances[bundle_id] = bundle
        self.definition_calls = 0

    def get_definitions(self):
        self.definition_calls += 1
        return self.definitions

    def get_icon_bundle_instances(self):
        return self.instances


class RecordingRenderer:
    """Isolated renderer that remembers every element it was given."""

    def __init__(self, markup="<rendered/>"):
        self.markup = markup
        self.calls = []

    def render_isolated(self, element):
        self.calls.append(dict(element))
        return self.markup


@pytest.fixture
def bus():
    return GlobalEventBus()


@pytest.fixture
def recording_renderer():
    return RecordingRenderer()


@pytest.fixture
def spec_registry():
    return FakeBundleRegistry(
        definitions={"core": "ambientimpact_core", "extra": "other_module"},
        instances={"core": ("/a.svg", True), "extra": ("/b.svg", False)},
    )


@pytest.fixture
def services(bus, tmp_path):
    """A fully booted system with the real modules and no config overrides."""
    return boot(
        module_names=["ambientimpact_core", "ambientimpact_icon"],
        config_path=str(tmp_path / "missing.yml"),
        bus=bus,
    )


@pytest.fixture
def make_module(tmp_path, monkeypatch):
    """
    Writes a package ``name`` under tmp_path with the given ``__init__.py``
    body and optional extra files, and makes it importable.
    """
    root = tmp_path / "modules"
    root.mkdir(exist_ok=True)
    monkeypatch.syspath_prepend(str(root))
    created = []

    def _make(name, init_source, files=None):
        package = root / name
        package.mkdir()
        (package / "__init__.py").write_text(textwrap.dedent(init_source), encoding="utf-8")
        for relative, content in (files or {}).items():
            target = package / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(textwrap.dedent(content), encoding="utf-8")
        created.append(name)
        return package

    yield _make

    for name in created:
        sys.modules.pop(name, None)
