import pytest

from ambientimpact_core.exceptions import PluginNotFoundError
from ambientimpact_core.modules.manager import ModuleManager


class _Services:
    def __init__(self, bus):
        self.bus = bus


@pytest.fixture
def manager(bus):
    return ModuleManager(_Services(bus))


def test_loads_module_and_runs_setup(make_module, manager):
    package = make_module("good_module", """
        from ambientimpact_core.modules.models import ModuleManifest

        manifest = ModuleManifest(id="good", name="Good", version="1.2.3", type="CORE")
        calls = []

        def setup(ctx):
            calls.append(ctx.manifest.id)
    """)

    assert manager.load("good_module") is True

    import good_module
    assert good_module.calls == ["good"]
    assert [m.id for m in manager.get_manifests()] == ["good"]
    assert manager.get_module_path("good") == str(package)


def test_dict_manifest_is_validated(make_module, manager):
    make_module("dict_module", """
        manifest = {"id": "dict", "name": "Dict", "version": "0.1.0"}

        def setup(ctx):
            pass
    """)

    manager.load_all(["dict_module"])

    assert manager.registry["dict"]["manifest"].type == "PLUGIN"


def test_invalid_manifest_is_skipped(make_module, manager):
    make_module("bad_manifest", """
        manifest = {"id": "bad"}

        def setup(ctx):
            raise AssertionError("must not run")
    """)

    assert manager.load("bad_manifest") is False
    assert manager.registry == {}


def test_package_without_manifest_is_skipped(make_module, manager):
    make_module("plain_package", "VALUE = 1\n")

    assert manager.load("plain_package") is False


def test_duplicate_id_is_rejected(make_module, manager):
    make_module("first_dup", """
        manifest = {"id": "dup", "name": "First", "version": "1.0.0"}
        def setup(ctx):
            pass
    """)
    make_module("second_dup", """
        manifest = {"id": "dup", "name": "Second", "version": "1.0.0"}
        def setup(ctx):
            pass
    """)

    manager.load_all(["first_dup", "second_dup"])

    assert [m.name for m in manager.get_manifests()] == ["First"]


def test_failing_setup_is_not_registered(make_module, manager):
    make_module("broken_setup", """
        manifest = {"id": "broken", "name": "Broken", "version": "1.0.0"}
        def setup(ctx):
            raise RuntimeError("boom")
    """)

    assert manager.load("broken_setup") is False
    assert "broken" not in manager.registry


def test_missing_import_is_logged_and_skipped(manager):
    assert manager.load("does_not_exist_anywhere") is False


def test_unknown_module_path(manager):
    with pytest.raises(PluginNotFoundError):
        manager.get_module_path("ghost")


def test_context_permissions(make_module, manager, bus):
    make_module("perm_module", """
        manifest = {
            "id": "perm",
            "name": "Perm",
            "version": "1.0.0",
            "permissions": {"subscribe": ["allowed"], "emit": ["out"]},
        }
        received = []

        def setup(ctx):
            ctx.subscribe("allowed")(lambda payload: received.append(("allowed", payload)))
            ctx.subscribe("forbidden")(lambda payload: received.append(("forbidden", payload)))
    """)
    manager.load("perm_module")
    ctx = manager.registry["perm"]["context"]
    emitted = []
    bus.subscribe("out")(emitted.append)

    bus.emit("allowed", {"n": 1})
    bus.emit("forbidden", {"n": 2})

    import perm_module
    assert perm_module.received == [("allowed", {"n": 1})]
    assert ctx.emit("out", {"ok": True}) is True
    assert ctx.emit("elsewhere") is False
    assert emitted == [{"ok": True}]


def test_wildcard_permission(make_module, manager, bus):
    make_module("wild_module", """
        manifest = {
            "id": "wild",
            "name": "Wild",
            "version": "1.0.0",
            "permissions": {"subscribe": ["*"], "emit": ["*"]},
        }
        def setup(ctx):
            pass
    """)
    manager.load("wild_module")

    assert manager.registry["wild"]["context"].emit("anything") is True


def test_booted_modules(services):
    manifests = services.module_manager.get_manifests()

    assert [m.id for m in manifests] == ["ambientimpact_core", "ambientimpact_icon"]
    assert [m.type for m in manifests] == ["CORE", "PLUGIN"]
