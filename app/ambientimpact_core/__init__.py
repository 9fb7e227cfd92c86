from .modules.models import ModuleManifest

# ==========================================
# MANIFEST: Das Core-Modul bringt das Komponenten-Framework
# und die Standard-Icon-Bundles (icon_bundles.yml) mit.
# ==========================================
manifest = ModuleManifest(
    id="ambientimpact_core",
    name="Ambient.Impact Core",
    version="2.0.0",
    description="Komponenten-Framework, Renderer und die mitgelieferten Icon-Bundles.",
    author="Ambient.Impact",
    icon="widgets",
    type="CORE",
    permissions={
        "subscribe": ["component:registered", "page:request_start"],
        "emit": []
    }
)

def setup(ctx):
    @ctx.subscribe("component:registered")
    def on_component_registered(payload):
        ctx.log.debug(f"Neue Komponente verfügbar: {payload.get('id')}")

    # Libraries einer abgebrochenen Seite nicht in die nächste mitnehmen
    @ctx.subscribe("page:request_start")
    def on_request_start(payload):
        ctx.services.renderer.reset_attachments()

    ctx.log.info("Core bereit.")
