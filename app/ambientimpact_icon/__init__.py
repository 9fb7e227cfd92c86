from ambientimpact_core.components import ComponentDefinition
from ambientimpact_core.modules.models import ModuleManifest
from .bundles import IconBundlePluginManager
from .component import Icon
from .element import ELEMENT_TYPE, TEMPLATE_DIR, build_icon_element

# ==========================================
# 1. MANIFEST: Identifikation & Rechte
# ==========================================
manifest = ModuleManifest(
    id="ambientimpact_icon",
    name="Icon",
    version="2.0.0",
    description="Icon-Bundles, das Icon-Render-Element und die Icon-Komponente.",
    author="Ambient.Impact",
    icon="interests",
    type="PLUGIN",
    permissions={
        "subscribe": ["page:request_start"],
        "emit": []
    }
)

# ==========================================
# 2. SETUP: Dienste, Element und Komponente anmelden
# ==========================================
def setup(ctx):
    bundle_manager = IconBundlePluginManager(ctx.services.module_manager, ctx.services.assets_prefix)
    ctx.services.set('icon_bundle_manager', bundle_manager)

    def container_base_class():
        return ctx.components.get_component("icon").configuration['containerBaseClass']

    ctx.services.elements.register(ELEMENT_TYPE, build_icon_element(bundle_manager, container_base_class), TEMPLATE_DIR)

    ctx.components.register(
        ComponentDefinition(
            id="icon",
            title="Icon",
            description="Contains settings and methods for managing and rendering icons.",
            provider=manifest.id,
        ),
        Icon.create,
    )

    # Jede Seite beginnt ohne benutzte Bundles
    @ctx.subscribe('page:request_start')
    def on_request_start(payload):
        bundle_manager.reset_used()

    ctx.log.info("Icon-Komponente angedockt.")
