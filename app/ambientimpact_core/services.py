from ambientimpact_core.components.manager import ComponentPluginManager
from ambientimpact_core.exceptions import ServiceNotFoundError
from ambientimpact_core.modules.manager import ModuleManager
from ambientimpact_core.render.renderer import isolated_renderer

class Services:
    """Die geteilten Dienste eines laufenden Systems, explizit verdrahtet."""

    def __init__(self, bus, elements, renderer, config_store, assets_prefix: str = "/modules"):
        self.bus = bus
        self.elements = elements
        # Vollständiger Renderer (sammelt Libraries) und der isolierte Adapter für Komponenten
        self.renderer = renderer
        self.isolated_renderer = isolated_renderer(renderer)
        self.config_store = config_store
        self.assets_prefix = assets_prefix
        self.module_manager = ModuleManager(self)
        self.component_manager = ComponentPluginManager(self)
        # Von Modulen bereitgestellte Dienste, z.B. 'icon_bundle_manager'
        self._provided = {}

    def set(self, name: str, service):
        self._provided[name] = service

    def has(self, name: str) -> bool:
        return name in self._provided

    def get(self, name: str):
        if name not in self._provided:
            raise ServiceNotFoundError(name)
        return self._provided[name]
