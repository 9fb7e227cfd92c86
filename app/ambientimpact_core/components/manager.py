from ambientimpact_core.exceptions import PluginNotFoundError
from ambientimpact_core.logger import get_logger
from .models import ComponentDefinition

log = get_logger("ComponentManager")

class ComponentPluginManager:
    def __init__(self, services):
        self.services = services
        # Format: { "component_id": (definition, factory) }, in Registrierungsreihenfolge
        self.registry = {}
        self._instances = {}

    def register(self, definition, factory) -> bool:
        """
        Registriert eine Komponente.

        ``factory`` wird mit (services, configuration, plugin_id, definition)
        aufgerufen, typischerweise ist das ``SomeComponent.create``.
        """
        if isinstance(definition, dict):
            definition = ComponentDefinition(**definition)

        if definition.id in self.registry:
            log.error(f"💥 ID-Konflikt: Komponente '{definition.id}' ist bereits registriert!")
            return False

        self.registry[definition.id] = (definition, factory)
        log.info(f"🧱 Komponente registriert: {definition.title} ({definition.id}, Provider: {definition.provider})")
        self.services.bus.emit("component:registered", {"id": definition.id, "provider": definition.provider})
        return True

    def get_definitions(self) -> dict:
        return {component_id: entry[0] for component_id, entry in self.registry.items()}

    def has_component(self, component_id: str) -> bool:
        return component_id in self.registry

    def get_component(self, component_id: str):
        """Gibt die (einmalig erzeugte) Instanz der Komponente zurück."""
        if component_id not in self.registry:
            raise PluginNotFoundError("Komponente", component_id)

        if component_id not in self._instances:
            definition, factory = self.registry[component_id]
            configuration = self.services.config_store.get(component_id)
            self._instances[component_id] = factory(self.services, configuration, component_id, definition)
            log.debug(f"Komponente instanziiert: {component_id}")

        return self._instances[component_id]

    def get_component_js_settings(self) -> dict:
        """Sammelt die Front-End-Settings aller Komponenten, die welche haben."""
        settings = {}
        for component_id in self.registry:
            js_settings = self.get_component(component_id).get_js_settings()
            if js_settings:
                settings[component_id] = js_settings

        self.services.bus.emit("components:settings_built", {"components": list(settings)})
        return settings
