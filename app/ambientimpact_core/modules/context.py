from ambientimpact_core.logger import get_logger
from .models import ModuleManifest

class ModuleContext:
    """
    Der Sandkasten für JEDES Modul (Core & Plugin).

    Gibt dem Modul einen eigenen Logger, einen rechtegeprüften Zugang zum
    Event-Bus und Zugriff auf die geteilten Dienste (Komponenten-Manager,
    Element-Registry, ...).
    """
    def __init__(self, manifest: ModuleManifest, services):
        self.manifest = manifest
        self.services = services
        # Logger zeigt z.B. [Core:Ambient.Impact Core] oder [Plugin:Icon]
        prefix = "Core" if manifest.type == "CORE" else "Plugin"
        self.log = get_logger(f"{prefix}:{manifest.name}")

    @property
    def components(self):
        return self.services.component_manager

    # --- EVENT BUS PROXY ---

    def _allowed(self, topic: str, granted: list) -> bool:
        return topic in granted or "*" in granted

    def subscribe(self, topic: str):
        def decorator(callback):
            if self._allowed(topic, self.manifest.permissions.subscribe):
                self.log.debug(f"Abonniert Topic: {topic}")
                self.services.bus.subscribe(topic)(callback)
            else:
                self.log.warning(f"🚫 Rechtefehler: Modul darf '{topic}' nicht abonnieren!")
            return callback
        return decorator

    def emit(self, topic: str, payload: dict = None):
        if self._allowed(topic, self.manifest.permissions.emit):
            self.services.bus.emit(topic, payload)
            return True
        self.log.warning(f"🚫 Rechtefehler: Modul darf '{topic}' nicht senden!")
        return False
