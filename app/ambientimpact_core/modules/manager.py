import importlib
import os
from pydantic import ValidationError

from ambientimpact_core.exceptions import PluginNotFoundError
from ambientimpact_core.logger import get_logger
from .models import ModuleManifest
from .context import ModuleContext

log = get_logger("ModuleManager")

class ModuleManager:
    def __init__(self, services):
        self.services = services
        # Die Registry speichert alle erfolgreich geladenen Module in Ladereihenfolge
        # Format: { "module_id": { "manifest": ..., "module": ..., "context": ... } }
        self.registry = {}

    def load_all(self, package_names):
        """Lädt alle angegebenen Pakete als Module."""
        log.info("🚀 Starte Module Loader...")

        for package_name in package_names:
            self.load(package_name)

        log.info(f"✅ Boot-Sequenz abgeschlossen: {len(self.registry)} Module geladen.")

    def load(self, package_name: str) -> bool:
        try:
            # 1. Modul dynamisch importieren
            module = importlib.import_module(package_name)

            # 2. Prüfen, ob es ein Ambient.Impact-Modul ist
            if not hasattr(module, 'manifest') or not hasattr(module, 'setup'):
                log.debug(f"Überspringe {package_name} (Kein Manifest oder Setup gefunden)")
                return False

            # 3. Manifest validieren (Pydantic übernimmt die Typprüfung!)
            raw_manifest = module.manifest
            if isinstance(raw_manifest, dict):
                manifest = ModuleManifest(**raw_manifest)
            elif isinstance(raw_manifest, ModuleManifest):
                manifest = raw_manifest
            else:
                raise ValueError("Manifest muss ein Dictionary oder ModuleManifest-Objekt sein.")

            # 4. Doppel-ID Prüfung
            if manifest.id in self.registry:
                log.error(f"💥 ID-Konflikt: Modul '{manifest.id}' ist bereits geladen!")
                return False

            # 5. Erst registrieren, dann starten: setup() darf schon nach dem eigenen Pfad fragen
            ctx = ModuleContext(manifest, self.services)
            self.registry[manifest.id] = {
                "manifest": manifest,
                "module": module,
                "context": ctx
            }
            try:
                module.setup(ctx)
            except Exception:
                del self.registry[manifest.id]
                raise

            icon = "🧩" if manifest.type == "PLUGIN" else "⚙️"
            log.info(f"{icon} {manifest.type} geladen: {manifest.name} (v{manifest.version})")
            return True

        except ValidationError as ve:
            log.error(f"❌ Manifest-Fehler in {package_name}: {ve}")
        except Exception as e:
            log.error(f"💥 Fataler Fehler beim Laden von {package_name}: {e}", exc_info=True)
        return False

    def get_manifests(self):
        """Gibt eine Liste aller geladenen Manifeste zurück."""
        return [entry["manifest"] for entry in self.registry.values()]

    def get_module_path(self, module_id: str) -> str:
        """Verzeichnis des Modul-Pakets (dort liegen icon_bundles.yml, assets/, templates/)."""
        if module_id not in self.registry:
            raise PluginNotFoundError("Modul", module_id)
        return os.path.dirname(os.path.abspath(self.registry[module_id]["module"].__file__))
