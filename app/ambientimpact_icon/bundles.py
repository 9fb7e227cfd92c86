import os
import yaml
from pydantic import BaseModel, Field, ValidationError

from ambientimpact_core.exceptions import PluginNotFoundError
from ambientimpact_core.logger import get_logger

ICON_BUNDLES_FILE = "icon_bundles.yml"

log = get_logger("IconBundles")

class IconBundleDefinition(BaseModel):
    id: str
    provider: str = Field(..., description="ID des Moduls, dessen icon_bundles.yml das Bundle definiert")
    path: str = Field(..., description="Pfad des SVG-Sprites relativ zum assets/-Verzeichnis des Providers")
    label: str = Field(default="")

class IconBundle:
    """Laufzeit-Zustand eines Bundles: URL und ob auf der Seite schon ein Icon daraus gerendert wurde."""

    def __init__(self, definition: IconBundleDefinition, url: str):
        self.definition = definition
        self._url = url
        self._used = False

    def get_id(self) -> str:
        return self.definition.id

    def get_url(self) -> str:
        return self._url

    def is_used(self) -> bool:
        return self._used

    def set_used(self, used: bool = True):
        self._used = used

class IconBundlePluginManager:
    """
    Findet die Icon-Bundles aller geladenen Module und verwaltet ihre Instanzen.

    Jedes Modul kann eine icon_bundles.yml mitbringen (bundle_id -> {path, label}).
    Gelesen wird beim ersten Zugriff, in der Ladereihenfolge der Module; bei
    doppelten IDs gewinnt das zuletzt geladene Modul.
    """

    def __init__(self, module_manager, assets_prefix: str = "/modules"):
        self.module_manager = module_manager
        self.assets_prefix = assets_prefix.rstrip("/")
        self._definitions = None
        self._instances = None

    def discover(self) -> dict:
        definitions = {}

        for module_id in self.module_manager.registry:
            bundles_file = os.path.join(self.module_manager.get_module_path(module_id), ICON_BUNDLES_FILE)
            if not os.path.exists(bundles_file):
                continue

            with open(bundles_file, 'r', encoding='utf-8') as f:
                raw_bundles = yaml.safe_load(f) or {}

            if not isinstance(raw_bundles, dict):
                log.error(f"❌ {bundles_file} muss ein Mapping (bundle_id -> {{path, label}}) enthalten, wird ignoriert.")
                continue

            for bundle_id, data in raw_bundles.items():
                if data is not None and not isinstance(data, dict):
                    log.error(f"❌ Ungültiges Icon-Bundle '{bundle_id}' in {bundles_file}: Mapping erwartet, nicht {type(data).__name__}")
                    continue
                try:
                    definition = IconBundleDefinition(id=bundle_id, provider=module_id, **(data or {}))
                except ValidationError as ve:
                    log.error(f"❌ Ungültiges Icon-Bundle '{bundle_id}' in {bundles_file}: {ve}")
                    continue

                if bundle_id in definitions:
                    log.warning(
                        f"⚠️ Icon-Bundle '{bundle_id}' von {definitions[bundle_id].provider} "
                        f"wird durch {module_id} überschrieben."
                    )
                definitions[bundle_id] = definition

        log.info(f"🎨 {len(definitions)} Icon-Bundle(s) gefunden: {', '.join(definitions) or '-'}")
        return definitions

    def get_definitions(self) -> dict:
        if self._definitions is None:
            self._definitions = self.discover()
        return self._definitions

    def build_url(self, definition: IconBundleDefinition) -> str:
        return f"{self.assets_prefix}/{definition.provider}/{definition.path.lstrip('/')}"

    def get_icon_bundle_instances(self) -> dict:
        if self._instances is None:
            self._instances = {
                bundle_id: IconBundle(definition, self.build_url(definition))
                for bundle_id, definition in self.get_definitions().items()
            }
        return self._instances

    def has_icon_bundle(self, bundle_id: str) -> bool:
        return bundle_id in self.get_definitions()

    def get_icon_bundle(self, bundle_id: str) -> IconBundle:
        instances = self.get_icon_bundle_instances()
        if bundle_id not in instances:
            raise PluginNotFoundError("Icon-Bundle", bundle_id)
        return instances[bundle_id]

    def reset_used(self):
        """Zu Beginn jeder Seite: noch kein Bundle benutzt."""
        for bundle in self.get_icon_bundle_instances().values():
            bundle.set_used(False)
