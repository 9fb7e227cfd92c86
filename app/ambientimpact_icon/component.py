import copy
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from ambientimpact_core.components import ComponentBase

# Nur Bundles dieses Providers gelten als "mitgeliefert"
DEFAULT_BUNDLE_PROVIDER = "ambientimpact_core"

# Render-Element mit Platzhaltern, die das Front-End per Textersetzung füllt.
# Klassen brauchen keinen Platzhalter, die setzt das JavaScript selbst.
TEMPLATE_ELEMENT = {
    '#type': 'ambientimpact_icon',
    '#containerTag': 'containerTagPlaceholder',
    '#icon': 'iconNamePlaceholder',
    '#url': 'urlPlaceholder',
    '#size': 'sizePlaceholder',
    '#text': 'textPlaceholder',
}

class IconDefaults(BaseModel):
    # Unbekannte Schlüssel aus Overrides bleiben erhalten
    model_config = ConfigDict(extra="allow")

    # TODO: Klären, ob es überhaupt ein Standard-Bundle geben sollte.
    bundle: Optional[str] = "core"
    size: int = 24
    containerTag: str = "span"
    textDisplay: str = "visible"

class IconConfiguration(BaseModel):
    model_config = ConfigDict(extra="allow")

    # Die Bundles, die mit dem Core ausgeliefert werden
    defaultBundles: List[str] = Field(default_factory=list)
    # Basis-Klasse des Containers, daraus leitet das Front-End die BEM-Klassen ab
    containerBaseClass: str = "ambientimpact-icon"
    defaults: IconDefaults = Field(default_factory=IconDefaults)

class Icon(ComponentBase):
    """Icon-Komponente: Einstellungen und Template für das Rendern von Icons im Front-End."""

    configuration_model = IconConfiguration

    def __init__(self, configuration: dict, plugin_id: str, plugin_definition, renderer, icon_bundle_manager):
        # Vor super().__init__() setzen, dort wird default_configuration() aufgerufen
        self.icon_bundle_manager = icon_bundle_manager
        super().__init__(configuration, plugin_id, plugin_definition, renderer)

    @classmethod
    def create(cls, services, configuration: dict, plugin_id: str, plugin_definition):
        return cls(
            configuration, plugin_id, plugin_definition,
            services.isolated_renderer,
            services.get('icon_bundle_manager'),
        )

    def compute_default_bundles(self) -> list:
        return [
            bundle_id
            for bundle_id, definition in self.icon_bundle_manager.get_definitions().items()
            if definition.provider == DEFAULT_BUNDLE_PROVIDER
        ]

    def default_configuration(self) -> dict:
        return {
            'defaultBundles': self.compute_default_bundles(),
            'containerBaseClass': 'ambientimpact-icon',
            'defaults': {
                'bundle': 'core',
                'size': 24,
                'containerTag': 'span',
                'textDisplay': 'visible',
            },
        }

    def get_js_settings(self) -> dict:
        config = self.configuration
        js_settings = {
            'containerBaseClass': config['containerBaseClass'],
            'templateDefaults': copy.deepcopy(config['defaults']),
            'template': self.renderer.render_isolated(dict(TEMPLATE_ELEMENT)),
            'bundles': {},
        }

        # URLs der Bundles und ob sie auf dieser Seite benutzt werden
        for bundle_id, bundle in self.icon_bundle_manager.get_icon_bundle_instances().items():
            js_settings['bundles'][bundle_id] = {
                'url': bundle.get_url(),
                'used': bundle.is_used(),
            }

        return js_settings
