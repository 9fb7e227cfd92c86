import copy
from pydantic import ValidationError

from ambientimpact_core.config import merge_deep
from ambientimpact_core.exceptions import ComponentConfigurationError
from .models import ComponentDefinition

class ComponentBase:
    """
    Basisklasse für alle Komponenten.

    Der Konstruktor ruft set_configuration() und damit
    default_configuration() auf. Unterklassen, die dafür eigene Dienste
    brauchen, müssen diese VOR super().__init__() setzen.
    """

    # Optionales Pydantic-Model, gegen das die zusammengeführte Konfiguration validiert wird
    configuration_model = None

    def __init__(self, configuration: dict, plugin_id: str, plugin_definition: ComponentDefinition, renderer):
        self.plugin_id = plugin_id
        self.plugin_definition = plugin_definition
        self.renderer = renderer
        self.set_configuration(configuration)

    @classmethod
    def create(cls, services, configuration: dict, plugin_id: str, plugin_definition: ComponentDefinition):
        """Factory für den Komponenten-Manager; Unterklassen holen sich hier ihre Dienste."""
        return cls(configuration, plugin_id, plugin_definition, services.isolated_renderer)

    def default_configuration(self) -> dict:
        return {}

    def get_configuration(self) -> dict:
        return copy.deepcopy(self.configuration)

    def set_configuration(self, configuration: dict):
        merged = merge_deep(self.default_configuration(), configuration or {})

        if self.configuration_model is not None:
            try:
                merged = self.configuration_model.model_validate(merged).model_dump()
            except ValidationError as e:
                raise ComponentConfigurationError(
                    f"Ungültige Konfiguration für Komponente '{self.plugin_id}': {e}"
                ) from e

        self.configuration = merged

    def get_js_settings(self) -> dict:
        return {}

    def has_js_settings(self) -> bool:
        return bool(self.get_js_settings())
