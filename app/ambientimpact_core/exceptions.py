class AmbientImpactError(Exception):
    """Basisklasse für alle Fehler des Frameworks."""


class PluginNotFoundError(AmbientImpactError, KeyError):
    """Eine Komponente, ein Icon-Bundle oder ein Modul existiert nicht."""

    def __init__(self, plugin_type: str, plugin_id: str):
        self.plugin_type = plugin_type
        self.plugin_id = plugin_id
        super().__init__(f"{plugin_type} '{plugin_id}' existiert nicht.")

    def __str__(self):
        # KeyError würde die Nachricht sonst in Anführungszeichen setzen
        return self.args[0]


class ServiceNotFoundError(PluginNotFoundError):
    def __init__(self, name: str):
        super().__init__("Service", name)


class ComponentConfigurationError(AmbientImpactError):
    """Die (zusammengeführte) Konfiguration einer Komponente ist ungültig."""


class UnknownElementError(AmbientImpactError):
    """Für den '#type' eines Render-Elements ist nichts registriert."""
