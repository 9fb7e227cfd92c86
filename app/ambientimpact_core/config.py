import copy
import os
import yaml

from ambientimpact_core.exceptions import ComponentConfigurationError
from ambientimpact_core.logger import get_logger

DEFAULT_CONFIG_PATH = os.getenv("AMBIENTIMPACT_CONFIG", "config/components.yml")

log = get_logger("ConfigStore")

def merge_deep(base: dict, overrides: dict) -> dict:
    """
    Führt ``overrides`` rekursiv über ``base`` zusammen und gibt ein neues Dict zurück.

    Verschachtelte Dicts werden gemischt, alle anderen Werte (auch Listen)
    werden ersetzt. Keine der Eingaben wird verändert.
    """
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_deep(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged

class ConfigStore:
    """Liest die Overrides aller Komponenten aus einer YAML-Datei (component_id -> Mapping)."""

    def __init__(self, path: str = None):
        self.path = path or DEFAULT_CONFIG_PATH
        self._overrides = None

    def load(self) -> dict:
        if self._overrides is not None:
            return self._overrides

        if not os.path.exists(self.path):
            log.debug(f"Keine Konfigurationsdatei unter {self.path}, nutze Defaults.")
            self._overrides = {}
            return self._overrides

        with open(self.path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ComponentConfigurationError(f"{self.path} muss ein Mapping (component_id -> Einstellungen) enthalten.")

        for component_id, overrides in data.items():
            if overrides is not None and not isinstance(overrides, dict):
                raise ComponentConfigurationError(f"Overrides für '{component_id}' in {self.path} müssen ein Mapping sein.")

        log.info(f"📄 Komponenten-Konfiguration geladen: {self.path} ({len(data)} Einträge)")
        self._overrides = data
        return self._overrides

    def get(self, component_id: str) -> dict:
        return copy.deepcopy(self.load().get(component_id) or {})
