from jinja2 import ChoiceLoader, FileSystemLoader

from ambientimpact_core.exceptions import UnknownElementError
from ambientimpact_core.logger import get_logger

log = get_logger("Elements")

class ElementType:
    """
    Beschreibt einen Render-Element-Typ (den Wert von '#type').

    ``defaults`` sind die Template-Variablen ohne '#', ``preprocess`` bekommt
    das fertige Variablen-Dict und darf es verändern, ``attached`` listet die
    Front-End-Libraries, die das Element benötigt.
    """
    def __init__(self, template: str, defaults: dict = None, preprocess=None, attached: list = None):
        self.template = template
        self.defaults = defaults or {}
        self.preprocess = preprocess
        self.attached = attached or []

class ElementRegistry:
    def __init__(self):
        self.types = {}
        # Wird mit jedem Modul, das Templates mitbringt, erweitert
        self.loader = ChoiceLoader([])

    def register(self, name: str, element_type: ElementType, template_dir: str = None):
        if name in self.types:
            log.warning(f"⚠️ Element-Typ '{name}' wird überschrieben.")
        self.types[name] = element_type
        if template_dir:
            self.loader.loaders.append(FileSystemLoader(template_dir))
        log.debug(f"Element-Typ registriert: {name}")

    def has(self, name: str) -> bool:
        return name in self.types

    def get(self, name: str) -> ElementType:
        if name not in self.types:
            raise UnknownElementError(f"Kein Element-Typ für '#type': {name!r} registriert.")
        return self.types[name]
