from jinja2 import Environment

from ambientimpact_core.logger import get_logger
from .elements import ElementRegistry

log = get_logger("Renderer")

# Schlüssel, die nicht als Template-Variablen durchgereicht werden
RESERVED_KEYS = ('#type', '#attached')

class BaseRenderer:
    def __init__(self, elements: ElementRegistry, environment: Environment = None):
        self.elements = elements
        self.environment = environment or Environment(
            loader=elements.loader,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Von render() gesammelte Front-End-Libraries der aktuellen Seite
        self.attachments = []

    def _render_element(self, element: dict, attachments) -> str:
        element_type = self.elements.get(element.get('#type'))

        variables = dict(element_type.defaults)
        for key, value in element.items():
            if key.startswith('#') and key not in RESERVED_KEYS:
                variables[key[1:]] = value

        if element_type.preprocess:
            element_type.preprocess(variables)

        if attachments is not None:
            for library in list(element_type.attached) + list(element.get('#attached', [])):
                if library not in attachments:
                    attachments.append(library)

        template = self.environment.get_template(element_type.template)
        return template.render(**variables).strip()

    def render(self, element: dict) -> str:
        """Rendert das Element und sammelt seine Libraries in ``self.attachments``."""
        return self._render_element(element, self.attachments)

    def pop_attachments(self) -> list:
        """Gibt die gesammelten Libraries zurück und leert die Liste für die nächste Seite."""
        attachments, self.attachments = self.attachments, []
        return attachments

    def reset_attachments(self):
        self.attachments = []

class Renderer(BaseRenderer):
    def render_in_isolation(self, element: dict) -> str:
        """Rendert ohne Libraries oder sonstige Metadaten einzusammeln."""
        return self._render_element(element, None)

class LegacyRenderer(BaseRenderer):
    """Renderer-API vor 2.0: die isolierte Variante hieß noch render_plain()."""

    def render_plain(self, element: dict) -> str:
        return self._render_element(element, None)

class IsolatedRenderer:
    """Adapter mit genau einer Methode, den Komponenten für seiteneffektfreies Rendern bekommen."""

    def __init__(self, render_fn):
        self._render_fn = render_fn

    def render_isolated(self, element: dict) -> str:
        return self._render_fn(element)

def isolated_renderer(renderer) -> IsolatedRenderer:
    """Wählt beim Verdrahten einmalig die passende Methode des Renderers aus."""
    if isinstance(renderer, IsolatedRenderer):
        return renderer
    if hasattr(renderer, 'render_in_isolation'):
        return IsolatedRenderer(renderer.render_in_isolation)
    if hasattr(renderer, 'render_plain'):
        log.debug(f"{type(renderer).__name__} kennt nur render_plain(), nutze Legacy-API.")
        return IsolatedRenderer(renderer.render_plain)
    raise TypeError(f"{type(renderer).__name__} bietet weder render_in_isolation() noch render_plain().")
