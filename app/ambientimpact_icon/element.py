import os

from ambientimpact_core.render import ElementType

ELEMENT_TYPE = "ambientimpact_icon"
TEMPLATE = "ambientimpact-icon.html.j2"
TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")

DEFAULT_BASE_CLASS = "ambientimpact-icon"

def build_icon_element(icon_bundle_manager, get_base_class=None) -> ElementType:
    """
    ``get_base_class`` liefert die BEM-Basisklasse, normalerweise das
    containerBaseClass der Icon-Komponente. Es wird erst beim Rendern gefragt,
    damit Overrides aus der Konfiguration auch im Server-Markup ankommen.
    """
    def preprocess(variables):
        bundle_id = variables.get('bundle')
        if not bundle_id:
            variables['classes'] = []
            return

        bundle = icon_bundle_manager.get_icon_bundle(bundle_id)
        if not variables.get('url'):
            variables['url'] = bundle.get_url()
        # Das Front-End lädt nur Sprites, die auf der Seite auch benutzt werden
        bundle.set_used()

        base = variables.get('baseClass') or (get_base_class() if get_base_class else DEFAULT_BASE_CLASS)
        variables['baseClass'] = base
        variables['classes'] = [
            base,
            f"{base}--icon-{variables['icon']}",
            f"{base}--bundle-{bundle_id}",
            f"{base}--text-{variables['textDisplay']}",
        ]

    return ElementType(
        template=TEMPLATE,
        defaults={
            'containerTag': 'span',
            'icon': None,
            'bundle': None,
            'url': None,
            'size': 24,
            'text': '',
            'textDisplay': 'visible',
            'baseClass': None,
        },
        preprocess=preprocess,
        attached=["ambientimpact_icon/icon"],
    )
