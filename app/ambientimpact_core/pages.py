import json
from nicegui import ui

from ambientimpact_core.routes import build_client_settings, start_request

def _json_script(data, attribute: str) -> str:
    # "</" darf im Script-Tag nicht vorkommen, sonst endet es vorzeitig
    payload = json.dumps(data).replace("</", "<\\/")
    return f'<script type="application/json" {attribute}>{payload}</script>'

def settings_script(settings: dict) -> str:
    return _json_script(settings, "data-ambientimpact-settings")

def libraries_script(libraries: list) -> str:
    return _json_script(libraries, "data-ambientimpact-libraries")

def build_page_head(services) -> str:
    """
    Head-Markup am Ende einer Seite: die Settings aller Komponenten und die
    Libraries, die die gerenderten Elemente angefordert haben. Die Libraries
    werden dabei vom Renderer abgeholt, die nächste Seite beginnt leer.
    """
    settings = build_client_settings(services.component_manager)
    libraries = services.renderer.pop_attachments()
    return settings_script(settings) + libraries_script(libraries)

def register_pages(services):
    @ui.page('/')
    def index_page():
        start_request(services, '/')

        with ui.card().classes('absolute-center shadow-2xl p-8 rounded-3xl w-full max-w-lg'):
            ui.label('Ambient.Impact').classes('text-2xl font-bold mb-2')
            ui.label(f"{len(services.component_manager.registry)} Komponente(n) geladen.").classes('text-sm text-slate-500')

        # Ein echtes Icon rendern, damit das Front-End sein Bundle als benutzt sieht
        if services.elements.has('ambientimpact_icon'):
            ui.add_body_html(services.renderer.render({
                '#type': 'ambientimpact_icon',
                '#bundle': 'core',
                '#icon': 'check',
                '#text': 'Ambient.Impact',
            }))

        # Erst zum Schluss bauen, nachdem alle Icons der Seite gerendert sind
        ui.add_head_html(build_page_head(services))
