import os
from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.staticfiles import StaticFiles

from ambientimpact_core.exceptions import PluginNotFoundError
from ambientimpact_core.logger import get_logger

log = get_logger("Routes")

ASSETS_DIR = "assets"

def start_request(services, path: str):
    """Jede Anfrage beginnt frisch: Module setzen hier ihren Seiten-Zustand zurück."""
    services.bus.emit('page:request_start', {'path': path})

def build_client_settings(component_manager) -> dict:
    """Das Objekt, das im Front-End als Konfiguration der Seite landet."""
    return {"AmbientImpact": {"components": component_manager.get_component_js_settings()}}

def build_router(services) -> APIRouter:
    router = APIRouter(prefix="/api/components", tags=["components"])

    @router.get("/settings")
    def get_all_settings():
        start_request(services, "/api/components/settings")
        return build_client_settings(services.component_manager)

    @router.get("/{component_id}/settings")
    def get_component_settings(component_id: str):
        start_request(services, f"/api/components/{component_id}/settings")
        try:
            component = services.component_manager.get_component(component_id)
        except PluginNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))
        return component.get_js_settings()

    return router

def mount_module_assets(app: FastAPI, services):
    """Stellt das assets/-Verzeichnis jedes Moduls unter <assets_prefix>/<module_id> bereit."""
    for module_id in services.module_manager.registry:
        assets_path = os.path.join(services.module_manager.get_module_path(module_id), ASSETS_DIR)
        if not os.path.isdir(assets_path):
            continue
        mount_path = f"{services.assets_prefix}/{module_id}"
        app.mount(mount_path, StaticFiles(directory=assets_path), name=f"assets:{module_id}")
        log.debug(f"Assets von {module_id} unter {mount_path} eingehängt.")
