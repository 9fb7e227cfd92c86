from fastapi import FastAPI
from nicegui import ui

from ambientimpact_core.kernel import boot
from ambientimpact_core.logger import setup_logging
from ambientimpact_core.pages import register_pages
from ambientimpact_core.routes import build_router, mount_module_assets

setup_logging()

app = FastAPI()

# 1. Module, Komponenten und Icon-Bundles laden
services = boot()
app.state.services = services

# 2. API und Assets VOR NiceGUI einhängen, sonst fängt dessen Root-Mount alles ab
app.include_router(build_router(services))
mount_module_assets(app, services)

# 3. Seiten
register_pages(services)

ui.run_with(app, mount_path="/")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8081,
        reload=True,
        reload_dirs=["app/ambientimpact_core", "app/ambientimpact_icon"],
        reload_includes=["*.py", "*.yml", "*.j2"]
    )
