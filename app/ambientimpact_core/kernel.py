import os

from ambientimpact_core.bus import bus as global_bus
from ambientimpact_core.config import ConfigStore
from ambientimpact_core.logger import get_logger
from ambientimpact_core.render import ElementRegistry, Renderer
from ambientimpact_core.services import Services

log = get_logger("Kernel")

DEFAULT_MODULES = ["ambientimpact_core", "ambientimpact_icon"]

def get_module_names():
    """AMBIENTIMPACT_MODULES=mod_a,mod_b überschreibt die Standard-Module."""
    raw = os.getenv("AMBIENTIMPACT_MODULES")
    if not raw:
        return list(DEFAULT_MODULES)
    return [name.strip() for name in raw.split(",") if name.strip()]

def boot(module_names=None, config_path: str = None, assets_prefix: str = None, bus=None, renderer_class=Renderer) -> Services:
    """Baut die Dienste auf, lädt alle Module und meldet den fertigen Boot auf dem Bus."""
    if module_names is None:
        module_names = get_module_names()
    if assets_prefix is None:
        assets_prefix = os.getenv("AMBIENTIMPACT_ASSETS_PREFIX", "/modules")

    elements = ElementRegistry()
    services = Services(
        bus=bus or global_bus,
        elements=elements,
        renderer=renderer_class(elements),
        config_store=ConfigStore(config_path),
        assets_prefix=assets_prefix.rstrip("/"),
    )

    log.info("📦 Lade Module und Komponenten...")
    services.module_manager.load_all(module_names)

    services.bus.emit("system:boot_complete", {"modules": list(services.module_manager.registry)})
    return services
