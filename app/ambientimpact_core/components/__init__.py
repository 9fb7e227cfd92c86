from .base import ComponentBase
from .manager import ComponentPluginManager
from .models import ComponentDefinition

__all__ = ["ComponentBase", "ComponentDefinition", "ComponentPluginManager"]
