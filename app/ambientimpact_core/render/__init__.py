from .elements import ElementRegistry, ElementType
from .renderer import IsolatedRenderer, LegacyRenderer, Renderer, isolated_renderer

__all__ = [
    "ElementRegistry",
    "ElementType",
    "IsolatedRenderer",
    "LegacyRenderer",
    "Renderer",
    "isolated_renderer",
]
