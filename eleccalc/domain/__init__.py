from .navigation import NavigationState, ViewportClass, classify_viewport
from .panels import DEFAULT_REGISTRY, PANELS, IconKey, PanelDescriptor, PanelRegistry

__all__ = [
    "NavigationState",
    "ViewportClass",
    "classify_viewport",
    "DEFAULT_REGISTRY",
    "PANELS",
    "IconKey",
    "PanelDescriptor",
    "PanelRegistry",
]
