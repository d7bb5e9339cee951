"""
Navigation shell: top bar, drawer menu and content region.

The shell is a controlled component. It highlights ``active_id`` and reports
clicks through ``on_select``; the caller owns the state and decides whether
the selection is applied. ``build_shell_layout`` is the pure model behind
``render_shell``.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

import streamlit as st

from eleccalc.domain.navigation import (
    DEFAULT_BREAKPOINT_PX,
    DEFAULT_DRAWER_WIDTH_PX,
    ViewportClass,
    classify_viewport,
)
from eleccalc.domain.panels import DEFAULT_REGISTRY, PanelRegistry
from eleccalc.web.icons import icon_for
from eleccalc.web.styles import (
    apply_overlay_drawer,
    apply_responsive_layout,
    render_sidebar_header,
    render_top_bar,
)


class DrawerMode(Enum):
    PERMANENT = "permanent"
    TEMPORARY = "temporary"


@dataclass(frozen=True)
class MenuItemView:
    id: str
    label: str
    glyph: str
    selected: bool


@dataclass(frozen=True)
class ShellLayout:
    viewport: ViewportClass
    drawer_mode: DrawerMode
    drawer_visible: bool
    drawer_width: int
    viewport_width: Optional[float]
    content_width: Optional[float]
    menu_items: Tuple[MenuItemView, ...]

    @property
    def selected_ids(self) -> Tuple[str, ...]:
        return tuple(item.id for item in self.menu_items if item.selected)


def build_shell_layout(
    registry: PanelRegistry,
    active_id: str,
    viewport_width: Optional[float] = None,
    drawer_open: bool = False,
    drawer_width: int = DEFAULT_DRAWER_WIDTH_PX,
    breakpoint: int = DEFAULT_BREAKPOINT_PX,
) -> ShellLayout:
    """Compute what the shell shows for one render.

    An unknown ``active_id`` yields no selected entry. With no viewport width
    the layout is the wide one and ``content_width`` is left to the browser.
    """
    items = tuple(
        MenuItemView(p.id, p.label, icon_for(p.icon), p.id == active_id)
        for p in registry.list()
    )

    viewport = ViewportClass.WIDE if viewport_width is None else classify_viewport(viewport_width, breakpoint)
    if viewport is ViewportClass.WIDE:
        content_width = None if viewport_width is None else viewport_width - drawer_width
        return ShellLayout(viewport, DrawerMode.PERMANENT, True, drawer_width,
                           viewport_width, content_width, items)

    # overlay drawer: content keeps the full viewport width
    return ShellLayout(viewport, DrawerMode.TEMPORARY, drawer_open, drawer_width,
                       viewport_width, viewport_width, items)


def _render_menu(container, layout: ShellLayout, on_select: Callable[[str], None]) -> None:
    for item in layout.menu_items:
        container.button(
            f"{item.glyph}  {item.label}",
            key=f"nav-{item.id}",
            type="primary" if item.selected else "secondary",
            use_container_width=True,
            on_click=on_select,
            args=(item.id,),
        )


def render_shell(
    content: Callable[[], None],
    active_id: str,
    on_select: Callable[[str], None],
    *,
    registry: PanelRegistry = DEFAULT_REGISTRY,
    title: str = "Electrical Calculator",
    subtitle: str = "",
    version: str = "",
    viewport_width: Optional[float] = None,
    drawer_open: bool = False,
    on_toggle_drawer: Optional[Callable[[], None]] = None,
    drawer_width: int = DEFAULT_DRAWER_WIDTH_PX,
    breakpoint: int = DEFAULT_BREAKPOINT_PX,
) -> None:
    """Draw the top bar, the menu and then ``content`` in the content region.

    The menu always lives in the sidebar. In the narrow layout the sidebar is
    only populated while the drawer is open, and it floats over the content,
    so the main column is the same with the drawer open or closed.
    """
    layout = build_shell_layout(registry, active_id, viewport_width, drawer_open, drawer_width, breakpoint)
    apply_responsive_layout(breakpoint, drawer_width)

    if layout.drawer_mode is DrawerMode.PERMANENT:
        render_top_bar(title, subtitle)
        if version:
            render_sidebar_header(title, version)
        _render_menu(st.sidebar, layout, on_select)
    else:
        bar, toggle = st.columns([6, 1])
        with bar:
            render_top_bar(title, subtitle)
        with toggle:
            st.button(
                "✕" if layout.drawer_visible else "☰",
                key="nav-drawer-toggle",
                help="Close menu" if layout.drawer_visible else "Open menu",
                on_click=on_toggle_drawer,
            )
        if layout.drawer_visible:
            apply_overlay_drawer(drawer_width)
            if version:
                render_sidebar_header(title, version)
            _render_menu(st.sidebar, layout, on_select)

    content()


__all__ = ["DrawerMode", "MenuItemView", "ShellLayout", "build_shell_layout", "render_shell"]
