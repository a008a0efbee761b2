#!/usr/bin/env python3
"""
Dear PyGui "Planet Creator" panel.

Owns the SpawnParams record used for the next right-click spawn, the
spawn-on-click toggle, and a newest-first list of planets with Remove buttons.
Remove clicks are queued; the host applies them between frames so that the
camera focus can be remapped right after each removal.
"""
import logging
from typing import Dict, List, Optional

import dearpygui.dearpygui as dpg

from .body_store import BodyStore
from .constants import COLOR_RANGE, MASS_RANGE, RADIUS_RANGE, VELOCITY_RANGE
from .data_models import SpawnParams, coerce_color
from .vector_utils import clamp

logger = logging.getLogger("planets.editor")

SYNC_EVERY_FRAMES = 6


class PlanetEditor:
    """
    Dear PyGui interface: spawn parameters and planet list.
    """

    def __init__(self, params: Optional[SpawnParams] = None, visible: bool = True):
        self.params = params if params is not None else SpawnParams()
        self.spawn_on_click = False
        self.visible = visible

        self.window_id = None
        self.planet_list_id = None
        self.status_msg_id = None

        self._pending_removals: List[int] = []
        self._listed: tuple = ()
        self._detail_ids: Dict[int, int] = {}
        self._frame = 0

        self._build_ui()

    # -----------------------
    # UI Construction
    # -----------------------

    def _build_ui(self):
        dpg.create_context()
        dpg.create_viewport(title="Planets - Controls", width=340, height=420)

        with dpg.window(label="Planet Creator", width=300, height=380, pos=(10, 10),
                        show=self.visible) as self.window_id:
            with dpg.tree_node(label="Settings", default_open=True):
                dpg.add_slider_float(label="Radius", default_value=self.params.radius,
                                     min_value=RADIUS_RANGE[0], max_value=RADIUS_RANGE[1],
                                     clamped=True, callback=self._on_radius)
                dpg.add_separator()
                dpg.add_slider_float(label="Velocity X", default_value=self.params.velocity[0],
                                     min_value=VELOCITY_RANGE[0], max_value=VELOCITY_RANGE[1],
                                     callback=self._on_velocity, user_data=0)
                dpg.add_separator()
                dpg.add_slider_float(label="Velocity Y", default_value=self.params.velocity[1],
                                     min_value=VELOCITY_RANGE[0], max_value=VELOCITY_RANGE[1],
                                     callback=self._on_velocity, user_data=1)
                dpg.add_separator()
                dpg.add_slider_float(label="Mass", default_value=self.params.mass,
                                     min_value=MASS_RANGE[0], max_value=MASS_RANGE[1],
                                     clamped=True, callback=self._on_mass)
                dpg.add_separator()
                for channel, label in enumerate(("Red", "Green", "Blue")):
                    dpg.add_slider_float(label=label, default_value=self.params.color[channel],
                                         min_value=COLOR_RANGE[0], max_value=COLOR_RANGE[1],
                                         callback=self._on_color, user_data=channel)
                    dpg.add_separator()
                dpg.add_checkbox(label="Spawn on click", default_value=self.spawn_on_click,
                                 callback=self._on_spawn_on_click)

            with dpg.tree_node(label="Planets", default_open=True):
                self.planet_list_id = dpg.add_group()

            dpg.add_separator()
            self.status_msg_id = dpg.add_text("")

        dpg.setup_dearpygui()
        dpg.show_viewport()

    # -----------------------
    # UI Callbacks
    # -----------------------

    def _on_radius(self, sender, app_data, user_data=None):
        radius = float(app_data)
        if not radius > 0:
            self.set_error("Radius must be positive and non-zero.")
            return
        self.params.radius = clamp(radius, RADIUS_RANGE[0], RADIUS_RANGE[1])

    def _on_mass(self, sender, app_data, user_data=None):
        mass = float(app_data)
        if not mass > 0:
            self.set_error("Mass must be positive and non-zero.")
            return
        self.params.mass = clamp(mass, MASS_RANGE[0], MASS_RANGE[1])

    def _on_velocity(self, sender, app_data, user_data):
        velocity = list(self.params.velocity)
        velocity[user_data] = float(app_data)
        self.params.velocity = (velocity[0], velocity[1])

    def _on_color(self, sender, app_data, user_data):
        color = list(self.params.color)
        color[user_data] = float(app_data)
        self.params.color = coerce_color(color)

    def _on_spawn_on_click(self, sender, app_data, user_data=None):
        self.spawn_on_click = bool(app_data)

    def _on_remove(self, sender, app_data, user_data):
        logger.debug("Removal of planet %d requested", user_data)
        self._pending_removals.append(user_data)

    def set_status(self, msg: str, color=(180, 220, 180)):
        dpg.set_value(self.status_msg_id, msg)
        dpg.configure_item(self.status_msg_id, color=color)

    def set_error(self, msg: str):
        self.set_status(msg, color=(255, 120, 120))

    # -----------------------
    # Host interface
    # -----------------------

    def is_running(self) -> bool:
        return dpg.is_dearpygui_running()

    def toggle(self) -> None:
        self.visible = not self.visible
        dpg.configure_item(self.window_id, show=self.visible)

    def pop_removals(self) -> List[int]:
        """Return queued removal indices, highest first, and clear the queue."""
        pending = sorted(set(self._pending_removals), reverse=True)
        self._pending_removals.clear()
        return pending

    def _rebuild_planet_list(self, store: BodyStore) -> None:
        dpg.delete_item(self.planet_list_id, children_only=True)
        self._detail_ids.clear()
        for i, b in store.newest_first():
            with dpg.tree_node(label=f"Planet {i + 1}", parent=self.planet_list_id):
                self._detail_ids[i] = dpg.add_text(self._describe(b))
                dpg.add_button(label="Remove", callback=self._on_remove, user_data=i)
        self._listed = tuple(id(b) for b in store)

    @staticmethod
    def _describe(b) -> str:
        return (f"Radius: {b.radius:g}\nMass: {b.mass:g}\n"
                f"Velocity: ({b.velocity[0]:.3f}, {b.velocity[1]:.3f})")

    def sync(self, store: BodyStore) -> None:
        """Refresh the planet list; details update roughly ten times a second."""
        if tuple(id(b) for b in store) != self._listed:
            self._rebuild_planet_list(store)
            return
        self._frame = (self._frame + 1) % SYNC_EVERY_FRAMES
        if self._frame:
            return
        for i, text_id in self._detail_ids.items():
            dpg.set_value(text_id, self._describe(store[i]))

    def render_frame(self) -> None:
        dpg.render_dearpygui_frame()

    def close(self) -> None:
        dpg.destroy_context()
