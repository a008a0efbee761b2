#!/usr/bin/env python3
"""
Planets application entry point.

What this module does
- Parses command line overrides for the physics constants and window size.
- Builds the Body Store with its physics engine and the default two-planet scene.
- Runs a single-threaded frame loop driving both the pygame viewport and the
  Dear PyGui "Planet Creator" panel.

Frame order
1) Viewport input (spawn on right click, focus cycling, zoom, panel toggle)
2) Queued removals from the panel, with the camera focus remapped after each
3) One physics step over all planets
4) Camera follows the focused planet; viewport and panel draw

Running
1) Install dependencies: `pip install pygame dearpygui`
2) Run this module: `python planets_sim.py`
"""

import argparse
import logging
import sys

from planets.body_store import BodyStore
from planets.camera import Camera, FocusTracker
from planets.constants import G, RESTITUTION_COEFFICIENT, VIEW_HEIGHT, VIEW_WIDTH
from planets.physics import PlanetPhysics

logger = logging.getLogger("planets")


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Planets - small N-body gravity sandbox")
    parser.add_argument("--gravity", type=float, default=G,
                        help=f"Gravitational constant (default: {G})")
    parser.add_argument("--restitution", type=float, default=RESTITUTION_COEFFICIENT,
                        help=f"Collision restitution in [0, 1] (default: {RESTITUTION_COEFFICIENT})")
    parser.add_argument("--width", type=int, default=VIEW_WIDTH, help="Viewport width in pixels")
    parser.add_argument("--height", type=int, default=VIEW_HEIGHT, help="Viewport height in pixels")
    parser.add_argument("--empty", action="store_true", help="Start without the default planets")
    parser.add_argument("--no-ui", action="store_true", help="Start with the Planet Creator hidden")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    return parser.parse_args(argv)


def build_default_scene(store: BodyStore, width: int, height: int) -> None:
    """A light red planet next to a heavier white one, both drifting slightly."""
    store.spawn((width / 2.0, height / 2.0), 5.0, (-0.1, -0.1), 5.0, (1.0, 0.0, 0.0, 1.0))
    store.spawn((width / 2.0 + 100.0, height / 2.0), 10.0, (0.1, 0.1), 10.0, (1.0, 1.0, 1.0, 1.0))
    logger.info("Default scene with %d planets", len(store))


def apply_removals(store: BodyStore, focus: FocusTracker, editor) -> None:
    for index in editor.pop_removals():
        try:
            store.remove(index)
        except IndexError as exc:
            logger.warning("Removal rejected: %s", exc)
            editor.set_error(str(exc))
            continue
        focus.on_removed(index, len(store))
        editor.set_status(f"Removed planet {index + 1}.")


def run(args) -> None:
    # GUI libraries are imported here so --help works without a display
    from planets.editor import PlanetEditor
    from planets.renderer import PygameRenderer

    store = BodyStore(PlanetPhysics(gravity=args.gravity, restitution=args.restitution))
    if not args.empty:
        build_default_scene(store, args.width, args.height)

    camera = Camera(target=(args.width / 2.0, args.height / 2.0))
    focus = FocusTracker()
    renderer = PygameRenderer(store, camera, focus)
    editor = PlanetEditor(visible=not args.no_ui)
    renderer.open(args.width, args.height)

    try:
        while renderer.running and editor.is_running():
            renderer.handle_events(editor.params, editor.spawn_on_click)
            if renderer.toggle_ui_requested:
                renderer.toggle_ui_requested = False
                editor.toggle()
            apply_removals(store, focus, editor)

            store.step()

            body = focus.resolve(store)
            if body is not None:
                camera.follow(body.position)

            renderer.draw()
            editor.sync(store)
            editor.render_frame()
            renderer.tick()
    finally:
        logger.info("Shutting down with %d planets", len(store))
        renderer.close()
        editor.close()


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Starting Planets (G=%g, restitution=%g)", args.gravity, args.restitution)
    run(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
