import pygame

from planets.body_store import BodyStore
from planets.camera import Camera, FocusTracker
from planets.data_models import SpawnParams
from planets.renderer import PygameRenderer, _safe_point, to_rgba255


def right_click(monkeypatch, pos=(400, 300)):
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=pos)
    monkeypatch.setattr(pygame.event, "get", lambda: [event])


def make_renderer():
    store = BodyStore()
    return PygameRenderer(store, Camera(), FocusTracker()), store


def test_right_click_spawns_at_cursor(monkeypatch):
    renderer, store = make_renderer()
    right_click(monkeypatch, pos=(410, 300))
    renderer.handle_events(SpawnParams(), True)

    assert len(store) == 1
    assert store.position(0) == (10.0, 0.0)


def test_right_click_ignored_when_spawning_disabled(monkeypatch):
    renderer, store = make_renderer()
    right_click(monkeypatch)
    renderer.handle_events(SpawnParams(), False)
    assert len(store) == 0


def test_invalid_spawn_params_do_not_crash(monkeypatch):
    renderer, store = make_renderer()
    right_click(monkeypatch)
    renderer.handle_events(SpawnParams(radius=0.0), True)

    assert len(store) == 0
    assert renderer.running


def test_color_and_point_conversion():
    assert to_rgba255((1.0, 0.0, 0.5, 0.1)) == (255, 0, 128, 26)
    assert _safe_point((1.7, -2.2)) == (1, -2)
    assert _safe_point((float("nan"), 0.0)) is None
    assert _safe_point((float("inf"), 0.0)) is None
