"""
Tests for the application shell (headless)
"""

import random
import time

import pytest
import pygame
from smokefield.core.app import App
from smokefield.core.settings_manager import SettingsManager
from smokefield.graphics.renderer import Renderer
from smokefield.simulation.scene import Scene


@pytest.fixture
def app(tmp_path):
    settings = SettingsManager(str(tmp_path / "settings.json"))
    settings.settings["display"]["width"] = 640
    settings.settings["display"]["height"] = 400
    return App(settings, rng=random.Random(7))


def test_start_and_run_frames(app):
    assert app.start()
    app.scheduler.start()
    for now in range(0, 160, 16):
        assert app.scheduler.pump(now)
    assert app.hero.population()["hero_smoke"] == 30
    assert app.backdrop.population()["backdrop_smoke"] == 55
    assert app.panel.result_visible


def test_layout_splits_hero_and_panel(app):
    assert app.start()
    assert app.hero_rect.top == 0
    assert app.panel_rect.top > app.hero_rect.bottom
    assert app.hero_surface.get_size() == app.hero_rect.size


def test_resize_reseeds_after_quiet_period(app):
    assert app.start()
    app.scheduler.start()
    app.scheduler.notify_resize((800, 500), 0)
    app.scheduler.pump(100)
    assert app.hero.width == 640

    app.scheduler.pump(250)
    assert app.hero.width == 800
    assert app.hero_surface.get_width() == 800
    assert len(app.hero.pools[0]) == 30


def test_missing_display_is_silent(app, monkeypatch):
    def no_display(*args, **kwargs):
        raise pygame.error("no video device")

    monkeypatch.setattr(pygame.display, "set_mode", no_display)
    assert app.start() is False
    assert app.screen is None
    app.run()


def test_frame_updates_everything_before_drawing(app, monkeypatch):
    calls = []
    step = Scene.step
    render = Renderer.render

    def recording_step(scene):
        calls.append(("step", scene.name))
        step(scene)

    def recording_render(renderer, scene, surface):
        calls.append(("render", scene.name))
        render(renderer, scene, surface)

    monkeypatch.setattr(Scene, "step", recording_step)
    monkeypatch.setattr(Renderer, "render", recording_render)

    assert app.start()
    app.scheduler.start()
    for now in (0, 16, 32):
        calls.clear()
        assert app.scheduler.pump(now)
        assert [kind for kind, _ in calls] == ["step", "step", "render", "render"]
        assert {name for _, name in calls} == {"hero", "backdrop"}


def test_window_size_changed_is_debounced(app):
    assert app.start()
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.WINDOWSIZECHANGED, x=900, y=500))
    app._poll_events()
    assert app.scheduler.pending_size == (900, 500)


def test_default_window_meets_frame_budget(tmp_path):
    settings = SettingsManager(str(tmp_path / "settings.json"))
    app = App(settings, rng=random.Random(11))
    assert app.start()
    assert app.screen.get_size() == (1280, 720)
    app.hero_pointer.move(300, 200)
    app.page_pointer.move(300, 200)

    app.scheduler.start()
    for now in range(0, 160, 16):
        app.scheduler.pump(now)

    frames = 60
    started = time.perf_counter()
    for i in range(frames):
        # Keep the trail and puff pools busy
        x = 300 + (i % 20) * 30
        app.hero_pointer.move(x, 200)
        app.page_pointer.move(x, 200)
        app.scheduler.pump(160 + i * 16)
    average_ms = (time.perf_counter() - started) * 1000 / frames
    assert average_ms < 40.0
