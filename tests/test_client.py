import pygame
import pytest

from flappy_plane.data_models import GameConfig, GamePhase
from flappy_plane.flappy_client import is_action_event, is_quit_event, parse_args
from flappy_plane.renderer import GROUND_COLOR, SKY_COLOR, Renderer


@pytest.mark.parametrize("event,expected", [
    (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE), True),
    (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a), False),
    (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10), touch=False), True),
    (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10), touch=True), False),
    (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(10, 10), touch=False), False),
    (pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5, finger_id=0), True),
    (pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 1)), False),
])
def test_input_mapping(event, expected):
    assert is_action_event(event) is expected


def test_quit_events():
    assert is_quit_event(pygame.event.Event(pygame.QUIT))
    assert is_quit_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert not is_quit_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))


def test_db_path_from_environment(monkeypatch):
    monkeypatch.setenv("FLAPPY_PLANE_DB", "/tmp/other.db")
    args = parse_args([])
    assert args.db == "/tmp/other.db"
    assert args.player is None
    args = parse_args(["--player", "Ann", "--db", "x.db", "--log-level", "DEBUG"])
    assert (args.player, args.db, args.log_level) == ("Ann", "x.db", "DEBUG")


@pytest.fixture
def renderer():
    config = GameConfig()
    surface = pygame.Surface((config.screen_width, config.screen_height))
    yield Renderer(surface, config)
    pygame.font.quit()


def test_renderer_draws_every_phase(renderer, gliding_engine):
    renderer.draw(gliding_engine.snapshot())
    assert gliding_engine.snapshot().phase is GamePhase.IDLE

    gliding_engine.start()
    for _ in range(60):
        gliding_engine.step()
    renderer.draw(gliding_engine.snapshot())
    assert renderer.surface.get_at((395, 585))[:3] == GROUND_COLOR
    assert renderer.surface.get_at((395, 300))[:3] == SKY_COLOR

    gliding_engine.game_over()
    renderer.draw(gliding_engine.snapshot())
    assert renderer.surface.get_at((395, 300))[:3] != SKY_COLOR


def test_setup_logging_installs_one_line_handler():
    import logging
    from flappy_plane.logger import HumanFormatter, setup_logging

    setup_logging("debug")
    setup_logging("info")
    root = logging.getLogger("flappy_plane")
    assert len(root.handlers) == 1
    assert root.level == logging.INFO

    record = logging.LogRecord("flappy_plane.game_engine", logging.INFO, __file__, 1,
                               "Run started for %s", ("Ann",), None)
    line = HumanFormatter().format(record)
    assert line.endswith("[I] game_engine: Run started for Ann")

    root.handlers.clear()
    root.setLevel(logging.NOTSET)
