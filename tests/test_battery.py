import pygame
import pytest

from resgate.battery import (
    BATTERY_HEIGHT,
    BATTERY_WIDTH,
    MAX_ROCKETS,
    Battery,
    Difficulty,
)
from resgate.geometry import Position

GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
BLACK = (0, 0, 0, 255)


@pytest.fixture
def screen():
    surface = pygame.Surface((800, 600))
    surface.fill((0, 0, 0))
    return surface


@pytest.mark.parametrize(
    "level, expected",
    [
        (Difficulty.EASY, (1, 3)),
        (Difficulty.MEDIUM, (2, 6)),
        (Difficulty.HARD, (3, 10)),
    ],
)
def test_reset_sets_capacity(level, expected):
    battery = Battery(Position(200, 520))
    battery.reset(level)
    assert (battery.rockets, battery.max_rockets) == expected
    assert battery.active
    assert not battery.connected


def test_reset_accepts_plain_int():
    battery = Battery()
    battery.reset(2)
    assert battery.max_rockets == MAX_ROCKETS


def test_reset_clears_connection():
    battery = Battery(connected=True)
    battery.reset(Difficulty.EASY)
    assert battery.connected is False


def test_reset_rejects_unknown_level():
    with pytest.raises(ValueError):
        Battery().reset(7)


def test_rockets_never_exceed_max_after_reset():
    for level in Difficulty:
        battery = Battery()
        battery.reset(level)
        assert 0 < battery.rockets < battery.max_rockets <= MAX_ROCKETS


def test_fallback_texture_is_blue(tmp_path):
    battery = Battery()
    assert battery.load_texture(tmp_path / "missing.bmp") is False
    assert battery.texture.get_size() == (BATTERY_WIDTH, BATTERY_HEIGHT)
    assert battery.texture.get_at((0, 0)) == BLUE


def test_fallback_without_path():
    battery = Battery()
    assert battery.load_texture(None) is False
    assert battery.texture.get_at((5, 5)) == BLUE


def test_load_real_image(tmp_path):
    image = pygame.Surface((BATTERY_WIDTH, BATTERY_HEIGHT))
    image.fill((10, 20, 30))
    path = tmp_path / "battery.bmp"
    pygame.image.save(image, str(path))
    battery = Battery()
    assert battery.load_texture(path) is True
    assert battery.texture.get_at((1, 1))[:3] == (10, 20, 30)


def test_release_drops_texture():
    battery = Battery()
    battery.load_texture()
    battery.release()
    assert battery.texture is None


def test_inactive_battery_draws_nothing(screen):
    battery = Battery(Position(200, 520))
    battery.load_texture()
    battery.draw(screen)
    assert screen.get_at((210, 530)) == BLACK


def test_draw_blits_texture_and_partial_bar(screen):
    battery = Battery(Position(200, 520))
    battery.reset(Difficulty.EASY)
    battery.load_texture()
    battery.draw(screen)
    assert screen.get_at((210, 530)) == BLUE
    assert screen.get_at((200, 510)) == GREEN
    assert screen.get_at((200 + BATTERY_WIDTH - 1, 510)) == BLACK


def test_full_battery_bar_spans_width(screen):
    battery = Battery(Position(100, 100))
    battery.reset(Difficulty.MEDIUM)
    battery.rockets = battery.max_rockets
    battery.draw(screen)
    assert screen.get_at((100, 90)) == GREEN
    assert screen.get_at((100 + BATTERY_WIDTH - 1, 90)) == GREEN
    assert screen.get_at((100 + BATTERY_WIDTH, 90)) == BLACK


def test_touches_charger_area():
    battery = Battery(Position(100, 500))
    assert battery.touches(Position(100, 500), 80, 50)
    assert not battery.touches(Position(200, 500), 80, 50)


def test_touches_edge_is_not_collision():
    battery = Battery(Position(0, 0))
    assert not battery.touches(Position(BATTERY_WIDTH, 0), 10, 10)