import pygame

from chickenrun.player import (
    GROUND_Y,
    JUMP_SPEED,
    START_X,
    Player,
)


def _sheet():
    sheet = pygame.Surface((300, 100))
    sheet.fill((255, 0, 0), pygame.Rect(0, 0, 100, 100))
    sheet.fill((0, 255, 0), pygame.Rect(100, 0, 100, 100))
    sheet.fill((0, 0, 255), pygame.Rect(200, 0, 100, 100))
    return sheet


def test_starts_on_ground():
    player = Player(_sheet())
    assert (player.x, player.y) == (START_X, GROUND_Y)
    assert player.is_jumping is False


def test_frame_size_from_sheet():
    player = Player(_sheet())
    assert player.frame_width * 3 == 300
    assert player.frame_height == 100


def test_start_jump_sets_upward_speed():
    player = Player(_sheet())
    player.start_jump()
    assert player.is_jumping is True
    assert player.velocity_y == -JUMP_SPEED


def test_second_jump_in_air_is_ignored():
    player = Player(_sheet())
    player.start_jump()
    player.update()
    speed = player.velocity_y
    player.start_jump()
    assert player.velocity_y == speed


def test_jump_rises_then_lands():
    player = Player(_sheet())
    player.start_jump()
    heights = []
    for _ in range(200):
        player.update()
        heights.append(player.y)
        if not player.is_jumping:
            break
    assert min(heights) < GROUND_Y
    assert player.y == GROUND_Y
    assert player.velocity_y == 0
    assert player.is_jumping is False


def test_animation_cycles_through_all_frames():
    player = Player(_sheet())
    frames = set()
    for _ in range(100):
        player.update()
        frames.add(player.current_frame)
    assert frames == {0, 1, 2}


def test_animation_holds_while_jumping():
    player = Player(_sheet())
    player.start_jump()
    before = (player.current_frame, player.frame_counter)
    for _ in range(5):
        player.update()
    assert (player.current_frame, player.frame_counter) == before


def test_reset_returns_to_ground():
    player = Player(_sheet())
    for _ in range(10):
        player.update()
    player.start_jump()
    player.update()
    player.reset()
    assert player.y == GROUND_Y
    assert player.is_jumping is False
    assert (player.current_frame, player.frame_counter) == (0, 0)


def test_hit_box_is_centred_in_frame():
    player = Player(_sheet())
    x, y, width, height = player.rect
    assert x - player.x == (player.x + player.frame_width) - (x + width)
    assert y - player.y == (player.y + player.frame_height) - (y + height)
    assert width > 0 and height > 0


def test_hit_box_follows_jump():
    player = Player(_sheet())
    before = player.rect
    player.start_jump()
    player.update()
    after = player.rect
    assert after[1] - before[1] == player.y - GROUND_Y
    assert after[0] == before[0]


def test_draw_uses_current_frame():
    player = Player(_sheet())
    screen = pygame.Surface((800, 450))
    player.draw(screen)
    assert screen.get_at((int(player.x), int(player.y)))[:3] == (255, 0, 0)
    while player.current_frame != 1:
        player.update()
    player.draw(screen)
    assert screen.get_at((int(player.x), int(player.y)))[:3] == (0, 255, 0)