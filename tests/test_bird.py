from flappyweb.bird import Bird
from flappyweb.geometry import Rect


def test_new_bird_is_at_rest():
    bird = Bird(100, 250, 60, 50)
    assert bird.rect == Rect(100, 250, 60, 50)
    assert bird.velocity == 0
    assert bird.angle == 0


def test_first_fall_step_accumulates_velocity_without_moving():
    bird = Bird(100, 250, 60, 50)
    bird.update(0.5)
    assert bird.velocity == 0.5
    assert bird.rect.y == 250
    assert bird.angle == 2.0


def test_jump_sets_velocity():
    bird = Bird(100, 250, 60, 50)
    bird.update(0.5)
    bird.jump(-8.0)
    assert bird.velocity == -8.0
    assert bird.rect.y == 250


def test_rising_bird_tilts_up_and_moves_up():
    bird = Bird(100, 250, 60, 50)
    bird.jump(-8.0)
    bird.update(0.5)
    assert bird.angle == -30.0
    assert bird.rect.y == 243
    assert bird.rect.x == 100


def test_displacement_truncates_toward_zero():
    bird = Bird(100, 250, 60, 50)
    bird.jump(-0.9)
    bird.update(0.0)
    assert bird.rect.y == 250


def test_tilt_is_capped_when_falling():
    bird = Bird(100, 250, 60, 50)
    for _ in range(40):
        bird.update(0.5)
    assert bird.angle == 30.0


def test_falling_bird_moves_down_monotonically():
    bird = Bird(100, 250, 60, 50)
    positions = []
    for _ in range(20):
        bird.update(0.5)
        positions.append(bird.rect.y)
    assert positions == sorted(positions)
    assert positions[-1] > 250


def test_update_keeps_size_and_x():
    bird = Bird(100, 250, 60, 50)
    bird.jump(-8.0)
    for _ in range(10):
        bird.update(0.5)
    assert (bird.rect.x, bird.rect.w, bird.rect.h) == (100, 60, 50)