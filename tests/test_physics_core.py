import math

import pytest

from flappy_box.config import DifficultyConfig
from flappy_box.constants import MIN_VIEWPORT_SIZE
from flappy_box.data_models import Actor, Obstacle, Viewport
from flappy_box.physics_core import PhysicsCore, clamp, sanitize_viewport


@pytest.fixture
def core():
    return PhysicsCore()


def make_actor(core, viewport, **changes):
    actor = Actor()
    core.scale_actor(actor, viewport)
    core.place_actor(actor, viewport)
    for name, value in changes.items():
        setattr(actor, name, value)
    return actor


def test_actor_is_scaled_from_viewport(core, viewport):
    actor = make_actor(core, viewport)
    assert (actor.x, actor.y) == (200, 300)
    assert actor.width == actor.height == 25  # 600 * 0.04 = 24, floored at 25
    assert actor.gravity == pytest.approx(0.48)
    assert actor.jump_impulse == pytest.approx(-7.2)
    assert actor.terminal_velocity == pytest.approx(6.0)


def test_small_viewport_uses_physics_minimums(core):
    actor = make_actor(core, Viewport(300, 200))
    assert actor.width == 25
    assert actor.gravity == 0.3
    assert actor.jump_impulse == -6.0


def test_gravity_integration_order(core, viewport):
    actor = make_actor(core, viewport)
    core.apply_gravity_and_movement(actor)
    assert actor.velocity == pytest.approx(0.48)
    assert actor.y == pytest.approx(300.48)


def test_terminal_velocity_cap(core, viewport):
    actor = make_actor(core, viewport, velocity=5.9)
    core.apply_gravity_and_movement(actor)
    assert actor.velocity == actor.terminal_velocity


def test_ceiling_clamps_instead_of_colliding(core, viewport):
    actor = make_actor(core, viewport, y=3.0, velocity=-10.0)
    core.apply_gravity_and_movement(actor)
    assert actor.y == 0.0
    assert actor.velocity == 0.0
    assert not core.check_collision(actor, [], viewport)


def test_flap_returns_impulse(core, viewport):
    actor = make_actor(core, viewport)
    assert core.flap(actor) == actor.jump_impulse


def test_obstacle_geometry(core, viewport):
    assert core.obstacle_spacing(viewport) == 150
    assert core.obstacle_width(viewport) == 80
    assert core.obstacle_spacing(Viewport(800, 300)) == 120
    assert core.obstacle_width(Viewport(2000, 600)) == 120  # 0.06 * 2000 beats the cap


def test_gap_bounds_keep_margins(core, viewport):
    assert core.gap_bounds(150, viewport) == (60, 390)


def test_gap_bounds_centre_when_viewport_too_short(core):
    lo, hi = core.gap_bounds(200, Viewport(160, 160))
    assert lo == hi == 0.0
    lo, hi = core.gap_bounds(120, Viewport(400, 140))
    assert lo == hi == 10.0


def test_gap_walk_is_bounded(core, viewport, seeded_rng):
    spacing = core.obstacle_spacing(viewport)
    variation = core.gap_variation(spacing, viewport)
    lo, hi = core.gap_bounds(spacing, viewport)
    top = viewport.height / 2
    for _ in range(500):
        new_top = core.next_gap_top(top, spacing, viewport, seeded_rng)
        assert lo <= new_top <= hi
        assert abs(new_top - top) <= variation / 2 + 1e-9
        top = new_top


def test_floor_collision(core, viewport):
    actor = make_actor(core, viewport, y=575.0)
    assert not core.check_collision(actor, [], viewport)
    actor.y = 575.5
    assert core.check_collision(actor, [], viewport)


@pytest.mark.parametrize("x, y, expected", [
    (200, 300, False),   # inside the gap
    (200, 299, True),    # pokes above gap top
    (200, 426, True),    # bottom 451 below gap bottom
    (200, 425, False),   # bottom exactly on gap bottom
    (175, 0, False),     # right edge touches obstacle x: no overlap
    (280, 0, False),     # left edge touches obstacle right: no overlap
    (279, 0, True),
])
def test_obstacle_collision(core, viewport, x, y, expected):
    actor = make_actor(core, viewport, x=float(x), y=float(y))
    obstacle = Obstacle(x=200, width=80, gap_top=300, spacing=150, speed=3)
    assert core.hits_obstacle(actor, obstacle) is expected


def test_collision_predicate_is_pure(core, viewport):
    actor = make_actor(core, viewport, y=250.0)
    obstacles = [
        Obstacle(x=190, width=80, gap_top=300, spacing=150, speed=3),
        Obstacle(x=600, width=80, gap_top=100, spacing=150, speed=3),
    ]
    results = {core.check_collision(actor, obstacles, viewport) for _ in range(5)}
    results.add(core.check_collision(actor, list(reversed(obstacles)), viewport))
    assert results == {True}
    assert actor.y == 250.0


def test_has_passed_uses_trailing_edge(core, viewport):
    actor = make_actor(core, viewport)
    assert not core.has_passed(actor, Obstacle(x=120, width=80, gap_top=0, spacing=150, speed=3))
    assert core.has_passed(actor, Obstacle(x=119, width=80, gap_top=0, spacing=150, speed=3))


def test_sanitize_viewport_clamps_bad_sizes(caplog):
    assert sanitize_viewport(1024, 768) == Viewport(1024.0, 768.0)
    with caplog.at_level("WARNING", logger="flappy_box"):
        vp = sanitize_viewport(0, -5)
    assert vp == Viewport(MIN_VIEWPORT_SIZE, MIN_VIEWPORT_SIZE)
    assert "clamped" in caplog.text
    assert sanitize_viewport(math.nan, math.inf) == Viewport(MIN_VIEWPORT_SIZE, MIN_VIEWPORT_SIZE)


def test_clamp():
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10


def test_custom_config_changes_formulas(viewport):
    core = PhysicsCore(DifficultyConfig(gravity_ratio=0.0, gravity_min=0.5, min_spacing=200))
    actor = make_actor(core, viewport)
    assert actor.gravity == 0.5
    assert core.obstacle_spacing(viewport) == 200
