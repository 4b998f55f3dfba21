import random

import pytest

from flappy_plane.data_models import GameConfig, Obstacle, Plane
from flappy_plane.physics_core import PhysicsCore


@pytest.fixture
def core():
    return PhysicsCore()


def make_obstacle(x, top_height=250, width=50, gap=140, floor_y=570):
    return Obstacle(x=x, width=width, top_height=top_height, gap=gap, floor_y=floor_y)


def test_step_plane_applies_gravity(core):
    plane = Plane.spawn(core.config)
    assert core.step_plane(plane) is False
    assert plane.velocity == pytest.approx(0.3)
    assert plane.y == pytest.approx(300.3)


def test_ground_hit_clamps_and_signals(core):
    plane = Plane(x=50, y=539, width=40, height=30, velocity=5)
    assert core.step_plane(plane) is True
    assert plane.y == 540
    assert plane.velocity == 0


def test_ceiling_clamps_without_signal(core):
    plane = Plane(x=50, y=1, width=40, height=30, velocity=-6)
    assert core.step_plane(plane) is False
    assert plane.y == 0
    assert plane.velocity == 0


@pytest.mark.parametrize("velocity,tilt", [(10, 41.2), (20, 45), (-6, -20), (-0.3, 0)])
def test_tilt_follows_velocity_within_limits(core, velocity, tilt):
    plane = Plane(x=50, y=300, width=40, height=30, velocity=velocity)
    core.step_plane(plane)
    assert plane.tilt == pytest.approx(tilt)


def test_jump_overrides_velocity(core):
    plane = Plane(x=50, y=300, width=40, height=30, velocity=8.5)
    core.jump(plane)
    assert plane.velocity == -6
    core.jump(plane)
    assert plane.velocity == -6


def test_spawned_gap_always_fits_on_screen(core):
    rng = random.Random(42)
    assert core.max_top_height() == 380
    for _ in range(2000):
        obs = core.spawn_obstacle(rng)
        assert 50 <= obs.top_height <= 380
        assert obs.bottom_y == obs.top_height + 140
        assert obs.bottom_height == 600 - (obs.top_height + 140) - 30
        assert obs.bottom_height >= 0
        assert obs.x == 400
        assert obs.passed is False


def test_gap_that_cannot_fit_is_rejected():
    with pytest.raises(ValueError):
        PhysicsCore(GameConfig(pipe_gap=500))


def test_step_obstacles_moves_and_drops_offscreen(core):
    keep = make_obstacle(10)
    edge = make_obstacle(-47)      # right edge lands exactly on 0
    gone = make_obstacle(-48)
    remaining = core.step_obstacles([keep, edge, gone])
    assert remaining == [keep, edge]
    assert keep.x == 7
    assert edge.right == 0


def test_no_horizontal_overlap_means_no_collision(core):
    obs = make_obstacle(100)
    for y in range(0, 541, 10):
        plane = Plane(x=50, y=y, width=40, height=30)
        assert core.check_obstacles(plane, [obs]).collided is False


@pytest.mark.parametrize("y", [249, 361])
def test_pipe_strike_is_a_collision(core, y):
    plane = Plane(x=50, y=y, width=40, height=30)
    result = core.check_obstacles(plane, [make_obstacle(60)])
    assert result.collided is True


def test_plane_inside_gap_is_safe(core):
    plane = Plane(x=50, y=250, width=40, height=30)
    assert core.check_obstacles(plane, [make_obstacle(60)]).collided is False
    plane.y = 360
    assert core.check_obstacles(plane, [make_obstacle(60)]).collided is False


def test_passed_obstacle_scores_once(core):
    plane = Plane(x=50, y=300, width=40, height=30)
    obs = make_obstacle(-1)
    assert core.check_obstacles(plane, [obs]).points == 1
    assert obs.passed is True
    assert core.check_obstacles(plane, [obs]).points == 0


def test_touching_trailing_edge_does_not_score(core):
    plane = Plane(x=50, y=300, width=40, height=30)
    obs = make_obstacle(0)
    assert core.check_obstacles(plane, [obs]).points == 0
    assert obs.passed is False


def test_collision_stops_processing(core):
    plane = Plane(x=50, y=0, width=40, height=30)
    hit = make_obstacle(60)
    later = make_obstacle(-5)
    result = core.check_obstacles(plane, [hit, later])
    assert result.collided is True
    assert later.passed is False
