import math

import pytest

from game.field2D import CanvasUnavailableError, Key, RecordingCanvas, World
from game.field2D.entities import Asteroid, Bullet, Vector2


def test_initial_state(world):
    assert len(world.ships) == 1
    assert world.ship.position == Vector2(256.0, 256.0)
    assert len(world.particles) == 100
    assert world.asteroids == []
    assert world.bullets == []
    for p in world.particles:
        assert 0 <= p.position.x < 512
        assert 0 <= p.position.y < 512


def test_refuses_to_start_without_canvas():
    with pytest.raises(CanvasUnavailableError):
        World(None)
    with pytest.raises(CanvasUnavailableError):
        World(RecordingCanvas(0, 512))


def test_config_overrides(canvas):
    w = World(canvas, seed=0, config={"n_particles": 5, "ship_start": (10, 20)})
    assert len(w.particles) == 5
    assert w.ship.position == Vector2(10.0, 20.0)
    with pytest.raises(KeyError):
        World(canvas, config={"gravity": 1.0})


@pytest.mark.parametrize("key", ["width", "height"])
def test_size_comes_from_canvas_not_config(canvas, key):
    # Size belongs to the canvas, not the world config
    with pytest.raises(KeyError):
        World(canvas, config={key: 800})
    assert World(RecordingCanvas(800, 300), seed=0).width == 800
    assert World(RecordingCanvas(800, 300), seed=0).height == 300


def test_spawn_chance_bounds(canvas):
    always = World(canvas, seed=0, config={"asteroid_spawn_chance": 1.0})
    for i in range(10):
        always.update(i * 16.0)
    assert len(always.asteroids) == 10

    never = World(canvas, seed=0, config={"asteroid_spawn_chance": 0.0})
    for i in range(200):
        never.update(i * 16.0)
    assert never.asteroids == []


def test_spawned_asteroid_starts_above_field(world):
    a = world.spawn_asteroid()
    assert a.position.y == -50.0
    assert 0 <= a.position.x < 512
    assert 3.0 <= a.speed < 5.0
    assert 10.0 <= a.radius < 60.0


def test_asteroid_removed_exactly_when_past_bottom(world):
    asteroid = world.spawn_asteroid(x=100.0, speed=4.0)
    threshold = world.height + asteroid.radius

    frames = 0
    while any(a is asteroid for a in world.asteroids):
        last_y = asteroid.position.y
        assert last_y <= threshold
        world.update(frames * 16.0)
        frames += 1
        assert frames < 1000

    # Removed on the first frame it went past the bottom edge
    assert asteroid.position.y > threshold
    assert asteroid.position.y - 4.0 <= threshold
    assert asteroid.position.y == pytest.approx(-50.0 + 4.0 * frames)


def test_bullet_leaving_canvas_is_removed(world):
    world.bullets.append(Bullet(Vector2(5.0, 100.0), angle=math.pi))
    world.bullets.append(Bullet(Vector2(256.0, 100.0), angle=0.0))
    world.update(0.0)
    assert len(world.bullets) == 1
    assert world.bullets[0].position.x == pytest.approx(271.0)


def test_removal_keeps_order_and_list_identity(world):
    bullets = world.bullets
    kept = [Asteroid(Vector2(float(x), 0.0), speed=1.0, radius=10.0) for x in range(3)]
    doomed = Asteroid(Vector2(0.0, 600.0), speed=1.0, radius=10.0)
    world.asteroids.extend([kept[0], doomed, kept[1], kept[2]])
    world.update(0.0)
    assert [a.position.x for a in world.asteroids] == [0.0, 1.0, 2.0]
    assert world.bullets is bullets


def test_fired_bullet_updates_in_same_frame(world):
    world.input_state.press(Key.SPACE)
    world.update(0.0)
    assert len(world.bullets) == 1
    bullet = world.bullets[0]
    ship = world.ship
    # Ships update before bullets, so the new bullet has already moved once
    assert bullet.position.x == pytest.approx(ship.position.x + 15 * math.cos(bullet.angle))
    assert bullet.position.y == pytest.approx(ship.position.y + 15 * math.sin(bullet.angle))
    assert bullet.velocity.y == pytest.approx(15 * math.sin(bullet.angle) + 0.05)


def test_fire_rate_follows_clock(world):
    world.input_state.press(Key.SPACE)
    world.update(0.0)
    world.update(60.0)
    world.update(124.0)
    assert len(world.bullets) == 1
    world.update(125.0)
    assert len(world.bullets) == 2


def test_draw_order(world, canvas):
    world.bullets.append(Bullet(Vector2(100.0, 100.0), angle=0.0))
    world.asteroids.append(Asteroid(Vector2(50.0, 50.0), speed=3.0, radius=12.0))
    world.draw()

    kinds = [op[0] for op in canvas.ops]
    colors = [op[-1] for op in canvas.ops[1:]]
    assert kinds[0] == "clear"
    assert colors[0] == (0x15, 0x05, 0x05)           # background
    assert colors[1:3] == [(0x22, 0xAA, 0xFF)] * 2   # ship
    assert colors[3:103] == [(0x44, 0x44, 0x44)] * 100  # particles
    assert colors[103] == (0xFF, 0xFF, 0x55)         # bullet
    assert colors[104] == (0x88, 0x66, 0x00)         # asteroid
    assert len(colors) == 105
    assert canvas.depth == 0


def test_long_run_ship_falls(world):
    for i in range(1000):
        world.step(i * 16.0)
    ship = world.ship
    assert ship.position.y > 256.0
    assert ship.position.x == pytest.approx(256.0)
    # Terminal fall speed where gravity and friction balance
    assert ship.velocity.y == pytest.approx(0.05 * 0.985 / (1 - 0.985), rel=1e-3)
    assert world.frame_count == 1000


def test_particles_stay_in_wrapped_band(world):
    for i in range(500):
        world.update(i * 16.0)
    for p in world.particles:
        assert -p.radius <= p.position.y <= world.height + p.radius + p.speed


def test_same_seed_same_run():
    def run(seed):
        w = World(RecordingCanvas(512, 512), seed=seed)
        w.input_state.press(Key.SPACE)
        w.input_state.press(Key.A)
        for i in range(300):
            w.update(i * 20.0)
        return ([(a.position.x, a.position.y, a.radius) for a in w.asteroids],
                [b.angle for b in w.bullets])

    assert run(7) == run(7)


def test_stats(world):
    world.spawn_asteroid()
    stats = world.stats()
    assert stats == {"frame": 0, "num_particles": 100, "num_asteroids": 1, "num_bullets": 0}
