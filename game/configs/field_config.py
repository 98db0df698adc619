"""
Configuration for the asteroid field simulation
Frame-based units: distances in pixels, speeds in pixels/frame, times in ms
"""

import math

# World parameters
WORLD_CONFIG = {
    "ship_start": (256.0, 256.0),
    "n_particles": 100,
    "asteroid_spawn_chance": 0.05,  # per frame
    "asteroid_spawn_y": -50.0,
}

# ==============================================================================
# ENTITY PARAMETERS
# ==============================================================================

SHIP_CONFIG = {
    "start_angle": -0.5 * math.pi,  # pointing up
    "thrust": 0.15,
    "reverse_thrust": -0.1,
    "rotation_speed": 0.06,     # rad/frame
    "friction": 0.985,          # velocity multiplier per frame
    "gravity": 0.05,            # added to velocity.y per frame
    "fire_cooldown_ms": 125.0,
    "fire_jitter": 0.1,         # total spread in rad, centered on heading
}

BULLET_CONFIG = {
    "speed": 15.0,
    "gravity": 0.05,
    "rect": (-8.0, -1.0, 24.0, 2.0),  # local x, y, w, h
}

PARTICLE_CONFIG = {
    "distance_offset": 0.25,    # distance = U[0,1) + offset
    "speed_scale": 7.5,
    "radius_scale": 2.0,
}

ASTEROID_CONFIG = {
    "speed_range": (3.0, 5.0),
    "radius_range": (10.0, 60.0),
}

# ==============================================================================
# RENDERING
# ==============================================================================

COLORS = {
    "background": (21, 5, 5),     # #150505
    "particle": (68, 68, 68),     # #444
    "asteroid": (136, 102, 0),    # #860
    "bullet": (255, 255, 85),     # #ff5
    "ship": (34, 170, 255),       # #2af
}

WINDOW_CONFIG = {
    "title": "Asteroid Field",
    "width": 512,               # canvas size; the World reads it from the canvas
    "height": 512,
    "fps": 60,
    "headless_frames": 1000,
    "log_every": 250,           # frames between headless progress lines
}


def merged_world_config(overrides=None):
    """Return WORLD_CONFIG with overrides applied, rejecting unknown keys"""
    config = dict(WORLD_CONFIG)
    if overrides:
        unknown = set(overrides) - set(config)
        if unknown:
            raise KeyError(f"Unknown world config keys: {sorted(unknown)}")
        config.update(overrides)
    return config


if __name__ == "__main__":
    for name, cfg in [("WORLD", WORLD_CONFIG), ("SHIP", SHIP_CONFIG),
                      ("BULLET", BULLET_CONFIG), ("ASTEROID", ASTEROID_CONFIG)]:
        print(f"{name}:")
        for key, value in cfg.items():
            print(f"  {key:24} {value}")
