# stickhero/tests/level_tests.py
"""
Platform generation and stick landing checks.

Usage (from repo root):
  python -m stickhero.tests.level_tests
"""

from __future__ import annotations
import sys

from stickhero.game.config import GAP_MIN_W, GAP_MAX_W, PLATFORM_MIN_W, PLATFORM_MAX_W
from stickhero.game.hero import Stick
from stickhero.game.level import Platform, PlatformGenerator, landing_platform, first_platform
from stickhero.tests.helpers import FixedSource


def test_generator_exact_layout():
    """Gap is drawn before width."""
    gen = PlatformGenerator(rng=FixedSource([0.5, 0.25]))
    nxt = gen.generate_next(Platform(50.0, 50.0))
    # gap = 40 + 0.5 * 160, width = 20 + 0.25 * 80
    assert nxt == Platform(x=220.0, width=40.0), nxt


def test_generator_stays_in_range_for_any_draw():
    draws = [0.0, 0.0, 0.999999, 0.999999, 0.5, 0.0, 0.0, 0.999999, 0.123, 0.876]
    gen = PlatformGenerator(rng=FixedSource(draws))
    prev = first_platform()
    for _ in range(len(draws)):
        nxt = gen.generate_next(prev)
        gap = nxt.x - prev.right
        assert GAP_MIN_W <= gap < GAP_MAX_W, f"gap {gap} out of range"
        assert PLATFORM_MIN_W <= nxt.width < PLATFORM_MAX_W, f"width {nxt.width} out of range"
        prev = nxt


def test_generator_custom_ranges():
    gen = PlatformGenerator(rng=FixedSource([0.0]), min_gap=10, max_gap=10, min_width=5, max_width=5)
    nxt = gen.generate_next(Platform(0.0, 10.0))
    assert nxt == Platform(x=20.0, width=5.0)


def test_seeded_generators_agree():
    a = PlatformGenerator(seed=99).extend([first_platform()], 10)
    b = PlatformGenerator(seed=99).extend([first_platform()], 10)
    assert a == b
    xs = [p.x for p in a]
    assert all(x1 < x2 for x1, x2 in zip(xs, xs[1:])), "x must strictly increase"
    assert all(p2.x - p1.right >= GAP_MIN_W for p1, p2 in zip(a, a[1:])), "platforms too close"


def test_reseed_restarts_sequence():
    gen = PlatformGenerator(seed=3)
    first = gen.generate_next(first_platform())
    gen.generate_next(first)
    gen.reseed(3)
    assert gen.generate_next(first_platform()) == first


def test_invalid_ranges_rejected():
    for kwargs in ({"min_gap": -1}, {"min_gap": 50, "max_gap": 10},
                   {"min_width": 0}, {"min_width": 30, "max_width": 10}):
        try:
            PlatformGenerator(seed=1, **kwargs)
        except ValueError:
            continue
        raise AssertionError(f"expected ValueError for {kwargs}")


def test_landing_open_interval():
    plat = Platform(50.0, 50.0)
    assert landing_platform([Stick(x=0.0, length=100.0)], [plat]) is None, "right edge must miss"
    assert landing_platform([Stick(x=0.0, length=50.0)], [plat]) is None, "left edge must miss"
    assert landing_platform([Stick(x=0.0, length=99.999)], [plat]) is plat
    assert landing_platform([Stick(x=0.0, length=50.001)], [plat]) is plat


def test_landing_uses_active_stick_only():
    platforms = [Platform(50.0, 50.0), Platform(220.0, 40.0), Platform(400.0, 60.0)]
    sticks = [Stick(x=0.0, length=60.0, rotation=90.0), Stick(x=100.0, length=140.0)]
    assert landing_platform(sticks, platforms) is platforms[1]
    sticks[-1].length = 200.0   # tip 300, in the gap
    assert landing_platform(sticks, platforms) is None
    sticks[-1].length = 330.0   # tip 430
    assert landing_platform(sticks, platforms) is platforms[2]


def main():
    tests = [v for k, v in sorted(globals().items()) if k.startswith("test_") and callable(v)]
    try:
        for t in tests:
            t()
            print(f"✓ {t.__name__}")
    except AssertionError as e:
        print(f"✗ Test failed: {e}", file=sys.stderr)
        sys.exit(1)
    print("🎉 All level tests passed")


if __name__ == "__main__":
    main()
