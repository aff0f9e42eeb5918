import numpy as np
import pytest

from vithi.engine import Engine
from vithi.render.chart import ChartRect, episode_segments, grid_lines, hex_to_rgb, to_screen_points

RECT = ChartRect(left=0, bottom=0, width=100, height=40)


def test_points_span_rect():
    pts = to_screen_points([10, 11, 12], [-2.0, 0.0, 2.0], RECT)
    assert pts.shape == (3, 2)
    assert pts[:, 0].tolist() == pytest.approx([0.0, 50.0, 100.0])
    assert pts[:, 1].tolist() == pytest.approx([0.0, 20.0, 40.0])


def test_values_outside_domain_are_clipped():
    pts = to_screen_points([0, 1], [5.0, -5.0], RECT)
    assert pts[:, 1].tolist() == pytest.approx([40.0, 0.0])


def test_empty_and_single_sample():
    assert to_screen_points([], [], RECT).shape == (0, 2)
    pts = to_screen_points([7], [0.0], ChartRect(60, 10, 200, 100))
    assert pts[0].tolist() == pytest.approx([60.0, 60.0])


def test_episode_segments_group_consecutive_members():
    pts = np.arange(12, dtype=float).reshape(6, 2)
    runs = episode_segments(pts, [False, True, True, True, False, True])
    assert len(runs) == 1
    assert runs[0].tolist() == pts[1:4].tolist()


def test_trailing_episode_run_is_kept():
    pts = np.zeros((4, 2))
    assert len(episode_segments(pts, [False, False, True, True])) == 1


def test_grid_lines():
    ys, xs = grid_lines(RECT, (-2.0, 2.0), y_step=1.0, x_divisions=4)
    assert ys.tolist() == pytest.approx([0, 10, 20, 30, 40])
    assert xs.tolist() == pytest.approx([0, 25, 50, 75, 100])


def test_hex_to_rgb():
    assert hex_to_rgb("#f44336") == (244, 67, 54)
    assert hex_to_rgb("9e9e9e") == (158, 158, 158)


def test_engine_buffer_renders_episode_overlay(fixed_random):
    eng = Engine(rng=fixed_random([0.25]))
    t = 0.0
    eng.tick(t)
    for i in range(10):
        if i == 4:
            eng.trigger_episode()
        t += 100.0
        eng.tick(t)
    seq, values, members = eng.buffer.arrays()
    pts = to_screen_points(seq, values, RECT)
    runs = episode_segments(pts, members)
    assert len(runs) == 1
    assert len(runs[0]) == 3
