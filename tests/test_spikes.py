import random

import pygame
import pytest

from dtts.spikes import Spikes, spike_count


def make_spikes(seed=7, cell=20.0):
    return Spikes(cell, (166, 166, 166), random.Random(seed))


def test_spike_count_zero_score_has_no_spikes():
    assert spike_count(0) == 0


def test_spike_count_small_score_has_one_spike():
    assert spike_count(3) == 1


def test_spike_count_is_capped():
    assert spike_count(1000) == 11


def test_spike_count_never_decreases():
    counts = [spike_count(n) for n in range(200)]
    assert counts == sorted(counts)


def test_random_stays_in_range():
    spikes = make_spikes()
    values = {spikes.random(11) for _ in range(500)}
    assert min(values) >= 0 and max(values) <= 11


def test_place_top_bottom_makes_sixteen_triangles():
    spikes = make_spikes()
    spikes.place_top_bottom()
    assert len(spikes.triangles) == 16
    assert all(len(t) == 3 for t in spikes.triangles)


@pytest.mark.parametrize("counter", [0, 1, 7, 25, 80])
def test_place_side_activates_expected_number(counter):
    spikes = make_spikes()
    spikes.place_side(counter)
    assert sum(spikes.side) == spike_count(counter)
    assert spikes.counter == counter


def test_place_side_is_reproducible_with_same_seed():
    first = make_spikes(3)
    second = make_spikes(3)
    first.place_side(40)
    second.place_side(40)
    assert first.side == second.side


def test_no_spikes_means_no_collision():
    spikes = make_spikes()
    spikes.place_side(0)
    assert not any(spikes.collides(y) for y in range(0, 300, 5))


def test_collides_at_active_slot():
    spikes = make_spikes()
    spikes.side = [False] * 12
    spikes.side[4] = True
    cell = spikes.cell_size
    assert spikes.collides(5 * cell)
    assert not spikes.collides(10 * cell)


def test_side_triangles_follow_counter_parity():
    spikes = make_spikes()
    spikes.place_side(11)
    cell = spikes.cell_size
    left = spikes.side_triangles()
    assert len(left) == sum(spikes.side)
    assert all(t[0][0] == pytest.approx(cell * 0.4) for t in left)
    spikes.counter = 12
    right = spikes.side_triangles()
    assert all(t[0][0] == pytest.approx(cell * 8.6) for t in right)


def test_draw_paints_floor_spike():
    spikes = make_spikes()
    spikes.place_side(0)
    surface = pygame.Surface((180, 280))
    surface.fill((0, 0, 0))
    spikes.draw(surface)
    triangle = spikes.triangles[0]
    cx = sum(p[0] for p in triangle) / 3
    cy = sum(p[1] for p in triangle) / 3
    assert tuple(surface.get_at((int(cx), int(cy))))[:3] == (166, 166, 166)