import random

import numpy as np
import pytest

from skyline_gen.buildings import catalog
from skyline_gen.canvas import Canvas

ALLOWED = set(" #=|-.^_o")


def test_catalog_has_all_presets_in_order():
    assert len(catalog.PRESET_NAMES) == 23
    assert catalog.PRESET_NAMES[0] == "tiny_box"
    assert catalog.PRESET_NAMES[-1] == "high_rise"
    assert list(catalog.PRESETS) == list(catalog.PRESET_NAMES)


@pytest.mark.parametrize("name", catalog.PRESET_NAMES)
def test_every_preset_draws_within_the_character_set(name):
    cv = Canvas(100, 200)
    catalog.build(cv, name, 96, 100)
    text = cv.to_text()
    assert text.strip()
    assert set(text) - {"\n"} <= ALLOWED


@pytest.mark.parametrize("name", catalog.PRESET_NAMES)
@pytest.mark.parametrize("center", [-50, 0, 199, 500])
def test_presets_tolerate_edge_positions(name, center):
    cv = Canvas(60, 80)
    catalog.build(cv, name, 58, center)
    assert len(cv.to_lines()) == 60


def test_single_block_presets_expose_their_spec():
    assert catalog.tall_slim.spec.shaft_w == 6
    assert catalog.tall_slim.spec.shaft_h == 32
    assert catalog.tall_slim.spec.crown
    assert not catalog.tall_slim.spec.antenna
    assert catalog.wide_step.spec.has_setback


def test_get_preset_normalizes_names():
    assert catalog.get_preset("Glass-Tower") is catalog.glass_tower
    assert catalog.get_preset(" l left ") is catalog.l_left


def test_get_preset_unknown_name():
    with pytest.raises(ValueError, match="Unknown building preset"):
        catalog.get_preset("castle")


def test_random_preset_is_reproducible():
    rng_a, rng_b = random.Random(7), random.Random(7)
    a = [catalog.random_preset(rng_a) for _ in range(10)]
    b = [catalog.random_preset(rng_b) for _ in range(10)]
    assert a == b
    assert all(name in catalog.PRESETS for name in a)


def test_random_preset_respects_pool():
    rng = random.Random(3)
    picks = {catalog.random_preset(rng, ["needle", "campus"]) for _ in range(50)}
    assert picks == {"needle", "campus"}


def test_industrial_has_pipes_with_caps():
    cv = Canvas(100, 200)
    catalog.industrial(cv, 90, 100)
    assert cv.get(71, 98) == "o"
    assert cv.get(71, 102) == "o"
    assert all(cv.get(r, 98) == "|" for r in range(72, 82))


def test_glass_tower_has_window_bands():
    cv = Canvas(100, 200)
    catalog.glass_tower(cv, 90, 100)
    lines = cv.to_lines()
    for i in range(2, 20, 3):
        assert lines[90 - i][96:105] == "." * 9


def test_campus_is_three_buildings_side_by_side():
    cv = Canvas(100, 200)
    catalog.campus(cv, 90, 100)
    # three shafts of height 8 share the base row
    bottom = cv.to_lines()[89]
    assert bottom[84:116].count("|") >= 4


def test_l_shapes_mirror_each_other():
    left, right = Canvas(60, 80), Canvas(60, 80)
    catalog.l_left(left, 50, 40)
    catalog.l_right(right, 50, 39)
    assert not np.array_equal(left.g, right.g)
    # the low wing of l_left reaches further left than the tower
    assert left.to_lines()[45].index("|") < right.to_lines()[45].index("|")
