import numpy as np
import pytest

from noise_generator import NoiseGenerator, build_permutation, hash_int


SAMPLE_POINTS = [(0.5, 0.5), (3.25, 7.75), (-4.1, 2.9), (255.5, 255.5), (1000.3, -12.6)]


def test_hash_of_zero_is_zero():
    assert hash_int(0) == 0


def test_hash_stays_within_32_bits():
    for x in (1, 42, 2**31 - 1, -1, -(2**31)):
        assert 0 <= hash_int(x) < 2**32


def test_permutation_is_a_duplicated_shuffle():
    p = build_permutation(42)
    assert len(p) == 512
    assert sorted(p[:256].tolist()) == list(range(256))
    assert p[:256].tolist() == p[256:].tolist()


def test_permutation_depends_on_seed():
    assert build_permutation(1).tolist() != build_permutation(2).tolist()


def test_same_seed_is_reproducible_across_constructions():
    first = NoiseGenerator(42)
    second = NoiseGenerator(42)
    assert first.permutation.tolist() == second.permutation.tolist()
    for x, y in SAMPLE_POINTS:
        assert first.noise_2d(x, y) == second.noise_2d(x, y)
        assert first.noise_1d(x) == second.noise_1d(x)


def test_repeated_calls_are_identical():
    noise = NoiseGenerator(7)
    values = [noise.noise_2d(x, y) for x, y in SAMPLE_POINTS]
    assert values == [noise.noise_2d(x, y) for x, y in SAMPLE_POINTS]


def test_permutation_is_read_only():
    noise = NoiseGenerator(3)
    with pytest.raises(ValueError):
        noise.permutation[0] = 1


def test_noise_is_zero_on_lattice_points():
    noise = NoiseGenerator(11)
    assert noise.noise_1d(5.0) == 0
    assert noise.noise_2d(3.0, 9.0) == 0


def test_noise_1d_is_bounded():
    noise = NoiseGenerator(99)
    for i in range(500):
        assert abs(noise.noise_1d(i * 0.37 - 50)) <= 2.0


def test_noise_2d_varies_between_cells():
    noise = NoiseGenerator(5)
    values = {round(noise.noise_2d(x + 0.5, 0.5), 9) for x in range(16)}
    assert len(values) > 1


def test_grid_matches_scalar_noise_exactly():
    noise = NoiseGenerator(42)
    xs, ys = np.meshgrid(np.linspace(-3.3, 12.7, 17), np.linspace(0.1, 9.9, 11))
    grid = noise.noise_2d_grid(xs, ys)
    expected = np.array([[noise.noise_2d(x, y) for x, y in zip(row_x, row_y)] for row_x, row_y in zip(xs, ys)])
    assert grid.shape == xs.shape
    assert np.array_equal(grid, expected)


def test_single_octave_fractal_equals_plain_grid():
    noise = NoiseGenerator(8)
    xs, ys = np.meshgrid(np.arange(0.5, 5.0), np.arange(0.25, 4.0))
    assert np.array_equal(noise.fractal_noise_2d_grid(xs, ys, octaves=1), noise.noise_2d_grid(xs, ys))
