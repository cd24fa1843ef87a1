import pytest

from sequence import create_rng, generate_sorted_array


def test_rng_is_deterministic():
    a = create_rng(42)
    b = create_rng(42)
    assert [a() for _ in range(20)] == [b() for _ in range(20)]


def test_rng_stays_in_unit_interval():
    rng = create_rng(9473)
    for _ in range(1000):
        x = rng()
        assert 0.0 <= x < 1.0


@pytest.mark.parametrize("size, min_value, max_value, seed", [
    (12, 2, 90, 9473),
    (1, 0, 0, 1),
    (10, 0, 9, 7),
    (50, -500, 500, 123),
    (64, 0, 1000, 0),
])
def test_generated_array_shape(size, min_value, max_value, seed):
    values = generate_sorted_array(size, min_value, max_value, seed)
    assert len(values) == size
    assert all(a < b for a, b in zip(values, values[1:]))
    assert values[0] >= min_value
    assert values[-1] <= max_value


def test_generated_array_depends_only_on_inputs():
    assert generate_sorted_array(12, 2, 90, 9473) == generate_sorted_array(12, 2, 90, 9473)


def test_tight_range_is_filled_exactly():
    assert generate_sorted_array(5, 10, 14, 3) == [10, 11, 12, 13, 14]


def test_zero_size():
    assert generate_sorted_array(0, 2, 90, 1) == []


def test_rejects_unfittable_parameters():
    with pytest.raises(ValueError, match="cannot fit"):
        generate_sorted_array(10, 0, 5, 1)
    with pytest.raises(ValueError):
        generate_sorted_array(-1, 0, 5, 1)
