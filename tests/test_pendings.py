import pytest

from falling_pixels.errors import PreconditionViolation
from falling_pixels.pendings import Pendings, generate_shuffled_sequence, shuffle
from falling_pixels.prng import Pcg32


def test_same_seed_reproduces_orders():
    a = Pendings(2024, 12, 9)
    b = Pendings(2024, 12, 9)
    assert a.orders == b.orders
    assert a.seed == b.seed == 2024


def test_every_order_is_a_permutation():
    p = Pendings(5, 20, 13)
    assert len(p.orders) == 20
    for order in p.orders:
        assert len(order) == 13
        assert set(order) == set(range(13))


def test_legacy_draw_still_permutes():
    p = Pendings(5, 10, 7, exact_bounds=False)
    for order in p.orders:
        assert sorted(order) == list(range(7))


def test_columns_consume_one_shared_stream():
    rng = Pcg32()
    rng.seed(77)
    expected = [generate_shuffled_sequence(6, rng) for _ in range(4)]
    assert Pendings(77, 4, 6).orders == expected


def test_store_uses_the_given_rng():
    rng = Pcg32()
    p = Pendings(3, 2, 5, rng)
    assert p.rng is rng
    follow = rng.next_u32()
    fresh = Pcg32()
    Pendings(3, 2, 5, fresh)
    assert fresh.next_u32() == follow


def test_update_seed_matches_fresh_store():
    p = Pendings(1, 8, 5)
    p.update_seed(31337)
    assert p.seed == 31337
    assert p.orders == Pendings(31337, 8, 5).orders
    assert (p.width, p.height) == (8, 5)


def test_update_seed_without_columns():
    p = Pendings(1, 0, 5)
    with pytest.raises(PreconditionViolation):
        p.update_seed(2)


def test_zero_length_sequence():
    rng = Pcg32()
    rng.seed(0)
    assert generate_shuffled_sequence(0, rng) == []


def test_negative_length_sequence():
    with pytest.raises(ValueError):
        generate_shuffled_sequence(-1, Pcg32())


def test_shuffle_single_element_draws_nothing():
    rng = Pcg32()
    rng.seed(11)
    state = rng.state
    seq = ["only"]
    shuffle(seq, rng)
    assert seq == ["only"]
    assert rng.state == state


def _shuffle_vec(vec, rng):
    # Loop of the first version: runs down to index 0, one draw per element.
    for idx in reversed(range(len(vec))):
        rand_idx = rng.gen_range(0, idx)
        vec[idx], vec[rand_idx] = vec[rand_idx], vec[idx]


@pytest.mark.parametrize("seed,width,height", [(12345, 4, 6), (0, 3, 1), (2**64 - 1, 7, 5)])
def test_legacy_draw_matches_first_version(seed, width, height):
    rng = Pcg32()
    rng.seed(seed)
    expected = []
    for _ in range(width):
        vec = list(range(height))
        _shuffle_vec(vec, rng)
        expected.append(vec)
    legacy = Pendings(seed, width, height, exact_bounds=False)
    assert legacy.orders == expected
    assert legacy.rng.state == rng.state


def test_legacy_draw_spends_one_draw_per_row():
    p = Pendings(9, 3, 4, exact_bounds=False)
    rng = Pcg32()
    rng.seed(9)
    for _ in range(3 * 4):
        rng.next_u32()
    assert p.rng.state == rng.state


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Pendings(1, 0, -1)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        Pendings(1, -1, 3)
