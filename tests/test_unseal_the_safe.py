import pytest

from cpkit.unseal_the_safe import count_passwords


def test_single_key_passwords_use_every_key():
    assert count_passwords(1) == 10


def test_two_key_passwords():
    assert count_passwords(2) == 26


def test_three_key_passwords():
    assert count_passwords(3) == 74


@pytest.mark.parametrize("n", [1, 2, 5, 10, 29])
def test_growth_is_bounded_by_four_moves(n):
    shorter, longer = count_passwords(n), count_passwords(n + 1)
    assert shorter <= longer <= 4 * shorter


def test_long_passwords_are_counted():
    assert count_passwords(30) > count_passwords(29) > 0


@pytest.mark.parametrize("n", [0, -3])
def test_non_positive_length_is_rejected(n):
    with pytest.raises(ValueError):
        count_passwords(n)