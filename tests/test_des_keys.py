import pytest
from hypothesis import given
from hypothesis import strategies as st

from algocollection.des_keys import (
    bin_to_hex,
    hex_to_bin,
    permute_pc1,
    permute_pc2,
    round_keys,
    shift_left,
    split_halves,
)

KEY = "133457799BBCDFF1"


def test_pc1_of_worked_example_key():
    expected = "11110000110011001010101011110101010101100110011110001111"
    assert permute_pc1(hex_to_bin(KEY)) == expected


def test_first_round_key_of_worked_example():
    expected = "000110110000001011101111111111000111000001110010"
    assert round_keys(KEY)[0] == expected


def test_round_keys_shape():
    keys = round_keys(KEY)
    assert len(keys) == 16
    assert all(len(key) == 48 and set(key) <= {"0", "1"} for key in keys)


@given(st.text(alphabet="0123456789ABCDEF", max_size=20))
def test_hex_round_trip(text):
    bits = hex_to_bin(text)
    assert len(bits) == 4 * len(text)
    assert bin_to_hex(bits) == text


def test_lower_case_hex_accepted():
    assert hex_to_bin("ab") == hex_to_bin("AB")


def test_invalid_hex_rejected():
    with pytest.raises(ValueError):
        hex_to_bin("12G4")


def test_bin_to_hex_rejects_bad_length_and_chars():
    with pytest.raises(ValueError):
        bin_to_hex("101")
    with pytest.raises(ValueError):
        bin_to_hex("1021")


@given(st.text(alphabet="01", min_size=1, max_size=40), st.integers(0, 50), st.integers(0, 50))
def test_shift_left_composes(bits, first, second):
    assert shift_left(shift_left(bits, first), second) == shift_left(bits, first + second)
    assert shift_left(bits, len(bits)) == bits
    assert sorted(shift_left(bits, first)) == sorted(bits)


def test_shift_left_moves_first_bit_to_end():
    assert shift_left("1000", 1) == "0001"


def test_shift_left_rejects_negative():
    with pytest.raises(ValueError):
        shift_left("1010", -1)


@given(st.text(alphabet="01", max_size=60))
def test_split_halves_rejoin(bits):
    left, right = split_halves(bits)
    assert left + right == bits
    assert len(right) - len(left) in (0, 1)


def test_permutations_check_length():
    with pytest.raises(ValueError):
        permute_pc1("0" * 63)
    with pytest.raises(ValueError):
        permute_pc2("0" * 48)


def test_permutations_of_all_ones():
    assert permute_pc1("1" * 64) == "1" * 56
    assert permute_pc2("1" * 56) == "1" * 48


def test_round_keys_reject_short_key():
    with pytest.raises(ValueError):
        round_keys("1334")