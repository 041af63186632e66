"""The DES key schedule: hex/binary conversion, PC-1, PC-2 and the round shifts."""

from string import hexdigits

_PC1 = (
    57, 49, 41, 33, 25, 17, 9,
    1, 58, 50, 42, 34, 26, 18,
    10, 2, 59, 51, 43, 35, 27,
    19, 11, 3, 60, 52, 44, 36,
    63, 55, 47, 39, 31, 23, 15,
    7, 62, 54, 46, 38, 30, 22,
    14, 6, 61, 53, 45, 37, 29,
    21, 13, 5, 28, 20, 12, 4,
)

_PC2 = (
    14, 17, 11, 24, 1, 5,
    3, 28, 15, 6, 21, 10,
    23, 19, 12, 4, 26, 8,
    16, 7, 27, 20, 13, 2,
    41, 52, 31, 37, 47, 55,
    30, 40, 51, 45, 33, 48,
    44, 49, 39, 56, 34, 53,
    46, 42, 50, 36, 29, 32,
)

_SHIFTS = (1, 1, 2, 2, 2, 2, 2, 2, 1, 2, 2, 2, 2, 2, 2, 1)


def _check_bits(bits: str) -> None:
    if any(bit not in "01" for bit in bits):
        raise ValueError("bit strings may hold only '0' and '1'")


def hex_to_bin(text: str) -> str:
    """Expand each hexadecimal digit into four bits."""
    bad = [char for char in text if char not in hexdigits]
    if bad:
        raise ValueError(f"invalid hexadecimal digit {bad[0]!r}")
    return "".join(f"{int(char, 16):04b}" for char in text)


def bin_to_hex(bits: str) -> str:
    """Turn each group of four bits into an upper-case hexadecimal digit."""
    _check_bits(bits)
    if len(bits) % 4:
        raise ValueError("bit string length must be a multiple of 4")
    return "".join(f"{int(bits[i:i + 4], 2):X}" for i in range(0, len(bits), 4))


def _permute(bits: str, table: tuple[int, ...], expected: int) -> str:
    _check_bits(bits)
    if len(bits) != expected:
        raise ValueError(f"expected {expected} bits, got {len(bits)}")
    return "".join(bits[position - 1] for position in table)


def permute_pc1(bits: str) -> str:
    """Reduce a 64-bit key to the 56-bit key K+ with permuted choice 1."""
    return _permute(bits, _PC1, 64)


def permute_pc2(bits: str) -> str:
    """Select a 48-bit round key from 56 bits with permuted choice 2."""
    return _permute(bits, _PC2, 56)


def shift_left(bits: str, shifts: int) -> str:
    """Rotate the bits left by ``shifts`` places."""
    if shifts < 0:
        raise ValueError(f"shift count must not be negative, got {shifts}")
    if not bits:
        return bits
    offset = shifts % len(bits)
    return bits[offset:] + bits[:offset]


def split_halves(bits: str) -> tuple[str, str]:
    """Split the bits into a left half C and a right half D."""
    middle = len(bits) // 2
    return bits[:middle], bits[middle:]


def round_keys(key_hex: str) -> list[str]:
    """Return the sixteen 48-bit round keys for a 64-bit key given in hexadecimal."""
    left, right = split_halves(permute_pc1(hex_to_bin(key_hex)))
    keys = []
    for shifts in _SHIFTS:
        left = shift_left(left, shifts)
        right = shift_left(right, shifts)
        keys.append(permute_pc2(left + right))
    return keys