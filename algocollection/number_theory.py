"""Prime sieving and addition by measuring printed field widths."""


def sieve_of_eratosthenes(limit: int) -> list[int]:
    """Return every prime not greater than ``limit``, in increasing order."""
    if limit < 2:
        return []
    is_prime = [True] * (limit + 1)
    is_prime[0] = is_prime[1] = False
    for number in range(2, int(limit ** 0.5) + 1):
        if is_prime[number]:
            is_prime[number * number :: number] = [False] * len(
                range(number * number, limit + 1, number)
            )
    return [number for number, prime in enumerate(is_prime) if prime]


def _field(width: int) -> str:
    # A one-character field padded to |width|; a negative width left-justifies.
    return "\r".rjust(width) if width >= 0 else "\r".ljust(-width)


def add_by_width(x: int, y: int) -> int:
    """Add two numbers without ``+`` by printing two padded fields and counting.

    Each field is at least one character wide, so the result equals ``x + y``
    only when both are positive.
    """
    return len(f"{_field(x)}{_field(y)}")