from Crypto.Random import get_random_bytes
from Crypto.Util.number import getRandomRange

from .errors import RandomnessUnavailable


def random_bytes(n: int) -> bytes:
    """Read ``n`` bytes from the operating system's secure random source."""
    try:
        data = get_random_bytes(n)
    except OSError as e:
        raise RandomnessUnavailable(str(e)) from e
    if len(data) != n:
        raise RandomnessUnavailable(f"Asked for {n} bytes, got {len(data)}.")
    return data


def rand(size: int) -> int:
    """Uniform integer in ``[0, size)`` drawn from :func:`random_bytes`."""
    if size == 1:
        return 0
    return getRandomRange(0, size, randfunc=random_bytes)


def multiply(values: list[int], size: int) -> int:
    result = 1
    for v in values:
        result = (result * v) % size
    return result
