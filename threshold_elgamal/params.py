import logging
from dataclasses import dataclass

from Crypto.Util.number import getPrime, bytes_to_long
from sympy import isprime

from .config import GENERATOR_FLOOR, MAX_SAMPLING_ATTEMPTS, MIN_SECURITY_LENGTH_BYTES
from .errors import InvalidParameters, ParameterGenerationExhausted
from .utils import random_bytes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupParameters:
    p: int
    """Safe prime modulus, ``p = 2q + 1``."""
    q: int
    """Prime order of the quadratic residue subgroup."""
    g: int
    """Generator of the order-``q`` subgroup."""
    security_length_bytes: int
    """Byte length the modulus was generated for."""

    def contains(self, value: int) -> bool:
        """Whether ``value`` is an element of the order-``q`` subgroup."""
        return 1 <= value < self.p and pow(value, self.q, self.p) == 1

    def validate(self) -> None:
        if self.q != (self.p - 1) // 2 or self.p % 2 == 0:
            raise InvalidParameters("q must equal (p - 1) / 2.")
        if not isprime(self.p):
            raise InvalidParameters("p is not prime.")
        if not isprime(self.q):
            raise InvalidParameters("q is not prime, p is not a safe prime.")
        if self.g == 1 or not self.contains(self.g):
            raise InvalidParameters("g does not generate the order-q subgroup.")


def generate_safe_prime(bits, max_attempts=MAX_SAMPLING_ATTEMPTS):
    for attempt in range(1, max_attempts + 1):
        p = getPrime(bits, randfunc=random_bytes)
        q = (p - 1) // 2
        if isprime(q):
            logger.debug("Found %d-bit safe prime after %d attempts", bits, attempt)
            return p, q
        if attempt % 1000 == 0:
            logger.warning("Still looking for a %d-bit safe prime after %d attempts", bits, attempt)
    raise ParameterGenerationExhausted(f"a {bits}-bit safe prime", max_attempts)


def sample_generator(p, q, length, max_attempts=MAX_SAMPLING_ATTEMPTS):
    # A square is always a quadratic residue, hence in the order-q subgroup
    for attempt in range(1, max_attempts + 1):
        g = bytes_to_long(random_bytes(length)) ** 2
        if GENERATOR_FLOOR <= g < q:
            logger.debug("Accepted generator after %d attempts", attempt)
            return g
    raise ParameterGenerationExhausted("a generator", max_attempts)


def setup(security_length_bytes, max_attempts=MAX_SAMPLING_ATTEMPTS) -> GroupParameters:
    """
    Generate the group description shared by every participant.

    Parameters:
    security_length_bytes (int): Length of the modulus in bytes; ``p`` has
        ``security_length_bytes * 8`` bits.
    max_attempts (int): Bound on each sampling loop.

    Returns:
    GroupParameters: A safe prime ``p``, its subgroup order ``q`` and a
    generator ``g`` of that subgroup.

    Raises:
    ValueError: If the requested length is too small to hold a generator.
    ParameterGenerationExhausted: If a sampling loop hits ``max_attempts``.
    RandomnessUnavailable: If the secure random source fails.
    """
    if security_length_bytes < MIN_SECURITY_LENGTH_BYTES:
        raise ValueError(
            f"security_length_bytes must be at least {MIN_SECURITY_LENGTH_BYTES}, got {security_length_bytes}."
        )
    if max_attempts < 1:
        raise ValueError("max_attempts must be positive.")

    bits = security_length_bytes * 8
    p, q = generate_safe_prime(bits, max_attempts)
    g = sample_generator(p, q, security_length_bytes // 2, max_attempts)
    logger.info("Generated %d-bit group parameters", bits)
    return GroupParameters(p, q, g, security_length_bytes)
