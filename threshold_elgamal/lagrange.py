"""
Lagrange interpolation carried out on group elements instead of scalars.

Exponentiation maps ``(Z_q, +)`` homomorphically onto the order-``q``
subgroup, so raising each ``g^f(x_i)`` to its scalar Lagrange weight and
multiplying the results gives ``g^f(x)`` without ever seeing ``f``.
"""
from Crypto.Util.number import inverse

from .errors import NonInvertibleDifference
from .params import GroupParameters
from .shares import PublicShare
from .utils import multiply


def lagrange_weight(x, x_i, x_s, q):
    """Weight of the point at ``x_i`` when evaluating at ``x``, modulo ``q``."""
    weight = 1
    for x_j in x_s:
        if x_j == x_i:
            continue
        diff = (x_i - x_j) % q
        if diff == 0:
            raise NonInvertibleDifference(f"Indices {x_i} and {x_j} coincide modulo q.")
        weight = (weight * (x - x_j) * inverse(diff, q)) % q
    return weight


def lagrange_weights(x, x_s, q):
    """One weight per x-coordinate; each is independent of the others."""
    if len(set(x_s)) != len(x_s):
        duplicates = sorted({x_i for x_i in x_s if x_s.count(x_i) > 1})
        raise NonInvertibleDifference(f"Duplicate indices {duplicates}.")
    return [lagrange_weight(x, x_i, x_s, q) for x_i in x_s]


def interpolate(params: GroupParameters, x: int, points: list[PublicShare]) -> PublicShare:
    """
    Reconstruct the group element at index ``x`` from ``points``.

    The ``n`` points define a unique polynomial ``f`` of degree ``n - 1`` in
    the exponent; the result is ``PublicShare(x, g^f(x) mod p)``.

    Raises:
    NonInvertibleDifference: If ``points`` is empty or two indices coincide
        modulo ``q``.
    """
    if not points:
        raise NonInvertibleDifference("No points to interpolate.")
    x_s = [point.index for point in points]
    weights = lagrange_weights(x, x_s, params.q)
    terms = [pow(point.value, weight, params.p) for point, weight in zip(points, weights)]
    return PublicShare(x, multiply(terms, params.p))
