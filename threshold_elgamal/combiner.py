import logging
from dataclasses import dataclass

from .config import DEFAULT_INDEX_CONFIG, IndexConfig
from .errors import ReconstructionMismatch
from .lagrange import interpolate
from .params import GroupParameters
from .shares import PublicShare
from .utils import rand

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CombinedKey:
    public_key: int
    """Group element encryption is performed under."""
    shares: tuple[PublicShare, ...]
    """Refreshed shares at the virtual indices, handed to encryptors."""


def refresh_shares(params, points, indices):
    return tuple(interpolate(params, x, points) for x in indices)


def verify_combination(params, dealer, refreshed, anchor, config=DEFAULT_INDEX_CONFIG):
    # refreshed shares plus any one real share pin down the same polynomial
    recovered = interpolate(params, config.blinding_index, list(refreshed) + [anchor])
    if recovered.value != dealer.value:
        raise ReconstructionMismatch(
            f"Interpolating refreshed shares with participant {anchor.index} did not recover the blinding point."
        )


def combine(params: GroupParameters, public_shares: list[PublicShare],
            config: IndexConfig = DEFAULT_INDEX_CONFIG) -> CombinedKey:
    """
    Run one key combination round over the participants' public shares.

    A fresh blinding point ``(blinding_index, g^secret)`` is added to the ``n``
    public shares, which fixes a polynomial of degree ``n`` in the exponent.
    That polynomial is evaluated at ``n`` virtual indices to give the refreshed
    shares, and ``g^secret`` becomes the combined public key.

    Any ciphertext under the combined key carries the refreshed shares' hints,
    so one genuine private share completes decryption. The effective threshold
    is therefore a single participant.

    Raises:
    ValueError: If ``public_shares`` is empty or holds a value outside the group.
    IndexNamespaceError: If an index is outside the participant range, or the
        virtual range would reach it.
    NonInvertibleDifference: If two participants share an index.
    ReconstructionMismatch: If the self-check fails.
    """
    if not public_shares:
        raise ValueError("At least one public share is required.")
    for share in public_shares:
        config.check_user_index(share.index)
        if not params.contains(share.value):
            raise ValueError(f"Public share of participant {share.index} is not a group element.")
    indices = config.virtual_indices(len(public_shares))

    secret = rand(params.q)
    dealer = PublicShare(config.blinding_index, pow(params.g, secret, params.p))
    all_points = list(public_shares) + [dealer]

    refreshed = refresh_shares(params, all_points, indices)
    verify_combination(params, dealer, refreshed, public_shares[0], config)

    logger.debug("Combined %d public shares into %d refreshed shares", len(public_shares), len(refreshed))
    return CombinedKey(dealer.value, refreshed)
