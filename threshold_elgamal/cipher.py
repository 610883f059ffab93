import logging
from dataclasses import dataclass

from Crypto.Util.number import bytes_to_long, inverse, long_to_bytes

from .config import DEFAULT_INDEX_CONFIG, IndexConfig
from .errors import MessageOutOfRange
from .lagrange import interpolate
from .params import GroupParameters
from .shares import PrivateShare, PublicShare
from .utils import rand

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ciphertext:
    c1: int
    """``g^r mod p``."""
    c2: int
    """``public_key^r * m mod p``."""
    hints: tuple[PublicShare, ...]
    """``(x_i, Y_i^r mod p)`` for every refreshed share ``(x_i, Y_i)``."""


# === Encryption ===

def check_refreshed_shares(params, shares, config=DEFAULT_INDEX_CONFIG):
    if not shares:
        raise ValueError("At least one refreshed share is required.")
    for share in shares:
        config.check_virtual_index(share.index)
        if not params.contains(share.value):
            raise ValueError(f"Refreshed share at index {share.index} is not a group element.")


def encrypt_int(params: GroupParameters, shares, public_key: int, message: int,
                config: IndexConfig = DEFAULT_INDEX_CONFIG) -> Ciphertext:
    if not 0 <= message < params.p:
        raise MessageOutOfRange(message, params.p)
    check_refreshed_shares(params, shares, config)
    if not params.contains(public_key):
        raise ValueError("Public key is not a group element.")

    r = rand(params.q)
    c1 = pow(params.g, r, params.p)
    s = pow(public_key, r, params.p)
    c2 = (s * message) % params.p
    # Y_i^r == (g^s_i)^r == c1^s_i, the partial decryption of virtual index x_i
    hints = tuple(PublicShare(share.index, pow(share.value, r, params.p)) for share in shares)
    logger.debug("Encrypted message with %d hints", len(hints))
    return Ciphertext(c1, c2, hints)


def encrypt(params: GroupParameters, shares, public_key: int, message: bytes,
            config: IndexConfig = DEFAULT_INDEX_CONFIG) -> Ciphertext:
    """
    Encrypt ``message`` under the combined ``public_key``.

    The bytes are read as one big-endian integer, which must be below ``p``.
    Leading zero bytes do not survive the round trip; the empty message
    decrypts back to empty bytes.
    """
    return encrypt_int(params, shares, public_key, bytes_to_long(message), config)


# === Decryption ===

def partial_decrypt(params: GroupParameters, private_share: PrivateShare, ciphertext: Ciphertext) -> PublicShare:
    return PublicShare(private_share.index, pow(ciphertext.c1, private_share.secret, params.p))


def recover_shared_secret(params, private_share, ciphertext, config=DEFAULT_INDEX_CONFIG):
    config.check_user_index(private_share.index)
    points = list(ciphertext.hints) + [partial_decrypt(params, private_share, ciphertext)]
    return interpolate(params, config.blinding_index, points).value


def decrypt_int(params: GroupParameters, private_share: PrivateShare, ciphertext: Ciphertext,
                config: IndexConfig = DEFAULT_INDEX_CONFIG) -> int:
    s = recover_shared_secret(params, private_share, ciphertext, config)
    logger.debug("Participant %d completed decryption", private_share.index)
    return (ciphertext.c2 * inverse(s, params.p)) % params.p


def decrypt(params: GroupParameters, private_share: PrivateShare, ciphertext: Ciphertext,
            config: IndexConfig = DEFAULT_INDEX_CONFIG) -> bytes:
    m = decrypt_int(params, private_share, ciphertext, config)
    return long_to_bytes(m) if m else b""
