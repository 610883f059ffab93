"""
Threshold ElGamal over the quadratic residue subgroup of a safe prime group.

Participants each hold a key share. A combination round folds their public
shares together with a fresh blinding point into a combined public key and a
set of refreshed shares. Ciphertexts carry partial decryptions for every
refreshed share, so any one participant's private share completes decryption.
That collapses the effective threshold to a single genuine share holder.

Modules:
- config: protocol constants and the index namespace.
- params: safe prime group generation.
- shares: key share types and issuance.
- lagrange: Lagrange interpolation in the exponent.
- combiner: public key combination and share refresh.
- cipher: encryption and decryption.
"""

from .config import DEFAULT_INDEX_CONFIG, IndexConfig
from .errors import (
    ThresholdElGamalError,
    RandomnessUnavailable,
    ParameterGenerationExhausted,
    InvalidParameters,
    NonInvertibleDifference,
    IndexNamespaceError,
    ReconstructionMismatch,
    MessageOutOfRange,
)
from .params import GroupParameters, setup
from .shares import PrivateShare, PublicShare, KeyShare, issue_share, issue_shares
from .lagrange import interpolate
from .combiner import CombinedKey, combine
from .cipher import Ciphertext, encrypt, encrypt_int, decrypt, decrypt_int, partial_decrypt
